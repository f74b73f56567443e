import pytest

from memdb.exceptions import ValueTypeError
from memdb.types import DataType, Value, coerce_value, parse_type_name


def test_value_equality_needs_same_tag():
    assert Value.integer(1) == Value.integer(1)
    assert Value.text("1") == Value.text("1")
    assert Value.integer(1) != Value.text("1")
    assert str(Value.integer(-7)) == "-7"
    assert str(Value.text("Alice Smith")) == "Alice Smith"


def test_value_rejects_mismatched_payload():
    with pytest.raises(ValueTypeError):
        Value(DataType.INT, "3")
    with pytest.raises(ValueTypeError):
        Value(DataType.INT, True)
    with pytest.raises(ValueTypeError):
        Value(DataType.STRING, 3)


def test_parse_type_name_any_case():
    assert parse_type_name("INT") is DataType.INT
    assert parse_type_name("String") is DataType.STRING
    with pytest.raises(ValueTypeError):
        parse_type_name("float")


def test_coerce_int_strips_noise():
    assert coerce_value("20", DataType.INT) == Value.integer(20)
    assert coerce_value("20)", DataType.INT) == Value.integer(20)
    assert coerce_value("-5", DataType.INT) == Value.integer(-5)


@pytest.mark.parametrize("text", ["'Alice'", "abc", "", "-", "1-2"])
def test_coerce_int_failures(text):
    with pytest.raises(ValueTypeError):
        coerce_value(text, DataType.INT)


def test_coerce_string_strips_one_quote_pair():
    assert coerce_value("'Bob'", DataType.STRING) == Value.text("Bob")
    assert coerce_value("Bob", DataType.STRING) == Value.text("Bob")
    assert coerce_value("''x''", DataType.STRING) == Value.text("'x'")
    assert coerce_value("'42'", DataType.STRING) == Value.text("42")
