from dataclasses import dataclass
from enum import Enum
from typing import Union

from .exceptions import ValueTypeError


class DataType(Enum):
    INT = "int"
    STRING = "string"


TYPE_NAMES = {t.value: t for t in DataType}


@dataclass(frozen=True)
class Value:
    """A single typed cell: an INT carrying an ``int`` or a STRING carrying a ``str``.

    Two values are equal only when both the tag and the payload match, so
    ``Value.integer(1) != Value.text("1")``.
    """

    type: DataType
    payload: Union[int, str]

    def __post_init__(self):
        if self.type is DataType.INT:
            ok = isinstance(self.payload, int) and not isinstance(self.payload, bool)
        elif self.type is DataType.STRING:
            ok = isinstance(self.payload, str)
        else:
            raise ValueTypeError(f"Unknown type: {self.type!r}")
        if not ok:
            raise ValueTypeError(f"Payload {self.payload!r} does not match type {self.type.value}")

    @classmethod
    def integer(cls, value: int) -> "Value":
        return cls(DataType.INT, value)

    @classmethod
    def text(cls, value: str) -> "Value":
        return cls(DataType.STRING, value)

    def __str__(self):
        if self.type is DataType.INT:
            return str(self.payload)
        return self.payload


def parse_type_name(name: str) -> DataType:
    """Map a declared type keyword (``int`` or ``string``, any case) to a DataType."""
    typ = TYPE_NAMES.get(name.strip().lower())
    if typ is None:
        raise ValueTypeError(f"Unknown data type: {name}")
    return typ


def coerce_value(text: str, typ: DataType) -> Value:
    """Convert literal text to a Value of the given column type. Raises ValueTypeError on failure.

    INT literals keep only their digits and minus signs before parsing, so
    stray punctuation such as ``20)`` still reads as ``20``. STRING literals
    lose one leading and one trailing single quote; embedded quotes are kept
    verbatim.
    """
    if typ is DataType.INT:
        digits = "".join(ch for ch in text if ch.isdigit() or ch == "-")
        try:
            return Value.integer(int(digits))
        except ValueError:
            raise ValueTypeError(f"Invalid integer value: {text}") from None
    if typ is DataType.STRING:
        s = text
        if s.startswith("'"):
            s = s[1:]
        if s.endswith("'"):
            s = s[:-1]
        return Value.text(s)
    raise ValueTypeError(f"Unknown type: {typ!r}")
