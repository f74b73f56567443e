from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Sequence

from .exceptions import ColumnNotFound, SchemaError, ValueTypeError
from .types import DataType, Value


@dataclass(frozen=True)
class Column:
    name: str
    type: DataType
    key: str = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise SchemaError("Column name must not be empty")
        object.__setattr__(self, "key", self.name.lower())


@dataclass(frozen=True)
class Predicate:
    """Equality test ``column = value`` used by select, update and delete."""

    column: str
    value: Value


class Row:
    """Column-name to Value bindings with case-insensitive lookup.

    Names keep the casing they were first stored with; setting ``AGE`` on a row
    that already holds ``age`` replaces the value under ``age``.
    """

    def __init__(self, values: Optional[Dict[str, Value]] = None):
        self._values: Dict[str, Value] = {}
        self._names: Dict[str, str] = {}
        for name, value in (values or {}).items():
            self.set(name, value)

    def set(self, name: str, value: Value):
        if not isinstance(value, Value):
            raise ValueTypeError(f"Expected a Value for column '{name}', got {value!r}")
        stored = self._names.setdefault(name.lower(), name)
        self._values[stored] = value

    def get(self, name: str) -> Value:
        stored = self._names.get(name.lower())
        if stored is None:
            raise ColumnNotFound(f"Column not found: {name}")
        return self._values[stored]

    def has(self, name: str) -> bool:
        return name.lower() in self._names

    def column_names(self) -> List[str]:
        return list(self._values)

    def items(self):
        return self._values.items()

    def copy(self) -> "Row":
        return Row(dict(self._values))

    def to_dict(self) -> Dict[str, Any]:
        return {name: value.payload for name, value in self._values.items()}

    def __getitem__(self, name: str) -> Value:
        return self.get(name)

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def __eq__(self, other):
        if not isinstance(other, Row):
            return NotImplemented
        return self._values == other._values

    def __repr__(self):
        return f"Row({self.to_dict()!r})"


class Table:
    """A named table: a fixed ordered schema and an ordered list of rows.

    Every stored row holds exactly the declared columns, each with a value of
    the declared type. Rows keep insertion order; update changes them in place
    and delete removes them without reordering the survivors.
    """

    def __init__(self, name: str, columns: Sequence[Column]):
        if not name:
            raise SchemaError("Table name must not be empty")
        if not columns:
            raise SchemaError(f"Table '{name}' must declare at least one column")
        self.name = name
        self.columns: List[Column] = list(columns)
        self._by_key: Dict[str, Column] = {}
        for col in self.columns:
            if col.key in self._by_key:
                raise SchemaError(f"Duplicate column in table '{name}': {col.name}")
            self._by_key[col.key] = col
        self._rows: List[Row] = []

    def has_column(self, name: str) -> bool:
        return name.lower() in self._by_key

    def column(self, name: str) -> Column:
        col = self._by_key.get(name.lower())
        if col is None:
            raise ColumnNotFound(f"Column not found in table '{self.name}': {name}")
        return col

    def column_names(self) -> List[str]:
        return [c.name for c in self.columns]

    @property
    def rows(self) -> List[Row]:
        return list(self._rows)

    def __len__(self):
        return len(self._rows)

    def _check_type(self, col: Column, value: Value):
        if value.type is not col.type:
            raise ValueTypeError(
                f"Type mismatch for column: {col.name} (expected {col.type.value}, got {value.type.value})"
            )

    def validate_row(self, row: Row):
        for name in row.column_names():
            if not self.has_column(name):
                raise SchemaError(f"Unknown column for table '{self.name}': {name}")
        for col in self.columns:
            if not row.has(col.name):
                raise SchemaError(f"Missing column: {col.name}")
            self._check_type(col, row.get(col.name))

    def _matcher(self, where: Optional[Predicate]):
        if where is None:
            return lambda row: True
        col = self.column(where.column)
        self._check_type(col, where.value)
        return lambda row: row.get(col.name) == where.value

    def insert(self, row: Row):
        self.validate_row(row)
        self._rows.append(row.copy())

    def select(self, columns: Optional[Sequence[str]] = None, where: Optional[Predicate] = None) -> List[Row]:
        """Return projected copies of the rows matching ``where``, in table order.

        ``columns`` of ``None`` or ``["*"]`` projects every declared column;
        otherwise the requested columns are returned in the requested order
        under their declared names.
        """
        if not columns or list(columns) == ["*"]:
            projection = list(self.columns)
        else:
            projection = [self.column(c) for c in columns]
        matches = self._matcher(where)
        result = []
        for row in self._rows:
            if matches(row):
                result.append(Row({c.name: row.get(c.name) for c in projection}))
        return result

    def update(self, column: str, value: Value, where: Optional[Predicate] = None) -> int:
        col = self.column(column)
        self._check_type(col, value)
        matches = self._matcher(where)
        updated = 0
        for row in self._rows:
            if matches(row):
                row.set(col.name, value)
                updated += 1
        return updated

    def delete(self, where: Optional[Predicate] = None) -> int:
        if where is None:
            deleted = len(self._rows)
            self._rows.clear()
            return deleted
        matches = self._matcher(where)
        kept = [row for row in self._rows if not matches(row)]
        deleted = len(self._rows) - len(kept)
        self._rows = kept
        return deleted
