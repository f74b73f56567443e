class MemDBError(Exception):
    """Base class for every error raised while executing a statement.

    ``kind`` names the error category reported to drivers.
    """

    kind = "Error"


class SQLSyntaxError(MemDBError, ValueError):
    kind = "SyntaxError"


class UnsupportedStatement(MemDBError):
    kind = "UnsupportedStatement"


class UnsupportedOperator(MemDBError):
    kind = "UnsupportedOperator"


class TableExists(MemDBError):
    kind = "TableExists"


class TableNotFound(MemDBError):
    kind = "TableNotFound"


class ColumnNotFound(MemDBError):
    kind = "ColumnNotFound"


class SchemaError(MemDBError):
    kind = "SchemaError"


class ValueTypeError(MemDBError, TypeError):
    kind = "TypeError"


class ArityError(MemDBError, ValueError):
    kind = "ArityError"
