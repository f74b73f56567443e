import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .catalog import Catalog
from .exceptions import ArityError, MemDBError, SchemaError, TableExists
from .parser import CreateTable, Delete, Insert, Parser, Select, Update, Where
from .storage import Column, Predicate, Row, Table
from .types import coerce_value, parse_type_name

logger = logging.getLogger(__name__)


@dataclass
class Result:
    """Outcome of one statement.

    ``count`` is the number of rows the statement produced or touched: rows
    returned for SELECT, 1 for INSERT, rows modified or removed for UPDATE and
    DELETE, and 0 for CREATE. ``error`` is set only by ``Executor.try_execute``.
    """

    statement: str
    table: Optional[str] = None
    columns: List[str] = field(default_factory=list)
    rows: List[Row] = field(default_factory=list)
    count: int = 0
    error: Optional[MemDBError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def records(self) -> List[Dict[str, Any]]:
        return [r.to_dict() for r in self.rows]


class Executor:
    """Execute statements against one Catalog.

    The catalog is owned by the caller and may be shared between executors;
    the executor itself keeps no state between calls. Each statement is parsed
    and fully validated before the catalog is touched, so a failing statement
    leaves every table as it was.
    """

    def __init__(self, catalog: Optional[Catalog] = None):
        self.catalog = catalog if catalog is not None else Catalog()
        self.parser = Parser()

    def execute(self, sql: str) -> Optional[Result]:
        logger.debug("execute: %s", sql)
        stmt = self.parser.parse(sql)
        if stmt is None:
            return None
        if isinstance(stmt, CreateTable):
            return self._exec_create(stmt)
        if isinstance(stmt, Insert):
            return self._exec_insert(stmt)
        if isinstance(stmt, Select):
            return self._exec_select(stmt)
        if isinstance(stmt, Update):
            return self._exec_update(stmt)
        if isinstance(stmt, Delete):
            return self._exec_delete(stmt)
        raise ValueError("Unsupported statement type")

    def try_execute(self, sql: str) -> Optional[Result]:
        """Like ``execute``, but report statement errors in the returned Result."""
        try:
            return self.execute(sql)
        except MemDBError as e:
            logger.warning("statement failed (%s): %s", e.kind, e)
            return Result(statement=_statement_name(sql), error=e)

    def _predicate(self, table: Table, where: Optional[Where]) -> Optional[Predicate]:
        if where is None:
            return None
        col = table.column(where.column)
        return Predicate(column=col.name, value=coerce_value(where.literal, col.type))

    def _exec_create(self, stmt: CreateTable) -> Result:
        if self.catalog.has_table(stmt.name):
            raise TableExists(f"Table already exists: {stmt.name}")
        columns = [Column(d.name, parse_type_name(d.type_name)) for d in stmt.columns]
        table = self.catalog.create_table(stmt.name, columns)
        logger.info("created table %s (%s)", table.name, ", ".join(table.column_names()))
        return Result(statement="CREATE", table=table.name, columns=table.column_names())

    def _exec_insert(self, stmt: Insert) -> Result:
        t = self.catalog.get_table(stmt.table)
        if len(stmt.columns) != len(stmt.values):
            raise ArityError(
                f"Column and value count mismatch (columns: {len(stmt.columns)}, values: {len(stmt.values)})"
            )
        row = Row()
        for name, literal in zip(stmt.columns, stmt.values):
            col = t.column(name)
            if row.has(name):
                raise SchemaError(f"Duplicate column in INSERT: {name}")
            row.set(name, coerce_value(literal, col.type))
        t.insert(row)
        return Result(statement="INSERT", table=t.name, count=1)

    def _exec_select(self, stmt: Select) -> Result:
        t = self.catalog.get_table(stmt.table)
        where = self._predicate(t, stmt.where)
        rows = t.select(stmt.columns, where)
        if stmt.columns == ["*"]:
            columns = t.column_names()
        else:
            columns = [t.column(c).name for c in stmt.columns]
        return Result(statement="SELECT", table=t.name, columns=columns, rows=rows, count=len(rows))

    def _exec_update(self, stmt: Update) -> Result:
        t = self.catalog.get_table(stmt.table)
        col = t.column(stmt.column)
        value = coerce_value(stmt.literal, col.type)
        where = self._predicate(t, stmt.where)
        updated = t.update(col.name, value, where)
        return Result(statement="UPDATE", table=t.name, count=updated)

    def _exec_delete(self, stmt: Delete) -> Result:
        t = self.catalog.get_table(stmt.table)
        where = self._predicate(t, stmt.where)
        deleted = t.delete(where)
        return Result(statement="DELETE", table=t.name, count=deleted)


def _statement_name(sql: str) -> str:
    head = sql.strip().split(None, 1)
    return head[0].upper() if head else ""
