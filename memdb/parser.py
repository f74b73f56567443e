import re
from dataclasses import dataclass
from typing import List, Optional

from .exceptions import SQLSyntaxError, UnsupportedOperator, UnsupportedStatement


@dataclass
class ColumnDef:
    name: str
    type_name: str


@dataclass
class CreateTable:
    name: str
    columns: List[ColumnDef]


@dataclass
class Insert:
    table: str
    columns: List[str]
    # raw literal text, coerced later against the table schema
    values: List[str]


@dataclass
class Where:
    column: str
    literal: str


@dataclass
class Select:
    columns: List[str]
    table: str
    where: Optional[Where] = None


@dataclass
class Update:
    table: str
    column: str
    literal: str
    where: Optional[Where] = None


@dataclass
class Delete:
    table: str
    where: Optional[Where] = None


def tokenize(sql: str) -> List[str]:
    """Split on whitespace, except whitespace between single quotes.

    Quotes stay part of their token and the quote state flips on every
    ``'``, so ``name = 'Alice Smith'`` gives ``['name', '=', "'Alice Smith'"]``.
    """
    tokens = []
    cur = []
    in_quote = False
    for ch in sql:
        if ch == "'":
            in_quote = not in_quote
            cur.append(ch)
        elif ch.isspace() and not in_quote:
            if cur:
                tokens.append("".join(cur))
                cur = []
        else:
            cur.append(ch)
    if cur:
        tokens.append("".join(cur))
    return tokens


def extract_bracketed(text: str, open: str = "(", close: str = ")") -> str:
    start = text.find(open)
    if start == -1:
        raise SQLSyntaxError(f"Missing '{open}' in SQL statement")
    end = text.find(close, start + 1)
    if end == -1:
        raise SQLSyntaxError(f"Missing '{close}' in SQL statement")
    return text[start + 1:end]


def split_on_commas(text: str) -> List[str]:
    return [p.strip() for p in text.split(",") if p.strip()]


class Parser:
    """Keyword-driven parser for the five supported statements.

    Supported examples:
    - CREATE TABLE student (id int, name string, age int)
    - INSERT INTO student (id, name, age) VALUES (1, 'Alice', 20)
    - SELECT name, age FROM student WHERE id = 2
    - UPDATE student SET age = 23 WHERE name = 'Bob'
    - DELETE FROM student WHERE id = 1

    Keywords match in any case. Literals are kept as raw text; the executor
    coerces them once the target table's column types are known.
    """

    _values_re = re.compile(r"\bVALUES\b", re.I)

    def parse(self, sql: str):
        sql = sql.strip()
        if sql.endswith(";"):
            sql = sql[:-1].rstrip()
        if not sql:
            return None
        tokens = tokenize(sql)
        head = [t.lower() for t in tokens[:2]]
        if head == ["create", "table"]:
            return self._parse_create(sql, tokens)
        if head == ["insert", "into"]:
            return self._parse_insert(sql, tokens)
        if head[0] == "select":
            return self._parse_select(tokens)
        if head[0] == "update":
            return self._parse_update(tokens)
        if head == ["delete", "from"]:
            return self._parse_delete(tokens)
        raise UnsupportedStatement(f"Unsupported SQL command: {' '.join(tokens[:2])}")

    def _table_name(self, tokens: List[str], pos: int, stmt: str) -> str:
        if pos >= len(tokens):
            raise SQLSyntaxError(f"Invalid {stmt} syntax: missing table name")
        # tolerate a bracket glued to the name, as in "student(id int)"
        name = tokens[pos].split("(", 1)[0]
        if not name:
            raise SQLSyntaxError(f"Invalid {stmt} syntax: missing table name")
        return name

    def _parse_where(self, tokens: List[str]) -> Optional[Where]:
        if not tokens:
            return None
        if tokens[0].lower() != "where":
            raise SQLSyntaxError(f"Unexpected token: {tokens[0]}")
        if len(tokens) != 4:
            raise SQLSyntaxError("Invalid WHERE clause: expected '<column> = <value>'")
        _, col, op, literal = tokens
        if op != "=":
            raise UnsupportedOperator(f"Only '=' is supported in WHERE clause, got '{op}'")
        return Where(column=col, literal=literal)

    def _parse_create(self, sql: str, tokens: List[str]) -> CreateTable:
        name = self._table_name(tokens, 2, "CREATE TABLE")
        defs = split_on_commas(extract_bracketed(sql))
        if not defs:
            raise SQLSyntaxError(f"Invalid CREATE TABLE syntax: no columns declared for {name}")
        cols = []
        for d in defs:
            parts = d.split()
            if len(parts) != 2:
                raise SQLSyntaxError(f"Invalid column definition: {d}")
            cols.append(ColumnDef(name=parts[0], type_name=parts[1]))
        return CreateTable(name=name, columns=cols)

    def _parse_insert(self, sql: str, tokens: List[str]) -> Insert:
        table = self._table_name(tokens, 2, "INSERT")
        m = self._values_re.search(sql)
        if not m:
            raise SQLSyntaxError("Invalid INSERT syntax: missing VALUES clause")
        cols = split_on_commas(extract_bracketed(sql[:m.start()]))
        vals = split_on_commas(extract_bracketed(sql[m.start():]))
        return Insert(table=table, columns=cols, values=vals)

    def _parse_select(self, tokens: List[str]) -> Select:
        from_pos = next((i for i, t in enumerate(tokens) if t.lower() == "from"), None)
        if from_pos is None or from_pos + 1 >= len(tokens):
            raise SQLSyntaxError("Invalid SELECT syntax: missing FROM clause or table name")
        # "name, age" and "name,age" both arrive here as one comma list
        cols_text = " ".join(tokens[1:from_pos]).strip()
        if cols_text == "*":
            cols = ["*"]
        else:
            cols = split_on_commas(cols_text)
        if not cols:
            raise SQLSyntaxError("Invalid SELECT syntax: no columns selected")
        table = tokens[from_pos + 1]
        where = self._parse_where(tokens[from_pos + 2:])
        return Select(columns=cols, table=table, where=where)

    def _parse_update(self, tokens: List[str]) -> Update:
        table = self._table_name(tokens, 1, "UPDATE")
        if len(tokens) < 3 or tokens[2].lower() != "set":
            raise SQLSyntaxError("Invalid UPDATE syntax: missing SET clause")
        where_pos = next((i for i, t in enumerate(tokens) if i > 2 and t.lower() == "where"), len(tokens))
        assignment = tokens[3:where_pos]
        if len(assignment) != 3:
            raise SQLSyntaxError("Invalid SET clause: expected '<column> = <value>'")
        col, op, literal = assignment
        if op != "=":
            raise UnsupportedOperator(f"Only '=' is supported in SET clause, got '{op}'")
        where = self._parse_where(tokens[where_pos:])
        return Update(table=table, column=col, literal=literal, where=where)

    def _parse_delete(self, tokens: List[str]) -> Delete:
        table = self._table_name(tokens, 2, "DELETE")
        where = self._parse_where(tokens[3:])
        return Delete(table=table, where=where)
