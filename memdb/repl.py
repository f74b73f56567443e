from typing import Iterator, Optional, TextIO

from .display import DEFAULT_WIDTH, format_result
from .exceptions import TableNotFound
from .executor import Executor


def split_statements(text: str) -> Iterator[str]:
    """Yield the statements of a script, split on ';' outside single quotes."""
    stmt = []
    in_string = False
    for ch in text:
        if ch == "'":
            in_string = not in_string
        if ch == ";" and not in_string:
            sql = "".join(stmt).strip()
            if sql:
                yield sql
            stmt = []
        else:
            stmt.append(ch)
    tail = "".join(stmt).strip()
    if tail:
        yield tail


def run_script(exe: Executor, text: str, out: Optional[TextIO] = None, width: int = DEFAULT_WIDTH) -> int:
    """Execute every statement in ``text``, printing each result. Returns the number of failures.

    A failing statement is reported and the script carries on with the next one.
    """
    failures = 0
    for sql in split_statements(text):
        res = exe.try_execute(sql)
        if res is None:
            continue
        if not res.ok:
            failures += 1
        print(format_result(res, width), file=out)
    return failures


def _describe(exe: Executor, name: str) -> str:
    table = exe.catalog.get_table(name)
    cols = ", ".join(f"{c.name} {c.type.value}" for c in table.columns)
    return f"{table.name} ({cols}) -- {len(table)} rows"


def repl_loop(exe: Optional[Executor] = None, width: int = DEFAULT_WIDTH):
    exe = exe or Executor()
    print("memdb REPL. Enter SQL statements terminated with ';'. Type .exit to quit.")
    print("Commands: .exit, .tables, .schema <table>")
    buffer = []
    while True:
        try:
            line = input("> " if not buffer else "... ")
        except EOFError:
            break
        if not line:
            continue
        stripped = line.strip()
        if not buffer and stripped == ".exit":
            break
        if not buffer and stripped == ".tables":
            print("Tables:", exe.catalog.table_names())
            continue
        if not buffer and stripped.startswith(".schema"):
            parts = stripped.split(None, 1)
            if len(parts) == 2:
                try:
                    print(_describe(exe, parts[1].strip()))
                except TableNotFound as e:
                    print(f"Error: {e}")
            else:
                print("Usage: .schema <table>")
            continue
        buffer.append(line)
        if stripped.endswith(";"):
            sql = "\n".join(buffer)
            buffer = []
            run_script(exe, sql, width=width)
