from typing import Optional

from .executor import Result

DEFAULT_WIDTH = 15


def format_result(result: Optional[Result], width: int = DEFAULT_WIDTH) -> str:
    """Render a Result the way the console driver prints it."""
    if result is None:
        return ""
    if not result.ok:
        return f"Error: {result.error}"
    if result.statement == "CREATE":
        return f"Table {result.table} created successfully."
    if result.statement == "INSERT":
        return f"{result.count} row inserted into {result.table}."
    if result.statement == "UPDATE":
        return f"{result.count} row(s) updated in {result.table}."
    if result.statement == "DELETE":
        return f"{result.count} row(s) deleted from {result.table}."
    lines = [f"Query result ({result.count} rows):"]
    lines.append("".join(name.rjust(width) for name in result.columns))
    for row in result.rows:
        lines.append("".join(str(row.get(name)).rjust(width) for name in result.columns))
    return "\n".join(lines)
