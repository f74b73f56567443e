from typing import Dict, List, Sequence

from .exceptions import TableExists, TableNotFound
from .storage import Column, Table


class Catalog:
    """Own every table of one in-memory database, keyed by lowercase table name.

    Tables live as long as the catalog does; there is no drop or rename.
    """

    def __init__(self):
        self._tables: Dict[str, Table] = {}

    def create_table(self, name: str, columns: Sequence[Column]) -> Table:
        key = name.lower()
        if key in self._tables:
            raise TableExists(f"Table already exists: {name}")
        table = Table(name, columns)
        self._tables[key] = table
        return table

    def get_table(self, name: str) -> Table:
        table = self._tables.get(name.lower())
        if table is None:
            raise TableNotFound(f"Table not found: {name}")
        return table

    def has_table(self, name: str) -> bool:
        return name.lower() in self._tables

    def table_names(self) -> List[str]:
        return [t.name for t in self._tables.values()]

    def __contains__(self, name: str) -> bool:
        return self.has_table(name)

    def __len__(self):
        return len(self._tables)
