from .catalog import Catalog
from .storage import Column, Row, Table
from .types import DataType, Value
from .executor import Executor, Result
from .parser import Parser

__all__ = ["Catalog", "Column", "Row", "Table", "DataType", "Value", "Executor", "Result", "Parser"]
