"""Stored procedure access: typed parameters, row mapping and invocation."""

from .engine import create_engine, dispose_engine
from .params import ProcedureParam, SqlType
from .procedures import ProcedureInvoker, build_call
from .rows import RowReader, column_index_map

__all__ = [
    "ProcedureInvoker",
    "ProcedureParam",
    "RowReader",
    "SqlType",
    "build_call",
    "column_index_map",
    "create_engine",
    "dispose_engine",
]
