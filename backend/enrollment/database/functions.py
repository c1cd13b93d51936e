# enrollment/database/functions.py
import sqlite3
from sqlalchemy import String, event
from sqlalchemy.engine import Engine
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.functions import FunctionElement


class unicode_lower(FunctionElement):
    """
    lower() that folds non-ASCII letters on every backend.

    SQLite's built-in lower() only folds ASCII, so on SQLite this compiles to
    py_lower(), Python's str.lower registered on each connection.
    """
    name = "unicode_lower"
    type = String()
    inherit_cache = True


@compiles(unicode_lower)
def _compile_lower(element, compiler, **kw):
    return f"lower({compiler.process(element.clauses, **kw)})"


@compiles(unicode_lower, "sqlite")
def _compile_sqlite_lower(element, compiler, **kw):
    return f"py_lower({compiler.process(element.clauses, **kw)})"


def _py_lower(value):
    return value.lower() if value is not None else None


@event.listens_for(Engine, "connect")
def register_sqlite_functions(dbapi_connection, connection_record):
    if isinstance(dbapi_connection, sqlite3.Connection):
        dbapi_connection.create_function("py_lower", 1, _py_lower, deterministic=True)
