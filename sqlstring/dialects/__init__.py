"""sqlstring dialect layer: per-engine literal rules."""
from sqlstring.dialects.base import SQLDialect
from sqlstring.dialects.mysql import MySQLDialect
from sqlstring.dialects.postgres import PostgresDialect
from sqlstring.dialects.registry import DEFAULT_DIALECT, DialectFactory
from sqlstring.dialects.sqlite import SQLiteDialect

DialectFactory.register_class("mysql", MySQLDialect)
DialectFactory.register_class("postgres", PostgresDialect)
DialectFactory.register_class("sqlite", SQLiteDialect)

__all__ = [
    "DEFAULT_DIALECT",
    "DialectFactory",
    "MySQLDialect",
    "PostgresDialect",
    "SQLDialect",
    "SQLiteDialect",
]
