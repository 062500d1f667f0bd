"""
SQL 视图示例库

Executable catalog of example SQL views: definitions, sample schema,
SQLite verification and .sql export.
"""

__version__ = "0.1.0"

__all__ = [
    "catalog",
    "config",
    "database",
    "cli",
]
