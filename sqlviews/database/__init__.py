"""
数据库层

提供 SQLite 数据库操作：
- Database: 数据库操作类
- ViewCheckResult: 视图校验结果
"""

from sqlviews.database.db import Database, ViewCheckResult

__all__ = [
    "Database",
    "ViewCheckResult",
]
