"""
SQLite 数据库操作层

提供：
- 数据库初始化（建表、索引）
- 视图创建/删除/校验
- 数据插入与查询
"""

import sqlite3
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Optional, List, Literal

import pandas as pd
from loguru import logger

from sqlviews.catalog.base import ViewDef, ViewDefinitionError
from sqlviews.catalog.examples import get_view, resolve_views
from sqlviews.catalog.sample_data import get_sample_frames
from sqlviews.catalog.schema import (
    ALL_TABLES,
    get_all_create_sql,
    get_all_indexes,
    get_create_table_sql,
)
from sqlviews.config import settings


@dataclass
class ViewCheckResult:
    """视图校验结果"""
    name: str
    ok: bool
    columns: List[str] = field(default_factory=list)
    error: Optional[str] = None


class Database:
    """SQLite 数据库操作类"""

    def __init__(self, db_path: Optional[str] = None):
        """初始化数据库

        Args:
            db_path: 数据库文件路径，":memory:" 为内存数据库，默认取配置
        """
        db_path = db_path or settings.get_db_path()
        self.in_memory = db_path == ":memory:"
        self.db_path = db_path if self.in_memory else Path(db_path)

        if not self.in_memory:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)

        self._conn: Optional[sqlite3.Connection] = None

        logger.info(f"Database initialized: {self.db_path}")

    def connect(self) -> sqlite3.Connection:
        """获取数据库连接

        Returns:
            sqlite3.Connection
        """
        if self._conn is None:
            self._conn = sqlite3.connect(
                self.db_path,
                check_same_thread=False,
                timeout=settings.DB_TIMEOUT
            )
            self._conn.row_factory = sqlite3.Row
            logger.debug(f"Connected to database: {self.db_path}")

        return self._conn

    def close(self):
        """关闭数据库连接"""
        if self._conn:
            self._conn.close()
            self._conn = None
            logger.debug("Database connection closed")

    def init_db(self):
        """初始化数据库（创建表和索引）"""
        conn = self.connect()
        cursor = conn.cursor()

        for sql in get_all_create_sql():
            cursor.execute(sql)

        for sql in get_all_indexes():
            try:
                cursor.execute(sql)
            except sqlite3.OperationalError as e:
                logger.warning(f"Index creation warning: {e}")

        conn.commit()
        logger.info(f"Database initialized with {len(ALL_TABLES)} tables and indexes")

    def execute_script(self, sql: str):
        """执行 SQL 脚本（多条语句）

        Args:
            sql: SQL 文本
        """
        conn = self.connect()
        try:
            conn.executescript(sql)
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            logger.error(f"Script execution failed: {e}")
            raise

    # ========================================
    # 视图操作
    # ========================================

    def create_view(self, view: ViewDef, replace: bool = False):
        """创建单个视图

        Args:
            view: 视图定义
            replace: 已存在时先删除再创建

        Raises:
            ViewDefinitionError: 数据库拒绝该视图定义
        """
        conn = self.connect()
        cursor = conn.cursor()

        try:
            if replace:
                cursor.execute(view.drop_sql())
            cursor.execute(view.create_sql(if_not_exists=not replace))
            conn.commit()
            logger.debug(f"Created view: {view.name}")

        except sqlite3.Error as e:
            conn.rollback()
            logger.error(f"Failed to create view {view.name}: {e}")
            raise ViewDefinitionError(view.name, str(e)) from e

    def create_views(
        self,
        names: Optional[List[str]] = None,
        replace: bool = False
    ) -> List[str]:
        """创建目录中的视图

        Args:
            names: 视图名称（None 表示全部）
            replace: 已存在时先删除再创建

        Returns:
            已创建的视图名称
        """
        created = []
        for view in resolve_views(names):
            self.create_view(view, replace=replace)
            created.append(view.name)

        logger.info(f"Created {len(created)} views")
        return created

    def drop_view(self, name: str):
        """删除视图（不存在时忽略）"""
        conn = self.connect()
        conn.execute(f"DROP VIEW IF EXISTS {name}")
        conn.commit()
        logger.debug(f"Dropped view: {name}")

    def check_view(self, name: str) -> ViewCheckResult:
        """校验视图仍能解析，且输出列与定义一致

        基础表的列被删除或改名后，视图查询会失败

        Args:
            name: 视图名称

        Returns:
            ViewCheckResult
        """
        view = get_view(name)

        if not self.view_exists(view.name):
            return ViewCheckResult(view.name, ok=False, error="view does not exist")

        cursor = self.connect().cursor()
        try:
            cursor.execute(f"SELECT * FROM {view.name} LIMIT 0")
        except sqlite3.Error as e:
            logger.warning(f"View {view.name} is broken: {e}")
            return ViewCheckResult(view.name, ok=False, error=str(e))

        columns = [col[0] for col in cursor.description]
        if tuple(columns) != view.columns:
            error = f"columns {columns} do not match definition {list(view.columns)}"
            logger.warning(f"View {view.name}: {error}")
            return ViewCheckResult(view.name, ok=False, columns=columns, error=error)

        return ViewCheckResult(view.name, ok=True, columns=columns)

    def check_views(self, names: Optional[List[str]] = None) -> List[ViewCheckResult]:
        """校验多个视图

        Args:
            names: 视图名称（None 表示全部）

        Returns:
            校验结果列表
        """
        results = [self.check_view(view.name) for view in resolve_views(names)]
        broken = [r.name for r in results if not r.ok]

        if broken:
            logger.warning(f"{len(broken)}/{len(results)} views broken: {broken}")
        else:
            logger.info(f"All {len(results)} views OK")

        return results

    # ========================================
    # 插入操作
    # ========================================

    def insert_dataframe(
        self,
        df: pd.DataFrame,
        table_name: str,
        if_exists: Literal["fail", "replace", "append"] = "append",
        chunksize: int = 1000
    ) -> int:
        """插入 DataFrame 到数据库

        Args:
            df: 要插入的数据
            table_name: 表名
            if_exists: 表已存在时的处理方式
                - "fail": 抛出错误
                - "replace": 删除原表，按 schema 重新创建
                - "append": 追加数据（默认）
            chunksize: 分批插入大小

        Returns:
            插入的行数
        """
        if df.empty:
            logger.warning(f"DataFrame is empty, skipping insert to {table_name}")
            return 0

        conn = self.connect()

        if if_exists == "fail" and self.table_exists(table_name):
            raise ValueError(f"Table '{table_name}' already exists")

        if if_exists == "replace":
            cursor = conn.cursor()
            cursor.execute(f"DROP TABLE IF EXISTS {table_name}")
            if table_name in ALL_TABLES:
                columns, constraint = ALL_TABLES[table_name]
                cursor.execute(get_create_table_sql(table_name, columns, constraint))
            conn.commit()
            logger.info(f"Replaced table: {table_name}")

        try:
            df.to_sql(
                table_name,
                conn,
                if_exists="append",
                index=False,
                chunksize=chunksize
            )
            rows = len(df)
            logger.debug(f"Inserted {rows} rows to {table_name}")
            return rows

        except Exception as e:
            logger.error(f"Failed to insert to {table_name}: {e}")
            raise

    def load_sample_data(self, today: Optional[date] = None) -> dict:
        """写入所有基础表的样本数据

        Args:
            today: 视为"今天"的日期

        Returns:
            表名 -> 插入行数
        """
        counts = {}
        for table_name, df in get_sample_frames(today).items():
            counts[table_name] = self.insert_dataframe(df, table_name)

        logger.info(f"Loaded sample data: {sum(counts.values())} rows in {len(counts)} tables")
        return counts

    # ========================================
    # 查询操作
    # ========================================

    def query(
        self,
        table_name: str,
        columns: Optional[List[str]] = None,
        filters: Optional[dict] = None,
        order_by: Optional[str] = None,
        limit: Optional[int] = None
    ) -> pd.DataFrame:
        """查询数据

        Args:
            table_name: 表名或视图名
            columns: 需要的列（None 表示所有列）
            filters: 过滤条件，如 {"department": "HR", "order_date >=": "2024-01-01"}
            order_by: 排序，如 "order_date ASC"
            limit: 限制返回行数

        Returns:
            查询结果 DataFrame
        """
        conn = self.connect()

        col_str = ", ".join(columns) if columns else "*"
        sql = f"SELECT {col_str} FROM {table_name}"

        where_parts = []
        params = []

        if filters:
            for key, value in filters.items():
                if " " in key:
                    col, op = key.split(" ", 1)
                else:
                    col, op = key, "="

                where_parts.append(f"{col} {op} ?")
                params.append(value)

        if where_parts:
            sql += " WHERE " + " AND ".join(where_parts)

        if order_by:
            sql += f" ORDER BY {order_by}"

        if limit is not None:
            sql += f" LIMIT {int(limit)}"

        try:
            df = pd.read_sql_query(sql, conn, params=params)
            logger.debug(f"Queried {len(df)} rows from {table_name}")
            return df

        except Exception as e:
            logger.error(f"Query failed: {e}")
            raise

    def query_view(
        self,
        name: str,
        filters: Optional[dict] = None,
        order_by: Optional[str] = None,
        limit: Optional[int] = None
    ) -> pd.DataFrame:
        """按视图名称查询

        Args:
            name: 视图名称（见 PREDEFINED_VIEWS）
            filters: 过滤条件
            order_by: 排序
            limit: 限制行数

        Returns:
            查询结果 DataFrame
        """
        view = get_view(name)
        return self.query(
            table_name=view.name,
            filters=filters,
            order_by=order_by,
            limit=limit
        )

    # ========================================
    # 元数据
    # ========================================

    def _object_exists(self, name: str, object_type: str) -> bool:
        cursor = self.connect().cursor()
        cursor.execute(
            "SELECT name FROM sqlite_master WHERE type = ? AND name = ?",
            (object_type, name)
        )
        return cursor.fetchone() is not None

    def table_exists(self, table_name: str) -> bool:
        """检查表是否存在"""
        return self._object_exists(table_name, "table")

    def view_exists(self, view_name: str) -> bool:
        """检查视图是否存在"""
        return self._object_exists(view_name, "view")

    def list_db_views(self) -> List[str]:
        """列出数据库中已存在的视图"""
        cursor = self.connect().cursor()
        cursor.execute("SELECT name FROM sqlite_master WHERE type = 'view' ORDER BY name")
        return [row["name"] for row in cursor.fetchall()]

    def get_table_info(self, table_name: str) -> pd.DataFrame:
        """获取表（或视图）结构信息

        Args:
            table_name: 表名

        Returns:
            结构信息 DataFrame（cid, name, type, notnull, dflt_value, pk）
        """
        conn = self.connect()
        return pd.read_sql_query(f"PRAGMA table_info({table_name})", conn)

    def get_view_columns(self, view_name: str) -> List[str]:
        """获取视图的输出列名（按顺序）"""
        return self.get_table_info(view_name)["name"].tolist()

    def __enter__(self):
        """上下文管理器入口"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """上下文管理器退出"""
        self.close()
