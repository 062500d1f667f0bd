#!/usr/bin/env python
"""
SQL 视图示例命令行工具

用法:
    sqlviews init --sample          # 建表、建视图并写入样本数据
    sqlviews list --kind aggregating
    sqlviews show customer_segments
    sqlviews query order_details --limit 5
    sqlviews check                  # 校验所有视图，有损坏时退出码为 1
    sqlviews export build/sql
"""

import argparse
import sqlite3
import sys

import pandas as pd
from loguru import logger

from sqlviews.catalog.base import CatalogError, ViewKind
from sqlviews.catalog.examples import get_view, list_views
from sqlviews.catalog.export import export_scripts
from sqlviews.config import settings
from sqlviews.database.db import Database


def setup_logging(level: str):
    """配置日志输出"""
    logger.remove()
    logger.add(sys.stderr, format=settings.LOG_FORMAT, level=level)

    if settings.DEBUG_MODE:
        logger.add(
            settings.get_log_file(),
            rotation=settings.LOG_ROTATION,
            retention=settings.LOG_RETENTION,
            level="DEBUG"
        )


def cmd_init(db: Database, args) -> int:
    db.init_db()
    created = db.create_views(replace=args.replace)
    if args.sample:
        db.load_sample_data()
    logger.success(f"Initialized {db.db_path}: {len(created)} views")
    return 0


def cmd_list(db: Database, args) -> int:
    for view in list_views(args.kind):
        complexity = "simple" if view.is_simple else "complex"
        print(f"{view.name:<24} {str(view.kind):<12} {complexity:<8} {view.use_case}")
    return 0


def cmd_show(db: Database, args) -> int:
    view = get_view(args.name)
    print(f"-- {view.description}")
    print(view.create_sql())
    for query in view.example_queries:
        print()
        print(query)
    return 0


def cmd_query(db: Database, args) -> int:
    df = db.query_view(args.name, limit=args.limit)
    if df.empty:
        print("(no rows)")
    else:
        print(df.to_string(index=False))
    return 0


def cmd_check(db: Database, args) -> int:
    results = db.check_views()
    for result in results:
        status = "OK" if result.ok else f"BROKEN: {result.error}"
        print(f"{result.name:<24} {status}")
    return 0 if all(r.ok for r in results) else 1


def cmd_export(db: Database, args) -> int:
    paths = export_scripts(args.out_dir)
    for path in paths:
        print(path)
    logger.success(f"Exported {len(paths)} files")
    return 0


COMMANDS = {
    "init": cmd_init,
    "list": cmd_list,
    "show": cmd_show,
    "query": cmd_query,
    "check": cmd_check,
    "export": cmd_export,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="SQL 视图示例：创建、查询、校验、导出")
    parser.add_argument('--db', type=str, default=None,
                        help=f'数据库路径 (default: {settings.DB_PATH})')
    default_level = settings.LOG_LEVEL if settings.LOG_LEVEL in settings.LOG_LEVELS else "INFO"
    parser.add_argument('--log-level', type=str.upper, default=default_level,
                        choices=settings.LOG_LEVELS,
                        help=f'日志级别 (default: {default_level})')

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("init", help="建表并创建所有视图")
    p.add_argument('--sample', action='store_true', help='写入样本数据')
    p.add_argument('--replace', action='store_true', help='重新创建已存在的视图')

    p = sub.add_parser("list", help="列出视图目录")
    p.add_argument('--kind', type=str, default=None,
                   choices=[kind.value for kind in ViewKind],
                   help='只列出该类别')

    p = sub.add_parser("show", help="打印视图定义")
    p.add_argument('name', type=str)

    p = sub.add_parser("query", help="查询视图")
    p.add_argument('name', type=str)
    p.add_argument('--limit', type=int, default=None)

    sub.add_parser("check", help="校验所有视图")

    p = sub.add_parser("export", help="导出 .sql 脚本")
    p.add_argument('out_dir', type=str, nargs='?', default=str(settings.EXPORT_DIR))

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    result = settings.validate_config()
    for error in result['errors']:
        logger.warning(f"Config: {error}")

    try:
        with Database(args.db) as db:
            return COMMANDS[args.command](db, args)
    except CatalogError as e:
        logger.error(str(e))
        return 1
    except (sqlite3.Error, pd.errors.DatabaseError) as e:
        # 常见原因：尚未执行 init
        logger.error(f"Database error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
