"""
SQL 脚本导出

把视图目录渲染为可直接执行的 .sql 脚本和 markdown 索引：
- 00_schema.sql: 所有基础表与索引
- NN_<use_case>.sql: 每个使用场景一个文件
- catalog.md: 视图索引
"""

import re
from pathlib import Path
from typing import Iterable, List, Optional

from loguru import logger

from sqlviews.catalog.base import ViewDef
from sqlviews.catalog.examples import USE_CASES, list_views
from sqlviews.catalog.schema import get_all_create_sql, get_all_indexes


SCHEMA_FILE = "00_schema.sql"
CATALOG_FILE = "catalog.md"


def _slug(text: str) -> str:
    return re.sub(r"[^a-z0-9]+", "_", text.lower()).strip("_")


def render_schema_script() -> str:
    """渲染建表脚本"""
    parts = ["-- Illustrative base tables used by the example views", ""]
    parts.extend(sql + "\n" for sql in get_all_create_sql())
    parts.extend(get_all_indexes())
    return "\n".join(parts) + "\n"


def render_view_script(views: Iterable[ViewDef], title: Optional[str] = None) -> str:
    """渲染视图脚本

    每个视图前带注释（类别、依赖表），后跟示例查询

    Args:
        views: 视图定义
        title: 脚本标题注释

    Returns:
        SQL 文本
    """
    parts = []
    if title:
        parts.extend([f"-- {title}", ""])

    for view in views:
        complexity = "simple" if view.is_simple else "complex, read-only"
        parts.append(f"-- {view.description}")
        parts.append(f"-- kind: {view.kind}, {complexity}; base tables: {', '.join(view.tables)}")
        parts.append(view.create_sql())
        for query in view.example_queries:
            parts.append("")
            parts.append(query)
        parts.append("")

    return "\n".join(parts)


def render_catalog_markdown() -> str:
    """渲染 markdown 视图索引"""
    lines = [
        "# View catalog",
        "",
        "| View | Kind | Simple | Base tables | Columns |",
        "| --- | --- | --- | --- | --- |",
    ]
    for view in list_views():
        lines.append(
            f"| `{view.name}` | {view.kind} | {'yes' if view.is_simple else 'no'} "
            f"| {', '.join(view.tables)} | {', '.join(view.columns)} |"
        )
    return "\n".join(lines) + "\n"


def export_scripts(out_dir) -> List[Path]:
    """导出所有脚本到目录

    Args:
        out_dir: 输出目录（不存在时创建）

    Returns:
        写入的文件路径（按执行顺序，最后一个是 catalog.md）
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    written = []

    path = out_dir / SCHEMA_FILE
    path.write_text(render_schema_script(), encoding="utf-8")
    written.append(path)

    views = list_views()
    for i, use_case in enumerate(USE_CASES, start=1):
        group = [view for view in views if view.use_case == use_case]
        if not group:
            continue
        path = out_dir / f"{i:02d}_{_slug(use_case)}.sql"
        path.write_text(render_view_script(group, title=use_case), encoding="utf-8")
        written.append(path)

    path = out_dir / CATALOG_FILE
    path.write_text(render_catalog_markdown(), encoding="utf-8")
    written.append(path)

    logger.info(f"Exported {len(written)} files to {out_dir}")
    return written
