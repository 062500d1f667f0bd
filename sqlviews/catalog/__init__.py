"""
视图目录

- base: ViewKind / ViewDef / 异常
- schema: 示例基础表
- examples: 示例视图（PREDEFINED_VIEWS）
- sample_data: 样本数据
- export: .sql 脚本导出
"""

from sqlviews.catalog.base import (
    CatalogError,
    UnknownViewError,
    ViewDef,
    ViewDefinitionError,
    ViewKind,
)
from sqlviews.catalog.examples import (
    PREDEFINED_VIEWS,
    classify_tier,
    get_view,
    list_views,
    views_for_table,
)

__all__ = [
    "CatalogError",
    "UnknownViewError",
    "ViewDef",
    "ViewDefinitionError",
    "ViewKind",
    "PREDEFINED_VIEWS",
    "classify_tier",
    "get_view",
    "list_views",
    "views_for_table",
]
