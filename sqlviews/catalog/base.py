"""
视图定义基础模块

包含：
- ViewKind: 视图类别枚举
- ViewDef: 视图定义（名称、定义查询、依赖表、输出列）
- 异常类定义
"""

from dataclasses import dataclass, field
from enum import Enum


class ViewKind(Enum):
    """视图类别枚举"""

    LOOKUP = "lookup"            # 查找视图：静态/参考数据
    JOIN = "join"                # 连接视图：多表组合
    AGGREGATING = "aggregating"  # 聚合视图：GROUP BY + 聚合函数
    FILTER = "filter"            # 行/列过滤（访问控制）
    TRANSFORM = "transform"      # 格式转换
    SUMMARY = "summary"          # 标量子查询汇总

    def __str__(self) -> str:
        return self.value


class CatalogError(Exception):
    """视图目录基础异常"""

    pass


class UnknownViewError(CatalogError):
    """视图名称未定义异常"""

    pass


class ViewDefinitionError(CatalogError):
    """视图定义被数据库拒绝，或依赖的基础表结构已变化"""

    def __init__(self, view_name: str, message: str):
        self.view_name = view_name
        super().__init__(f"View '{view_name}' is invalid: {message}")


@dataclass(frozen=True)
class ViewDef:
    """
    视图定义

    Attributes:
        name: 视图名称
        kind: 视图类别
        use_case: 所属使用场景（文档章节标题）
        description: 说明
        select_sql: 定义视图的 SELECT 语句（SQLite 方言，不含结尾分号）
        tables: 依赖的基础表
        columns: 视图暴露的列，按顺序
        example_queries: 示例查询
    """
    name: str
    kind: ViewKind
    use_case: str
    description: str
    select_sql: str
    tables: tuple
    columns: tuple
    example_queries: tuple = field(default_factory=tuple)

    @property
    def is_simple(self) -> bool:
        """简单视图：单表、无聚合。通常可以更新"""
        return len(self.tables) == 1 and self.kind not in (ViewKind.AGGREGATING, ViewKind.SUMMARY)

    @property
    def is_read_only(self) -> bool:
        """复杂视图（多表/聚合/子查询）通常只读"""
        return not self.is_simple

    def create_sql(self, if_not_exists: bool = True) -> str:
        """生成 CREATE VIEW 语句

        Args:
            if_not_exists: 是否加 IF NOT EXISTS

        Returns:
            CREATE VIEW SQL 语句
        """
        guard = "IF NOT EXISTS " if if_not_exists else ""
        return f"CREATE VIEW {guard}{self.name} AS\n{self.select_sql.strip()};"

    def drop_sql(self) -> str:
        """生成 DROP VIEW 语句"""
        return f"DROP VIEW IF EXISTS {self.name};"
