"""
示例数据库 Schema 定义

示例视图引用的基础表，仅用于演示视图语法：
- employees: 员工（含敏感字段 salary / ssn）
- customers / orders / order_items / products: 电商
- students / courses / lessons / enrollments / lesson_completions: 在线学习平台
- access_to_basic_services: 联合国基础服务覆盖数据（查找视图示例）

表之间不定义外键，日期统一以 YYYY-MM-DD 文本存储
"""

from dataclasses import dataclass
from typing import Any, Literal, Optional


@dataclass
class ColumnDef:
    """列定义"""
    name: str
    type: Literal["TEXT", "REAL", "INTEGER", "NUMERIC"]
    nullable: bool = True
    primary_key: bool = False
    unique: bool = False
    default: Any = None


# ========================================
# 表结构定义
# ========================================

TABLE_EMPLOYEES = [
    ColumnDef("emp_id", "INTEGER", primary_key=True),
    ColumnDef("name", "TEXT", nullable=False),
    ColumnDef("email", "TEXT"),
    ColumnDef("salary", "NUMERIC"),               # DECIMAL(10,2)
    ColumnDef("ssn", "TEXT"),                     # 敏感字段
    ColumnDef("department", "TEXT"),
    ColumnDef("hire_date", "TEXT"),
    ColumnDef("performance_rating", "INTEGER"),
]

TABLE_CUSTOMERS = [
    ColumnDef("customer_id", "INTEGER", primary_key=True),
    ColumnDef("customer_name", "TEXT", nullable=False),
    ColumnDef("email", "TEXT"),
    ColumnDef("phone", "TEXT"),
    ColumnDef("registration_date", "TEXT"),
    ColumnDef("status", "TEXT", default="A"),     # A=Active, I=Inactive, S=Suspended
]

TABLE_PRODUCTS = [
    ColumnDef("product_id", "INTEGER", primary_key=True),
    ColumnDef("product_name", "TEXT", nullable=False),
    ColumnDef("category", "TEXT"),
    ColumnDef("price", "NUMERIC"),
    ColumnDef("stock_quantity", "INTEGER", default=0),
]

TABLE_ORDERS = [
    ColumnDef("order_id", "INTEGER", primary_key=True),
    ColumnDef("customer_id", "INTEGER", nullable=False),
    ColumnDef("order_date", "TEXT", nullable=False),
    ColumnDef("total_amount", "NUMERIC"),
]

TABLE_ORDER_ITEMS = [
    ColumnDef("order_id", "INTEGER", nullable=False),
    ColumnDef("product_id", "INTEGER", nullable=False),
    ColumnDef("quantity", "INTEGER", nullable=False),
    ColumnDef("price", "NUMERIC", nullable=False),  # 成交单价
]

TABLE_STUDENTS = [
    ColumnDef("student_id", "INTEGER", primary_key=True),
    ColumnDef("student_name", "TEXT", nullable=False),
    ColumnDef("email", "TEXT"),
]

TABLE_COURSES = [
    ColumnDef("course_id", "INTEGER", primary_key=True),
    ColumnDef("course_name", "TEXT", nullable=False),
]

TABLE_LESSONS = [
    ColumnDef("lesson_id", "INTEGER", primary_key=True),
    ColumnDef("course_id", "INTEGER", nullable=False),
    ColumnDef("lesson_title", "TEXT"),
]

TABLE_ENROLLMENTS = [
    ColumnDef("student_id", "INTEGER", nullable=False),
    ColumnDef("course_id", "INTEGER", nullable=False),
    ColumnDef("enrolled_on", "TEXT"),
]

# 课时完成记录（视图 student_progress 的数据来源）
TABLE_LESSON_COMPLETIONS = [
    ColumnDef("student_id", "INTEGER", nullable=False),
    ColumnDef("lesson_id", "INTEGER", nullable=False),
    ColumnDef("score", "REAL"),
    ColumnDef("completion_date", "TEXT"),
]

TABLE_ACCESS_TO_BASIC_SERVICES = [
    ColumnDef("Country_name", "TEXT", nullable=False),
    ColumnDef("Region", "TEXT"),
    ColumnDef("Time_period", "INTEGER", nullable=False),
    ColumnDef("Est_population_in_millions", "REAL"),
    ColumnDef("Pct_basic_drinking_water", "REAL"),   # 基础饮用水覆盖率 (%)
    ColumnDef("Pct_basic_sanitation", "REAL"),       # 基础卫生设施覆盖率 (%)
]


# ========================================
# 索引定义
# ========================================

INDEXES = [
    # orders
    "CREATE INDEX IF NOT EXISTS idx_orders_customer ON orders(customer_id);",
    "CREATE INDEX IF NOT EXISTS idx_orders_date ON orders(order_date);",

    # order_items
    "CREATE INDEX IF NOT EXISTS idx_order_items_product ON order_items(product_id);",

    # lessons
    "CREATE INDEX IF NOT EXISTS idx_lessons_course ON lessons(course_id);",
]


# 所有表：表名 -> (列定义, 复合主键)
ALL_TABLES = {
    "employees": (TABLE_EMPLOYEES, None),
    "customers": (TABLE_CUSTOMERS, None),
    "products": (TABLE_PRODUCTS, None),
    "orders": (TABLE_ORDERS, None),
    "order_items": (TABLE_ORDER_ITEMS, "PRIMARY KEY (order_id, product_id)"),
    "students": (TABLE_STUDENTS, None),
    "courses": (TABLE_COURSES, None),
    "lessons": (TABLE_LESSONS, None),
    "enrollments": (TABLE_ENROLLMENTS, "PRIMARY KEY (student_id, course_id)"),
    "lesson_completions": (TABLE_LESSON_COMPLETIONS, "PRIMARY KEY (student_id, lesson_id)"),
    "access_to_basic_services": (TABLE_ACCESS_TO_BASIC_SERVICES, "PRIMARY KEY (Country_name, Time_period)"),
}


def get_create_table_sql(
    table_name: str,
    columns: list[ColumnDef],
    table_constraint: Optional[str] = None
) -> str:
    """生成建表 SQL

    Args:
        table_name: 表名
        columns: 列定义列表
        table_constraint: 表级约束，如复合主键

    Returns:
        CREATE TABLE SQL 语句
    """
    col_defs = []

    for col in columns:
        parts = [col.name, col.type]

        if col.primary_key:
            parts.append("PRIMARY KEY")
        elif not col.nullable:
            parts.append("NOT NULL")

        if col.unique and not col.primary_key:
            parts.append("UNIQUE")

        if col.default is not None:
            parts.append(f"DEFAULT {repr(col.default)}")

        col_defs.append(" ".join(parts))

    if table_constraint:
        col_defs.append(table_constraint)

    return f"CREATE TABLE IF NOT EXISTS {table_name} (\n  " + ",\n  ".join(col_defs) + "\n);"


def get_table_columns(table_name: str) -> list[str]:
    """获取表的列名列表"""
    columns, _ = ALL_TABLES[table_name]
    return [col.name for col in columns]


def get_all_create_sql() -> list[str]:
    """获取所有建表 SQL"""
    sqls = []
    for table_name, (columns, constraint) in ALL_TABLES.items():
        sqls.append(get_create_table_sql(table_name, columns, constraint))
    return sqls


def get_all_indexes() -> list[str]:
    """获取所有索引 SQL"""
    return INDEXES
