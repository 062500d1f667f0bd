"""
示例视图定义

按使用场景组织的 CREATE VIEW 示例（SQLite 方言）：
1. 数据安全与访问控制
2. 简化复杂连接
3. 封装业务逻辑
4. 报表与分析
5. 数据转换与格式化
6. 模拟数据接口
7. 实战场景：在线学习平台
8. 查找视图
"""

from typing import Optional, Union

from sqlviews.catalog.base import ViewDef, ViewKind, UnknownViewError
from sqlviews.config import settings


# ========================================
# 使用场景
# ========================================

USE_CASE_SECURITY = "Data Security and Access Control"
USE_CASE_JOINS = "Simplifying Complex Joins"
USE_CASE_BUSINESS_LOGIC = "Business Logic Encapsulation"
USE_CASE_REPORTING = "Reporting and Analytics"
USE_CASE_TRANSFORM = "Data Transformation and Formatting"
USE_CASE_MOCK = "Creating Mock Data Interfaces"
USE_CASE_ELEARNING = "Real-World Scenario: E-learning Platform"
USE_CASE_LOOKUP = "Lookup View"

USE_CASES = [
    USE_CASE_SECURITY,
    USE_CASE_JOINS,
    USE_CASE_BUSINESS_LOGIC,
    USE_CASE_REPORTING,
    USE_CASE_TRANSFORM,
    USE_CASE_MOCK,
    USE_CASE_ELEARNING,
    USE_CASE_LOOKUP,
]


# ========================================
# 客户分级规则
# ========================================

# (等级, 累计消费下限)，从高到低
TIER_THRESHOLDS = [
    ("VIP", settings.TIER_VIP),
    ("Gold", settings.TIER_GOLD),
    ("Silver", settings.TIER_SILVER),
]
DEFAULT_TIER = "Bronze"


def classify_tier(total_spent: Optional[float]) -> str:
    """按累计消费计算客户等级（与视图中的 CASE 表达式一致）

    Args:
        total_spent: 累计消费，无订单时为 None

    Returns:
        客户等级
    """
    # SQL 中 NULL >= x 不成立，落入 ELSE
    if total_spent is None:
        return DEFAULT_TIER

    for tier, threshold in TIER_THRESHOLDS:
        if total_spent >= threshold:
            return tier
    return DEFAULT_TIER


def tier_case_sql(amount_expr: str, indent: str = "    ") -> str:
    """生成客户分级 CASE 表达式

    Args:
        amount_expr: 金额表达式，如 SUM(o.total_amount)
        indent: WHEN/ELSE 行缩进

    Returns:
        CASE ... END 表达式
    """
    lines = ["CASE"]
    for tier, threshold in TIER_THRESHOLDS:
        lines.append(f"{indent}    WHEN {amount_expr} >= {threshold} THEN '{tier}'")
    lines.append(f"{indent}    ELSE '{DEFAULT_TIER}'")
    lines.append(f"{indent}END")
    return "\n".join(lines)


# ========================================
# 1. 数据安全与访问控制
# ========================================

VIEW_HR_EMPLOYEE = ViewDef(
    name="hr_employee_view",
    kind=ViewKind.FILTER,
    use_case=USE_CASE_SECURITY,
    description="HR department view: every employee column except the SSN.",
    select_sql="""
SELECT emp_id, name, email, salary, department, hire_date, performance_rating
FROM employees
""",
    tables=("employees",),
    columns=("emp_id", "name", "email", "salary", "department", "hire_date", "performance_rating"),
)

VIEW_STAFF_DIRECTORY = ViewDef(
    name="staff_directory",
    kind=ViewKind.FILTER,
    use_case=USE_CASE_SECURITY,
    description="General staff directory: contact columns only, executives hidden.",
    select_sql="""
SELECT emp_id, name, email, department
FROM employees
WHERE department != 'Executive'
""",
    tables=("employees",),
    columns=("emp_id", "name", "email", "department"),
)


# ========================================
# 2. 简化复杂连接
# ========================================

# 不使用视图时需要反复书写的查询
ORDER_DETAILS_SELECT = """
SELECT
    o.order_id,
    c.customer_name,
    c.email,
    p.product_name,
    oi.quantity,
    oi.price,
    (oi.quantity * oi.price) AS line_total,
    o.order_date
FROM orders o
JOIN customers c ON o.customer_id = c.customer_id
JOIN order_items oi ON o.order_id = oi.order_id
JOIN products p ON oi.product_id = p.product_id
"""

VIEW_ORDER_DETAILS = ViewDef(
    name="order_details",
    kind=ViewKind.JOIN,
    use_case=USE_CASE_JOINS,
    description="One row per order line with customer and product names resolved.",
    select_sql=ORDER_DETAILS_SELECT,
    tables=("orders", "customers", "order_items", "products"),
    columns=("order_id", "customer_name", "email", "product_name",
             "quantity", "price", "line_total", "order_date"),
    example_queries=(
        f"SELECT * FROM order_details WHERE order_date >= '{settings.ORDER_REPORT_START}';",
    ),
)


# ========================================
# 3. 封装业务逻辑
# ========================================

VIEW_CUSTOMER_SEGMENTS = ViewDef(
    name="customer_segments",
    kind=ViewKind.AGGREGATING,
    use_case=USE_CASE_BUSINESS_LOGIC,
    description="Customer classification based on purchase history.",
    select_sql=f"""
SELECT
    c.customer_id,
    c.customer_name,
    c.email,
    COUNT(o.order_id) AS total_orders,
    SUM(o.total_amount) AS total_spent,
    {tier_case_sql("SUM(o.total_amount)")} AS customer_tier,
    AVG(o.total_amount) AS avg_order_value
FROM customers c
LEFT JOIN orders o ON c.customer_id = o.customer_id
GROUP BY c.customer_id, c.customer_name, c.email
""",
    tables=("customers", "orders"),
    columns=("customer_id", "customer_name", "email", "total_orders",
             "total_spent", "customer_tier", "avg_order_value"),
)


# ========================================
# 4. 报表与分析
# ========================================

VIEW_MONTHLY_SALES_REPORT = ViewDef(
    name="monthly_sales_report",
    kind=ViewKind.AGGREGATING,
    use_case=USE_CASE_REPORTING,
    description="Monthly sales summary.",
    select_sql="""
SELECT
    CAST(strftime('%Y', order_date) AS INTEGER) AS year,
    CAST(strftime('%m', order_date) AS INTEGER) AS month,
    COUNT(DISTINCT order_id) AS total_orders,
    COUNT(DISTINCT customer_id) AS unique_customers,
    SUM(total_amount) AS total_revenue,
    AVG(total_amount) AS avg_order_value,
    MAX(total_amount) AS largest_order
FROM orders
GROUP BY strftime('%Y', order_date), strftime('%m', order_date)
""",
    tables=("orders",),
    columns=("year", "month", "total_orders", "unique_customers",
             "total_revenue", "avg_order_value", "largest_order"),
)

VIEW_PRODUCT_PERFORMANCE = ViewDef(
    name="product_performance",
    kind=ViewKind.AGGREGATING,
    use_case=USE_CASE_REPORTING,
    description="Product performance; products never ordered are listed with zero orders.",
    select_sql="""
SELECT
    p.product_id,
    p.product_name,
    p.category,
    COUNT(oi.order_id) AS times_ordered,
    SUM(oi.quantity) AS total_quantity_sold,
    SUM(oi.quantity * oi.price) AS total_revenue,
    AVG(oi.price) AS avg_selling_price
FROM products p
LEFT JOIN order_items oi ON p.product_id = oi.product_id
GROUP BY p.product_id, p.product_name, p.category
""",
    tables=("products", "order_items"),
    columns=("product_id", "product_name", "category", "times_ordered",
             "total_quantity_sold", "total_revenue", "avg_selling_price"),
)


# ========================================
# 5. 数据转换与格式化
# ========================================

STATUS_DESCRIPTIONS = {
    "A": "Active",
    "I": "Inactive",
    "S": "Suspended",
}


def _status_case_sql() -> str:
    lines = ["CASE"]
    for code, label in STATUS_DESCRIPTIONS.items():
        lines.append(f"        WHEN status = '{code}' THEN '{label}'")
    lines.append("    END")
    return "\n".join(lines)


VIEW_CUSTOMER_EXPORT_FORMAT = ViewDef(
    name="customer_export_format",
    kind=ViewKind.TRANSFORM,
    use_case=USE_CASE_TRANSFORM,
    description="Customer rows formatted for an external API or report.",
    select_sql=f"""
SELECT
    customer_id AS id,
    UPPER(customer_name) AS name,
    email,
    '+1-' || phone AS formatted_phone,
    strftime('%Y-%m-%d', registration_date) AS reg_date,
    {_status_case_sql()} AS status_description
FROM customers
""",
    tables=("customers",),
    columns=("id", "name", "email", "formatted_phone", "reg_date", "status_description"),
)


# ========================================
# 6. 模拟数据接口
# ========================================

VIEW_DASHBOARD_SUMMARY = ViewDef(
    name="dashboard_summary",
    kind=ViewKind.SUMMARY,
    use_case=USE_CASE_MOCK,
    description="Single-row dashboard built from scalar sub-queries.",
    select_sql=f"""
SELECT
    (SELECT COUNT(*) FROM orders WHERE DATE(order_date) = DATE('now', 'localtime')) AS today_orders,
    (SELECT COUNT(*) FROM customers WHERE DATE(registration_date) = DATE('now', 'localtime')) AS new_customers_today,
    (SELECT SUM(total_amount) FROM orders
        WHERE strftime('%m', order_date) = strftime('%m', 'now', 'localtime')) AS monthly_revenue,
    (SELECT COUNT(*) FROM products WHERE stock_quantity < {settings.LOW_STOCK_THRESHOLD}) AS low_stock_items
""",
    tables=("orders", "customers", "products"),
    columns=("today_orders", "new_customers_today", "monthly_revenue", "low_stock_items"),
)


# ========================================
# 7. 在线学习平台
# ========================================

VIEW_STUDENT_PROGRESS = ViewDef(
    name="student_progress",
    kind=ViewKind.AGGREGATING,
    use_case=USE_CASE_ELEARNING,
    description="Per student and course: lessons completed, completion rate and scores.",
    select_sql="""
SELECT
    s.student_id,
    s.student_name,
    s.email,
    c.course_name,
    COUNT(DISTINCT l.lesson_id) AS total_lessons,
    COUNT(DISTINCT lc.lesson_id) AS completed_lessons,
    ROUND(COUNT(DISTINCT lc.lesson_id) * 100.0 / COUNT(DISTINCT l.lesson_id), 2) AS completion_percentage,
    AVG(lc.score) AS average_score,
    MAX(lc.completion_date) AS last_activity
FROM students s
JOIN enrollments e ON s.student_id = e.student_id
JOIN courses c ON e.course_id = c.course_id
JOIN lessons l ON c.course_id = l.course_id
LEFT JOIN lesson_completions lc ON s.student_id = lc.student_id AND l.lesson_id = lc.lesson_id
GROUP BY s.student_id, s.student_name, s.email, c.course_name
""",
    tables=("students", "enrollments", "courses", "lessons", "lesson_completions"),
    columns=("student_id", "student_name", "email", "course_name", "total_lessons",
             "completed_lessons", "completion_percentage", "average_score", "last_activity"),
)


# ========================================
# 8. 查找视图
# ========================================

VIEW_COUNTRY_LOOKUP = ViewDef(
    name="Country_Lookup",
    kind=ViewKind.LOOKUP,
    use_case=USE_CASE_LOOKUP,
    description="Country names with their estimated population, per time period.",
    select_sql="""
SELECT
    Country_name,
    Est_population_in_millions,
    Time_period
FROM
    access_to_basic_services
""",
    tables=("access_to_basic_services",),
    columns=("Country_name", "Est_population_in_millions", "Time_period"),
    example_queries=(
        "SELECT * FROM Country_Lookup;",
    ),
)


# 所有预定义视图（按文档顺序）
PREDEFINED_VIEWS = {
    view.name: view
    for view in (
        VIEW_HR_EMPLOYEE,
        VIEW_STAFF_DIRECTORY,
        VIEW_ORDER_DETAILS,
        VIEW_CUSTOMER_SEGMENTS,
        VIEW_MONTHLY_SALES_REPORT,
        VIEW_PRODUCT_PERFORMANCE,
        VIEW_CUSTOMER_EXPORT_FORMAT,
        VIEW_DASHBOARD_SUMMARY,
        VIEW_STUDENT_PROGRESS,
        VIEW_COUNTRY_LOOKUP,
    )
}


def get_view(name: str) -> ViewDef:
    """按名称获取视图定义（不区分大小写）

    Raises:
        UnknownViewError: 名称未定义
    """
    if name in PREDEFINED_VIEWS:
        return PREDEFINED_VIEWS[name]

    lowered = name.lower()
    for view_name, view in PREDEFINED_VIEWS.items():
        if view_name.lower() == lowered:
            return view

    raise UnknownViewError(
        f"Unknown view: {name}. Available: {list(PREDEFINED_VIEWS.keys())}"
    )


def list_views(kind: Optional[Union[ViewKind, str]] = None) -> list[ViewDef]:
    """列出视图定义

    Args:
        kind: 只返回该类别（ViewKind 或其值，如 "join"）

    Returns:
        视图定义列表（文档顺序）
    """
    if kind is None:
        return list(PREDEFINED_VIEWS.values())

    if isinstance(kind, str):
        kind = ViewKind(kind.lower())

    return [view for view in PREDEFINED_VIEWS.values() if view.kind == kind]


def views_for_table(table_name: str) -> list[ViewDef]:
    """返回依赖某张基础表的所有视图"""
    return [view for view in PREDEFINED_VIEWS.values() if table_name in view.tables]


def resolve_views(names: Optional[list[str]] = None) -> list[ViewDef]:
    """把名称列表解析为视图定义，保持文档顺序

    Args:
        names: 视图名称，None 表示全部

    Returns:
        视图定义列表
    """
    if names is None:
        return list(PREDEFINED_VIEWS.values())

    wanted = {get_view(name).name for name in names}
    return [view for view in PREDEFINED_VIEWS.values() if view.name in wanted]
