"""
示例数据

为每张基础表生成少量确定性的样本数据，用于演示和测试视图：
- 员工中包含一名 Executive（staff_directory 应将其隐藏）
- 客户覆盖 VIP / Gold / Silver / Bronze 四个等级，以及一名无订单客户
- 一笔订单和一名客户的日期为"今天"，dashboard_summary 会有非零计数
"""

from datetime import date
from typing import Optional

import pandas as pd


def _employees() -> pd.DataFrame:
    return pd.DataFrame({
        "emp_id": [1, 2, 3, 4],
        "name": ["Ada Park", "Ben Cole", "Cara Diaz", "Dan Eze"],
        "email": ["ada@example.com", "ben@example.com", "cara@example.com", "dan@example.com"],
        "salary": [98000.00, 61000.00, 72500.50, 250000.00],
        "ssn": ["123-45-6789", "234-56-7890", "345-67-8901", "456-78-9012"],
        "department": ["Engineering", "Support", "HR", "Executive"],
        "hire_date": ["2019-03-01", "2021-07-15", "2020-01-06", "2015-09-30"],
        "performance_rating": [5, 3, 4, 4],
    })


def _customers(today: date) -> pd.DataFrame:
    return pd.DataFrame({
        "customer_id": [1, 2, 3, 4, 5],
        "customer_name": ["Alice Moreau", "Bruno Silva", "Chen Wei", "Dana Holt", "Emil Novak"],
        "email": ["alice@example.com", "bruno@example.com", "chen@example.com",
                  "dana@example.com", "emil@example.com"],
        "phone": ["555-0101", "555-0102", "555-0103", "555-0104", None],
        "registration_date": ["2022-05-14", "2023-02-01", "2023-08-19", "2024-01-02", today.isoformat()],
        "status": ["A", "I", "S", "A", "A"],
    })


def _products() -> pd.DataFrame:
    return pd.DataFrame({
        "product_id": [1, 2, 3, 4],
        "product_name": ["Laptop", "Mouse", "Monitor", "Keyboard Stand"],
        "category": ["Computers", "Accessories", "Displays", "Accessories"],
        "price": [2000.00, 25.00, 300.00, 45.00],
        "stock_quantity": [12, 150, 3, 5],
    })


def _orders(today: date) -> pd.DataFrame:
    return pd.DataFrame({
        "order_id": [1, 2, 3, 4, 5],
        "customer_id": [1, 1, 2, 3, 4],
        "order_date": ["2023-11-15", "2024-01-10", "2024-02-03", "2024-02-20", today.isoformat()],
        "total_amount": [10000.00, 500.00, 5200.00, 1000.00, 250.00],
    })


def _order_items() -> pd.DataFrame:
    return pd.DataFrame({
        "order_id": [1, 2, 3, 3, 4, 4, 5],
        "product_id": [1, 2, 1, 3, 3, 2, 2],
        "quantity": [5, 20, 2, 4, 2, 16, 10],
        "price": [2000.00, 25.00, 2000.00, 300.00, 300.00, 25.00, 25.00],
    })


def _students() -> pd.DataFrame:
    return pd.DataFrame({
        "student_id": [1, 2, 3],
        "student_name": ["Femi Ade", "Greta Lind", "Hugo Roy"],
        "email": ["femi@example.com", "greta@example.com", "hugo@example.com"],
    })


def _courses() -> pd.DataFrame:
    return pd.DataFrame({
        "course_id": [1, 2],
        "course_name": ["SQL Basics", "Data Modeling"],
    })


def _lessons() -> pd.DataFrame:
    return pd.DataFrame({
        "lesson_id": [1, 2, 3, 4, 5, 6],
        "course_id": [1, 1, 1, 1, 2, 2],
        "lesson_title": ["SELECT", "WHERE", "JOIN", "Views", "Keys", "Normal forms"],
    })


def _enrollments() -> pd.DataFrame:
    return pd.DataFrame({
        "student_id": [1, 1, 2],
        "course_id": [1, 2, 1],
        "enrolled_on": ["2024-03-01", "2024-03-05", "2024-03-02"],
    })


def _lesson_completions() -> pd.DataFrame:
    return pd.DataFrame({
        "student_id": [1, 1, 1, 2],
        "lesson_id": [1, 2, 3, 1],
        "score": [90.0, 80.0, 70.0, 100.0],
        "completion_date": ["2024-03-02", "2024-03-04", "2024-03-09", "2024-03-03"],
    })


def _access_to_basic_services() -> pd.DataFrame:
    return pd.DataFrame({
        "Country_name": ["Kenya", "Kenya", "Brazil", "India"],
        "Region": ["Sub-Saharan Africa", "Sub-Saharan Africa", "Latin America", "South Asia"],
        "Time_period": [2015, 2020, 2020, 2020],
        "Est_population_in_millions": [47.9, 53.8, 212.6, 1380.0],
        "Pct_basic_drinking_water": [58.9, 61.6, 99.0, 90.5],
        "Pct_basic_sanitation": [29.1, 32.7, 89.8, 71.3],
    })


def get_sample_frames(today: Optional[date] = None) -> dict[str, pd.DataFrame]:
    """生成所有基础表的样本数据

    Args:
        today: 视为"今天"的日期（默认当前日期）

    Returns:
        表名 -> DataFrame，顺序与 schema.ALL_TABLES 一致
    """
    today = today or date.today()

    return {
        "employees": _employees(),
        "customers": _customers(today),
        "products": _products(),
        "orders": _orders(today),
        "order_items": _order_items(),
        "students": _students(),
        "courses": _courses(),
        "lessons": _lessons(),
        "enrollments": _enrollments(),
        "lesson_completions": _lesson_completions(),
        "access_to_basic_services": _access_to_basic_services(),
    }
