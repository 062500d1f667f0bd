"""
Schema 定义测试
"""

from sqlviews.catalog.schema import (
    ALL_TABLES,
    ColumnDef,
    get_all_create_sql,
    get_create_table_sql,
)


def test_create_table_sql():
    columns = [
        ColumnDef("id", "INTEGER", primary_key=True),
        ColumnDef("code", "TEXT", nullable=False, unique=True),
        ColumnDef("status", "TEXT", default="A"),
        ColumnDef("qty", "INTEGER", default=0),
    ]
    sql = get_create_table_sql("things", columns)

    assert sql.startswith("CREATE TABLE IF NOT EXISTS things (")
    assert "id INTEGER PRIMARY KEY" in sql
    assert "code TEXT NOT NULL UNIQUE" in sql
    assert "status TEXT DEFAULT 'A'" in sql
    assert "qty INTEGER DEFAULT 0" in sql
    assert sql.endswith(");")


def test_table_constraint():
    columns, constraint = ALL_TABLES["order_items"]
    sql = get_create_table_sql("order_items", columns, constraint)

    assert "PRIMARY KEY (order_id, product_id)" in sql


def test_all_create_sql():
    sqls = get_all_create_sql()

    assert len(sqls) == len(ALL_TABLES)
    assert all(sql.startswith("CREATE TABLE IF NOT EXISTS") for sql in sqls)


def test_progress_table_does_not_clash_with_view_name():
    assert "student_progress" not in ALL_TABLES
    assert "lesson_completions" in ALL_TABLES
