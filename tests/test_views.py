"""
示例视图行为测试

在样本数据上逐个验证视图的输出列、行数与计算结果
"""

from datetime import date

import pandas as pd
import pytest

from sqlviews.catalog.examples import (
    ORDER_DETAILS_SELECT,
    PREDEFINED_VIEWS,
    classify_tier,
    get_view,
)


def _frame(seeded_db, name, order_by=None):
    return seeded_db.query_view(name, order_by=order_by)


class TestColumns:
    """视图输出列测试"""

    @pytest.mark.parametrize("name", list(PREDEFINED_VIEWS.keys()))
    def test_columns_match_definition(self, seeded_db, name):
        df = _frame(seeded_db, name)
        assert tuple(df.columns) == get_view(name).columns

    @pytest.mark.parametrize("name", list(PREDEFINED_VIEWS.keys()))
    def test_columns_on_empty_tables(self, db, name):
        df = db.query_view(name)
        assert tuple(df.columns) == get_view(name).columns


class TestSecurityViews:
    """访问控制视图测试"""

    def test_hr_view_keeps_all_rows(self, seeded_db):
        df = _frame(seeded_db, "hr_employee_view")

        assert len(df) == 4
        assert "ssn" not in df.columns

    def test_staff_directory_hides_executives(self, seeded_db):
        df = _frame(seeded_db, "staff_directory", order_by="emp_id")

        assert df["emp_id"].tolist() == [1, 2, 3]
        assert "Executive" not in df["department"].tolist()


class TestOrderDetails:
    """连接视图测试"""

    def test_matches_raw_join(self, seeded_db):
        view_df = _frame(seeded_db, "order_details", order_by="order_id, product_name")
        raw_df = pd.read_sql_query(
            ORDER_DETAILS_SELECT + " ORDER BY o.order_id, p.product_name",
            seeded_db.connect()
        )

        pd.testing.assert_frame_equal(view_df, raw_df)

    def test_line_total(self, seeded_db):
        df = _frame(seeded_db, "order_details")

        assert len(df) == 7
        assert (df["line_total"] == df["quantity"] * df["price"]).all()

    def test_example_query(self, seeded_db):
        df = seeded_db.query_view("order_details", filters={"order_date >=": "2024-01-01"})

        # 2023-11-15 的订单 1 被排除
        assert 1 not in df["order_id"].tolist()
        assert set(df["order_id"]) == {2, 3, 4, 5}


class TestCustomerSegments:
    """客户分级视图测试"""

    def test_sample_tiers(self, seeded_db):
        df = _frame(seeded_db, "customer_segments", order_by="customer_id")

        assert df["customer_tier"].tolist() == ["VIP", "Gold", "Silver", "Bronze", "Bronze"]
        assert df["total_orders"].tolist() == [2, 1, 1, 1, 0]

    def test_customer_without_orders(self, seeded_db):
        row = seeded_db.query_view("customer_segments", filters={"customer_id": 5}).iloc[0]

        assert row["total_orders"] == 0
        assert pd.isna(row["total_spent"])
        assert pd.isna(row["avg_order_value"])
        assert row["customer_tier"] == "Bronze"

    def test_tier_boundaries(self, db):
        totals = {1: 10000, 2: 5000, 3: 1000, 4: 999, 5: 9999.99}
        db.insert_dataframe(pd.DataFrame({
            "customer_id": list(totals),
            "customer_name": [f"c{i}" for i in totals],
        }), "customers")
        db.insert_dataframe(pd.DataFrame({
            "order_id": list(totals),
            "customer_id": list(totals),
            "order_date": ["2024-05-01"] * len(totals),
            "total_amount": list(totals.values()),
        }), "orders")

        df = db.query_view("customer_segments", order_by="customer_id")

        assert df["customer_tier"].tolist() == ["VIP", "Gold", "Silver", "Bronze", "Gold"]
        for _, row in df.iterrows():
            assert row["customer_tier"] == classify_tier(row["total_spent"])

    def test_tier_uses_sum_of_orders(self, db):
        db.insert_dataframe(pd.DataFrame({
            "customer_id": [1],
            "customer_name": ["split"],
        }), "customers")
        db.insert_dataframe(pd.DataFrame({
            "order_id": [1, 2],
            "customer_id": [1, 1],
            "order_date": ["2024-05-01", "2024-05-02"],
            "total_amount": [600, 400],
        }), "orders")

        row = db.query_view("customer_segments").iloc[0]
        assert row["total_spent"] == 1000
        assert row["avg_order_value"] == 500
        assert row["customer_tier"] == "Silver"


class TestReportingViews:
    """报表视图测试"""

    def test_monthly_sales_report(self, seeded_db):
        df = seeded_db.query_view(
            "monthly_sales_report",
            filters={"year": 2024, "month": 2},
        )

        assert len(df) == 1
        row = df.iloc[0]
        assert row["total_orders"] == 2
        assert row["unique_customers"] == 2
        assert row["total_revenue"] == 6200
        assert row["avg_order_value"] == 3100
        assert row["largest_order"] == 5200

    def test_monthly_sales_report_groups(self, seeded_db):
        df = _frame(seeded_db, "monthly_sales_report")

        assert df["total_orders"].sum() == 5
        assert df["total_revenue"].sum() == 16950

    def test_product_performance(self, seeded_db):
        df = _frame(seeded_db, "product_performance", order_by="product_id")

        assert df["times_ordered"].tolist() == [2, 3, 2, 0]
        assert df["total_quantity_sold"].iloc[0] == 7
        assert df["total_revenue"].iloc[0] == 14000
        # 从未售出的商品仍然出现
        assert pd.isna(df["total_revenue"].iloc[3])


class TestCustomerExportFormat:
    """格式转换视图测试"""

    def test_formatting(self, seeded_db):
        df = _frame(seeded_db, "customer_export_format", order_by="id")
        first = df.iloc[0]

        assert first["name"] == "ALICE MOREAU"
        assert first["formatted_phone"] == "+1-555-0101"
        assert first["reg_date"] == "2022-05-14"
        assert df["status_description"].tolist()[:3] == ["Active", "Inactive", "Suspended"]

    def test_missing_phone_and_unknown_status(self, db):
        db.insert_dataframe(pd.DataFrame({
            "customer_id": [1],
            "customer_name": ["x"],
            "phone": [None],
            "status": ["Z"],
        }), "customers")

        row = db.query_view("customer_export_format").iloc[0]
        assert pd.isna(row["formatted_phone"])
        assert pd.isna(row["status_description"])


class TestDashboardSummary:
    """汇总视图测试"""

    def test_single_row(self, seeded_db):
        df = _frame(seeded_db, "dashboard_summary")

        assert len(df) == 1
        row = df.iloc[0]
        assert row["today_orders"] == 1
        assert row["new_customers_today"] == 1
        assert row["low_stock_items"] == 2
        assert row["monthly_revenue"] >= 250

    def test_empty_tables(self, db):
        row = db.query_view("dashboard_summary").iloc[0]

        assert row["today_orders"] == 0
        assert row["low_stock_items"] == 0
        assert pd.isna(row["monthly_revenue"])

    def test_monthly_revenue_matches_month_of_year(self, db, today):
        """按月份匹配，不区分年份"""
        other_month = today.month % 12 + 1
        db.insert_dataframe(pd.DataFrame({
            "order_id": [1, 2, 3],
            "customer_id": [1, 1, 1],
            "order_date": [
                today.isoformat(),
                date(today.year - 1, today.month, 1).isoformat(),
                date(today.year, other_month, 1).isoformat(),
            ],
            "total_amount": [100, 20, 3],
        }), "orders")

        row = db.query_view("dashboard_summary").iloc[0]
        assert row["monthly_revenue"] == 120
        assert row["today_orders"] == 1


class TestStudentProgress:
    """在线学习视图测试"""

    def test_progress(self, seeded_db):
        df = _frame(seeded_db, "student_progress", order_by="student_id, course_name")

        # 学生 3 未选课，不出现
        assert df["student_id"].tolist() == [1, 1, 2]

        sql_basics = df[(df["student_id"] == 1) & (df["course_name"] == "SQL Basics")].iloc[0]
        assert sql_basics["total_lessons"] == 4
        assert sql_basics["completed_lessons"] == 3
        assert sql_basics["completion_percentage"] == 75.0
        assert sql_basics["average_score"] == 80.0
        assert sql_basics["last_activity"] == "2024-03-09"

        modeling = df[(df["student_id"] == 1) & (df["course_name"] == "Data Modeling")].iloc[0]
        assert modeling["completed_lessons"] == 0
        assert modeling["completion_percentage"] == 0.0
        assert pd.isna(modeling["average_score"])

        greta = df[df["student_id"] == 2].iloc[0]
        assert greta["completion_percentage"] == 25.0

    def test_percentage_rounding(self, db):
        db.insert_dataframe(pd.DataFrame({"student_id": [1], "student_name": ["s"]}), "students")
        db.insert_dataframe(pd.DataFrame({"course_id": [1], "course_name": ["c"]}), "courses")
        db.insert_dataframe(pd.DataFrame({"lesson_id": [1, 2, 3], "course_id": [1, 1, 1]}), "lessons")
        db.insert_dataframe(pd.DataFrame({"student_id": [1], "course_id": [1]}), "enrollments")
        db.insert_dataframe(pd.DataFrame({
            "student_id": [1], "lesson_id": [2], "score": [50.0], "completion_date": ["2024-01-01"],
        }), "lesson_completions")

        row = db.query_view("student_progress").iloc[0]
        assert row["completion_percentage"] == 33.33


class TestCountryLookup:
    """查找视图测试"""

    def test_lookup_rows(self, seeded_db):
        df = _frame(seeded_db, "Country_Lookup")
        base = seeded_db.query("access_to_basic_services")

        assert list(df.columns) == ["Country_name", "Est_population_in_millions", "Time_period"]
        assert len(df) == len(base)

        merged = df.merge(base, on=["Country_name", "Time_period"], suffixes=("", "_base"))
        assert len(merged) == len(df)
        assert (merged["Est_population_in_millions"] == merged["Est_population_in_millions_base"]).all()

    def test_lookup_is_live(self, seeded_db):
        """视图不存储数据：基础表变化立即可见"""
        seeded_db.execute_script(
            "INSERT INTO access_to_basic_services (Country_name, Time_period, Est_population_in_millions) "
            "VALUES ('Chile', 2020, 19.1);"
        )

        df = seeded_db.query_view("Country_Lookup", filters={"Country_name": "Chile"})
        assert df["Est_population_in_millions"].tolist() == [19.1]
