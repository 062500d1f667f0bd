"""
全局pytest配置和fixtures

提供测试所需的通用fixtures
"""

import pytest
from datetime import date
from pathlib import Path
import sys

# 添加项目根目录到Python路径
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlviews.database.db import Database


# ==================== 数据库Fixtures ====================

@pytest.fixture
def today():
    """测试中视为"今天"的日期"""
    return date.today()


@pytest.fixture
def empty_db():
    """已建表、未建视图、无数据的内存数据库"""
    db = Database(":memory:")
    db.init_db()
    yield db
    db.close()


@pytest.fixture
def db(empty_db):
    """已建表和所有视图的内存数据库（无数据）"""
    empty_db.create_views()
    return empty_db


@pytest.fixture
def seeded_db(db, today):
    """已建表、视图并写入样本数据的内存数据库"""
    db.load_sample_data(today)
    return db


# ==================== Pytest配置钩子 ====================

def pytest_configure(config):
    """pytest配置钩子 - 注册自定义标记"""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
