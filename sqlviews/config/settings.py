"""
SQL 视图示例库 - 统一配置管理

所有配置参数集中管理，可通过环境变量覆盖
"""

from pathlib import Path
import os

# ==================== 项目路径 ====================
PROJECT_ROOT = Path(__file__).parent.parent.parent
DATA_DIR = PROJECT_ROOT / "data"
LOGS_DIR = PROJECT_ROOT / "logs"
DOCS_DIR = PROJECT_ROOT / "docs"
EXPORT_DIR = Path(os.getenv('SQLVIEWS_EXPORT_DIR', str(PROJECT_ROOT / "build" / "sql")))

# ==================== 数据库配置 ====================
# 默认数据库文件，":memory:" 表示内存数据库
DB_PATH = os.getenv('SQLVIEWS_DB_PATH', str(DATA_DIR / "views_demo.db"))
DB_TIMEOUT = 30                      # 连接等待锁的秒数

# ==================== 示例业务参数 ====================
# 客户分级阈值（累计消费 >= 阈值）
TIER_VIP = 10000
TIER_GOLD = 5000
TIER_SILVER = 1000

LOW_STOCK_THRESHOLD = 10             # 库存低于此值视为低库存
ORDER_REPORT_START = "2024-01-01"    # order_details 示例查询起始日期

# ==================== 日志配置 ====================
LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVEL = os.getenv('SQLVIEWS_LOG_LEVEL', 'INFO').upper()
LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"
LOG_ROTATION = "1 day"
LOG_RETENTION = "30 days"

# ==================== 调试配置 ====================
DEBUG_MODE = os.getenv('DEBUG_MODE', 'false').lower() == 'true'


def get_db_path() -> str:
    """获取数据库路径"""
    return DB_PATH


def get_log_file(name: str = "sqlviews") -> Path:
    """获取日志文件路径"""
    return LOGS_DIR / f"{name}.log"


def validate_config() -> dict:
    """
    验证配置有效性

    Returns:
        dict: 验证结果 {'valid': bool, 'errors': list}
    """
    errors = []

    if not DOCS_DIR.exists():
        errors.append(f"文档目录不存在: {DOCS_DIR}")

    if DB_PATH != ":memory:":
        parent = Path(DB_PATH).parent
        if parent.exists() and not parent.is_dir():
            errors.append(f"数据库目录不是文件夹: {parent}")

    if not (TIER_VIP > TIER_GOLD > TIER_SILVER > 0):
        errors.append(
            f"客户分级阈值必须严格递减: VIP={TIER_VIP}, Gold={TIER_GOLD}, Silver={TIER_SILVER}"
        )

    if LOW_STOCK_THRESHOLD < 0:
        errors.append(f"低库存阈值({LOW_STOCK_THRESHOLD})不能为负数")

    if LOG_LEVEL not in LOG_LEVELS:
        errors.append(f"未知日志级别: {LOG_LEVEL}")

    return {
        'valid': len(errors) == 0,
        'errors': errors
    }
