"""
配置测试
"""

from sqlviews.config import settings


def test_paths():
    assert settings.DOCS_DIR == settings.PROJECT_ROOT / "docs"
    assert settings.get_log_file("check").name == "check.log"


def test_validate_config():
    result = settings.validate_config()

    assert result['valid'], result['errors']
    assert result['errors'] == []


def test_validate_config_bad_thresholds(monkeypatch):
    monkeypatch.setattr(settings, "TIER_GOLD", settings.TIER_VIP + 1)
    result = settings.validate_config()

    assert not result['valid']
    assert any("阈值" in e for e in result['errors'])
