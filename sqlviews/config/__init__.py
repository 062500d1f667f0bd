"""
配置模块
"""

from sqlviews.config import settings

__all__ = ["settings"]
