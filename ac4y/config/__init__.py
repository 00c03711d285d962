"""
配置模块
"""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
