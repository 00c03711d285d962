"""
ac4y - 按模块名加载 .properties 配置并创建数据库连接
"""

from .base import Ac4yContext
from .base.database import DBConnection

__version__ = "1.0.0"

__all__ = ["Ac4yContext", "DBConnection"]
