"""
数据库连接模块
"""

from .base import DataSourceConnection
from .db_connection import DBConnection
from .drivers import build_connect_params, resolve_driver
from .properties import find_resource, load_properties, parse_properties

__all__ = [
    "DataSourceConnection",
    "DBConnection",
    "build_connect_params",
    "resolve_driver",
    "find_resource",
    "load_properties",
    "parse_properties",
]
