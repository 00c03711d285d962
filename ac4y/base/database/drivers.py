"""
数据库驱动解析

driver 配置项可以是内置别名 (pymysql / sqlite3)，也可以是任意实现了
DB-API 2 (connect() + Error) 的可导入模块名。
"""

import importlib
import logging
from pathlib import Path
from types import ModuleType
from typing import Any, Callable, Dict

from ...config.settings import get_settings
from ..exceptions import LookupFailure, ResourceReadFailure

logger = logging.getLogger(__name__)

# 不传给驱动 connect() 的配置项
RESERVED_KEYS = {"driver", "max_errors"}


def resolve_driver(driver_name: str) -> ModuleType:
    """
    导入驱动模块

    Args:
        driver_name: 驱动模块名

    Returns:
        ModuleType: DB-API 2 模块

    Raises:
        LookupFailure: 模块无法导入或不是 DB-API 2 模块
    """
    try:
        module = importlib.import_module(driver_name)
    except ImportError as e:
        logger.error(f"❌ 数据库驱动未找到: {driver_name}")
        raise LookupFailure(f"数据库驱动未找到: {driver_name}") from e

    if not callable(getattr(module, "connect", None)) or not hasattr(module, "Error"):
        raise LookupFailure(f"{driver_name} 不是 DB-API 2 驱动模块")

    return module


def int_property(properties: Dict[str, str], key: str, default: int) -> int:
    value = properties.get(key)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ResourceReadFailure(f"配置项 {key} 不是整数: {value!r}") from e


def float_property(properties: Dict[str, str], key: str, default: float) -> float:
    value = properties.get(key)
    if value is None or value == "":
        return default
    try:
        return float(value)
    except ValueError as e:
        raise ResourceReadFailure(f"配置项 {key} 不是数字: {value!r}") from e


def _require(properties: Dict[str, str], key: str) -> str:
    value = properties.get(key)
    if not value:
        raise ResourceReadFailure(f"缺少必需的配置项: {key}")
    return value


def _pymysql_params(properties: Dict[str, str], base_dir: Path) -> Dict[str, Any]:
    settings = get_settings()
    return {
        "host": properties.get("host", "localhost"),
        "port": int_property(properties, "port", 3306),
        "user": properties.get("user", "root"),
        "password": properties.get("password", ""),
        "database": _require(properties, "database"),
        "charset": properties.get("charset", "utf8mb4"),
        "connect_timeout": int_property(
            properties, "connect_timeout", settings.connect_timeout
        ),
    }


def _sqlite3_params(properties: Dict[str, str], base_dir: Path) -> Dict[str, Any]:
    settings = get_settings()
    database = _require(properties, "database")
    if database != ":memory:" and not Path(database).is_absolute():
        # 相对路径以资源文件所在目录为基准
        database = str(base_dir / database)
    return {
        "database": database,
        "timeout": float_property(properties, "timeout", float(settings.connect_timeout)),
    }


def _generic_params(properties: Dict[str, str], base_dir: Path) -> Dict[str, Any]:
    return {
        key: value for key, value in properties.items() if key not in RESERVED_KEYS
    }


PARAM_BUILDERS: Dict[str, Callable[[Dict[str, str], Path], Dict[str, Any]]] = {
    "pymysql": _pymysql_params,
    "sqlite3": _sqlite3_params,
}


def build_connect_params(
    driver_name: str, properties: Dict[str, str], base_dir: Path
) -> Dict[str, Any]:
    """
    根据驱动生成 connect() 参数

    Args:
        driver_name: 驱动模块名
        properties: 配置项
        base_dir: 资源文件所在目录

    Returns:
        Dict[str, Any]: connect() 关键字参数

    Raises:
        ResourceReadFailure: 缺少必需配置项或数值格式错误
    """
    builder = PARAM_BUILDERS.get(driver_name, _generic_params)
    return builder(properties, base_dir)
