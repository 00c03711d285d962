"""
.properties 配置资源的定位与读取
"""

import io
import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple, Union

from dotenv import dotenv_values

from ...config.settings import get_settings
from ..exceptions import LookupFailure, ResourceReadFailure

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def find_resource(
    resource_name: str, search_path: Optional[Iterable[PathLike]] = None
) -> Path:
    """
    在搜索路径中查找配置资源

    Args:
        resource_name: 资源文件名，例如 customer.properties
        search_path: 目录列表，按顺序查找；为空时使用配置中的 properties_path

    Returns:
        Path: 第一个存在的资源文件路径

    Raises:
        LookupFailure: 所有目录中都不存在该资源
    """
    if search_path is None:
        search_path = get_settings().properties_path

    directories = [Path(directory) for directory in search_path]
    for directory in directories:
        candidate = directory / resource_name
        if candidate.is_file():
            logger.debug(f"资源 {resource_name} 定位到 {candidate}")
            return candidate

    searched = ", ".join(str(directory) for directory in directories) or "<empty>"
    raise LookupFailure(
        f"配置资源未找到，已搜索: {searched}", resource_name=resource_name
    )


def parse_properties(text: str) -> Dict[str, str]:
    """
    解析 key=value 格式的配置文本

    支持 # 注释、引号以及 ${VAR} 环境变量插值。没有值的键被丢弃。
    """
    values = dotenv_values(stream=io.StringIO(text), interpolate=True)
    return {key: value for key, value in values.items() if value is not None}


def load_properties(
    resource_name: str, search_path: Optional[Iterable[PathLike]] = None
) -> Tuple[Path, Dict[str, str]]:
    """
    查找并读取配置资源

    Args:
        resource_name: 资源文件名
        search_path: 目录列表

    Returns:
        Tuple[Path, Dict[str, str]]: 资源路径与解析后的配置项

    Raises:
        LookupFailure: 资源不存在
        ResourceReadFailure: 资源无法读取，或缺少 driver 配置项
    """
    path = find_resource(resource_name, search_path)
    encoding = get_settings().properties_encoding

    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"❌ 读取配置资源失败: {path}: {e}")
        raise ResourceReadFailure(
            f"无法读取配置资源 {path}: {e}", resource_name=resource_name
        ) from e

    properties = parse_properties(text)
    if not properties.get("driver"):
        logger.error(f"❌ 配置资源缺少 driver 配置项: {path}")
        raise ResourceReadFailure(
            f"配置资源 {path} 缺少 driver 配置项", resource_name=resource_name
        )

    logger.debug(f"已读取配置资源 {path} ({len(properties)} 项)")
    return path, properties
