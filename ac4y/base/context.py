"""
运行上下文：按模块名定位 .properties 配置并创建数据库连接
"""

import logging
from typing import Any, Callable, Optional

from .database import DBConnection

logger = logging.getLogger(__name__)

ConnectionFactory = Callable[[str], Any]


class Ac4yContext:
    """
    运行上下文

    连接构造函数通过 connection_factory 注入，默认使用 DBConnection。
    构造函数抛出的异常原样传递给调用方。
    """

    RESOURCE_SUFFIX = ".properties"

    def __init__(self, connection_factory: Optional[ConnectionFactory] = None):
        if connection_factory is None:
            connection_factory = DBConnection
        self._connection_factory = connection_factory

    @staticmethod
    def resource_name(module: str) -> str:
        """模块名对应的配置资源名"""
        return module + Ac4yContext.RESOURCE_SUFFIX

    def get_db_connection(self, module: str, class_name: str) -> Any:
        """
        获取模块对应的数据库连接

        Args:
            module: 模块名，决定读取哪个 .properties 资源
            class_name: 类名，当前未使用

        Returns:
            connection_factory 的返回值
        """
        resource_name = self.resource_name(module)
        logger.debug(f"模块 {module!r} -> 配置资源 {resource_name!r}")
        return self._connection_factory(resource_name)
