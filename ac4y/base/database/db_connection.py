"""
基于 .properties 资源的数据库连接
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Optional, Union
import logging

from ...config.settings import get_settings
from ..exceptions import DataAccessFailure
from .base import DataSourceConnection
from .drivers import build_connect_params, int_property, resolve_driver
from .properties import load_properties

logger = logging.getLogger(__name__)


class DBConnection(DataSourceConnection):
    """由配置资源创建的数据库连接（单连接，不做连接池）"""

    def __init__(
        self,
        resource_name: str,
        search_path: Optional[Iterable[Union[str, Path]]] = None,
    ):
        """
        读取配置资源并建立连接

        Args:
            resource_name: 配置资源名，例如 customer.properties
            search_path: 资源搜索目录，为空时使用配置中的 properties_path

        Raises:
            LookupFailure: 资源或驱动无法定位
            ResourceReadFailure: 资源无法读取或内容不合法
            DataAccessFailure: 数据库连接失败
        """
        self._resource_name = resource_name
        self._resource_path, properties = load_properties(resource_name, search_path)
        self._driver_name = properties["driver"]

        super().__init__(
            name=f"{self._driver_name}:{resource_name}",
            max_errors=int_property(
                properties, "max_errors", get_settings().max_errors
            ),
        )

        self._driver = resolve_driver(self._driver_name)
        self._params: Dict[str, Any] = build_connect_params(
            self._driver_name, properties, self._resource_path.parent
        )

        self.connect()

    @property
    def resource_name(self) -> str:
        """配置资源名"""
        return self._resource_name

    @property
    def resource_path(self) -> Path:
        """配置资源文件路径"""
        return self._resource_path

    @property
    def driver_name(self) -> str:
        """驱动模块名"""
        return self._driver_name

    @contextmanager
    def _driver_errors(self, action: str) -> Iterator[None]:
        """把驱动 Error 转换为 DataAccessFailure"""
        try:
            yield
        except self._driver.Error as e:
            raise DataAccessFailure(
                f"{self._driver_name} {action}失败: {e}",
                resource_name=self._resource_name,
            ) from e

    def _describe(self) -> str:
        host = self._params.get("host")
        database = self._params.get("database", "")
        if host:
            return f"{self._params.get('user', '')}@{host}:{self._params.get('port', '')}/{database}"
        return str(database)

    def _open(self) -> Any:
        logger.info(f"🔄 正在连接 {self._driver_name}: {self._describe()}")
        try:
            with self._driver_errors("连接"):
                return self._driver.connect(**self._params)
        except DataAccessFailure as e:
            logger.error(f"❌ {e}")
            raise

    def _close(self, client: Any) -> None:
        with self._driver_errors("关闭"):
            client.close()

    def _probe(self, client: Any) -> bool:
        with self._driver_errors("健康检查"):
            cursor = client.cursor()
            try:
                cursor.execute("SELECT 1")
                return bool(cursor.fetchone())
            finally:
                cursor.close()

    def get_stats(self) -> Dict[str, Any]:
        """获取连接统计信息（不包含密码）"""
        stats = super().get_stats()
        stats.update(
            {
                "resource": self._resource_name,
                "resource_path": str(self._resource_path),
                "driver": self._driver_name,
            }
        )
        return stats

    def __enter__(self) -> "DBConnection":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.disconnect()

    def __repr__(self) -> str:
        return (
            f"DBConnection(resource={self._resource_name!r}, "
            f"driver={self._driver_name!r}, connected={self.connected})"
        )
