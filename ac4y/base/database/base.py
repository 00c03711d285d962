"""
单个数据库连接的生命周期管理

子类只负责驱动相关的三件事: 打开 (_open)、关闭 (_close)、探活 (_probe)，
并把驱动异常转换为 DataAccessFailure。状态、错误计数和统计信息由基类维护。
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, Optional
import logging

from ..exceptions import DataAccessFailure

logger = logging.getLogger(__name__)


class DataSourceConnection(ABC):
    """持有一个驱动原生连接的句柄"""

    def __init__(self, name: str, max_errors: int = 3):
        """
        Args:
            name: 连接名称，用于日志和统计
            max_errors: 连续错误次数阈值，达到后记录错误日志
        """
        self._name = name
        self._client: Any = None
        self._connection_time: Optional[datetime] = None
        self._error_count = 0
        self._max_errors = max_errors

    @abstractmethod
    def _open(self) -> Any:
        """打开并返回驱动原生连接，失败抛出 DataAccessFailure"""

    @abstractmethod
    def _close(self, client: Any) -> None:
        """关闭驱动原生连接，失败抛出 DataAccessFailure"""

    @abstractmethod
    def _probe(self, client: Any) -> bool:
        """探活查询，失败抛出 DataAccessFailure"""

    def connect(self) -> bool:
        """
        建立连接

        Returns:
            bool: 成功返回 True

        Raises:
            DataAccessFailure: 驱动拒绝连接
        """
        if self._client is not None:
            return True

        try:
            self._client = self._open()
        except DataAccessFailure:
            self.increment_error()
            raise

        self._connection_time = datetime.now()
        self.reset_error()
        logger.info(f"✅ {self._name} 连接成功")
        return True

    def disconnect(self) -> bool:
        """
        关闭连接，可重复调用

        Returns:
            bool: 驱动关闭失败时返回 False，句柄仍会被清空
        """
        client, self._client = self._client, None
        self._connection_time = None
        if client is None:
            return True

        try:
            self._close(client)
        except DataAccessFailure as e:
            logger.error(f"❌ {self._name} 关闭失败: {e}")
            return False

        logger.info(f"✅ {self._name} 连接已关闭")
        return True

    def reconnect(self) -> bool:
        """关闭后重新建立连接"""
        logger.info(f"🔄 尝试重新连接 {self._name}")
        self.disconnect()
        return self.connect()

    def is_healthy(self) -> bool:
        """
        健康检查

        Returns:
            bool: 未连接或探活失败时返回 False
        """
        if self._client is None:
            return False

        try:
            healthy = self._probe(self._client)
        except DataAccessFailure as e:
            logger.error(f"❌ {self._name} 健康检查失败: {e}")
            self.increment_error()
            return False

        if healthy:
            self.reset_error()
        return healthy

    def get_connection(self) -> Any:
        """
        获取驱动原生连接

        Raises:
            DataAccessFailure: 连接未建立或已关闭
        """
        if self._client is None:
            raise DataAccessFailure(f"{self._name} 连接未建立")
        return self._client

    @property
    def connected(self) -> bool:
        return self._client is not None

    @property
    def connection_time(self) -> Optional[datetime]:
        return self._connection_time

    @property
    def error_count(self) -> int:
        return self._error_count

    def increment_error(self):
        self._error_count += 1
        if self._error_count >= self._max_errors:
            logger.error(f"❌ {self._name} 错误次数过多 ({self._error_count})")

    def reset_error(self):
        self._error_count = 0

    def get_stats(self) -> Dict[str, Any]:
        """获取连接统计信息"""
        return {
            "name": self._name,
            "connected": self.connected,
            "connection_time": (
                self._connection_time.isoformat() if self._connection_time else None
            ),
            "error_count": self._error_count,
            "max_errors": self._max_errors,
            "healthy": self.is_healthy(),
        }
