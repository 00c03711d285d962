"""
异常类型定义

所有领域异常都带有一个 ErrorKind 标签，调用方可以按种类分支处理，
而不必依赖具体的异常继承层次。
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """失败种类"""

    LOOKUP = "lookup"
    DATA_ACCESS = "data_access"
    IO = "io"
    OTHER = "other"


class Ac4yException(Exception):
    """领域异常基类"""

    kind: ErrorKind = ErrorKind.OTHER

    def __init__(self, message: str, resource_name: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.resource_name = resource_name

    def __str__(self) -> str:
        if self.resource_name:
            return f"{self.message} (resource: {self.resource_name})"
        return self.message


class LookupFailure(Ac4yException):
    """资源或驱动无法定位"""

    kind = ErrorKind.LOOKUP


class DataAccessFailure(Ac4yException):
    """数据源拒绝或无法建立连接"""

    kind = ErrorKind.DATA_ACCESS


class ResourceReadFailure(Ac4yException):
    """配置资源无法读取或内容不合法"""

    kind = ErrorKind.IO


def error_kind(exc: BaseException) -> ErrorKind:
    """
    获取异常对应的失败种类

    Args:
        exc: 任意异常

    Returns:
        ErrorKind: 领域异常返回其自身标签；ImportError 归为 LOOKUP，
            OSError 归为 IO，其余 (包括 KeyError 等编程错误) 归为 OTHER
    """
    if isinstance(exc, Ac4yException):
        return exc.kind
    if isinstance(exc, ImportError):
        return ErrorKind.LOOKUP
    if isinstance(exc, OSError):
        return ErrorKind.IO
    return ErrorKind.OTHER
