"""
基础模块 - 运行上下文与数据库连接
"""

from .context import Ac4yContext
from .exceptions import (
    Ac4yException,
    DataAccessFailure,
    ErrorKind,
    LookupFailure,
    ResourceReadFailure,
    error_kind,
)

__all__ = [
    "Ac4yContext",
    "Ac4yException",
    "DataAccessFailure",
    "ErrorKind",
    "LookupFailure",
    "ResourceReadFailure",
    "error_kind",
]
