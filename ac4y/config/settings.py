"""
项目配置设置
"""

import os
from pathlib import Path
from typing import List
from functools import lru_cache

from dotenv import load_dotenv

# 加载 .env 文件
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)


def _get_env_var_as_int(name: str, default: str) -> int:
    """安全地从环境变量获取整数值，移除行内注释。"""
    value_str = os.getenv(name, default)
    # 移除注释和两边的空格
    cleaned_value = value_str.split("#")[0].strip()
    return int(cleaned_value)


def _get_env_var_as_path_list(name: str, default: str) -> List[Path]:
    """从环境变量获取目录列表（以 os.pathsep 分隔），忽略空项。"""
    value_str = os.getenv(name, default)
    return [Path(item.strip()) for item in value_str.split(os.pathsep) if item.strip()]


class Settings:
    """应用配置"""

    def __init__(self):
        # 应用基本信息
        self.app_name: str = os.getenv("APP_NAME", "ac4y-context")
        self.version: str = os.getenv("VERSION", "1.0.0")

        # .properties 资源查找配置
        self.properties_path: List[Path] = _get_env_var_as_path_list(
            "AC4Y_PROPERTIES_PATH", os.pathsep.join([".", "config"])
        )
        self.properties_encoding: str = os.getenv(
            "AC4Y_PROPERTIES_ENCODING", "utf-8"
        )

        # 数据库连接配置
        self.connect_timeout: int = _get_env_var_as_int("AC4Y_CONNECT_TIMEOUT", "10")
        self.max_errors: int = _get_env_var_as_int("AC4Y_MAX_ERRORS", "3")

        # 日志配置
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO")
        self.log_format: str = os.getenv(
            "LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )


@lru_cache()
def get_settings() -> Settings:
    """获取配置实例（单例模式）"""
    return Settings()
