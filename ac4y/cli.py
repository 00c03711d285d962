"""
连接诊断命令行: 按模块名打开数据库连接并输出连接信息
"""

import argparse
import json
import logging
import os
import sys
from functools import partial
from typing import List, Optional

from .base import Ac4yContext, error_kind
from .base.database import DBConnection
from .config.settings import get_settings


def setup_logging(level: str, log_format: str):
    """配置日志"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=log_format,
        stream=sys.stderr,  # stdout 只输出连接信息
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ac4y-check", description="按模块名检查 .properties 数据库配置"
    )
    parser.add_argument("module", help="模块名，读取 <module>.properties")
    parser.add_argument(
        "--class-name", default="", help="类名（当前未使用，保留接口）"
    )
    parser.add_argument(
        "--properties-path",
        default=None,
        help=f"资源搜索目录，以 {os.pathsep!r} 分隔 (默认: AC4Y_PROPERTIES_PATH)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="日志级别 (默认: LOG_LEVEL 环境变量)",
    )
    return parser


def _report_failure(exc: Exception) -> int:
    print(f"error kind: {error_kind(exc).value}", file=sys.stderr)
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    """主函数"""
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except ValueError as e:
        # 日志尚未配置，直接输出到 stderr
        print(f"❌ 配置无效: {e}", file=sys.stderr)
        return _report_failure(e)

    setup_logging(args.log_level or settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)

    factory = DBConnection
    if args.properties_path:
        search_path = [item for item in args.properties_path.split(os.pathsep) if item]
        factory = partial(DBConnection, search_path=search_path)

    context = Ac4yContext(connection_factory=factory)
    try:
        connection = context.get_db_connection(args.module, args.class_name)
    except Exception as e:
        logger.error(f"❌ 无法为模块 {args.module} 建立连接: {e}")
        return _report_failure(e)

    with connection:
        print(json.dumps(connection.get_stats(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
