#!/usr/bin/env python3
"""
连接诊断启动脚本
"""

import sys
from pathlib import Path

# 添加项目根目录到Python路径
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from ac4y.cli import main

if __name__ == "__main__":
    sys.exit(main())
