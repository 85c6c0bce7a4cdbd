"""配置常量模块 -- 可通过环境变量覆盖

包含数据目录与 SQLite 数据库路径。
"""

import os
from pathlib import Path


def _get_base_dir() -> Path:
    """获取项目 data 基础目录"""
    return Path(os.environ.get("ASSISTANT_DATA_DIR", "data"))


def get_db_path() -> str:
    """获取 SQLite 数据库路径"""
    return os.environ.get(
        "ASSISTANT_DB_PATH",
        str(_get_base_dir() / "sqlite" / "assistant.db"),
    )
