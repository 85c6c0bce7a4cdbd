"""CLI 入口模块 -- python -m assistant.core <command>

支持的命令：
  init-db  创建数据库文件与 tasks 表
"""

import asyncio
import sys

from .config import get_db_path


def main() -> None:
    """CLI 主入口"""
    if len(sys.argv) < 2:
        print("用法: python -m assistant.core <command>")
        print("命令:")
        print("  init-db  创建数据库文件与 tasks 表")
        sys.exit(1)

    command = sys.argv[1]

    if command == "init-db":
        asyncio.run(init_database())
    else:
        print(f"未知命令: {command}")
        print("可用命令: init-db")
        sys.exit(1)


async def init_database() -> None:
    """初始化数据库并报告现有任务数"""
    from .store import create_store_group

    db_path = get_db_path()
    print(f"数据库路径: {db_path}")

    store_group = await create_store_group(db_path)

    try:
        tasks = await store_group.task_store.list_tasks()
        print(f"初始化完成，现有 {len(tasks)} 条任务")
    finally:
        await store_group.conn.close()


if __name__ == "__main__":
    main()
