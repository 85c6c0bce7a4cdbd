"""TaskStore SQLite 实现

tasks 表按文档方式存储：每行一个完整 Task JSON，
task_id 与 task_type 单独成列用于主键查找和类型筛选。
"""

import json
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime

import aiosqlite
import structlog
from ulid import ULID

from ..exceptions import StoreUnavailableError, TaskNotFoundError
from ..models.enums import TaskType
from ..models.task import Task, dump_task, parse_task

log = structlog.get_logger()


@contextmanager
def _storage_errors(operation: str) -> Iterator[None]:
    """将驱动层异常统一转换为 StoreUnavailableError

    aiosqlite 在连接关闭后抛出 ValueError，其余为 sqlite3.Error 子类。
    """
    try:
        yield
    except (aiosqlite.Error, ValueError) as e:
        log.error("task_store_unavailable", operation=operation, error=str(e))
        raise StoreUnavailableError(operation, e) from e


class SqliteTaskStore:
    """TaskStore 的 SQLite 实现"""

    def __init__(self, conn: aiosqlite.Connection) -> None:
        self._conn = conn

    async def list_tasks(self, task_type: TaskType | None = None) -> list[Task]:
        """按插入顺序列出任务，支持按 task_type 筛选"""
        type_filter = TaskType(task_type).value if task_type else None
        with _storage_errors("list_tasks"):
            if type_filter:
                cursor = await self._conn.execute(
                    "SELECT document FROM tasks WHERE task_type = ? ORDER BY rowid",
                    (type_filter,),
                )
            else:
                cursor = await self._conn.execute(
                    "SELECT document FROM tasks ORDER BY rowid"
                )
            rows = await cursor.fetchall()
        return [self._row_to_task(row) for row in rows]

    async def insert_task(self, task: Task) -> Task:
        """分配 ULID 并写入，客户端提交的 id 被忽略"""
        stored = task.model_copy(update={"id": str(ULID())})
        now = datetime.now(UTC).isoformat()
        document = json.dumps(dump_task(stored), ensure_ascii=False)
        with _storage_errors("insert_task"):
            await self._conn.execute(
                """
                INSERT INTO tasks (task_id, task_type, created_at, updated_at, document)
                VALUES (?, ?, ?, ?, ?)
                """,
                (stored.id, stored.task_type, now, now, document),
            )
            await self._conn.commit()
        log.info("task_created", task_id=stored.id, task_type=stored.task_type)
        return stored

    async def get_task(self, task_id: str) -> Task | None:
        """根据 task_id 查询任务"""
        with _storage_errors("get_task"):
            cursor = await self._conn.execute(
                "SELECT document FROM tasks WHERE task_id = ?",
                (task_id,),
            )
            row = await cursor.fetchone()
        if row is None:
            return None
        return self._row_to_task(row)

    async def replace_task(self, task_id: str, task: Task) -> Task:
        """整体替换：所有字段（含 subTasks 与任务类型）以请求体为准，ID 保持不变

        并发更新同一任务时后写入者覆盖先写入者。
        """
        stored = task.model_copy(update={"id": task_id})
        document = json.dumps(dump_task(stored), ensure_ascii=False)
        with _storage_errors("replace_task"):
            cursor = await self._conn.execute(
                """
                UPDATE tasks
                SET task_type = ?, updated_at = ?, document = ?
                WHERE task_id = ?
                """,
                (stored.task_type, datetime.now(UTC).isoformat(), document, task_id),
            )
            updated = cursor.rowcount
            await self._conn.commit()
        if updated == 0:
            log.info("task_not_found", task_id=task_id, operation="replace_task")
            raise TaskNotFoundError(task_id)
        log.info("task_replaced", task_id=task_id, task_type=stored.task_type)
        return stored

    async def delete_task(self, task_id: str) -> bool:
        """删除任务，不存在时静默返回 False"""
        with _storage_errors("delete_task"):
            cursor = await self._conn.execute(
                "DELETE FROM tasks WHERE task_id = ?",
                (task_id,),
            )
            deleted = cursor.rowcount
            await self._conn.commit()
        log.info("task_deleted", task_id=task_id, existed=deleted > 0)
        return deleted > 0

    @staticmethod
    def _row_to_task(row: aiosqlite.Row) -> Task:
        """将数据库行转换为 Task 模型"""
        return parse_task(json.loads(row[0]))
