"""TaskService -- 任务 CRUD 业务逻辑

无领域规则：请求原样转交给 TaskStore。
唯一的决策是更新不存在的任务时显式抛出 TaskNotFoundError。
"""

import structlog
from assistant.core.exceptions import TaskNotFoundError
from assistant.core.models import Task, TaskType
from assistant.core.store import StoreGroup

log = structlog.get_logger()


class TaskService:
    """任务业务服务"""

    def __init__(self, store_group: StoreGroup) -> None:
        self._stores = store_group

    async def list_tasks(self, task_type: TaskType | None = None) -> list[Task]:
        """查询任务列表"""
        return await self._stores.task_store.list_tasks(task_type)

    async def create_task(self, task: Task) -> Task:
        """创建任务，ID 由存储层分配"""
        return await self._stores.task_store.insert_task(task)

    async def get_task(self, task_id: str) -> Task:
        """查询单个任务

        Raises:
            TaskNotFoundError: 任务不存在
        """
        task = await self._stores.task_store.get_task(task_id)
        if task is None:
            log.info("task_not_found", task_id=task_id, operation="get_task")
            raise TaskNotFoundError(task_id)
        return task

    async def update_task(self, task_id: str, task: Task) -> Task:
        """以请求体整体替换已有任务

        Raises:
            TaskNotFoundError: 任务不存在
        """
        return await self._stores.task_store.replace_task(task_id, task)

    async def delete_task(self, task_id: str) -> None:
        """删除任务，任务不存在时不报错"""
        await self._stores.task_store.delete_task(task_id)
