"""Store Protocol 接口定义

定义 TaskStore 仓储抽象接口，使用 Python Protocol 实现结构化子类型，
领域模型不依赖任何持久化框架。
"""

from typing import Protocol

from ..models.enums import TaskType
from ..models.task import Task


class TaskStore(Protocol):
    """Task 仓储接口"""

    async def list_tasks(self, task_type: TaskType | None = None) -> list[Task]:
        """按插入顺序列出任务，可按 taskType 筛选"""
        ...

    async def insert_task(self, task: Task) -> Task:
        """分配新 ID 并持久化，返回存储后的记录"""
        ...

    async def get_task(self, task_id: str) -> Task | None:
        """根据 task_id 查询任务，不存在返回 None"""
        ...

    async def replace_task(self, task_id: str, task: Task) -> Task:
        """整体替换任务文档，不存在时抛出 TaskNotFoundError"""
        ...

    async def delete_task(self, task_id: str) -> bool:
        """删除任务（幂等），返回是否实际删除了记录"""
        ...
