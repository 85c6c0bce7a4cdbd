"""Assistant Core Domain Models -- 公共类型导出

所有公共模型类型从此入口导入。
"""

from .enums import Priority, TaskType, priority_sort_key
from .task import (
    LearningTask,
    LoanTask,
    ManualTask,
    MeetingTask,
    SubTask,
    Task,
    TaskAdapter,
    TaskBase,
    dump_task,
    parse_task,
)

__all__ = [
    # 枚举
    "Priority",
    "TaskType",
    "priority_sort_key",
    # Task 联合类型
    "Task",
    "TaskBase",
    "ManualTask",
    "LearningTask",
    "LoanTask",
    "MeetingTask",
    "SubTask",
    # 编解码
    "TaskAdapter",
    "parse_task",
    "dump_task",
]
