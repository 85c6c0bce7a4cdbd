"""枚举定义

包含 Priority 优先级（有序集合）与 TaskType 任务类型判别值。
"""

from enum import StrEnum


class Priority(StrEnum):
    """任务优先级 -- 按声明顺序由低到高"""

    NONE = "NONE"
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"

    @property
    def rank(self) -> int:
        """优先级序号，NONE 为 0，CRITICAL 为 4"""
        return _PRIORITY_ORDER.index(self)


_PRIORITY_ORDER: list[Priority] = list(Priority)


class TaskType(StrEnum):
    """任务类型 -- Task 联合类型的判别字段取值"""

    MANUAL = "MANUAL"
    LEARNING = "LEARNING"
    LOAN = "LOAN"
    MEETING = "MEETING"


def priority_sort_key(priority: Priority | None) -> int:
    """排序键：None 视同 NONE"""
    if priority is None:
        return Priority.NONE.rank
    return Priority(priority).rank
