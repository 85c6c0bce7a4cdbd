"""Core 异常体系

存储层只抛出以下异常，由 gateway 映射为 HTTP 状态码：
- TaskNotFoundError -> 404
- StoreUnavailableError -> 503
"""


class StoreError(Exception):
    """存储层基础异常"""

    def __init__(self, message: str, recoverable: bool = False) -> None:
        """
        Args:
            message: 错误描述
            recoverable: 调用方重试是否可能成功
        """
        super().__init__(message)
        self.recoverable = recoverable


class TaskNotFoundError(StoreError):
    """按 task_id 查找的任务不存在"""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task with id {task_id} does not exist")
        self.task_id = task_id


class StoreUnavailableError(StoreError):
    """存储引擎不可用（连接已关闭、磁盘错误、锁超时等）"""

    def __init__(self, operation: str, original_error: Exception) -> None:
        """
        Args:
            operation: 失败的存储操作名
            original_error: 驱动层原始异常
        """
        super().__init__(
            f"Task store unavailable during {operation}: {original_error}",
            recoverable=True,
        )
        self.operation = operation
        self.original_error = original_error
