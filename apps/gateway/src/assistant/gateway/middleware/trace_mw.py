"""TraceMiddleware -- 任务级追踪

对 /api/tasks/{task_id} 请求绑定 trace_id，
同一任务的读取、替换、删除日志可按 trace_id 串联。
"""

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

_TASKS_PREFIX = "/api/tasks/"
_ULID_LENGTH = 26


def extract_task_id(path: str) -> str | None:
    """从 /api/tasks/{task_id} 路径中提取 ULID 格式的 task_id"""
    if not path.startswith(_TASKS_PREFIX):
        return None
    task_id = path[len(_TASKS_PREFIX):].split("/", 1)[0]
    if len(task_id) != _ULID_LENGTH:
        return None
    return task_id


class TraceMiddleware(BaseHTTPMiddleware):
    """任务级追踪中间件 -- 为任务操作绑定 trace_id"""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        task_id = extract_task_id(request.url.path)
        if task_id:
            structlog.contextvars.bind_contextvars(trace_id=f"trace-{task_id}")

        return await call_next(request)
