"""异常处理器 -- 将 core 异常映射为 HTTP 错误响应

错误响应体格式统一为 {"error": {"code": ..., "message": ...}}。
"""

import structlog
from assistant.core.exceptions import StoreUnavailableError, TaskNotFoundError
from fastapi import FastAPI, Request
from starlette.responses import JSONResponse

log = structlog.get_logger()


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"code": code, "message": message}},
    )


async def task_not_found_handler(request: Request, exc: TaskNotFoundError) -> JSONResponse:
    """TaskNotFoundError -> 404"""
    return _error_response(404, "TASK_NOT_FOUND", str(exc))


async def store_unavailable_handler(
    request: Request, exc: StoreUnavailableError
) -> JSONResponse:
    """StoreUnavailableError -> 503，不向客户端暴露驱动层细节"""
    log.error(
        "store_unavailable",
        operation=exc.operation,
        error=str(exc.original_error),
    )
    return _error_response(
        503,
        "STORE_UNAVAILABLE",
        f"Task store is unavailable ({exc.operation})",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """注册 core 异常处理器"""
    app.add_exception_handler(TaskNotFoundError, task_not_found_handler)
    app.add_exception_handler(StoreUnavailableError, store_unavailable_handler)
