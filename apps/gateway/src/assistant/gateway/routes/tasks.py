"""任务 CRUD 路由

GET    /api/tasks: 任务列表，支持 taskType 筛选。
POST   /api/tasks: 创建任务，ID 由存储层分配。
GET    /api/tasks/{task_id}: 任务详情。
PUT    /api/tasks/{task_id}: 整体替换任务，不存在返回 404。
DELETE /api/tasks/{task_id}: 删除任务，幂等，始终返回 200。
"""

from typing import Any

from assistant.core.models import Task, TaskType, dump_task, parse_task
from fastapi import APIRouter, Body, Depends, Query
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from starlette.responses import JSONResponse, Response

from ..deps import get_task_service
from ..services.task_service import TaskService

router = APIRouter()


def _parse_body(payload: dict[str, Any]) -> Task:
    """将请求体校验为具体的 Task 变体，失败时返回标准 422"""
    try:
        return parse_task(payload)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False), body=payload) from e


@router.get("/api/tasks")
async def list_tasks(
    task_type: TaskType | None = Query(
        default=None, alias="taskType", description="按任务类型筛选"
    ),
    service: TaskService = Depends(get_task_service),
):
    """查询任务列表，按插入顺序返回"""
    tasks = await service.list_tasks(task_type)
    return JSONResponse(status_code=200, content=[dump_task(t) for t in tasks])


@router.post("/api/tasks")
async def create_task(
    payload: dict[str, Any] = Body(...),
    service: TaskService = Depends(get_task_service),
):
    """创建任务，请求体中的 id 被忽略"""
    task = await service.create_task(_parse_body(payload))
    return JSONResponse(status_code=201, content=dump_task(task))


@router.get("/api/tasks/{task_id}")
async def get_task(
    task_id: str,
    service: TaskService = Depends(get_task_service),
):
    """查询单个任务"""
    task = await service.get_task(task_id)
    return JSONResponse(status_code=200, content=dump_task(task))


@router.put("/api/tasks/{task_id}")
async def update_task(
    task_id: str,
    payload: dict[str, Any] = Body(...),
    service: TaskService = Depends(get_task_service),
):
    """以请求体整体替换任务"""
    task = await service.update_task(task_id, _parse_body(payload))
    return JSONResponse(status_code=200, content=dump_task(task))


@router.delete("/api/tasks/{task_id}")
async def delete_task(
    task_id: str,
    service: TaskService = Depends(get_task_service),
):
    """删除任务，无论任务是否存在均返回 200 空响应"""
    await service.delete_task(task_id)
    return Response(status_code=200)
