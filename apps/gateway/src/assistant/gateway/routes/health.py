"""健康检查路由

GET /api/health: 静态诊断字符串。
GET /hello: 静态问候字符串。
GET /ready: Readiness 检查，验证 SQLite 连通性。
"""

import structlog
from fastapi import APIRouter, Request
from starlette.responses import JSONResponse, PlainTextResponse

log = structlog.get_logger()

router = APIRouter()


@router.get("/api/health", response_class=PlainTextResponse)
async def health():
    """Liveness 检查 -- 永远返回 200"""
    return "Backend is running!"


@router.get("/hello", response_class=PlainTextResponse)
async def hello():
    return "Hello from Backend!"


@router.get("/ready")
async def ready(request: Request):
    """Readiness 检查 -- SQLite 不可用时返回 503"""
    checks = {}
    all_ok = True

    try:
        store_group = request.app.state.store_group
        cursor = await store_group.conn.execute("SELECT 1")
        await cursor.fetchone()
        checks["sqlite"] = "ok"
    except Exception as e:
        log.warning("readiness_check_failed", check="sqlite", error=str(e))
        checks["sqlite"] = "unavailable"
        all_ok = False

    return JSONResponse(
        status_code=200 if all_ok else 503,
        content={
            "status": "ready" if all_ok else "not_ready",
            "checks": checks,
        },
    )
