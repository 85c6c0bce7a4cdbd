"""FastAPI 应用主文件

app 创建 + lifespan 管理：DB 初始化/关闭 + 中间件 + 异常处理器 + 路由注册。
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from assistant.core.config import get_db_path
from assistant.core.store import create_store_group
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import GatewayConfig, load_gateway_config
from .errors import register_exception_handlers
from .middleware.logging_config import setup_logfire, setup_logging
from .middleware.logging_mw import LoggingMiddleware
from .middleware.trace_mw import TraceMiddleware
from .routes import health, tasks

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """应用生命周期管理：启动时打开数据库，关闭时释放连接"""
    db_path = get_db_path()
    app.state.store_group = await create_store_group(db_path)
    log.info("store_initialized", db_path=db_path)

    yield

    if getattr(app.state, "store_group", None):
        await app.state.store_group.conn.close()
        log.info("store_closed")


def create_app(config: GatewayConfig | None = None) -> FastAPI:
    """创建 FastAPI 应用实例"""
    config = config or load_gateway_config()

    app = FastAPI(
        title="Personal Assistant Backend",
        version="0.1.0",
        description="个人助理任务管理 API",
        lifespan=lifespan,
    )
    app.state.config = config

    # 中间件后注册者在外层：CORS -> Logging -> Trace
    app.add_middleware(TraceMiddleware)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    setup_logging()
    setup_logfire()

    register_exception_handlers(app)

    app.include_router(tasks.router, tags=["tasks"])
    app.include_router(health.router, tags=["health"])

    return app


# 默认 app 实例（uvicorn 入口）
app = create_app()
