"""apps/gateway 测试配置 -- FastAPI app + httpx AsyncClient fixture"""

import os
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest_asyncio
from httpx import ASGITransport, AsyncClient


@pytest_asyncio.fixture
async def test_app(tmp_path: Path):
    """创建测试用 FastAPI app，手动初始化 lifespan 状态"""
    os.environ["ASSISTANT_DB_PATH"] = str(tmp_path / "sqlite" / "test.db")
    os.environ["LOGFIRE_SEND_TO_LOGFIRE"] = "false"

    from assistant.core.store import create_store_group
    from assistant.gateway.main import create_app

    app = create_app()

    # 手动初始化 Store（绕过 lifespan）
    store_group = await create_store_group(os.environ["ASSISTANT_DB_PATH"])
    app.state.store_group = store_group

    yield app

    await store_group.conn.close()
    os.environ.pop("ASSISTANT_DB_PATH", None)
    os.environ.pop("LOGFIRE_SEND_TO_LOGFIRE", None)


@pytest_asyncio.fixture
async def client(test_app) -> AsyncGenerator[AsyncClient, None]:
    """提供 httpx AsyncClient 用于测试"""
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
    ) as ac:
        yield ac
