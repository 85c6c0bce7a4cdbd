"""GatewayConfig -- Gateway 配置加载

从环境变量加载监听地址与 CORS 来源配置。
"""

import os

import structlog
from pydantic import BaseModel, Field

log = structlog.get_logger()

_DEFAULT_PORT = 8080


class GatewayConfig(BaseModel):
    """Gateway 配置 -- 从环境变量加载

    环境变量:
        ASSISTANT_HOST: 监听地址（默认 0.0.0.0）
        ASSISTANT_PORT: 监听端口（默认 8080）
        ASSISTANT_CORS_ORIGINS: 允许的跨域来源，逗号分隔（默认 *）
    """

    host: str = Field(default="0.0.0.0", description="监听地址")
    port: int = Field(default=_DEFAULT_PORT, ge=1, le=65535, description="监听端口")
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="允许的跨域来源",
    )


def load_gateway_config() -> GatewayConfig:
    """从环境变量加载 Gateway 配置

    Returns:
        GatewayConfig 实例
    """
    kwargs: dict = {}

    if val := os.environ.get("ASSISTANT_HOST"):
        kwargs["host"] = val

    if val := os.environ.get("ASSISTANT_PORT"):
        try:
            kwargs["port"] = int(val)
        except ValueError:
            log.warning(
                "invalid_port_config",
                env_var="ASSISTANT_PORT",
                value=val,
                fallback=_DEFAULT_PORT,
            )

    if val := os.environ.get("ASSISTANT_CORS_ORIGINS"):
        origins = [origin.strip() for origin in val.split(",") if origin.strip()]
        if origins:
            kwargs["cors_allow_origins"] = origins

    return GatewayConfig(**kwargs)
