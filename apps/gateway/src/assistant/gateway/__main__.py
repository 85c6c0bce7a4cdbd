"""python -m assistant.gateway -- 以 uvicorn 启动 API 服务"""

import uvicorn

from .config import load_gateway_config


def main() -> None:
    """按 GatewayConfig 的地址与端口启动 uvicorn，日志沿用 structlog 配置"""
    config = load_gateway_config()
    uvicorn.run(
        "assistant.gateway.main:app",
        host=config.host,
        port=config.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
