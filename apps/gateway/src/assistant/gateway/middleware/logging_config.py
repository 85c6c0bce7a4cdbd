"""任务 API 日志配置

请求日志（request_started / request_completed）与任务存储事件
（task_created / task_replaced / task_deleted / task_store_unavailable）
共用一条 structlog 管道，request_id 与 trace_id 经 contextvars 附加到每条记录。
部署到托管平台时用 ASSISTANT_LOG_FORMAT=json 输出单行 JSON。
"""

import logging
import os

import structlog


def setup_logging(log_format: str | None = None, log_level: str | None = None) -> None:
    """配置 structlog 与标准库 logging

    Args:
        log_format: "json" 或 "dev"，缺省读取 ASSISTANT_LOG_FORMAT（默认 dev）
        log_level: 日志级别名，缺省读取 ASSISTANT_LOG_LEVEL（默认 INFO）
    """
    log_format = log_format or os.environ.get("ASSISTANT_LOG_FORMAT", "dev")
    log_level = log_level or os.environ.get("ASSISTANT_LOG_LEVEL", "INFO")

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # 标准库 logging（uvicorn、aiosqlite 等第三方日志）走同一渲染器
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


def setup_logfire() -> None:
    """为任务 API 挂载 Logfire 追踪

    仅在 LOGFIRE_SEND_TO_LOGFIRE=true 时启用，需要安装 logfire extra。
    """
    send_to_logfire = os.environ.get("LOGFIRE_SEND_TO_LOGFIRE", "false").lower()
    if send_to_logfire != "true":
        return

    try:
        import logfire

        logfire.configure()
        logfire.instrument_fastapi()
    except Exception as e:
        # Logfire 初始化失败不影响服务运行
        structlog.get_logger().warning("logfire_init_failed", error=str(e))
