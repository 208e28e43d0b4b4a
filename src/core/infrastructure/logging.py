"""Logging configuration with structlog integration.

提供两种日志记录方式：
1. loguru: 用于一般调试日志
2. structlog: 用于关键业务事件的结构化日志
"""

import sys
from typing import Any

import structlog
from loguru import logger

from src.core.config import settings


def setup_logging() -> None:
    """Configure application logging with structlog and loguru."""
    _configure_structlog()
    _configure_loguru()

    logger.info(f"Logging configured with level: {settings.LOG_LEVEL}")


def _configure_structlog() -> None:
    """配置 structlog 处理器链。"""
    if settings.ENVIRONMENT == "local":
        # 本地开发使用人类可读格式
        renderer = structlog.dev.ConsoleRenderer(colors=True)
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.CallsiteParameterAdder(
                [
                    structlog.processors.CallsiteParameter.MODULE,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                    structlog.processors.CallsiteParameter.LINENO,
                ]
            ),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            _get_log_level_number(settings.LOG_LEVEL)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def _configure_loguru() -> None:
    """配置 loguru。"""
    logger.remove()

    logger.add(
        sys.stderr,
        level=settings.LOG_LEVEL,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    if settings.ENVIRONMENT != "local":
        logger.add(
            "logs/vodlist_{time:YYYY-MM-DD}.log",
            rotation="00:00",
            retention="14 days",
            level="INFO",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        )


def _get_log_level_number(level: str) -> int:
    """将日志级别字符串转换为数字。"""
    levels = {
        "DEBUG": 10,
        "INFO": 20,
        "WARNING": 30,
        "ERROR": 40,
        "CRITICAL": 50,
    }
    return levels.get(level.upper(), 20)


# ============================================================================
# 业务事件日志记录器
# ============================================================================


class BusinessEvents:
    """业务事件日志助手类。

    Usage:
        BusinessEvents.listing_fetched(source_id="s1", type_id=1, page=1, ...)
    """

    _log = structlog.get_logger("business.events")

    @classmethod
    def listing_fetched(
        cls,
        source_id: str,
        type_id: int,
        page: int,
        record_count: int,
        page_count: int,
        **extra: Any,
    ) -> None:
        """记录分类列表抓取成功事件。"""
        cls._log.info(
            "listing_fetched",
            event_type="listing",
            source_id=source_id,
            type_id=type_id,
            page=page,
            record_count=record_count,
            page_count=page_count,
            **extra,
        )

    @classmethod
    def listing_fetch_failed(
        cls,
        source_id: str,
        type_id: int,
        page: int,
        status: str,
        error: str,
        **extra: Any,
    ) -> None:
        """记录分类列表抓取失败事件（EMPTY / FAILED）。"""
        cls._log.warning(
            "listing_fetch_failed",
            event_type="listing_error",
            source_id=source_id,
            type_id=type_id,
            page=page,
            status=status,
            error=error,
            **extra,
        )

    @classmethod
    def listing_discarded(
        cls,
        request_key: str,
        latest_key: str | None,
        **extra: Any,
    ) -> None:
        """记录过期请求结果被丢弃事件。"""
        cls._log.info(
            "listing_discarded",
            event_type="listing_stale",
            request_key=request_key,
            latest_key=latest_key,
            **extra,
        )

    @classmethod
    def source_registry_changed(
        cls,
        user_id: str,
        action: str,
        source_count: int,
        **extra: Any,
    ) -> None:
        """记录用户视频源列表变更事件。"""
        cls._log.info(
            "source_registry_changed",
            event_type="source_registry",
            user_id=user_id,
            action=action,
            source_count=source_count,
            **extra,
        )
