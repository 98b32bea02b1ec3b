"""
Structured Logging
==================
structlog configuration for processes embedding the codec.

Usage:
    from smscodec.log import setup_logging

    setup_logging(service_name="smsly-gateway", level="DEBUG", json_output=False)
"""

import logging
from typing import Optional

import structlog
from structlog.typing import FilteringBoundLogger

from . import config


def setup_logging(
    service_name: Optional[str] = None,
    level: Optional[str] = None,
    json_output: Optional[bool] = None,
) -> FilteringBoundLogger:
    """
    Configure structlog for the host process.

    Args:
        service_name: Name bound to every event (defaults to SMSCODEC_SERVICE_NAME)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Whether to render JSON (for production)

    Returns:
        Logger bound to the service name
    """
    service_name = service_name or config.SERVICE_NAME
    level = (level or config.LOG_LEVEL).upper()
    if json_output is None:
        json_output = config.JSON_LOGS

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level, logging.INFO)
        ),
        cache_logger_on_first_use=False,
    )

    logger = structlog.get_logger("smscodec").bind(service=service_name)
    logger.debug("Logging configured", level=level, json_output=json_output)
    return logger
