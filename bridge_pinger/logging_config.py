"""
structlog setup for the route pinger.

JSON lines by default; the dev console renderer when running at DEBUG.
Provider and cache modules log through the stdlib ``logging`` module, so
their records are funnelled through the same processor chain.
"""

import logging
import sys
from typing import List, Optional

import structlog

from .config import settings

NOISY_LOGGERS = ("uvicorn.access", "httpcore", "httpx")


def _add_service(_logger, _method_name, event_dict):
    event_dict.setdefault("service", settings.service_name)
    return event_dict


def _processor_chain(json_output: bool) -> List[structlog.types.Processor]:
    processors: List[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _add_service,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if json_output:
        processors.append(structlog.processors.format_exc_info)
    return processors


def setup_logging(log_level: Optional[str] = None) -> None:
    """Configure structlog and the root stdlib logger.

    Args:
        log_level: Level name overriding ``settings.log_level`` (the CLI
            passes WARNING so route tables are not interleaved with logs).
    """
    level_name = (log_level or settings.log_level).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO

    json_output = level != logging.DEBUG
    chain = _processor_chain(json_output)
    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[*chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
