"""Structured logging for ddlkit.

structlog is configured once, when this module is first imported, to emit
one JSON object per event through the standard library root logger.

Settings used (see ``ddlkit.config.settings``):
- DDLKIT_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL (default INFO)
- DDLKIT_LOG_TO_FILE: also write a daily rotating file (default off)
- DDLKIT_LOG_FILE_DIR: directory for that file (default logs/)

Connection URLs and DSNs carry credentials, so events never log them in
clear: any key that looks like a password, token, secret, URL or DSN is
replaced by ``[REDACTED]`` before rendering.

Usage:
    >>> from ddlkit.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("schema.create_table.built", table="users", dialect="mysql")
"""

import logging
import re
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, List, MutableMapping

import structlog
from structlog.types import EventDict, Processor

from ddlkit.config import Settings, get_settings

SENSITIVE_PATTERNS = [
    re.compile(r".*password.*", re.IGNORECASE),
    re.compile(r".*token.*", re.IGNORECASE),
    re.compile(r".*api_key.*", re.IGNORECASE),
    re.compile(r".*secret.*", re.IGNORECASE),
    re.compile(r"^(.*_)?url$", re.IGNORECASE),
    re.compile(r"^(.*_)?dsn$", re.IGNORECASE),
]

REDACTED_VALUE = "[REDACTED]"

# Rotated files kept before the oldest is deleted
LOG_FILE_BACKUPS = 30


def _is_sensitive(key: str) -> bool:
    return any(pattern.match(key) for pattern in SENSITIVE_PATTERNS)


def sanitize_for_logging(data: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``data`` with credential-bearing values redacted.

    Nested dicts are sanitized recursively.

    Example:
        >>> sanitize_for_logging({"database_url": "mysql://u:p@db/app", "table": "users"})
        {'database_url': '[REDACTED]', 'table': 'users'}
    """
    sanitized: Dict[str, Any] = {}
    for key, value in data.items():
        if _is_sensitive(key):
            sanitized[key] = REDACTED_VALUE
        elif isinstance(value, dict):
            sanitized[key] = sanitize_for_logging(value)
        else:
            sanitized[key] = value
    return sanitized


def sanitization_processor(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> MutableMapping[str, Any]:
    """structlog processor wrapping :func:`sanitize_for_logging`."""
    return sanitize_for_logging(dict(event_dict))


def _log_file_path(settings: Settings) -> Path:
    log_dir = Path(settings.log_file_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / f"ddlkit-{datetime.now():%Y%m%d}.log"


def _build_handlers(settings: Settings, level: int) -> List[logging.Handler]:
    """stdout always; a midnight-rotating file when enabled."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if settings.log_to_file:
        handlers.append(
            TimedRotatingFileHandler(
                filename=str(_log_file_path(settings)),
                when="midnight",
                interval=1,
                backupCount=LOG_FILE_BACKUPS,
                encoding="utf-8",
            )
        )
    for handler in handlers:
        handler.setLevel(level)
    return handlers


def _configure_structlog() -> None:
    settings = get_settings()
    level = getattr(logging, settings.log_level, logging.INFO)

    logging.basicConfig(format="%(message)s", level=level, handlers=[])
    for handler in _build_handlers(settings, level):
        logging.root.addHandler(handler)

    processors: List[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        sanitization_processor,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.get_logger(__name__).debug(
        "configuration.loaded",
        log_level=settings.log_level,
        log_to_file=settings.log_to_file,
        default_datasource=settings.default_datasource,
    )


_configure_structlog()


def get_logger(name: str) -> Any:
    """Logger for a module, typically ``get_logger(__name__)``."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> Any:
    """Logger carrying ``kwargs`` on every event it emits.

    Example:
        >>> logger = bind_context(dialect="postgresql", datasource="default")
        >>> logger.info("schema.introspection.started", table="users")
    """
    return structlog.get_logger().bind(**kwargs)
