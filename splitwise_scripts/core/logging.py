"""
Centralized Logging Configuration.

All modules must use this logging setup. Do not create standalone loggers.
Configuration is loaded from config/settings/logging.yaml via AppConfig.

Structured fields in every JSON log record:
    timestamp   - ISO 8601 UTC timestamp
    level       - Log level (debug, info, warning, error, critical)
    logger      - Module path (e.g., splitwise_scripts.api.client)
    event       - Log message
    func_name   - Function that emitted the log
    lineno      - Line number in source file
    source      - Origin context, set explicitly (cli, api)
    script      - Script name, bound by the command harness

Console output goes to stderr so that the JSON printed by the scripts on
stdout stays machine-readable.

Usage:
    from splitwise_scripts.core.logging import get_logger, setup_logging

    setup_logging()
    setup_logging(level="DEBUG", format_type="console")

    logger = get_logger(__name__)
    logger.info("Message", key="value")

    log_with_source(logger, "api", "debug", "API request", method="GET")

Log File:
    logs/system.jsonl — single file, all records, filter by 'source' field
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

import structlog
from structlog.typing import Processor

from splitwise_scripts.core.config import find_project_root, get_app_config


def _resolve_log_path(configured_path: str) -> Path:
    """Resolve the log file path relative to project root."""
    return find_project_root() / configured_path


def setup_logging(level: str | None = None, format_type: str | None = None) -> None:
    """
    Configure structured logging for the scripts.

    Configuration comes from the validated logging.yaml (AppConfig.logging).
    Parameters passed to this function override it.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Overrides config.
        format_type: Output format ('json' or 'console'). Overrides config.
    """
    config = get_app_config().logging

    effective_level = level if level is not None else config.level
    effective_format = format_type if format_type is not None else config.format

    file_config = config.handlers.file

    log_level = getattr(logging, effective_level.upper())

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
    ]

    json_formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.processors.JSONRenderer(),
        foreign_pre_chain=shared_processors,
    )

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    if effective_format == "console":
        console_formatter = structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=False),
            foreign_pre_chain=shared_processors,
        )
    else:
        console_formatter = json_formatter

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if config.handlers.console.enabled:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    if file_config.enabled:
        log_path = _resolve_log_path(file_config.path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            filename=str(log_path),
            maxBytes=file_config.max_bytes,
            backupCount=file_config.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(json_formatter)
        root_logger.addHandler(file_handler)

    # httpx logs every request at INFO, including the full URL.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str) -> Any:
    """
    Get a logger instance for the given name.

    Args:
        name: Logger name, typically __name__

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_with_source(logger: Any, source: str, level: str, message: str, **kwargs: Any) -> None:
    """
    Log a message with an explicit source.

    Args:
        logger: The logger instance
        source: Log source, e.g. "cli" or "api"
        level: Log level (debug, info, warning, error, critical)
        message: Log message
        **kwargs: Additional context fields

    Raises:
        AttributeError: If level is not a valid log level

    Example:
        log_with_source(logger, "api", "debug", "API response", status_code=200)
    """
    log_method = getattr(logger, level.lower())
    log_method(message, source=source, **kwargs)
