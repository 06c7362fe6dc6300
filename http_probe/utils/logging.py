"""Structured logging utilities for http-probe.

Uses structlog for structured logging with Rich for console output.
"""

import logging
from typing import Optional, Any, Dict, List
from datetime import datetime, timezone

import structlog
from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme
from rich.style import Style


PROBE_THEME = Theme({
    "info": Style(color="cyan"),
    "warning": Style(color="yellow", bold=True),
    "error": Style(color="red", bold=True),
    "status": Style(color="green", bold=True),
    "redirect": Style(color="magenta"),
    "url": Style(color="cyan", italic=True),
})

# Global console instance
console = Console(theme=PROBE_THEME)


def add_timestamp(
    logger: logging.Logger,
    method_name: str,
    event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """Add ISO timestamp to log events."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def add_log_level(
    logger: logging.Logger,
    method_name: str,
    event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """Add log level to event dict."""
    event_dict["level"] = method_name.upper()
    return event_dict


def drop_event(
    logger: Any,
    method_name: str,
    event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """Discard every event that reaches it."""
    raise structlog.DropEvent


def setup_logging(
    level: str = "INFO",
    json_output: bool = False,
    log_file: Optional[str] = None,
) -> structlog.BoundLogger:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: If True, output JSON format instead of pretty console
        log_file: Optional file path to write logs to

    Returns:
        Configured structlog logger
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    rich_handler.setLevel(log_level)
    handlers: List[logging.Handler] = [rich_handler]

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        ))
        handlers.append(file_handler)

    logging.basicConfig(
        level=log_level,
        handlers=handlers,
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        add_timestamp,
        add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        ))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger("http_probe")


def get_logger(name: str = "http_probe") -> structlog.BoundLogger:
    """Get a logger instance with the given name.

    Args:
        name: Logger name (usually module name)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def null_logger() -> structlog.BoundLogger:
    """Get a logger that silently drops everything it is given.

    Independent of the global structlog configuration, so muting one
    client never affects another.
    """
    return structlog.wrap_logger(
        structlog.ReturnLogger(),
        processors=[drop_event],
        wrapper_class=structlog.BoundLogger,
    )
