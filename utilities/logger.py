"""
Structured logging setup using structlog.
Provides JSON or console output and a context-aware logger for store operations.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union
import structlog
from structlog.stdlib import LoggerFactory


def setup_logging(
    log_level: str = "INFO",
    log_format: str = "json",
    log_file: Optional[Union[str, Path]] = None,
    debug: bool = False
) -> None:
    """
    Set up structured logging with configurable output formats.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format (json or console)
        log_file: Optional log file path
        debug: Add call site information to every entry
    """

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if debug:
        processors.append(structlog.processors.CallsiteParameterAdder())

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(getattr(logging, log_level.upper()))
        file_handler.setFormatter(logging.Formatter('%(message)s'))

        logging.getLogger().addHandler(file_handler)

    logger = structlog.get_logger(__name__)
    logger.info(
        "Logging system initialized",
        level=log_level,
        format=log_format,
        file=str(log_file) if log_file else None,
        debug=debug
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


class StoreLogger:
    """
    Logger for book store operations with bound context.
    """

    def __init__(self, name: str = "bookshelf.store", context: Optional[dict] = None):
        self.name = name
        self.logger = get_logger(name)
        self.context = dict(context or {})

    def bind_context(self, **kwargs) -> 'StoreLogger':
        """
        Bind context variables to a new logger.

        Args:
            **kwargs: Context variables to bind

        Returns:
            New StoreLogger carrying this logger's context plus ``kwargs``;
            this logger is left unchanged
        """
        return StoreLogger(self.name, {**self.context, **kwargs})

    def log_outcome(self, operation: str, outcome, book_id: Optional[str] = None) -> None:
        """Log the outcome of a store operation."""
        if outcome.ok:
            level = "info" if operation in ("create", "update", "delete") else "debug"
        else:
            level = "warning"
        getattr(self.logger, level)(
            "Book operation",
            operation=operation,
            outcome=outcome.kind.value,
            status_code=outcome.status_code,
            book_id=book_id,
            detail=outcome.message,
            **self.context
        )

    def log_listing(self, total: int, matched: int, filters: dict) -> None:
        """Log a list query."""
        self.logger.debug(
            "Books listed",
            total=total,
            matched=matched,
            filters=filters,
            **self.context
        )
