"""
Structured logging setup with correlation IDs.

structlog events and plain stdlib records both go through one
``structlog.stdlib.ProcessorFormatter`` per handler, so JSON output carries
event fields as top-level keys.
"""

import logging
import logging.handlers
import uuid
import sys
from typing import Dict, Any, Optional
from pathlib import Path
from contextvars import ContextVar

import structlog

from maxprofit.config.settings import LOG_LEVELS, get_settings

SERVICE_NAME = 'maxprofit'
SERVICE_VERSION = '1.0.0'

# Context variable for correlation ID
correlation_id_ctx: ContextVar[Optional[str]] = ContextVar('correlation_id', default=None)


class CorrelationIDProcessor:
    """Structlog processor to add correlation ID to log entries."""

    def __call__(self, logger, method_name, event_dict):
        correlation_id = correlation_id_ctx.get()
        if correlation_id:
            event_dict['correlation_id'] = correlation_id
        return event_dict


class ServiceInfoProcessor:
    """Structlog processor to add service information."""

    def __call__(self, logger, method_name, event_dict):
        event_dict['service'] = SERVICE_NAME
        event_dict['version'] = SERVICE_VERSION
        return event_dict


def _shared_processors():
    # Run for structlog events and, as foreign_pre_chain, for stdlib records
    return [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        CorrelationIDProcessor(),
        ServiceInfoProcessor(),
        structlog.processors.StackInfoRenderer(),
    ]


def build_formatter(log_format: str, colors: bool = False) -> structlog.stdlib.ProcessorFormatter:
    """Formatter rendering log records as JSON lines or console text."""
    if log_format == 'json':
        final = [
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ]
    else:
        final = [structlog.dev.ConsoleRenderer(colors=colors)]

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_shared_processors(),
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *final],
    )


def _resolve_level(log_level: str) -> int:
    name = str(log_level).upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {log_level!r}; expected one of {', '.join(LOG_LEVELS)}")
    return getattr(logging, name)


class LoggingManager:
    """Centralized logging configuration and management."""

    def __init__(self):
        self.configured = False
        self.handlers = []

    def configure_logging(
        self,
        log_level: str = None,
        log_format: str = None,
        log_file: str = None,
        max_file_size: int = None,
        backup_count: int = None,
        stream=None,
    ):
        """Configure application logging."""
        if self.configured:
            return

        settings = get_settings()
        level = _resolve_level(log_level or settings.LOG_LEVEL)
        log_format = log_format or settings.LOG_FORMAT
        log_file = log_file or settings.LOG_FILE_PATH
        max_file_size = max_file_size or (10 * 1024 * 1024)  # 10MB default
        backup_count = backup_count or 5

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                *_shared_processors(),
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            logger_factory=structlog.stdlib.LoggerFactory(),
            context_class=dict,
            cache_logger_on_first_use=True,
        )

        root_logger = logging.getLogger()
        root_logger.setLevel(level)

        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
        for handler in self.handlers:
            handler.close()
        self.handlers = []

        # Console handler; stderr keeps CLI stdout clean
        stream = stream or sys.stderr
        console_handler = logging.StreamHandler(stream)
        console_handler.setFormatter(
            build_formatter(log_format, colors=hasattr(stream, 'isatty') and stream.isatty())
        )
        root_logger.addHandler(console_handler)
        self.handlers.append(console_handler)

        # File output is always JSON lines
        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=max_file_size,
                backupCount=backup_count,
                encoding='utf-8'
            )
            file_handler.setFormatter(build_formatter('json'))
            root_logger.addHandler(file_handler)
            self.handlers.append(file_handler)

        # Reduce noise from third-party libraries
        logging.getLogger('httpx').setLevel(logging.WARNING)
        logging.getLogger('uvicorn.access').setLevel(logging.WARNING)
        logging.getLogger('asyncio').setLevel(logging.WARNING)

        self.configured = True

    def get_logger(self, name: str, extra_context: Dict[str, Any] = None) -> structlog.stdlib.BoundLogger:
        """Get a configured logger instance."""
        if not self.configured:
            self.configure_logging()

        logger = structlog.get_logger(name)

        if extra_context:
            logger = logger.bind(**extra_context)

        return logger

    def set_correlation_id(self, correlation_id: str = None) -> str:
        """Set correlation ID for current context."""
        if correlation_id is None:
            correlation_id = str(uuid.uuid4())

        correlation_id_ctx.set(correlation_id)
        return correlation_id

    def get_correlation_id(self) -> Optional[str]:
        """Get current correlation ID."""
        return correlation_id_ctx.get()

    def clear_correlation_id(self):
        """Clear correlation ID from current context."""
        correlation_id_ctx.set(None)


# Global logging manager instance
logging_manager = LoggingManager()


# Convenience functions
def get_logger(name: str, extra_context: Dict[str, Any] = None) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance."""
    return logging_manager.get_logger(name, extra_context)


def set_correlation_id(correlation_id: str = None) -> str:
    """Set correlation ID for current context."""
    return logging_manager.set_correlation_id(correlation_id)


def get_correlation_id() -> Optional[str]:
    """Get current correlation ID."""
    return logging_manager.get_correlation_id()


def clear_correlation_id():
    """Clear correlation ID from current context."""
    logging_manager.clear_correlation_id()


def configure_logging(**kwargs):
    """Configure application logging."""
    return logging_manager.configure_logging(**kwargs)
