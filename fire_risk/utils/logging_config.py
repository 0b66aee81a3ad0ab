import logging
import sys
from pathlib import Path

import structlog

from fire_risk.config import Config


class CustomFormatter(logging.Formatter):
    """Formatter producing: [yyyy-mm-dd hh:mm:ss] [log_type] [logger_name]: {message}"""

    def format(self, record):
        # Keep only the last component of dotted logger names
        logger_name = record.name.split('.')[-1] if '.' in record.name else record.name

        timestamp = self.formatTime(record, '%Y-%m-%d %H:%M:%S')

        formatted_message = f"[{timestamp}] [{record.levelname}] [{logger_name}]: {record.getMessage()}"

        if record.exc_info:
            formatted_message += '\n' + self.formatException(record.exc_info)

        return formatted_message


def ensure_logs_directory(log_file_path: Path) -> Path:
    """Ensure the directory holding the log file exists."""
    log_file_path.parent.mkdir(parents=True, exist_ok=True)
    return log_file_path


def _event_renderer(settings: Config):
    if settings.log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True)


def setup_logging(settings: Config):
    """
    Configure logging for the application.

    Standard library handlers carry the custom line format; structlog events
    are rendered as key/value text or JSON and handed to those handlers.

    Args:
        settings: Application settings providing level, format and file options
    """
    level = getattr(logging, settings.log_level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    formatter = CustomFormatter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file_path = None
    if settings.log_to_file:
        log_file_path = ensure_logs_directory(settings.get_log_file_path())
        file_handler = logging.FileHandler(log_file_path, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.processors.format_exc_info,
            _event_renderer(settings),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    logger = logging.getLogger(__name__)
    if log_file_path:
        logger.info(f"Logging configured - writing to {log_file_path}")
    else:
        logger.info("Logging configured - writing to stdout")

