import logging
import sys
from pathlib import Path

import structlog

from src.config.config import Config


class LogLineFormatter(logging.Formatter):
    """Prefix each rendered structlog event with time, level and the emitting module.

    Example: ``[2026-10-18 09:15:02] [WARNING] [weather_service]: event='API request failed' status_code=404``
    """

    def format(self, record):
        module = record.name.rsplit(".", 1)[-1]
        timestamp = self.formatTime(record, "%Y-%m-%d %H:%M:%S")
        line = f"[{timestamp}] [{record.levelname}] [{module}]: {record.getMessage()}"

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def ensure_logs_directory(config: Config) -> Path:
    """Ensure the logs directory exists."""
    logs_dir = config.get_log_dir_path()
    logs_dir.mkdir(parents=True, exist_ok=True)
    return logs_dir


def get_log_file_path(config: Config) -> Path:
    """Get the log file path based on environment."""
    logs_dir = ensure_logs_directory(config)
    log_filename = f"weather_bot_{config.environment}.log"
    return logs_dir / log_filename


def configure_structlog(config: Config):
    """
    Route structlog events through the standard library logging handlers.

    Events are rendered as key=value pairs for the text format and as a JSON
    object for the json format; the stdlib formatter adds timestamp and level.
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if config.log_format == "json"
        else structlog.processors.KeyValueRenderer(key_order=["event"])
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def setup_logging(config: Config):
    """
    Configure logging for the application.

    Writes every event to the environment's log file and to the console.
    Console output goes to stderr so that stdout only carries the answer.
    """
    level = getattr(logging, config.log_level.upper())

    # Get log file path
    log_file_path = get_log_file_path(config)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    formatter = LogLineFormatter()

    file_handler = logging.FileHandler(log_file_path, encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    # The HTTP clients log every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)

    configure_structlog(config)

    logger = structlog.get_logger(__name__)
    logger.info("Logging configured", log_file=str(log_file_path))
