"""
Structured logging for the service

Records go to the console and, unless LOG_TO_FILE is off, to rotating
app and error files under LOGS_DIR.
"""

import logging
import logging.handlers
from datetime import datetime, timezone
from pathlib import Path

from pythonjsonlogger.json import JsonFormatter

from .settings import Config

LOGGER_NAME = 'game_reviews'
TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class ServiceJsonFormatter(JsonFormatter):
    """JSON formatter stamping each record with UTC time, level and logger"""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name


def build_formatter(log_format: str) -> logging.Formatter:
    if log_format == 'json':
        return ServiceJsonFormatter()
    return logging.Formatter(TEXT_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')


def _rotating_handler(path, level, formatter, config: Config) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=config.LOG_MAX_BYTES,
        backupCount=config.LOG_BACKUP_COUNT
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logger(config: Config) -> logging.Logger:
    """
    Configure the service logger from a config object

    Args:
        config: Configuration with LOG_LEVEL, LOG_FORMAT, LOG_TO_FILE, etc.

    Returns:
        The configured service logger
    """
    level = getattr(logging, config.LOG_LEVEL)
    formatter = build_formatter(config.LOG_FORMAT)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if config.LOG_TO_FILE:
        logs_dir = Path(config.LOGS_DIR)
        logs_dir.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_rotating_handler(config.LOG_FILE, level, formatter, config))
        logger.addHandler(
            _rotating_handler(logs_dir / 'error.log', logging.ERROR, formatter, config)
        )

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """Service logger, or a named child logger"""
    return logging.getLogger(name or LOGGER_NAME)


class LoggerMixin:
    """Gives a component a logger named after its module and class"""

    @property
    def logger(self) -> logging.Logger:
        return logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")

    def log_info(self, message: str, **kwargs):
        self.logger.info(message, extra=kwargs)

    def log_warning(self, message: str, **kwargs):
        self.logger.warning(message, extra=kwargs)

    def log_debug(self, message: str, **kwargs):
        self.logger.debug(message, extra=kwargs)
