"""
Config Package
Environment-driven settings and structured logging
"""

from .settings import Config, DevelopmentConfig, TestingConfig, ProductionConfig, config
from .logger import setup_logger, get_logger, LoggerMixin

__all__ = [
    'Config',
    'DevelopmentConfig',
    'TestingConfig',
    'ProductionConfig',
    'config',
    'setup_logger',
    'get_logger',
    'LoggerMixin'
]
