"""
Configuration settings for the Game Reviews GraphQL service
Loads from environment variables with sensible defaults
"""

import os
from pathlib import Path

# ============================================
# BASE CONFIGURATION
# ============================================

class Config:
    """Base configuration"""

    # Flask
    FLASK_ENV = os.getenv('FLASK_ENV', 'production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = os.getenv('TESTING', 'False').lower() == 'true'
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')

    # Server
    SERVER_HOST = os.getenv('SERVER_HOST', '0.0.0.0')
    SERVER_PORT = int(os.getenv('SERVER_PORT', 4000))

    # Paths
    BASE_DIR = Path(__file__).resolve().parent.parent.parent
    LOGS_DIR = os.getenv('LOGS_DIR', str(BASE_DIR / 'logs'))

    # ============================================
    # GRAPHQL
    # ============================================

    GRAPHQL_PATH = os.getenv('GRAPHQL_PATH', '/graphql')
    # graphiql, apollo-sandbox, pathfinder or empty to disable the explorer
    GRAPHQL_IDE = os.getenv('GRAPHQL_IDE', 'graphiql') or None

    # sequence or uuid
    GAME_ID_STRATEGY = os.getenv('GAME_ID_STRATEGY', 'sequence')

    # ============================================
    # CORS
    # ============================================

    CORS_ORIGINS = os.getenv(
        'CORS_ORIGINS',
        'http://localhost:3000,http://localhost:4000'
    ).split(',')

    # ============================================
    # LOGGING
    # ============================================

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_FORMAT = os.getenv('LOG_FORMAT', 'json')
    LOG_TO_FILE = os.getenv('LOG_TO_FILE', 'True').lower() == 'true'
    LOG_FILE = os.getenv('LOG_FILE', str(Path(LOGS_DIR) / 'app.log'))
    LOG_MAX_BYTES = int(os.getenv('LOG_MAX_BYTES', 10485760))  # 10MB
    LOG_BACKUP_COUNT = int(os.getenv('LOG_BACKUP_COUNT', 5))

    # ============================================
    # MONITORING
    # ============================================

    PROMETHEUS_ENABLED = os.getenv('PROMETHEUS_ENABLED', 'True').lower() == 'true'


class DevelopmentConfig(Config):
    """Development configuration"""
    FLASK_ENV = 'development'
    DEBUG = True
    TESTING = False
    LOG_LEVEL = 'DEBUG'
    LOG_FORMAT = 'text'


class TestingConfig(Config):
    """Testing configuration"""
    FLASK_ENV = 'testing'
    DEBUG = True
    TESTING = True
    LOG_LEVEL = 'DEBUG'
    LOG_TO_FILE = False
    PROMETHEUS_ENABLED = False


class ProductionConfig(Config):
    """Production configuration"""
    FLASK_ENV = 'production'
    DEBUG = False
    TESTING = False
    LOG_LEVEL = 'INFO'


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
