"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""
    
    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    
    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 8000))
    FRONTEND_URL = os.getenv('FRONTEND_URL', 'http://localhost:3000')
    
    # Room identifiers are 6-digit numbers
    ROOM_ID_MIN = int(os.getenv('ROOM_ID_MIN', 100000))
    ROOM_ID_MAX = int(os.getenv('ROOM_ID_MAX', 999999))
    ROOM_ID_MAX_ATTEMPTS = int(os.getenv('ROOM_ID_MAX_ATTEMPTS', 100))
    
    # Dictionary Lookup Settings
    DICTIONARY_API_ENABLED = os.getenv('DICTIONARY_API_ENABLED', 'True').lower() == 'true'
    DICTIONARY_API_URL = os.getenv(
        'DICTIONARY_API_URL',
        'https://api.dictionaryapi.dev/api/v2/entries/en/{word}'
    )
    DICTIONARY_API_TIMEOUT = float(os.getenv('DICTIONARY_API_TIMEOUT', 5))
    
    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    DICTIONARY_API_ENABLED = False


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
