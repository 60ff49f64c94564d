import logging
import os
from typing import Optional

from dotenv import load_dotenv

from uddf2py.utils.validators import SI, parse_bool

# Load environment variables from .env file
load_dotenv()

class Config:
    """Base configuration class."""

    DEBUG = False
    TESTING = False

    def __init__(self):
        """Read configuration from the environment."""
        # Validated by parse_uddf only when a call falls back to it
        self.DEFAULT_UNIT = os.environ.get('UDDF_DEFAULT_UNIT', SI).strip().lower()
        self.LABEL_REFERENCES = parse_bool(os.environ.get('UDDF_LABEL_REFERENCES'))
        self.LOG_LEVEL = os.environ.get('UDDF_LOG_LEVEL', 'WARNING').upper()

    @property
    def log_level(self) -> int:
        """Numeric logging level, falling back to WARNING for unknown names."""
        level = logging.getLevelName(self.LOG_LEVEL)
        return level if isinstance(level, int) else logging.WARNING

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

    def __init__(self):
        # Tests must not depend on the developer's .env overrides
        self.DEFAULT_UNIT = SI
        self.LABEL_REFERENCES = False
        self.LOG_LEVEL = 'DEBUG'

# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(config_name: Optional[str] = None) -> Config:
    """Build the configuration selected by name or by UDDF_ENV."""
    config_name = config_name or os.environ.get('UDDF_ENV', 'development')
    config_class = config.get(config_name, config['default'])
    return config_class()
