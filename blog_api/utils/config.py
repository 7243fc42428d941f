"""
Configuration management for the blog article API.
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == '':
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"Environment variable {name} must be an integer, got {value!r}")


class Config:
    """Configuration class for application settings."""

    # MongoDB Configuration
    MONGODB_URI = os.getenv('MONGODB_URI', 'mongodb://localhost:27017/')
    MONGODB_DB = os.getenv('MONGODB_DB', 'my-blog')
    MONGODB_MAX_POOL_SIZE = _int_env('MONGODB_MAX_POOL_SIZE', 50)
    MONGODB_MIN_POOL_SIZE = _int_env('MONGODB_MIN_POOL_SIZE', 0)
    MONGODB_TIMEOUT_MS = _int_env('MONGODB_TIMEOUT_MS', 5000)

    # Front-end bundle
    STATIC_FOLDER = os.getenv(
        'STATIC_FOLDER',
        os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))), 'build')
    )

    # Server Configuration
    HOST = os.getenv('HOST', '0.0.0.0')
    PORT = _int_env('PORT', 8000)
    DEBUG = os.getenv('DEBUG', 'false').lower() == 'true'

    # Logging Configuration
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
    LOG_FILE = os.getenv('LOG_FILE') or None

    @classmethod
    def validate(cls):
        """
        Validate that the configuration values are usable.

        Raises:
            ConfigurationError: If required configuration is missing or invalid
        """
        required_vars = {
            'MONGODB_URI': cls.MONGODB_URI,
            'MONGODB_DB': cls.MONGODB_DB,
            'STATIC_FOLDER': cls.STATIC_FOLDER,
        }

        missing = [var for var, value in required_vars.items() if not value]

        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}. "
                f"Please check your .env file."
            )

        if not 0 < cls.PORT < 65536:
            raise ConfigurationError(f"PORT must be between 1 and 65535, got {cls.PORT}")

        if cls.MONGODB_MIN_POOL_SIZE > cls.MONGODB_MAX_POOL_SIZE:
            raise ConfigurationError(
                "MONGODB_MIN_POOL_SIZE cannot be larger than MONGODB_MAX_POOL_SIZE"
            )

    @classmethod
    def as_flask_config(cls) -> dict:
        """Settings consumed by the application factory."""
        return {
            'MONGODB_URI': cls.MONGODB_URI,
            'DATABASE_NAME': cls.MONGODB_DB,
            'MONGODB_MAX_POOL_SIZE': cls.MONGODB_MAX_POOL_SIZE,
            'MONGODB_MIN_POOL_SIZE': cls.MONGODB_MIN_POOL_SIZE,
            'MONGODB_TIMEOUT_MS': cls.MONGODB_TIMEOUT_MS,
            'STATIC_FOLDER': cls.STATIC_FOLDER,
        }
