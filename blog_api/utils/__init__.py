"""
Utility modules for configuration and errors.
"""
from .config import Config, ConfigurationError
from .errors import (
    ArticleAPIError,
    ArticleNotFoundError,
    ValidationError,
    StoreConnectionError,
    StoreOperationError,
)

__all__ = [
    'Config',
    'ConfigurationError',
    'ArticleAPIError',
    'ArticleNotFoundError',
    'ValidationError',
    'StoreConnectionError',
    'StoreOperationError',
]
