"""
Error taxonomy for the article API.

Every error raised while handling a request derives from ArticleAPIError and
carries the HTTP status it maps to at the request boundary.
"""
from typing import Any, Dict


class ArticleAPIError(Exception):
    """Base class for errors recovered at the request boundary."""

    status_code = 500
    message = 'Internal server error'

    def __init__(self, error: Any = None):
        self.error = str(error) if error is not None else self.message
        super().__init__(self.error)

    def to_dict(self) -> Dict[str, str]:
        return {
            "message": self.message,
            "error": self.error
        }


class ArticleNotFoundError(ArticleAPIError):
    """No article document matches the requested name."""

    status_code = 404
    message = 'Article not found'

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No article named '{name}'")


class ValidationError(ArticleAPIError):
    status_code = 400
    message = 'Invalid request'


class StoreConnectionError(ArticleAPIError):
    """The document store could not be reached."""

    status_code = 503
    message = 'Error connecting to db'


class StoreOperationError(ArticleAPIError):
    """The document store rejected or failed a query or update."""

    status_code = 500
    message = 'Error querying db'
