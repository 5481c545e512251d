from .config import ConfigurationError
from .http import AppHTTPException, ConflictError, NotFoundError, ValidationError

__all__ = ["AppHTTPException", "ConfigurationError", "ConflictError", "NotFoundError", "ValidationError"]
