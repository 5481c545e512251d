from .hashid import HashIdService
from .user import UserService

__all__ = ["HashIdService", "UserService"]
