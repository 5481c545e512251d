from .base import AuditMixin, Base, HashIdMixin, TimestampMixin
from .definitions import User

__all__ = ["AuditMixin", "Base", "HashIdMixin", "TimestampMixin", "User"]
