from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import AuditMixin, Base, HashIdMixin

# --- CORE IDENTITY ENTITY ---


class User(Base, HashIdMixin, AuditMixin):
    """
    The User Definition Table (T_User).

    The integer primary key never leaves the service: every API payload and URL
    identifies a user by the 'hashid' column instead.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, comment="Unique User ID (internal only).")

    first_name: Mapped[str] = mapped_column(String(100), nullable=False, comment="User's given name.")
    last_name: Mapped[str] = mapped_column(String(100), nullable=False, comment="User's family name.")

    username: Mapped[str] = mapped_column(
        String(50), nullable=False, unique=True, index=True, comment="User's unique public handle."
    )

    about: Mapped[None | str] = mapped_column(Text, nullable=True, comment="Free-form profile description.")

    email: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        unique=True,
        index=True,
        comment="User's unique email address, used as the primary login identifier.",
    )

    email_verified_at: Mapped[None | datetime] = mapped_column(
        DateTime(timezone=True), nullable=True, comment="Time the email address was verified, if ever."
    )

    password_hash: Mapped[str] = mapped_column(
        String(128), nullable=False, comment="Secured hash of the user's password."
    )

    is_active: Mapped[bool] = mapped_column(default=True, comment="Indicates if the user account is active.")

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"
