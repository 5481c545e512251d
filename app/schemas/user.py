"""
Pydantic schemas defining the contract for user registration and lookup
across the Presentation (API) and Service Layers.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Self

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.core.security.password import BCRYPT_MAX_BYTES

if TYPE_CHECKING:
    from app.models.definitions import User

# --- Input Schemas (Requests / Commands) ---


class RegisterUserRequest(BaseModel):
    """
    Schema for the registration command. Validated by FastAPI before the
    Service Layer sees it.
    """

    first_name: str = Field(..., min_length=1, max_length=100, description="User's given name")
    last_name: str = Field(..., min_length=1, max_length=100, description="User's family name")
    username: str = Field(..., min_length=2, max_length=50, description="Unique public handle")
    email: EmailStr = Field(..., description="User's unique email address")

    # Optional in the schema so the service can report a missing password as a business rule.
    password: str | None = Field(
        default=None, min_length=8, description="User's password (min 8 characters, will be hashed)"
    )

    about: str | None = Field(default=None, max_length=2000, description="Free-form profile description")

    @field_validator("password")
    @classmethod
    def _check_password_bytes(cls, value: str | None) -> str | None:
        if value is not None and len(value.encode()) > BCRYPT_MAX_BYTES:
            raise ValueError(f"Password must not be longer than {BCRYPT_MAX_BYTES} bytes.")
        return value


# --- Output Schema (Response) ---


class UserResponse(BaseModel):
    """
    Public representation of a user. 'id' carries the hashid; the integer
    primary key is never part of the response.
    """

    id: str = Field(..., description="Opaque public user identifier (hashid)")
    first_name: str = Field(..., description="User's given name")
    last_name: str = Field(..., description="User's family name")
    name: str = Field(..., description="User's full name")
    username: str = Field(..., description="User's public handle")
    email: str = Field(..., description="User's email address")
    about: str | None = Field(default=None, description="Free-form profile description")
    email_verified_at: datetime | None = Field(default=None, description="Time the email was verified")

    created_at: datetime = Field(..., description="Date and time of user creation")
    updated_at: datetime = Field(..., description="Date and time of last update")

    @classmethod
    def from_user(cls, user: "User", hashid: str) -> Self:
        data = {field: getattr(user, field) for field in cls.model_fields if field != "id"}
        return cls(id=hashid, **data)
