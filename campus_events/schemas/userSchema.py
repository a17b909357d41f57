from typing import Optional

from pydantic import EmailStr, Field, ValidationInfo, field_validator

from campus_events.constants.constants import MAX_PASSWORD_BYTES, UserRole
from campus_events.schemas.base import FROZEN, CamelModel


def normalize_email(email: str) -> str:
    """Normalize email by converting to lowercase and stripping whitespace."""
    return email.strip().lower()


class UserBase(CamelModel):
    email: EmailStr
    name: str = Field(..., min_length=1, max_length=255)
    role: UserRole = UserRole.student

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return normalize_email(v)


class UserCreate(UserBase):
    password: str = Field(..., min_length=8)
    confirm_password: str

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return v

    @field_validator("confirm_password")
    @classmethod
    def passwords_match(cls, v: str, info: ValidationInfo) -> str:
        password: Optional[str] = info.data.get("password")
        if password is not None and v != password:
            raise ValueError("Passwords do not match")
        return v


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return normalize_email(v)


class UserResponse(UserBase):
    id: int


class User(UserResponse):
    """Stored user row. Never returned directly."""

    model_config = FROZEN

    password_hash: str
