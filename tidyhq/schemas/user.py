"""User schemas used for registration, login and responses."""

from pydantic import EmailStr, field_validator

from tidyhq.core.security import password_policy_violations
from tidyhq.schemas.common import CamelModel


class RegisterRequest(CamelModel):
    """Public registration payload. Any `role` sent by the caller is ignored."""

    username: str
    email: EmailStr
    first_name: str
    last_name: str
    password: str

    @field_validator("username", "first_name", "last_name")
    @classmethod
    def _not_blank(cls, value: str, info) -> str:
        value = value.strip()
        if not value:
            label = info.field_name.replace("_", " ").capitalize()
            raise ValueError(f"{label} is required")
        return value

    @field_validator("password")
    @classmethod
    def _password_policy(cls, value: str) -> str:
        problems = password_policy_violations(value)
        if problems:
            raise ValueError("; ".join(problems))
        return value


class LoginRequest(CamelModel):
    username: str
    password: str


class UserRead(CamelModel):
    id: str
    username: str
    email: str
    first_name: str
    last_name: str
    role: str


class LogoutResponse(CamelModel):
    message: str


