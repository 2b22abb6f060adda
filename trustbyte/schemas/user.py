from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class RegisterRequest(BaseModel):
    # all optional so a missing field gets the "required" message, not a schema error
    name: Optional[str] = Field(None, min_length=2, max_length=64)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=6)

    @field_validator("name", "email", "password", mode="before")
    @classmethod
    def blank_is_missing(cls, value):
        return _blank_to_none(value)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() if value else value


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

    @field_validator("email", "password", mode="before")
    @classmethod
    def blank_is_missing(cls, value):
        return _blank_to_none(value)


class LoginResponse(BaseModel):
    success: bool = True
    message: str = "User logged in successfully"
    jwtToken: str
    email: str
    name: str
