"""
Authware API request and response models.

Pydantic models for the JSON payloads exchanged with the Authware backend.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, model_validator


class InitForm(BaseModel):
    """Request body for application initialization."""

    id: str


class LoginForm(BaseModel):
    """Request body for user authentication."""

    app_id: str
    username: str
    password: str


class RegisterForm(BaseModel):
    """Request body for creating a new user."""

    app_id: str
    username: str
    password: str
    token: str = Field(..., description="License key granting the user time or a role")
    email_address: str


class ResponseModel(BaseModel):
    """Base for backend responses. A null field takes its default, as if omitted."""

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class ApiModel(ResponseModel):
    """An API attached to an application."""

    id: str = ""
    name: str = ""


class BackingApp(ResponseModel):
    """Application details returned by the initialization endpoint."""

    name: str = ""
    id: str = ""
    version: str = ""
    date_created: datetime | None = None
    is_hwid_checking_enabled: bool = False
    apis: list[ApiModel] = Field(default_factory=list)
    user_count: int = 0
    request_count: int = 0


class AuthResponse(ResponseModel):
    """Successful authentication response."""

    auth_token: str


class DefaultResponse(ResponseModel):
    """
    Default response envelope used across the Authware API.

    `code` is the API's own status code, unrelated to the HTTP status.
    `errors` typically carries validation failures for user input.
    """

    code: int = 0
    message: str = ""
    errors: list[str] = Field(default_factory=list)
