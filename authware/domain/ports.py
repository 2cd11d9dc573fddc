"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure, and the immutable values that cross them.
Adapters implement these protocols.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol

# Zero-argument callable returning a stable per-device identifier.
HardwareIdProvider = Callable[[], str]


@dataclass(frozen=True)
class Api:
    """An API registered on an Authware application."""

    id: str
    name: str


@dataclass(frozen=True)
class ApplicationInfo:
    """
    Application metadata as reported by the Authware backend.

    Only produced from a successful initialization response.
    """

    id: str
    name: str
    version: str
    date_created: datetime | None
    hwid_checking_enabled: bool
    apis: tuple[Api, ...] = field(default_factory=tuple)
    user_count: int = 0
    request_count: int = 0


class SessionCredentials(Protocol):
    """Identity fields read from a session when building each request."""

    auth_token: str
    version: str
    hardware_id_provider: HardwareIdProvider | None


class AuthwareGateway(Protocol):
    """Port interface for the Authware backend endpoints."""

    def fetch_application(
        self,
        session: SessionCredentials,
        app_id: str,
        *,
        timeout: float | None = None,
    ) -> ApplicationInfo:
        """
        Fetch application metadata.

        Args:
            session: Session whose headers are attached to the request
            app_id: Application identifier as shown on Authware
            timeout: Per-request timeout in seconds, default when None

        Returns:
            ApplicationInfo for the application
        """
        ...

    def authenticate(
        self,
        session: SessionCredentials,
        app_id: str,
        username: str,
        password: str,
        *,
        timeout: float | None = None,
    ) -> str:
        """
        Authenticate a user.

        Returns:
            Authorization token for the user
        """
        ...

    def register(
        self,
        session: SessionCredentials,
        app_id: str,
        username: str,
        password: str,
        email: str,
        token: str,
        *,
        timeout: float | None = None,
    ) -> None:
        """Create a new user on the application."""
        ...
