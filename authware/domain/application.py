"""
Application session - The caller-owned Authware application identity.

An Application holds the identity fields attached to every request
(ID, version, auth token, hardware ID provider) and the metadata
populated from the backend on initialization.

Lifecycle
=========

    created --initialize()--> initialized

- initialize() succeeds at most once per Application.
- authenticate() and register() require an initialized Application.
- A failed initialize() commits nothing: metadata stays unset and the
  Application may be initialized again after the cause is fixed.

Session mutation (the initialized flag and the auth token) happens under
a per-instance lock. The lock is held across the initialization request,
so concurrent initialize() calls result in exactly one backend request.
"""

import threading
from datetime import datetime

from .exceptions import (
    AppAlreadyInitialized,
    AppNotInitialized,
    BadHardwareIdConfiguration,
    BadIdConfiguration,
)
from .ports import Api, ApplicationInfo, AuthwareGateway, HardwareIdProvider


class Application:
    """
    Domain service for one Authware application.

    Satisfies the SessionCredentials protocol structurally, so it is
    passed straight to the gateway as the request header source.
    """

    def __init__(
        self,
        id: str,
        version: str,
        gateway: AuthwareGateway,
        hardware_id_provider: HardwareIdProvider | None = None,
    ) -> None:
        self.id = id
        self.version = version
        self.hardware_id_provider = hardware_id_provider
        self.auth_token = ""

        self.name: str | None = None
        self.date_created: datetime | None = None
        self.hwid_checking_enabled: bool | None = None
        self.apis: tuple[Api, ...] | None = None
        self.user_count: int | None = None
        self.request_count: int | None = None

        self._gateway = gateway
        self._initialized = False
        self._lock = threading.Lock()

    @classmethod
    def create(
        cls,
        id: str,
        version: str,
        gateway: AuthwareGateway,
        hardware_id_provider: HardwareIdProvider | None = None,
        *,
        timeout: float | None = None,
    ) -> "Application":
        """Construct an Application and initialize it in one call."""
        app = cls(id, version, gateway, hardware_id_provider)
        app.initialize(timeout=timeout)
        return app

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self, *, timeout: float | None = None) -> None:
        """
        Perform one-time initialization against the backend.

        Args:
            timeout: Per-request timeout in seconds, default when None

        Raises:
            AppAlreadyInitialized: If already initialized (no request is made)
            BadIdConfiguration: If id or version is empty (no request is made)
            BadHardwareIdConfiguration: If the backend enforces hardware IDs
                and no hardware_id_provider is set
        """
        with self._lock:
            if self._initialized:
                raise AppAlreadyInitialized()

            if not self.id or not self.version:
                raise BadIdConfiguration()

            info = self._gateway.fetch_application(self, self.id, timeout=timeout)

            # Checked before any field is committed
            if info.hwid_checking_enabled and self.hardware_id_provider is None:
                raise BadHardwareIdConfiguration()

            self._apply(info)
            self._initialized = True

    def authenticate(self, username: str, password: str, *, timeout: float | None = None) -> None:
        """
        Authenticate a user and keep their token for later requests.

        The token is only replaced on success.

        Raises:
            AppNotInitialized: If initialize() has not succeeded
        """
        self._require_initialized()

        token = self._gateway.authenticate(self, self.id, username, password, timeout=timeout)

        with self._lock:
            self.auth_token = token

    def register(
        self,
        username: str,
        password: str,
        email: str,
        token: str,
        *,
        timeout: float | None = None,
    ) -> None:
        """
        Create a new user. The new user is not signed in.

        Args:
            username: Name to identify the new user by
            password: Password for the new account
            email: Contact address for the user
            token: License key granting the user time or a role

        Raises:
            AppNotInitialized: If initialize() has not succeeded
        """
        self._require_initialized()
        self._gateway.register(self, self.id, username, password, email, token, timeout=timeout)

    def sign_out(self) -> None:
        """Forget the stored auth token."""
        with self._lock:
            self.auth_token = ""

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise AppNotInitialized()

    def _apply(self, info: ApplicationInfo) -> None:
        self.name = info.name
        self.date_created = info.date_created
        self.hwid_checking_enabled = info.hwid_checking_enabled
        self.apis = info.apis
        self.user_count = info.user_count
        self.request_count = info.request_count
