"""
Domain exceptions - Semantic error types for the Authware SDK.

This module defines the error taxonomy raised to callers. Network errors
raised by the HTTP client library are not wrapped and propagate as-is.
"""


class AuthwareError(Exception):
    """Base class for Authware SDK errors."""

    pass


class ConfigurationError(AuthwareError):
    """Application was set up with missing or invalid local configuration."""

    pass


class BadIdConfiguration(ConfigurationError):
    """Application ID or version is empty."""

    def __init__(self) -> None:
        super().__init__(
            "invalid application configuration, ensure you set the ID and version "
            "before calling initialize"
        )


class BadHardwareIdConfiguration(ConfigurationError):
    """Backend enforces hardware IDs but no hardware ID provider is set."""

    def __init__(self) -> None:
        super().__init__(
            "invalid application configuration, ensure that you set the "
            "hardware_id_provider to a valid hardware ID fetching function. if you "
            "do not want to validate hardware IDs then you need to disable the "
            "functionality on the authware dashboard"
        )


class LifecycleError(AuthwareError):
    """Operation called in the wrong initialization state."""

    pass


class AppNotInitialized(LifecycleError):
    """Operation requires a successfully initialized application."""

    def __init__(self) -> None:
        super().__init__(
            "the application must be initialized before calling this function, "
            "you can initialize it by calling initialize"
        )


class AppAlreadyInitialized(LifecycleError):
    """initialize() was called on an application that is already initialized."""

    def __init__(self) -> None:
        super().__init__("application already initialized")


class TamperedCertificate(AuthwareError):
    """
    Server certificate was not issued by an allowed certificate authority.

    Typically raised when HTTPS traffic is being intercepted by a debugging
    proxy, or when the SDK is out of date with the backend's issuers.
    """

    def __init__(self, issuer: str = "") -> None:
        super().__init__(
            "server certificate validation failed, tampering with https "
            "certificates may have occurred"
        )
        self.issuer = issuer


class ApiError(AuthwareError):
    """Backend answered with a non-success status code."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        code: int = 0,
        errors: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.errors = list(errors or [])


class MalformedResponse(AuthwareError):
    """Response body could not be decoded into the expected shape."""

    pass
