"""
Authware SDK.

Authenticate and register users against Authware, and read application
metadata, over HTTPS pinned to the backend's certificate issuers.

    app = authware.create_application("app-id", "1.0.0")
    app.authenticate("username", "password")
"""

from authware.dependencies import create_application, new_application
from authware.domain import (
    Api,
    ApiError,
    AppAlreadyInitialized,
    AppNotInitialized,
    Application,
    ApplicationInfo,
    AuthwareError,
    BadHardwareIdConfiguration,
    BadIdConfiguration,
    ConfigurationError,
    LifecycleError,
    MalformedResponse,
    TamperedCertificate,
)

__version__ = "0.1.0"

__all__ = [
    "Api",
    "ApiError",
    "AppAlreadyInitialized",
    "AppNotInitialized",
    "Application",
    "ApplicationInfo",
    "AuthwareError",
    "BadHardwareIdConfiguration",
    "BadIdConfiguration",
    "ConfigurationError",
    "LifecycleError",
    "MalformedResponse",
    "TamperedCertificate",
    "create_application",
    "new_application",
]
