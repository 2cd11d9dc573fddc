"""
Domain layer - Pure SDK logic with zero framework imports.

This package contains the Authware application session and its error
taxonomy. It defines its own port interfaces for the backend, so the
HTTP adapter can be swapped or faked in tests.
"""

from .application import Application
from .exceptions import (
    ApiError,
    AppAlreadyInitialized,
    AppNotInitialized,
    AuthwareError,
    BadHardwareIdConfiguration,
    BadIdConfiguration,
    ConfigurationError,
    LifecycleError,
    MalformedResponse,
    TamperedCertificate,
)
from .ports import Api, ApplicationInfo, AuthwareGateway, HardwareIdProvider, SessionCredentials

__all__ = [
    "Api",
    "ApiError",
    "AppAlreadyInitialized",
    "AppNotInitialized",
    "Application",
    "ApplicationInfo",
    "AuthwareError",
    "AuthwareGateway",
    "BadHardwareIdConfiguration",
    "BadIdConfiguration",
    "ConfigurationError",
    "HardwareIdProvider",
    "LifecycleError",
    "MalformedResponse",
    "SessionCredentials",
    "TamperedCertificate",
]
