"""
SDK wiring - Factories that assemble applications with their adapters.

One AuthwareTransport is shared by every application created here, so
all sessions in the process reuse the same pinned connection pool.
"""

from functools import lru_cache

from authware.adapters.http import AuthwareTransport, HttpAuthwareGateway
from authware.config.settings import get_settings
from authware.domain.application import Application
from authware.domain.ports import AuthwareGateway, HardwareIdProvider


@lru_cache
def get_transport() -> AuthwareTransport:
    """Get the shared transport (singleton)."""
    return AuthwareTransport(get_settings())


def get_gateway() -> HttpAuthwareGateway:
    """Create gateway over the shared transport."""
    return HttpAuthwareGateway(get_transport())


def new_application(
    id: str,
    version: str,
    hardware_id_provider: HardwareIdProvider | None = None,
    *,
    gateway: AuthwareGateway | None = None,
) -> Application:
    """
    Create an application without initializing it.

    Call initialize() on the result before any other operation.
    """
    return Application(
        id,
        version,
        gateway=gateway or get_gateway(),
        hardware_id_provider=hardware_id_provider,
    )


def create_application(
    id: str,
    version: str,
    hardware_id_provider: HardwareIdProvider | None = None,
    *,
    gateway: AuthwareGateway | None = None,
    timeout: float | None = None,
) -> Application:
    """
    Create and initialize an application.

    Raises:
        BadIdConfiguration: If id or version is empty
        BadHardwareIdConfiguration: If the backend enforces hardware IDs
            and no hardware_id_provider is given
    """
    return Application.create(
        id,
        version,
        gateway=gateway or get_gateway(),
        hardware_id_provider=hardware_id_provider,
        timeout=timeout,
    )
