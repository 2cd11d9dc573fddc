"""
HTTP gateway adapter - Implements AuthwareGateway protocol.

Binds each backend endpoint to its request form and response model,
and maps wire models to domain values.
"""

import logging

from authware.api.models import (
    AuthResponse,
    BackingApp,
    DefaultResponse,
    InitForm,
    LoginForm,
    RegisterForm,
)
from authware.domain.exceptions import MalformedResponse
from authware.domain.ports import Api, ApplicationInfo, SessionCredentials

from .transport import AuthwareTransport

logger = logging.getLogger(__name__)


class HttpAuthwareGateway:
    """
    Implements AuthwareGateway protocol via AuthwareTransport.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, transport: AuthwareTransport) -> None:
        self._transport = transport

    def fetch_application(
        self,
        session: SessionCredentials,
        app_id: str,
        *,
        timeout: float | None = None,
    ) -> ApplicationInfo:
        app = self._transport.send(
            "POST", "app", InitForm(id=app_id), BackingApp, session=session, timeout=timeout
        )
        if app is None:
            raise MalformedResponse("empty application response")

        logger.info("Fetched Authware application %s (%s)", app.id or app_id, app.name)

        return ApplicationInfo(
            id=app.id,
            name=app.name,
            version=app.version,
            date_created=app.date_created,
            hwid_checking_enabled=app.is_hwid_checking_enabled,
            apis=tuple(Api(id=api.id, name=api.name) for api in app.apis),
            user_count=app.user_count,
            request_count=app.request_count,
        )

    def authenticate(
        self,
        session: SessionCredentials,
        app_id: str,
        username: str,
        password: str,
        *,
        timeout: float | None = None,
    ) -> str:
        form = LoginForm(app_id=app_id, username=username, password=password)
        auth = self._transport.send(
            "POST", "user/auth", form, AuthResponse, session=session, timeout=timeout
        )
        if auth is None:
            raise MalformedResponse("empty authentication response")
        return auth.auth_token

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
        form = RegisterForm(
            app_id=app_id,
            username=username,
            password=password,
            token=token,
            email_address=email,
        )
        self._transport.send(
            "POST", "user/register", form, DefaultResponse, session=session, timeout=timeout
        )
