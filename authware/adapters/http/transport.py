"""
Request transport - Sends Authware requests over a pinned httpx client.

A single AuthwareTransport wraps one httpx.Client and is shared by every
session. The session is passed per request and supplies the token,
version and hardware ID headers, so several applications can share the
same connection pool.

Client configuration:
- Fixed origin https://api.authware.org/
- TLS through the issuer-pinned context from trust.py
- Environment and system proxies ignored (trust_env=False)
- Redirects not followed
- Connect, read, write and pool timeouts from settings (10s default)
"""

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel

from authware.config.settings import Settings, get_settings
from authware.domain.ports import SessionCredentials

from .decoder import decode_response
from .trust import create_ssl_context

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

BASE_URL = "https://api.authware.org/"

AUTHORIZATION_HEADER = "Authorization"
HARDWARE_ID_HEADER = "X-Authware-Hardware-ID"
APP_VERSION_HEADER = "X-Authware-App-Version"
USER_AGENT_HEADER = "User-Agent"


class AuthwareTransport:
    """
    Builds, sends and decodes requests to the Authware API.

    The underlying httpx.Client is thread-safe and owns connection pooling.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize transport.

        Args:
            settings: SDK settings, cached environment settings when None
            transport: httpx transport override, the pinned HTTPS transport
                when None (tests pass an httpx.MockTransport)
        """
        self._settings = settings or get_settings()
        self._timeout = httpx.Timeout(self._settings.timeout_seconds)

        if transport is None:
            transport = httpx.HTTPTransport(verify=create_ssl_context(), trust_env=False)

        self._client = httpx.Client(
            base_url=BASE_URL,
            transport=transport,
            timeout=self._timeout,
            trust_env=False,
            follow_redirects=False,
        )

    def build_headers(self, session: SessionCredentials) -> dict[str, str]:
        """
        Build the Authware headers for one request.

        The hardware ID provider is called here, once per request.
        """
        headers: dict[str, str] = {}

        if session.auth_token:
            headers[AUTHORIZATION_HEADER] = session.auth_token

        if session.hardware_id_provider is not None:
            headers[HARDWARE_ID_HEADER] = session.hardware_id_provider()

        headers[APP_VERSION_HEADER] = session.version
        headers[USER_AGENT_HEADER] = self._settings.user_agent
        headers["Content-Type"] = "application/json"
        return headers

    def build_request(
        self,
        method: str,
        path: str,
        body: BaseModel,
        *,
        session: SessionCredentials,
        timeout: float | None = None,
    ) -> httpx.Request:
        """Serialize the body and build a request relative to the base URL."""
        return self._client.build_request(
            method,
            path,
            content=body.model_dump_json().encode(),
            headers=self.build_headers(session),
            timeout=self._timeout if timeout is None else httpx.Timeout(timeout),
        )

    def send(
        self,
        method: str,
        path: str,
        body: BaseModel,
        response_model: type[T],
        *,
        session: SessionCredentials,
        timeout: float | None = None,
    ) -> T | None:
        """
        Send a request and decode its response.

        Args:
            method: HTTP method
            path: Path relative to the base URL (e.g. "user/auth")
            body: Request payload, sent as JSON
            response_model: Model that a success response decodes into
            session: Session providing the identity headers
            timeout: Per-request timeout in seconds, settings default when None

        Returns:
            Decoded payload, or None for a success response without a body

        Raises:
            TamperedCertificate: If the server certificate issuer is not allowed
            ApiError: For non-success status codes
            MalformedResponse: If the response body cannot be decoded
            httpx.HTTPError: For network failures
        """
        request = self.build_request(method, path, body, session=session, timeout=timeout)
        response = self._client.send(request)

        logger.debug("%s %s -> %s", method, request.url.path, response.status_code)

        return decode_response(response.status_code, response.content, response_model)

    def close(self) -> None:
        """Close the underlying connection pool."""
        self._client.close()

    def __enter__(self) -> "AuthwareTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
