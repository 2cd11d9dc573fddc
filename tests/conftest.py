"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A scripted Authware backend on top of httpx.MockTransport
- Transport, gateway and application wiring against that backend
- Throwaway certificate authorities for TLS issuer tests
"""

import datetime
import ipaddress
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.x509.oid import ExtendedKeyUsageOID, NameOID

from authware.adapters.http import AuthwareTransport, HttpAuthwareGateway
from authware.config.settings import Settings
from authware.domain.application import Application

APP_ID = "0a6f4a3c-5b0e-4d8e-9f7a-2b1c3d4e5f60"
APP_VERSION = "1.0.0"

APP_RESPONSE: dict[str, Any] = {
    "name": "Test App",
    "id": APP_ID,
    "version": APP_VERSION,
    "date_created": "2023-01-15T10:30:00Z",
    "is_hwid_checking_enabled": False,
    "apis": [{"id": "api-1", "name": "Weather"}],
    "user_count": 42,
    "request_count": 1337,
}


class FakeBackend:
    """Scripted Authware backend that records every request it receives."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[str, Callable[[httpx.Request], httpx.Response]] = {}

    def respond(
        self,
        path: str,
        status_code: int = 200,
        json: Any = None,
        content: bytes | None = None,
    ) -> None:
        """Answer requests to path with a fixed response."""

        def route(request: httpx.Request) -> httpx.Response:
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json)

        self._routes[path] = route

    def fail(self, path: str, exc: Exception) -> None:
        """Raise exc for requests to path, like a failing connection would."""

        def route(request: httpx.Request) -> httpx.Response:
            raise exc

        self._routes[path] = route

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self._routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"code": 404, "message": "not found", "errors": []})
        return route(request)

    @property
    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]


@pytest.fixture
def backend() -> FakeBackend:
    """Create an empty scripted backend."""
    return FakeBackend()


@pytest.fixture
def settings() -> Settings:
    """Settings with explicit defaults, independent of the environment."""
    return Settings(timeout_seconds=10.0, user_agent="Authware-Python/0.1.0")


@pytest.fixture
def transport(backend: FakeBackend, settings: Settings) -> AuthwareTransport:
    """Create a transport that talks to the scripted backend."""
    return AuthwareTransport(settings, transport=httpx.MockTransport(backend.handler))


@pytest.fixture
def gateway(transport: AuthwareTransport) -> HttpAuthwareGateway:
    """Create the HTTP gateway over the scripted transport."""
    return HttpAuthwareGateway(transport)


@pytest.fixture
def app(gateway: HttpAuthwareGateway) -> Application:
    """Create an uninitialized application wired to the scripted backend."""
    return Application(APP_ID, APP_VERSION, gateway=gateway)


@pytest.fixture
def initialized_app(app: Application, backend: FakeBackend) -> Application:
    """Create an application that completed initialization."""
    backend.respond("/app", json=APP_RESPONSE)
    app.initialize()
    return app


class LeafCertificate:
    """Server certificate and key issued by a CertificateAuthority."""

    def __init__(self, cert: x509.Certificate, key: ec.EllipticCurvePrivateKey) -> None:
        self.cert = cert
        self.key = key

    @property
    def der(self) -> bytes:
        return self.cert.public_bytes(serialization.Encoding.DER)

    def write_pem(self, directory: Path) -> tuple[str, str]:
        """Write certificate and key PEM files, returning their paths."""
        certfile = directory / "server.pem"
        keyfile = directory / "server.key"
        certfile.write_bytes(self.cert.public_bytes(serialization.Encoding.PEM))
        keyfile.write_bytes(
            self.key.private_bytes(
                serialization.Encoding.PEM,
                serialization.PrivateFormat.PKCS8,
                serialization.NoEncryption(),
            )
        )
        return str(certfile), str(keyfile)


class CertificateAuthority:
    """Throwaway CA whose distinguished name becomes the leaf issuer."""

    def __init__(self, organization: str, common_name: str) -> None:
        self.key = ec.generate_private_key(ec.SECP256R1())
        self.name = x509.Name(
            [
                x509.NameAttribute(NameOID.COUNTRY_NAME, "US"),
                x509.NameAttribute(NameOID.ORGANIZATION_NAME, organization),
                x509.NameAttribute(NameOID.COMMON_NAME, common_name),
            ]
        )
        now = datetime.datetime.now(datetime.timezone.utc)
        self.cert = (
            x509.CertificateBuilder()
            .subject_name(self.name)
            .issuer_name(self.name)
            .public_key(self.key.public_key())
            .serial_number(x509.random_serial_number())
            .not_valid_before(now - datetime.timedelta(days=1))
            .not_valid_after(now + datetime.timedelta(days=30))
            .add_extension(x509.BasicConstraints(ca=True, path_length=None), critical=True)
            .add_extension(
                x509.KeyUsage(
                    digital_signature=True,
                    content_commitment=False,
                    key_encipherment=False,
                    data_encipherment=False,
                    key_agreement=False,
                    key_cert_sign=True,
                    crl_sign=True,
                    encipher_only=False,
                    decipher_only=False,
                ),
                critical=True,
            )
            .add_extension(
                x509.SubjectKeyIdentifier.from_public_key(self.key.public_key()),
                critical=False,
            )
            .sign(self.key, hashes.SHA256())
        )

    def write_pem(self, directory: Path) -> str:
        """Write the CA certificate as a PEM bundle, returning its path."""
        cafile = directory / "ca.pem"
        cafile.write_bytes(self.cert.public_bytes(serialization.Encoding.PEM))
        return str(cafile)

    def issue(self, hostname: str = "127.0.0.1") -> LeafCertificate:
        """Issue a server certificate valid for localhost and 127.0.0.1."""
        key = ec.generate_private_key(ec.SECP256R1())
        now = datetime.datetime.now(datetime.timezone.utc)
        cert = (
            x509.CertificateBuilder()
            .subject_name(x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, hostname)]))
            .issuer_name(self.name)
            .public_key(key.public_key())
            .serial_number(x509.random_serial_number())
            .not_valid_before(now - datetime.timedelta(days=1))
            .not_valid_after(now + datetime.timedelta(days=30))
            .add_extension(
                x509.SubjectAlternativeName(
                    [
                        x509.DNSName("localhost"),
                        x509.IPAddress(ipaddress.ip_address("127.0.0.1")),
                    ]
                ),
                critical=False,
            )
            .add_extension(x509.BasicConstraints(ca=False, path_length=None), critical=True)
            .add_extension(
                x509.ExtendedKeyUsage([ExtendedKeyUsageOID.SERVER_AUTH]),
                critical=False,
            )
            .add_extension(
                x509.AuthorityKeyIdentifier.from_issuer_public_key(self.key.public_key()),
                critical=False,
            )
            .sign(self.key, hashes.SHA256())
        )
        return LeafCertificate(cert, key)


@pytest.fixture(scope="session")
def cloudflare_ca() -> CertificateAuthority:
    return CertificateAuthority("Cloudflare, Inc.", "Cloudflare Inc ECC CA-3")


@pytest.fixture(scope="session")
def letsencrypt_ca() -> CertificateAuthority:
    return CertificateAuthority("Let's Encrypt", "R3")


@pytest.fixture(scope="session")
def interception_ca() -> CertificateAuthority:
    """CA of the kind an HTTPS debugging proxy installs locally."""
    return CertificateAuthority("mitmproxy", "mitmproxy")
