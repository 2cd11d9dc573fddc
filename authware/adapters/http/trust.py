"""
Certificate trust validator - Issuer allow-list enforced at TLS handshake.

Standard chain-of-trust validation accepts any certificate signed by a root
in the trust store, including a root the user installed to intercept and
rewrite HTTPS traffic (for example to spoof a successful authentication).
This module narrows that: the leaf certificate presented by the server must
also be issued by one of the certificate authorities the Authware backend
actually uses.

The check runs inside the handshake itself. IssuerPinnedContext swaps in a
socket class whose do_handshake() inspects the peer certificate before
returning, so no request bytes are written to a connection that fails it.
Chain validation and hostname checking still run as usual beforehand.
"""

import logging
import ssl
from typing import Protocol

import certifi
from cryptography import x509

from authware.domain.exceptions import TamperedCertificate

logger = logging.getLogger(__name__)

# Substring match against the RFC 4514 issuer string, tolerant of format drift
ALLOWED_ISSUER_MARKERS: tuple[str, ...] = (
    "Cloudflare Inc",
    "Let's Encrypt",
)


class PeerCertificateSource(Protocol):
    """Anything exposing the peer certificate like ssl.SSLSocket does."""

    def getpeercert(self, binary_form: bool = False) -> bytes | None: ...


def is_allowed_issuer(issuer: str) -> bool:
    """Return True if the issuer contains one of the allowed markers."""
    return any(marker in issuer for marker in ALLOWED_ISSUER_MARKERS)


def peer_issuer(sock: PeerCertificateSource) -> str:
    """
    Render the issuer of the leaf peer certificate as an RFC 4514 string.

    Returns an empty string when the peer presented no certificate.
    """
    der_cert = sock.getpeercert(binary_form=True)
    if not der_cert:
        return ""
    cert = x509.load_der_x509_certificate(der_cert)
    return cert.issuer.rfc4514_string()


def verify_peer_certificate(sock: PeerCertificateSource) -> None:
    """
    Check the peer certificate issuer against the allow-list.

    Raises:
        TamperedCertificate: If the issuer is not allowed
    """
    issuer = peer_issuer(sock)
    if not is_allowed_issuer(issuer):
        logger.warning("Rejected server certificate from issuer %r", issuer)
        raise TamperedCertificate(issuer)


class IssuerCheckingSocket(ssl.SSLSocket):
    """SSLSocket that verifies the peer issuer once the handshake completes."""

    def do_handshake(self, block: bool = False) -> None:
        super().do_handshake(block)
        try:
            verify_peer_certificate(self)
        except TamperedCertificate:
            self.close()
            raise


class IssuerPinnedContext(ssl.SSLContext):
    """SSLContext whose sockets enforce the issuer allow-list."""

    sslsocket_class = IssuerCheckingSocket


def create_ssl_context(cafile: str | None = None) -> ssl.SSLContext:
    """
    Create the client SSL context used for every Authware connection.

    Args:
        cafile: CA bundle path, certifi's bundle when None

    Returns:
        Context with CERT_REQUIRED, hostname checking and the issuer check
    """
    context = IssuerPinnedContext(ssl.PROTOCOL_TLS_CLIENT)
    context.minimum_version = ssl.TLSVersion.TLSv1_2
    context.load_verify_locations(cafile=cafile or certifi.where())
    return context
