"""HTTP adapters - Authware backend over pinned HTTPS."""

from .decoder import decode_response
from .gateway import HttpAuthwareGateway
from .transport import AuthwareTransport
from .trust import create_ssl_context, verify_peer_certificate

__all__ = [
    "AuthwareTransport",
    "HttpAuthwareGateway",
    "create_ssl_context",
    "decode_response",
    "verify_peer_certificate",
]
