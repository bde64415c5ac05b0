"""
Decode the identity assertion injected by the Static Web Apps gateway.

This package has no dependency on other app packages (swa_api.security, etc.).
Use decode_client_principal() with the raw header value to get a ClientPrincipal.
"""

from .context import ClientPrincipal
from .decoder import (
    CLIENT_PRINCIPAL_HEADER,
    DecodeError,
    decode_client_principal,
    encode_client_principal,
    parse_client_principal,
)

__all__ = [
    "CLIENT_PRINCIPAL_HEADER",
    "ClientPrincipal",
    "DecodeError",
    "decode_client_principal",
    "encode_client_principal",
    "parse_client_principal",
]
