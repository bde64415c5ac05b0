"""
Decode the ``x-ms-client-principal`` header into a ClientPrincipal.

Background for newcomers:
    Azure Static Web Apps handles the GitHub login itself. For every request
    to a linked API it removes any client-supplied ``x-ms-client-principal``
    header and, when the caller is signed in, injects its own:

        x-ms-client-principal: base64(utf-8(json({
            "identityProvider": "github",
            "userId": "...",
            "userDetails": "octocat",
            "userRoles": ["anonymous", "authenticated"],
        })))

    There is **no signature** on this value. It is only trustworthy because the
    gateway strips and overwrites it. Never read it in a deployment where the
    app can be reached without going through that gateway (see
    ``auth.trust_gateway_header`` in the security config).

    A missing header and an undecodable header mean the same thing to callers:
    the request is anonymous.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging

from pydantic import ValidationError

from .context import ClientPrincipal

logger = logging.getLogger(__name__)

CLIENT_PRINCIPAL_HEADER = "x-ms-client-principal"


class DecodeError(Exception):
    """Raised when a present header cannot be decoded. Do not log the header."""

    pass


def _b64decode(value: str) -> bytes:
    # The gateway sends padded standard base64; tolerate stripped padding.
    padded = value + "=" * (-len(value) % 4)
    return base64.b64decode(padded, validate=True)


def parse_client_principal(header_value: str) -> ClientPrincipal:
    """
    Decode a non-empty header value.

    Raises DecodeError on malformed base64, UTF-8, JSON, or a JSON document
    that does not have the principal's shape.
    """
    try:
        raw = _b64decode(header_value.strip())
    except (binascii.Error, ValueError) as e:
        raise DecodeError("Invalid principal: base64") from e

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError("Invalid principal: utf-8") from e

    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError, over-long integer literals, and nesting past the recursion limit
        raise DecodeError("Invalid principal: json") from e

    if not isinstance(data, dict):
        raise DecodeError("Invalid principal: expected a JSON object")

    try:
        return ClientPrincipal.model_validate(data)
    except ValidationError as e:
        raise DecodeError("Invalid principal: fields") from e


def decode_client_principal(header_value: str | None) -> ClientPrincipal | None:
    """
    Return the decoded principal, or None for anonymous traffic.

    Decode failures are swallowed here and reported as None so that a garbled
    header is handled exactly like a missing one.
    """
    if header_value is None or not header_value.strip():
        logger.debug("No client principal header")
        return None

    try:
        return parse_client_principal(header_value)
    except DecodeError as e:
        cause = type(e.__cause__).__name__ if e.__cause__ else "DecodeError"
        logger.info("%s (%s)", e, cause)
        return None


def encode_client_principal(principal: ClientPrincipal) -> str:
    """Build a header value the way the gateway does (local dev and tests)."""
    payload = json.dumps(principal.to_dict(), ensure_ascii=False)
    return base64.b64encode(payload.encode("utf-8")).decode("ascii")
