from __future__ import annotations

import logging

from fastapi import Request

from swa_api.principal import ClientPrincipal, decode_client_principal
from swa_api.security.config import SecurityConfig

logger = logging.getLogger(__name__)


def extract_principal(request: Request, config: SecurityConfig) -> ClientPrincipal | None:
    """
    Read the gateway-injected principal header, if we are allowed to.

    - Input: `x-ms-client-principal: <base64 json>` (header name from config)
    - Missing, empty or undecodable header -> None (anonymous)
    - Header ignored entirely unless `auth.trust_gateway_header` is set
    """

    header_name = config.auth.principal_header
    raw = request.headers.get(header_name)

    if not config.auth.trust_gateway_header:
        if raw:
            logger.warning(
                "Ignoring %s header: gateway not trusted path=%s method=%s",
                header_name,
                request.url.path,
                request.method,
            )
        return None

    principal = decode_client_principal(raw)
    if principal is None:
        logger.info("Anonymous request path=%s method=%s", request.url.path, request.method)
    else:
        logger.info(
            "Authenticated request user_id=%s provider=%s path=%s method=%s",
            principal.user_id,
            principal.identity_provider,
            request.url.path,
            request.method,
        )
    return principal
