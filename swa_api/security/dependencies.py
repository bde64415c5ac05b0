from __future__ import annotations

from fastapi import Depends, HTTPException, Request, status

from swa_api.principal import ClientPrincipal
from swa_api.security.auth import extract_principal
from swa_api.security.config import SecurityConfig

UNAUTHORIZED_MESSAGE = "Authentication is required to access protected data"


def get_security_config(request: Request) -> SecurityConfig:
    config = getattr(request.app.state, "security_config", None)
    if config is None:
        raise RuntimeError("Security config not loaded. Did app startup run?")
    return config


def get_client_principal(request: Request) -> ClientPrincipal | None:
    """Principal for this request, or None when anonymous."""
    return getattr(request.state, "principal", None)


def get_current_principal(request: Request) -> ClientPrincipal:
    principal = get_client_principal(request)
    if principal is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=UNAUTHORIZED_MESSAGE)
    return principal


def enforce_security(
    request: Request,
    config: SecurityConfig = Depends(get_security_config),
) -> None:
    """
    Global security dependency (configuration-driven).

    Decodes the principal once per request and stores it on
    ``request.state.principal``. Routes whose rule (or decorator metadata)
    requires authentication get a 401 when no principal decoded. Roles are
    passed through untouched; nothing here enforces them.
    """

    rule = config.match(request.url.path, request.method.upper())

    endpoint = request.scope.get("endpoint")
    decorator_auth = bool(getattr(endpoint, "__security_auth_required__", False)) if endpoint else False

    principal = extract_principal(request, config)
    request.state.principal = principal

    if (rule.auth_required or decorator_auth) and principal is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=UNAUTHORIZED_MESSAGE)
