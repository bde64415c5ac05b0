"""
Pytest fixtures for the test suite.

API tests run the real app (lifespan included) through FastAPI's TestClient.
Server exceptions are not re-raised so the 500 handler can be asserted on.
"""
from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from swa_api.main import create_app
from swa_api.principal import ClientPrincipal, encode_client_principal
from swa_api.settings import Settings

REPO_ROOT = Path(__file__).resolve().parents[1]
SECURITY_CONFIG = REPO_ROOT / "config" / "security_config.yaml"


@pytest.fixture
def settings():
    return Settings(security_config_path=str(SECURITY_CONFIG), log_level="DEBUG")


@pytest.fixture
def client(settings):
    """TestClient over an app using the repo's security config."""
    app = create_app(settings=settings)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def principal():
    return ClientPrincipal(
        identity_provider="github",
        user_id="u1",
        user_details="Jane",
        user_roles=("admin",),
    )


@pytest.fixture
def principal_header(principal):
    """Header dict the gateway would inject for ``principal``."""
    return {"x-ms-client-principal": encode_client_principal(principal)}
