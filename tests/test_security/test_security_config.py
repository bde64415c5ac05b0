"""Tests for loading and matching the YAML security config."""

from pathlib import Path

import pytest

from swa_api.security.config import SecurityConfig, SecurityConfigModel, load_security_config

REPO_CONFIG = Path(__file__).resolve().parents[2] / "config" / "security_config.yaml"


def _config(**security) -> SecurityConfig:
    return SecurityConfig(SecurityConfigModel.model_validate(security))


def test_repo_config_loads():
    config = load_security_config(REPO_CONFIG)
    assert config.auth.principal_header == "x-ms-client-principal"
    assert config.auth.trust_gateway_header is True
    assert config.match("/api/protected-data", "GET").auth_required is True
    assert config.match("/api/user-info", "GET").auth_required is False


def test_missing_security_key_raises(tmp_path):
    path = tmp_path / "security.yaml"
    path.write_text("auth: {}\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Missing top-level 'security' key"):
        load_security_config(path)


def test_empty_file_raises(tmp_path):
    path = tmp_path / "security.yaml"
    path.write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        load_security_config(path)


def test_defaults_do_not_trust_gateway():
    config = _config()
    assert config.auth.trust_gateway_header is False
    assert config.auth.principal_header == "x-ms-client-principal"
    assert config.match("/anything", "GET").auth_required is False


def test_exact_match_before_template():
    config = _config(
        routes=[
            {"path": "/api/items/{id}", "auth_required": True},
            {"path": "/api/items/public", "auth_required": False},
        ]
    )
    assert config.match("/api/items/public", "GET").auth_required is False
    assert config.match("/api/items/42", "GET").auth_required is True


def test_template_does_not_cross_segments():
    config = _config(routes=[{"path": "/api/items/{id}", "auth_required": True}])
    assert config.match("/api/items/1/extra", "GET").auth_required is False


def test_method_mismatch_falls_back_to_default():
    config = _config(
        default={"auth_required": True},
        routes=[{"path": "/api/user-info", "methods": ["get"], "auth_required": False}],
    )
    assert config.match("/api/user-info", "get").auth_required is False
    assert config.match("/api/user-info", "POST").auth_required is True


def test_rule_without_auth_required_inherits_default():
    config = _config(default={"auth_required": True}, routes=[{"path": "/x"}])
    assert config.match("/x", "GET").auth_required is True
