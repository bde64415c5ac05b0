"""Tests for ClientPrincipal."""

import pytest
from pydantic import ValidationError

from swa_api.principal import ClientPrincipal


def test_principal_from_gateway_json():
    principal = ClientPrincipal.model_validate(
        {
            "identityProvider": "github",
            "userId": "u1",
            "userDetails": "octocat",
            "userRoles": ["anonymous", "authenticated"],
        }
    )
    assert principal.identity_provider == "github"
    assert principal.user_roles == ("anonymous", "authenticated")
    assert principal.to_dict()["userRoles"] == ["anonymous", "authenticated"]


def test_principal_is_immutable():
    principal = ClientPrincipal(identity_provider="github", user_id="u1", user_details="Jane")
    with pytest.raises(ValidationError):
        principal.user_id = "u2"
