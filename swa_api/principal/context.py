"""Immutable principal produced after decoding the gateway identity assertion."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class ClientPrincipal(BaseModel):
    """
    Caller identity for a single request.

    Field names follow the JSON document the gateway encodes into the
    ``x-ms-client-principal`` header; Python attribute names are snake_case.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    identity_provider: StrictStr = Field(alias="identityProvider")
    """Upstream OAuth provider, e.g. ``github``."""

    user_id: StrictStr = Field(alias="userId")
    """Platform-assigned stable id (not the provider's native id)."""

    user_details: StrictStr = Field(alias="userDetails")
    """Login name or email; provider-defined."""

    user_roles: tuple[StrictStr, ...] = Field(default=(), alias="userRoles")
    """Role tags, e.g. ``("anonymous", "authenticated")``. Never None."""

    @field_validator("user_roles", mode="before")
    @classmethod
    def _null_roles_to_empty(cls, value: Any) -> Any:
        return () if value is None else value

    def to_dict(self) -> dict[str, object]:
        """Return the gateway's JSON shape (camelCase keys)."""
        return {
            "identityProvider": self.identity_provider,
            "userId": self.user_id,
            "userDetails": self.user_details,
            "userRoles": list(self.user_roles),
        }
