from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from swa_api.principal import ClientPrincipal
from swa_api.services.user_data import ProtectedData


class ErrorOut(BaseModel):
    error: str
    message: str


class UserInfoOut(BaseModel):
    """
    Public "who am I" shape.

    ``name`` and ``email`` both come from the principal's ``userDetails``; the
    gateway does not send them separately.
    """

    model_config = ConfigDict(populate_by_name=True)

    is_authenticated: bool = Field(alias="isAuthenticated")
    user_id: str | None = Field(default=None, alias="userId")
    name: str | None = None
    email: str | None = None
    provider: str | None = None
    roles: list[str] = Field(default_factory=list)

    @classmethod
    def anonymous(cls) -> UserInfoOut:
        return cls(is_authenticated=False)

    @classmethod
    def from_principal(cls, principal: ClientPrincipal) -> UserInfoOut:
        return cls(
            is_authenticated=True,
            user_id=principal.user_id,
            name=principal.user_details,
            email=principal.user_details,
            provider=principal.identity_provider,
            roles=list(principal.user_roles),
        )


class ProtectedDataOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId")
    message: str
    timestamp: str
    user_number: int = Field(alias="userNumber", ge=0, lt=1000)

    @classmethod
    def from_record(cls, record: ProtectedData) -> ProtectedDataOut:
        return cls.model_validate(record.to_dict())
