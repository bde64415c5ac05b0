from __future__ import annotations

from fastapi import APIRouter, Depends

from swa_api.principal import ClientPrincipal
from swa_api.schemas.identity import UserInfoOut
from swa_api.security.dependencies import get_client_principal

router = APIRouter(prefix="/api", tags=["identity"])


@router.get("/user-info", response_model=UserInfoOut)
def user_info(principal: ClientPrincipal | None = Depends(get_client_principal)) -> UserInfoOut:
    # Reports identity state only; anonymous callers still get a 200.
    if principal is None:
        return UserInfoOut.anonymous()
    return UserInfoOut.from_principal(principal)
