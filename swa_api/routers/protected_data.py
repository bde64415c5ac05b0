from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from swa_api.principal import ClientPrincipal
from swa_api.schemas.identity import ErrorOut, ProtectedDataOut
from swa_api.security.decorators import require_authentication
from swa_api.security.dependencies import get_current_principal
from swa_api.services.user_data import generate_user_data

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["protected"])


@router.get(
    "/protected-data",
    response_model=ProtectedDataOut,
    responses={401: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
@require_authentication()
def protected_data(principal: ClientPrincipal = Depends(get_current_principal)) -> ProtectedDataOut:
    record = generate_user_data(principal.user_id)
    logger.debug("Generated protected data user_id=%s user_number=%s", record.user_id, record.user_number)
    return ProtectedDataOut.from_record(record)
