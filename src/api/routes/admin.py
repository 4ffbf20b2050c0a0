"""
Admin API Routes - Maintenance Endpoints

Authentication is via Admin API Key, not user JWTs.
"""

from fastapi import APIRouter, Depends, status

from src.api.error import to_http_error
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.admin import (
    SweepExpiredSessionsResponse,
    SweepExpiredSessionsUseCase,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/sessions/sweep",
    status_code=status.HTTP_200_OK,
    response_model=SweepExpiredSessionsResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def sweep_expired_sessions(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Sweep Expired Sessions

    Hard-deletes every session past its expiry, revoked or not.
    Meant to be called periodically by a scheduler.

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
    """
    use_case = SweepExpiredSessionsUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        raise to_http_error(result.error)

    return result.value
