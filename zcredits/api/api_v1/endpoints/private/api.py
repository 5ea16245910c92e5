from fastapi import APIRouter, Depends

from zcredits.api.api_v1.endpoints.private.conversion_rate import conversion_rate_router
from zcredits.api.api_v1.endpoints.private.password_reset import password_reset_router
from zcredits.core.security import require_admin_api_key

private_v1_router = APIRouter(prefix='/private/v1', dependencies=[Depends(require_admin_api_key)])

private_v1_router.include_router(conversion_rate_router)
private_v1_router.include_router(password_reset_router)
