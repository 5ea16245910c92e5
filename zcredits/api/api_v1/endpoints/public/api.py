from fastapi import APIRouter

from zcredits.api.api_v1.endpoints.public.conversion import conversion_api_router
from zcredits.api.api_v1.endpoints.public.zcreds import zcreds_api_router

public_v1_router = APIRouter(prefix='/v1/public')

public_v1_router.include_router(conversion_api_router)
public_v1_router.include_router(zcreds_api_router)
