from fastapi import Request

from zcredits.services.admin.password_reset import PasswordResetService
from zcredits.services.conversion.conversion_service import ConversionService
from zcredits.services.conversion.rate_cache import RateCache


def get_rate_cache(request: Request) -> RateCache:
    return request.app.state.rate_cache


def get_conversion_service(request: Request) -> ConversionService:
    return ConversionService(get_rate_cache(request))


def get_password_reset_service(request: Request) -> PasswordResetService:
    return request.app.state.password_reset_service
