from fastapi import APIRouter, Body, Depends, Query
from rfc9457 import BadRequestProblem

from zcredits.core.dependencies import get_conversion_service, get_rate_cache
from zcredits.schemas.conversion import DepositQuoteIn, WithdrawalQuoteIn
from zcredits.services.conversion.conversion_service import ConversionService
from zcredits.services.conversion.exceptions import AmountBelowMinimumError
from zcredits.services.conversion.rate_cache import RateCache
from zcredits.services.conversion.types import AmountCheckOut, ConversionOut, RateOut

conversion_api_router = APIRouter(tags=["conversion"])


@conversion_api_router.get("/conversion-rate", response_model=RateOut,
                           description="Latest PKR price of one Z-Credit")
async def get_conversion_rate(rate_cache: RateCache = Depends(get_rate_cache)):
    return RateOut(rate=await rate_cache.get_latest_conversion_rate())


@conversion_api_router.get("/conversion/pkr-to-zc", response_model=ConversionOut)
async def pkr_to_zc(amount: float = Query(..., ge=0),
                    service: ConversionService = Depends(get_conversion_service)):
    return await service.pkr_to_zc(amount)


@conversion_api_router.get("/conversion/zc-to-pkr", response_model=ConversionOut)
async def zc_to_pkr(amount: float = Query(..., ge=0),
                    service: ConversionService = Depends(get_conversion_service)):
    return await service.zc_to_pkr(amount)


@conversion_api_router.get("/conversion/deposit/validate", response_model=AmountCheckOut,
                           description="Check a PKR deposit against the minimum")
async def validate_deposit(amount: float = Query(..., ge=0)):
    return ConversionService.check_deposit(amount)


@conversion_api_router.get("/conversion/withdrawal/validate", response_model=AmountCheckOut,
                           description="Check a Z-Credits withdrawal against the minimum")
async def validate_withdrawal(amount: float = Query(..., ge=0)):
    return ConversionService.check_withdrawal(amount)


@conversion_api_router.post("/conversion/deposit/quote", response_model=ConversionOut)
async def quote_deposit(data: DepositQuoteIn = Body(...),
                        service: ConversionService = Depends(get_conversion_service)):
    try:
        return await service.quote_deposit(data.pkr_amount)
    except AmountBelowMinimumError as e:
        raise BadRequestProblem(detail=e.message)


@conversion_api_router.post("/conversion/withdrawal/quote", response_model=ConversionOut)
async def quote_withdrawal(data: WithdrawalQuoteIn = Body(...),
                           service: ConversionService = Depends(get_conversion_service)):
    try:
        return await service.quote_withdrawal(data.zc_amount)
    except AmountBelowMinimumError as e:
        raise BadRequestProblem(detail=e.message)
