from fastapi import APIRouter, Body

from zcredits.schemas.zcreds import FinancialAmountIn, ZcredFormatIn, ZcredFormatOut, ZcredInputIn, ZcredInputOut
from zcredits.services.zcreds.formatter import (
    AmountValidation,
    format_pkr_from_zcreds,
    format_zcred_display,
    format_zcreds,
    validate_financial_amount,
    validate_zcred_input,
)

zcreds_api_router = APIRouter(prefix="/zcreds", tags=["zcreds"])


@zcreds_api_router.post("/format", response_model=ZcredFormatOut)
async def format_amount(data: ZcredFormatIn = Body(...)):
    return ZcredFormatOut(
        formatted=format_zcreds(data.amount),
        display=format_zcred_display(data.amount),
        pkr=format_pkr_from_zcreds(data.amount, data.exchange_rate),
    )


@zcreds_api_router.post("/validate", response_model=ZcredInputOut,
                        description="Check text typed into a Z-Credits input")
async def validate_input(data: ZcredInputIn = Body(...)):
    return ZcredInputOut(value=data.value, is_valid=validate_zcred_input(data.value))


@zcreds_api_router.post("/validate-amount", response_model=AmountValidation)
async def validate_amount(data: FinancialAmountIn = Body(...)):
    return validate_financial_amount(data.amount, data.kind, data.minimum, data.maximum)
