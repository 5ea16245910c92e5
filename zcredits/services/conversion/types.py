from pydantic import BaseModel

from zcredits.enums.currency import CurrencyEnum


class RateOut(BaseModel):
    rate: float


class ConversionOut(BaseModel):
    source_amount: float
    source_currency: CurrencyEnum
    target_amount: float
    target_currency: CurrencyEnum
    rate: float
    formatted: str


class AmountCheckOut(BaseModel):
    amount: float
    currency: CurrencyEnum
    minimum: float
    is_valid: bool
