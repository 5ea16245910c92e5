from pydantic import BaseModel, Field

from zcredits.enums.currency import AmountKindEnum


class ZcredFormatIn(BaseModel):
    amount: float | str = Field(..., description="Z-Credits as a number or text")
    exchange_rate: float = Field(1, gt=0, description="PKR per Z-Credit")


class ZcredFormatOut(BaseModel):
    formatted: str
    display: str
    pkr: str


class ZcredInputIn(BaseModel):
    value: str = Field(..., description="Raw text typed by the user")


class ZcredInputOut(BaseModel):
    value: str
    is_valid: bool


class FinancialAmountIn(BaseModel):
    amount: float | str
    kind: AmountKindEnum
    minimum: float | None = None
    maximum: float | None = None
