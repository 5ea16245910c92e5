from pydantic import BaseModel, Field


class DepositQuoteIn(BaseModel):
    pkr_amount: float = Field(..., ge=0, description="Deposit in PKR")


class WithdrawalQuoteIn(BaseModel):
    zc_amount: float = Field(..., ge=0, description="Withdrawal in Z-Credits")
