from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ConversionRateCreate(BaseModel):
    rate: float = Field(..., gt=0)
    effective_date: datetime | None = None


class ConversionRateUpdate(BaseModel):
    rate: float | None = Field(None, gt=0)
    effective_date: datetime | None = None


class ConversionRateRead(BaseModel):
    id: int
    rate: float
    effective_date: datetime
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
