from uuid import UUID

from pydantic import BaseModel, Field


class PasswordResetIn(BaseModel):
    user_id: UUID = Field(..., description="Account to reset")
    new_password: str = Field(..., min_length=6, description="Replacement password")
