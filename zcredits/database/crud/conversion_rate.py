from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from zcredits.database.crud.base import BaseService
from zcredits.database.models import ConversionRate
from zcredits.database.schemas.conversion_rate import ConversionRateCreate, ConversionRateUpdate


class ConversionRateService(BaseService[ConversionRate, ConversionRateCreate, ConversionRateUpdate]):
    def __init__(self, session: AsyncSession):
        super().__init__(ConversionRate, session)

    async def get_latest_rate(self) -> ConversionRate | None:
        result = await self.session.execute(
            select(ConversionRate).order_by(ConversionRate.effective_date.desc()).limit(1)
        )
        return result.scalar_one_or_none()

    @staticmethod
    def get_history_stmt() -> Select:
        return select(ConversionRate).order_by(ConversionRate.effective_date.desc(), ConversionRate.id.desc())
