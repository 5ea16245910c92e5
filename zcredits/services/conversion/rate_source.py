from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from zcredits.database.crud.conversion_rate import ConversionRateService
from zcredits.services.conversion.exceptions import ConversionRateNotFoundError
from zcredits.services.conversion.rate_cache import RateFetcher


def database_rate_fetcher(session_factory: async_sessionmaker[AsyncSession]) -> RateFetcher:
    """Build a fetcher reading the newest ``conversion_rate`` row."""

    async def fetch_rate() -> float:
        async with session_factory() as session:
            record = await ConversionRateService(session).get_latest_rate()
        if record is None:
            raise ConversionRateNotFoundError()
        return record.rate

    return fetch_rate
