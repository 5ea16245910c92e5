import asyncio
import sys
from pathlib import Path

import pandas as pd
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

# Ensure project root is on sys.path so that 'zcredits' package can be imported
CURRENT_FILE = Path(__file__).resolve()
PROJECT_ROOT = CURRENT_FILE.parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from zcredits.core.logger import logger, setup_logging
from zcredits.database.crud.conversion_rate import ConversionRateService
from zcredits.database.db.session import AsyncSessionLocal, init_models
from zcredits.database.schemas.conversion_rate import ConversionRateCreate

DEFAULT_CSV = CURRENT_FILE.parent / 'src' / 'conversion_rate.csv'


def load_rates(path: Path) -> list[ConversionRateCreate]:
    """Read ``rate,effective_date`` rows, skipping rows without a positive rate."""
    df = pd.read_csv(path)
    df['rate'] = pd.to_numeric(df['rate'], errors='coerce')
    df['effective_date'] = pd.to_datetime(df['effective_date'], utc=True, errors='coerce')

    invalid = df['rate'].isna() | (df['rate'] <= 0) | df['effective_date'].isna()
    if invalid.any():
        logger.warning(f'Skipping {int(invalid.sum())} invalid rows from {path}')
    df = df[~invalid]

    return [
        ConversionRateCreate(rate=float(row.rate), effective_date=row.effective_date.to_pydatetime())
        for row in df.itertuples(index=False)
    ]


async def seed_conversion_rates(path: Path = DEFAULT_CSV,
                                session_factory: async_sessionmaker[AsyncSession] = AsyncSessionLocal) -> int:
    rates = load_rates(path)
    async with session_factory() as db:
        service = ConversionRateService(db)
        for rate in rates:
            await service.create(rate)
    logger.info(f'Seeded {len(rates)} conversion rates from {path}')
    return len(rates)


async def main():
    setup_logging()
    await init_models()
    await seed_conversion_rates(Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_CSV)


if __name__ == '__main__':
    asyncio.run(main())
