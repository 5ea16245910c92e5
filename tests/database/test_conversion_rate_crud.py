"""Tests for zcredits/database/crud/conversion_rate.py and the database rate fetcher."""

from datetime import datetime, timedelta, UTC

import pytest

from zcredits.database.crud.conversion_rate import ConversionRateService
from zcredits.database.schemas.conversion_rate import ConversionRateCreate
from zcredits.services.conversion.exceptions import ConversionRateNotFoundError
from zcredits.services.conversion.rate_source import database_rate_fetcher

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=UTC)


async def seed(db, *rates_by_offset):
    service = ConversionRateService(db)
    for rate, days in rates_by_offset:
        await service.create(ConversionRateCreate(rate=rate, effective_date=NOW + timedelta(days=days)))


class TestConversionRateService:
    async def test_empty_table(self, db):
        assert await ConversionRateService(db).get_latest_rate() is None

    async def test_latest_by_effective_date_not_insert_order(self, db):
        await seed(db, (90.0, 0), (95.0, 10), (92.0, 5))
        latest = await ConversionRateService(db).get_latest_rate()
        assert latest.rate == 95.0

    async def test_create_defaults_effective_date(self, db):
        record = await ConversionRateService(db).create(ConversionRateCreate(rate=88.0))
        assert record.id is not None
        assert record.effective_date is not None
        assert record.created_at is not None

    async def test_get_and_get_all(self, db):
        await seed(db, (90.0, 0), (91.0, 1))
        service = ConversionRateService(db)
        assert len(await service.get_all()) == 2
        first = await service.get(1)
        assert first.rate == 90.0
        assert await service.get(999) is None

    async def test_history_newest_first(self, db):
        await seed(db, (90.0, 0), (95.0, 10), (92.0, 5))
        result = await db.execute(ConversionRateService.get_history_stmt())
        assert [r.rate for r in result.scalars().all()] == [95.0, 92.0, 90.0]


class TestDatabaseRateFetcher:
    async def test_returns_latest_rate(self, db, session_factory):
        await seed(db, (90.0, 0), (97.5, 3))
        fetch_rate = database_rate_fetcher(session_factory)
        assert await fetch_rate() == 97.5

    async def test_raises_when_empty(self, session_factory):
        fetch_rate = database_rate_fetcher(session_factory)
        with pytest.raises(ConversionRateNotFoundError):
            await fetch_rate()
