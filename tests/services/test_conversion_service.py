"""Tests for zcredits/services/conversion/conversion_service.py"""

import pytest

from zcredits.enums.currency import CurrencyEnum
from zcredits.services.conversion.conversion_service import ConversionService
from zcredits.services.conversion.exceptions import AmountBelowMinimumError


@pytest.fixture
def service(rate_cache):
    return ConversionService(rate_cache)


class TestConversions:
    async def test_pkr_to_zc(self, service):
        result = await service.pkr_to_zc(900)
        assert result.target_amount == 10
        assert result.target_currency == CurrencyEnum.ZC
        assert result.rate == 90.0
        assert result.formatted == "10.00 ZC"

    async def test_zc_to_pkr(self, service):
        result = await service.zc_to_pkr(2)
        assert result.target_amount == 180
        assert result.formatted == "PKR 180.00"

    async def test_rate_fetched_once(self, service, rate_fetcher):
        await service.pkr_to_zc(900)
        await service.zc_to_pkr(2)
        assert rate_fetcher.calls == 1


class TestChecks:
    def test_deposit_check(self):
        assert ConversionService.check_deposit(120).is_valid is True
        check = ConversionService.check_deposit(119.99)
        assert check.is_valid is False
        assert check.minimum == 120
        assert check.currency == CurrencyEnum.PKR

    def test_withdrawal_check(self):
        assert ConversionService.check_withdrawal(150).is_valid is True
        assert ConversionService.check_withdrawal(149.99).is_valid is False


class TestQuotes:
    async def test_deposit_quote(self, service):
        result = await service.quote_deposit(180)
        assert result.target_amount == 2

    async def test_deposit_below_minimum(self, service, rate_fetcher):
        with pytest.raises(AmountBelowMinimumError) as exc_info:
            await service.quote_deposit(100)
        assert exc_info.value.minimum == 120
        assert rate_fetcher.calls == 0

    async def test_withdrawal_quote(self, service):
        result = await service.quote_withdrawal(150)
        assert result.target_amount == 13500

    async def test_withdrawal_below_minimum(self, service):
        with pytest.raises(AmountBelowMinimumError) as exc_info:
            await service.quote_withdrawal(149.99)
        assert "150" in exc_info.value.message
