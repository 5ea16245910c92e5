from zcredits.core.logger import logger, log_async_execution_time
from zcredits.enums.currency import CurrencyEnum
from zcredits.services.conversion.converter import (
    MIN_DEPOSIT_PKR,
    MIN_WITHDRAWAL_ZC,
    convert_pkr_to_zc,
    convert_zc_to_pkr,
    format_currency,
    validate_deposit_amount,
    validate_withdrawal_amount,
)
from zcredits.services.conversion.exceptions import AmountBelowMinimumError
from zcredits.services.conversion.rate_cache import RateCache
from zcredits.services.conversion.types import AmountCheckOut, ConversionOut


class ConversionService:
    def __init__(self, rate_cache: RateCache):
        self.rate_cache = rate_cache

    async def pkr_to_zc(self, pkr_amount: float) -> ConversionOut:
        rate = await self.rate_cache.get_latest_conversion_rate()
        zc_amount = convert_pkr_to_zc(pkr_amount, rate)
        return ConversionOut(source_amount=pkr_amount, source_currency=CurrencyEnum.PKR,
                             target_amount=zc_amount, target_currency=CurrencyEnum.ZC,
                             rate=rate, formatted=format_currency(zc_amount, CurrencyEnum.ZC))

    async def zc_to_pkr(self, zc_amount: float) -> ConversionOut:
        rate = await self.rate_cache.get_latest_conversion_rate()
        pkr_amount = convert_zc_to_pkr(zc_amount, rate)
        return ConversionOut(source_amount=zc_amount, source_currency=CurrencyEnum.ZC,
                             target_amount=pkr_amount, target_currency=CurrencyEnum.PKR,
                             rate=rate, formatted=format_currency(pkr_amount, CurrencyEnum.PKR))

    @staticmethod
    def check_deposit(pkr_amount: float) -> AmountCheckOut:
        return AmountCheckOut(amount=pkr_amount, currency=CurrencyEnum.PKR, minimum=MIN_DEPOSIT_PKR,
                              is_valid=validate_deposit_amount(pkr_amount))

    @staticmethod
    def check_withdrawal(zc_amount: float) -> AmountCheckOut:
        return AmountCheckOut(amount=zc_amount, currency=CurrencyEnum.ZC, minimum=MIN_WITHDRAWAL_ZC,
                              is_valid=validate_withdrawal_amount(zc_amount))

    @log_async_execution_time('Deposit quote')
    async def quote_deposit(self, pkr_amount: float) -> ConversionOut:
        if not validate_deposit_amount(pkr_amount):
            logger.warning(f'Deposit of {pkr_amount} PKR is below the minimum',
                           extra={'amount': pkr_amount, 'minimum': MIN_DEPOSIT_PKR})
            raise AmountBelowMinimumError(pkr_amount, MIN_DEPOSIT_PKR, CurrencyEnum.PKR.value)
        return await self.pkr_to_zc(pkr_amount)

    @log_async_execution_time('Withdrawal quote')
    async def quote_withdrawal(self, zc_amount: float) -> ConversionOut:
        if not validate_withdrawal_amount(zc_amount):
            logger.warning(f'Withdrawal of {zc_amount} ZC is below the minimum',
                           extra={'amount': zc_amount, 'minimum': MIN_WITHDRAWAL_ZC})
            raise AmountBelowMinimumError(zc_amount, MIN_WITHDRAWAL_ZC, CurrencyEnum.ZC.value)
        return await self.zc_to_pkr(zc_amount)
