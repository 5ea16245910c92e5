"""
PKR / Z-Credits conversion helpers.

``rate`` is always the PKR price of one Z-Credit. Inputs are not validated:
callers pass finite numbers and a positive rate.
"""
from zcredits.core.utils import to_fixed
from zcredits.enums.currency import CurrencyEnum

MIN_DEPOSIT_PKR = 120
MIN_WITHDRAWAL_ZC = 150


def convert_pkr_to_zc(pkr_amount: float, rate: float) -> float:
    return pkr_amount / rate


def convert_zc_to_pkr(zc_amount: float, rate: float) -> float:
    return zc_amount * rate


def format_currency(amount: float, currency: CurrencyEnum = CurrencyEnum.ZC) -> str:
    if currency == CurrencyEnum.PKR:
        return f'PKR {to_fixed(amount)}'
    return f'{to_fixed(amount)} ZC'


def validate_deposit_amount(pkr_amount: float) -> bool:
    return pkr_amount >= MIN_DEPOSIT_PKR


def validate_withdrawal_amount(zc_amount: float) -> bool:
    return zc_amount >= MIN_WITHDRAWAL_ZC
