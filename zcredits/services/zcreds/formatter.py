"""
Formatting and validation of Z-Credit amounts with two-decimal precision.

Text input is parsed leniently (``"12abc"`` reads as 12) and unparseable
input degrades to zero instead of raising.
"""
import math
import re

from pydantic import BaseModel

from zcredits.core.utils import parse_float, to_fixed
from zcredits.enums.currency import AmountKindEnum

# Partial input such as "12." has to pass while the user is still typing
ZCRED_INPUT_PATTERN = re.compile(r'\d*\.?\d{0,2}', re.ASCII)

MAX_DECIMAL_PLACES = 2


class AmountValidation(BaseModel):
    is_valid: bool
    error: str | None = None


def format_zcreds(amount: float | str) -> str:
    num = parse_float(amount)
    if math.isnan(num):
        return '0.00'
    return to_fixed(num)


def parse_zcreds(value: str) -> float:
    parsed = parse_float(value)
    return 0.0 if math.isnan(parsed) else parsed


def validate_zcred_input(value: str) -> bool:
    if not isinstance(value, str) or not ZCRED_INPUT_PATTERN.fullmatch(value):
        return False
    # NaN compares false, which rejects "" and "."
    return parse_float(value) >= 0


def format_zcred_display(amount: float | str) -> str:
    return f'{format_zcreds(amount)} Z-Credits'


def format_pkr_from_zcreds(zcreds: float | str, exchange_rate: float = 1) -> str:
    num = parse_float(zcreds)
    if math.isnan(num):
        num = 0.0
    return f'PKR {to_fixed(num * exchange_rate)}'


def _decimal_places(amount: float | str) -> int:
    text = amount if isinstance(amount, str) else repr(amount)
    _, _, fraction = text.partition('.')
    return len(fraction)


def _format_limit(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


def validate_financial_amount(amount: float | str,
                              kind: AmountKindEnum,
                              minimum: float | None = None,
                              maximum: float | None = None) -> AmountValidation:
    """
    Check a deposit or withdrawal amount entered by a user.

    Returns the first failing rule as ``error``; ``kind`` only picks the unit
    named in the minimum and maximum messages.
    """
    num = parse_float(amount)

    if math.isnan(num):
        return AmountValidation(is_valid=False, error='Please enter a valid number')

    if num < 0:
        return AmountValidation(is_valid=False, error='Amount cannot be negative')

    if _decimal_places(amount) > MAX_DECIMAL_PLACES:
        return AmountValidation(is_valid=False,
                                error=f'Amount cannot have more than {MAX_DECIMAL_PLACES} decimal places')

    unit = 'Z-Credits' if kind == AmountKindEnum.ZCREDS else 'PKR'
    if minimum is not None and num < minimum:
        return AmountValidation(is_valid=False,
                                error=f'Minimum amount is {_format_limit(minimum)} {unit}')

    if maximum is not None and num > maximum:
        return AmountValidation(is_valid=False,
                                error=f'Maximum amount is {_format_limit(maximum)} {unit}')

    return AmountValidation(is_valid=True)
