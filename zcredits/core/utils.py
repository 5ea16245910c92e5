import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, TypeVar

from fastapi_pagination import Page
from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)

# Leading numeric prefix accepted by JavaScript's parseFloat
_FLOAT_PREFIX = re.compile(r'[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)', re.ASCII)


def parse_float(value: Any) -> float:
    """
    Parse a value the way browser number inputs do.

    Numbers pass through. Text is read up to the end of its longest numeric
    prefix after leading whitespace, so ``"12abc"`` is 12 and ``".5"`` is 0.5.
    Anything else is ``nan``.
    """
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float, Decimal)):
        return float(value)
    if not isinstance(value, str):
        return math.nan

    match = _FLOAT_PREFIX.match(value.lstrip())
    if not match:
        return math.nan
    return float(match.group())


def to_fixed(value: float, digits: int = 2) -> str:
    """Render ``value`` with exactly ``digits`` fractional digits, rounding half away from zero."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if abs(value) >= 1e21:
        return repr(value)
    if value == 0:
        value = 0.0

    with localcontext() as ctx:
        ctx.prec = 64
        fixed = Decimal(value).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
    return f"{fixed:f}"


def create_pagination_page(model: type[T]) -> type[Page[T]]:
    return Page[model]
