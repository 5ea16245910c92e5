import math
import time
from typing import Awaitable, Callable

from zcredits.core.logger import logger
from zcredits.services.conversion.exceptions import InvalidConversionRateError

RateFetcher = Callable[[], Awaitable[float]]
Clock = Callable[[], float]

DEFAULT_TTL_SECONDS = 5 * 60
DEFAULT_FALLBACK_RATE = 1.0


class RateCache:
    """
    Holds the newest PKR-per-ZC conversion rate for ``ttl_seconds``.

    A failed fetch is logged and answered with ``fallback_rate``; the cache is
    left untouched so the following call fetches again. There is no lock:
    concurrent misses each fetch and the last successful write wins.
    """

    def __init__(self,
                 fetch_rate: RateFetcher,
                 ttl_seconds: float = DEFAULT_TTL_SECONDS,
                 fallback_rate: float = DEFAULT_FALLBACK_RATE,
                 clock: Clock = time.monotonic):
        self._fetch_rate = fetch_rate
        self.ttl_seconds = ttl_seconds
        self.fallback_rate = fallback_rate
        self._clock = clock
        self._value: float | None = None
        self._fetched_at: float | None = None

    @property
    def cached_rate(self) -> float | None:
        return self._value

    @property
    def fetched_at(self) -> float | None:
        return self._fetched_at

    def is_fresh(self) -> bool:
        if self._value is None or self._fetched_at is None:
            return False
        return self._clock() - self._fetched_at < self.ttl_seconds

    async def get_latest_conversion_rate(self) -> float:
        if self.is_fresh():
            return self._value

        try:
            rate = await self._fetch_rate()
            if isinstance(rate, bool) or not isinstance(rate, (int, float)) \
                    or not math.isfinite(rate) or rate <= 0:
                raise InvalidConversionRateError(rate)
        except Exception as e:
            logger.error('Error fetching conversion rate, falling back',
                         exc_info=e, extra={'fallback_rate': self.fallback_rate})
            return self.fallback_rate

        self._value = float(rate)
        self._fetched_at = self._clock()
        logger.debug('Conversion rate refreshed', extra={'rate': self._value})
        return self._value
