import asyncio
import random
import logging
from typing import Awaitable, Callable

from jobquery.config.settings import settings

logger = logging.getLogger(__name__)

SleepFunc = Callable[[float], Awaitable[None]]


async def random_delay(
    min_seconds: float = settings.PACING_MIN_DELAY,
    max_seconds: float = settings.PACING_MAX_DELAY,
    sleep: SleepFunc = asyncio.sleep,
) -> float:
    """
    Wait a uniformly random time between min_seconds and max_seconds.

    Used between successful page fetches so requests are not perfectly
    periodic. Returns the delay that was applied.

    Example:
        await random_delay(2.0, 3.0)  # Wait 2-3 seconds
    """
    delay = max(0.0, random.uniform(min_seconds, max_seconds))
    logger.debug(f"Pacing delay {delay:.2f}s")
    await sleep(delay)
    return delay


def backoff_seconds(attempt: int) -> float:
    """Exponential backoff: 2 ** attempt seconds for the given failed attempt."""
    return float(2**attempt)


async def backoff(attempt: int, sleep: SleepFunc = asyncio.sleep) -> float:
    delay = backoff_seconds(attempt)
    logger.warning(f"Backing off {delay:.0f}s before retry (attempt {attempt})")
    await sleep(delay)
    return delay
