"""Simulated network latency for the mock data layer.

All waiting is cooperative: the only blocking primitive is asyncio.sleep().
"""

import asyncio
import logging
import random

logger = logging.getLogger(__name__)


async def simulate_latency(
    min_s: float,
    max_s: float | None = None,
    rng: random.Random | None = None,
) -> float:
    """Sleep for a duration between min_s and max_s seconds.

    With no max_s the delay is fixed at min_s. Negative values are clamped
    to zero and max_s is raised to min_s when it is smaller.

    Returns the actual sleep duration (useful for testing).
    """
    floor = max(min_s, 0.0)
    ceiling = floor if max_s is None else max(max_s, floor)
    duration = floor if ceiling == floor else (rng or random).uniform(floor, ceiling)
    if duration > 0:
        await asyncio.sleep(duration)
    logger.debug("Simulated latency: %.3fs", duration)
    return duration
