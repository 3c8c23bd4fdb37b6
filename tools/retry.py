"""
Bounded retry for upstream HTTP calls. Kept apart from response shaping: the
decorator only re-attempts on transport errors and re-raises the last one.
"""
import asyncio
import functools
import logging
import random

import httpx

logger = logging.getLogger(__name__)


def with_retry(max_attempts: int = 1, base_delay: float = 0.5):
    """
    Retry an async call on httpx.TransportError, up to max_attempts in total.
    Delay grows linearly with the attempt number, with jitter. max_attempts=1 means no retry.
    """
    attempts = max(1, max_attempts)

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            for attempt in range(1, attempts + 1):
                try:
                    return await func(*args, **kwargs)
                except httpx.TransportError as e:
                    if attempt == attempts:
                        raise
                    delay = base_delay * attempt * random.uniform(0.5, 1.5)
                    logger.warning(
                        "Upstream transport error (%s), attempt %d/%d, retrying in %.2fs",
                        type(e).__name__, attempt, attempts, delay,
                    )
                    await asyncio.sleep(delay)

        return wrapper

    return decorator
