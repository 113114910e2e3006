"""Deferred execution helpers.

These cover the two "run it later" idioms from the examples: a one-shot
callback after a delay, and an awaitable that resolves to a value. Neither
offers timing guarantees and neither needs to be cancelled.
"""

import asyncio
import threading
import typing as tp

from arrowkit.logger.logger import logger

__all__ = ["schedule_once", "resolve_after"]

T = tp.TypeVar("T")


def schedule_once(
    fn: tp.Callable[..., tp.Any], delay: float, *args: tp.Any
) -> threading.Timer:
    """Run ``fn(*args)`` once, roughly ``delay`` seconds from now.

    The callback runs on a daemon timer thread, so a pending callback never
    keeps the interpreter alive.

    Args:
        fn: Callback to run.
        delay: Delay in seconds. Must not be negative.
        *args: Positional arguments forwarded to ``fn``.

    Returns:
        The started timer; ``join()`` it to wait for the callback.

    Raises:
        ValueError: If ``delay`` is negative.
    """
    if delay < 0:
        raise ValueError(f"delay must be non-negative, got {delay}")
    timer = threading.Timer(delay, fn, args=args)
    timer.daemon = True
    timer.start()
    logger.debug(f"Scheduled {getattr(fn, '__name__', fn)!r} in {delay}s")
    return timer


async def resolve_after(value: T, delay: float = 0.0) -> T:
    """Wait ``delay`` seconds, then return ``value``."""
    await asyncio.sleep(delay)
    return value
