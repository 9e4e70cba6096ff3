"""Async timing helpers."""

import asyncio


async def sleep(time_sec: float) -> None:
    """Suspend the calling task for time_sec seconds.

    Other tasks on the event loop keep running. Negative durations are
    treated as zero. Cancellation is whatever asyncio provides; wrap the
    call in ``asyncio.wait_for`` to race it against a timeout.

    Args:
        time_sec: Delay in seconds (fractions allowed).
    """
    await asyncio.sleep(max(0.0, time_sec))
