"""The countdown coroutine that drives a session."""

from __future__ import annotations

import asyncio


async def countdown(
    seconds: int,
    ticks: asyncio.Queue,
    control: asyncio.Queue,
    interval: float = 1.0,
) -> None:
    """Count down from ``seconds``, putting each remaining value on ``ticks``.

    Booleans read from ``control`` pause (False) or resume (True) the count.
    A change of state restarts the current tick. A final 0 is always sent
    once the count is over.
    """
    remaining = seconds
    running = True

    while remaining > 0:
        if not running:
            running = await control.get()
            continue

        getter = asyncio.ensure_future(control.get())
        try:
            done, _ = await asyncio.wait({getter}, timeout=interval)
            if getter not in done:
                getter.cancel()
                await asyncio.wait({getter})
        finally:
            if not getter.done():
                getter.cancel()

        if not getter.cancelled():
            running = getter.result()
            continue

        remaining -= 1
        await ticks.put(remaining)

    await ticks.put(0)