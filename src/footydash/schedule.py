"""Daily refresh: run once now, again at the next local midnight, then every 24 hours."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timedelta
from typing import Awaitable, Callable, Optional


logger = logging.getLogger(__name__)

REFRESH_PERIOD = timedelta(hours=24)


def seconds_until_midnight(now: datetime) -> float:
    """Seconds from ``now`` to the start of the following day in ``now``'s zone."""

    tomorrow = (now + timedelta(days=1)).replace(hour=0, minute=0, second=0, microsecond=0)
    return (tomorrow - now).total_seconds()


async def run_daily(
    job: Callable[[], Awaitable[object]],
    *,
    now: Callable[[], datetime] = lambda: datetime.now().astimezone(),
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    iterations: Optional[int] = None,
) -> int:
    """Run ``job`` immediately and then on the daily schedule.

    Runs are sequential, so they never overlap. A failing run is logged and
    the schedule continues. ``iterations`` caps the total number of runs
    (``None`` runs forever); the number of completed runs is returned.
    """

    runs = 0
    delay: Optional[float] = None
    while iterations is None or runs < iterations:
        if delay is not None:
            logger.debug("Next refresh in %.0f seconds", delay)
            await sleep(delay)
        try:
            await job()
        except Exception:
            logger.exception("Scheduled refresh failed")
        runs += 1
        delay = seconds_until_midnight(now()) if runs == 1 else REFRESH_PERIOD.total_seconds()
    return runs


__all__ = ["REFRESH_PERIOD", "run_daily", "seconds_until_midnight"]
