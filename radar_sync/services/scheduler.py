"""
Weekly trigger for the playlist sync job.
Computes fire times in a configured time zone and invokes the job forever.
"""

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, time, timezone
from typing import Any, Awaitable, Callable, Optional
from zoneinfo import ZoneInfo

from radar_sync.api.base_client import SyncError

logger = logging.getLogger(__name__)

WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

@dataclass(frozen=True)
class WeeklySchedule:
    """A fixed weekly fire time. ``weekday`` uses Python's Monday=0 numbering."""
    weekday: int = 4
    hour: int = 3
    minute: int = 0
    second: int = 0
    timezone: str = "UTC"

    def __post_init__(self):
        if not 0 <= self.weekday <= 6:
            raise ValueError(f"weekday must be between 0 and 6, got {self.weekday}")
        if not 0 <= self.hour <= 23:
            raise ValueError(f"hour must be between 0 and 23, got {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"minute must be between 0 and 59, got {self.minute}")
        if not 0 <= self.second <= 59:
            raise ValueError(f"second must be between 0 and 59, got {self.second}")
        # Fails early on an unknown zone name.
        ZoneInfo(self.timezone)

    @classmethod
    def from_cron(cls, expression: str, tz: str = "UTC") -> 'WeeklySchedule':
        """
        Parse a six-field ``second minute hour day month weekday`` expression.

        Only the weekly form is supported: fixed second, minute and hour,
        ``*`` for day and month, and a single weekday where 0 and 7 are Sunday.

        Raises:
            ValueError: The expression is not a weekly schedule
        """
        parts = expression.split()
        if len(parts) != 6:
            raise ValueError(f"Expected 6 fields in schedule '{expression}', got {len(parts)}")

        second, minute, hour, day, month, weekday = parts
        if day != "*" or month != "*":
            raise ValueError(f"Schedule '{expression}' is not weekly: day and month must be '*'")

        try:
            cron_weekday = int(weekday)
            values = int(second), int(minute), int(hour)
        except ValueError:
            raise ValueError(f"Schedule '{expression}' must use plain numbers for time and weekday")

        if not 0 <= cron_weekday <= 7:
            raise ValueError(f"Weekday in schedule '{expression}' must be between 0 and 7")

        return cls(
            weekday=(cron_weekday - 1) % 7,
            hour=values[2],
            minute=values[1],
            second=values[0],
            timezone=tz
        )

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    def describe(self) -> str:
        return f"every {WEEKDAY_NAMES[self.weekday]} at {self.hour:02d}:{self.minute:02d}:{self.second:02d} {self.timezone}"

    def next_fire_after(self, now: datetime) -> datetime:
        """Return the first fire time strictly after ``now`` (which must be timezone aware)."""
        if now.tzinfo is None:
            raise ValueError("now must be timezone aware")

        zone = self.zone
        local = now.astimezone(zone)
        at = time(self.hour, self.minute, self.second)

        days_ahead = (self.weekday - local.weekday()) % 7
        candidate = datetime.combine(local.date() + timedelta(days=days_ahead), at, tzinfo=zone)
        if candidate <= local:
            candidate = datetime.combine(candidate.date() + timedelta(days=7), at, tzinfo=zone)

        return candidate

    @staticmethod
    def seconds_between(start: datetime, end: datetime) -> float:
        # Aware datetimes sharing a tzinfo subtract as wall time; compare in UTC.
        return (end.astimezone(timezone.utc) - start.astimezone(timezone.utc)).total_seconds()

def utc_now() -> datetime:
    return datetime.now(timezone.utc)

class Scheduler:
    """Invokes a job on a weekly schedule until stopped."""

    def __init__(
        self,
        schedule: WeeklySchedule,
        job: Callable[[], Awaitable[Any]],
        clock: Callable[[], datetime] = utc_now,
        sleep: Optional[Callable[[float], Awaitable[None]]] = None
    ):
        """
        Initialize scheduler.

        Args:
            schedule: When to fire
            job: Coroutine function invoked on every fire, with no arguments
            clock: Source of the current aware time
            sleep: Awaitable delay; defaults to a sleep that ``stop()`` interrupts
        """
        self.schedule = schedule
        self.job = job
        self.clock = clock
        self.sleep = sleep or self._interruptible_sleep
        self.runs = 0
        self._stop_event = asyncio.Event()
        self._last_fire: Optional[datetime] = None

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    def stop(self) -> None:
        self._stop_event.set()

    async def _interruptible_sleep(self, seconds: float) -> None:
        try:
            await asyncio.wait_for(self._stop_event.wait(), timeout=seconds)
        except asyncio.TimeoutError:
            pass

    def next_fire_time(self) -> datetime:
        now = self.clock()
        if self._last_fire is not None and self._last_fire > now:
            now = self._last_fire
        return self.schedule.next_fire_after(now)

    async def fire(self) -> None:
        """Invoke the job once. Failures are logged; the next fire is the only retry."""
        self.runs += 1
        try:
            await self.job()
        except SyncError as e:
            logger.error(f"Scheduled playlist sync failed: {e}")
        except Exception:
            logger.exception("Scheduled playlist sync crashed")

    async def run_forever(self, max_runs: Optional[int] = None) -> None:
        """Sleep until each fire time and invoke the job, until stopped or ``max_runs`` is reached."""
        logger.info(f"Playlist sync scheduled {self.schedule.describe()}")

        while not self.stopped:
            fire_at = self.next_fire_time()
            delay = self.schedule.seconds_between(self.clock(), fire_at)
            logger.info(f"Next playlist sync at {fire_at.isoformat()}")

            await self.sleep(max(delay, 0.0))
            # The sleep can return before the wall clock reaches fire_at.
            while not self.stopped and self.clock() < fire_at:
                await self.sleep(self.schedule.seconds_between(self.clock(), fire_at))
            if self.stopped:
                break

            self._last_fire = fire_at
            await self.fire()

            if max_runs is not None and self.runs >= max_runs:
                break
