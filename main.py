#!/usr/bin/env python3
"""
Spotify Playlist Radar Sync
CLI entry point: run one playlist sync now, or stay up and run it on the
weekly schedule.
"""

import sys
import asyncio
import logging
import argparse

from config.settings import Settings
from radar_sync.api.base_client import SyncError
from radar_sync.services.scheduler import Scheduler, WeeklySchedule, utc_now
from radar_sync.services.sync_runner import run_sync

logger = logging.getLogger("radar_sync")

def configure_logging(settings: Settings):
    """Configure root logging from settings."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=settings.log_format
    )

async def run_once(settings: Settings) -> int:
    """Run a single sync. Returns the process exit code."""
    try:
        report = await run_sync(settings)
    except SyncError as e:
        logger.error(f"Playlist sync aborted: {e}")
        return 1

    return 0 if report.failed == 0 else 2

async def run_scheduled(settings: Settings, schedule: WeeklySchedule):
    """Block forever, running the sync on the configured weekly schedule."""
    scheduler = Scheduler(schedule, lambda: run_sync(settings))
    try:
        await scheduler.run_forever()
    except asyncio.CancelledError:
        scheduler.stop()
        raise

def show_next_run(schedule: WeeklySchedule):
    """Print the next scheduled fire time."""
    fire_at = schedule.next_fire_after(utc_now())
    print(f"Schedule: {schedule.describe()}")
    print(f"Next run: {fire_at.isoformat()}")

def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description='Weekly Spotify playlist sync')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('run', help='Run one playlist sync now')
    subparsers.add_parser('schedule', help='Run the playlist sync on the weekly schedule')
    subparsers.add_parser('next-run', help='Show when the next scheduled sync will run')

    args = parser.parse_args()
    settings = Settings()
    configure_logging(settings)

    try:
        if args.command in ('schedule', 'next-run'):
            schedule = settings.schedule()
        if args.command != 'next-run':
            settings.validate()
    except ValueError as e:
        logger.error(str(e))
        return 1

    if args.command == 'next-run':
        show_next_run(schedule)
        return 0

    if args.command == 'schedule':
        try:
            asyncio.run(run_scheduled(settings, schedule))
        except KeyboardInterrupt:
            logger.info("Scheduler stopped")
        return 0

    return asyncio.run(run_once(settings))

if __name__ == "__main__":
    sys.exit(main())
