"""Services that run the playlist sync job."""

from .sync_runner import SyncRunner, SyncState, SyncReport, StepResult, PlaylistFailure, run_sync
from .scheduler import WeeklySchedule, Scheduler

__all__ = [
    'SyncRunner',
    'SyncState',
    'SyncReport',
    'StepResult',
    'PlaylistFailure',
    'run_sync',
    'WeeklySchedule',
    'Scheduler'
]
