"""
Playlist sync orchestration.

A run acquires one token and then reads every configured playlist in order.
Each step returns an explicit ``StepResult``; the runner decides per step
whether an error ends the run (token acquisition) or is only recorded
(a single playlist).
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Generic, List, Optional, Sequence, TypeVar

from radar_sync.api.base_client import SyncError, AiohttpTransport
from radar_sync.api.playlist_reader import PlaylistReader
from radar_sync.api.token_provider import TokenProvider
from radar_sync.models.credentials import Credentials, AccessToken
from radar_sync.models.playlist import PlaylistSummary
from radar_sync.utils.record_sink import RecordSink, LoggingRecordSink

logger = logging.getLogger(__name__)

T = TypeVar("T")

class SyncState(Enum):
    IDLE = "idle"
    TOKEN_ACQUIRED = "token_acquired"
    FETCHING = "fetching"
    DONE = "done"
    FAILED = "failed"

@dataclass
class StepResult(Generic[T]):
    """Outcome of one step: either a value or the error that replaced it."""
    value: Optional[T] = None
    error: Optional[SyncError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

@dataclass
class PlaylistFailure:
    playlist_id: str
    error: SyncError

@dataclass
class SyncReport:
    """Everything one run observed. Discarded once the run has been reported."""
    state: SyncState = SyncState.IDLE
    token_error: Optional[SyncError] = None
    successes: List[PlaylistSummary] = field(default_factory=list)
    failures: List[PlaylistFailure] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return len(self.successes)

    @property
    def failed(self) -> int:
        return len(self.failures)

class SyncRunner:
    """Drives one sync run from token acquisition to the last playlist."""

    def __init__(
        self,
        credentials: Credentials,
        playlist_ids: Sequence[str],
        token_provider: TokenProvider,
        playlist_reader: PlaylistReader,
        sink: Optional[RecordSink] = None
    ):
        self.credentials = credentials
        self.playlist_ids = list(playlist_ids)
        self.token_provider = token_provider
        self.playlist_reader = playlist_reader
        self.sink = sink or LoggingRecordSink()
        self.state = SyncState.IDLE

    async def _attempt(self, step: Awaitable[T]) -> StepResult[T]:
        try:
            return StepResult(value=await step)
        except SyncError as e:
            return StepResult(error=e)

    def _transition(self, report: SyncReport, state: SyncState) -> None:
        logger.debug(f"Sync state {self.state.value} -> {state.value}")
        self.state = state
        report.state = state

    async def run(self) -> SyncReport:
        """
        Execute one complete sync run.

        Returns:
            SyncReport in state DONE, or FAILED when no token could be acquired
        """
        report = SyncReport()
        self.state = SyncState.IDLE

        token_result = await self._attempt(self.token_provider.acquire_token(self.credentials))
        if not token_result.ok:
            report.token_error = token_result.error
            self._transition(report, SyncState.FAILED)
            self.sink.error("Failed to obtain Spotify access token", error=token_result.error)
            return report

        token: AccessToken = token_result.value
        self._transition(report, SyncState.TOKEN_ACQUIRED)
        self.sink.info("Successfully obtained Spotify access token")

        self._transition(report, SyncState.FETCHING)
        for playlist_id in self.playlist_ids:
            result = await self._attempt(self.playlist_reader.fetch_playlist(token, playlist_id))
            if result.ok:
                report.successes.append(result.value)
            else:
                report.failures.append(PlaylistFailure(playlist_id, result.error))
                self.sink.error(
                    f"Failed to sync playlist {playlist_id}",
                    error=result.error,
                    playlist_id=playlist_id
                )

        self._transition(report, SyncState.DONE)
        self.sink.info(
            f"Playlist sync finished: {report.succeeded} succeeded, {report.failed} failed",
            succeeded=report.succeeded,
            failed=report.failed
        )
        return report

    async def run_or_raise(self) -> SyncReport:
        """Run and re-raise a token failure so the invocation itself fails."""
        report = await self.run()
        if report.state is SyncState.FAILED:
            raise report.token_error
        return report

async def run_sync(settings: Any, sink: Optional[RecordSink] = None) -> SyncReport:
    """
    Scheduled entry point: build fresh components from settings and run once.

    Nothing built here outlives the call. A token failure propagates to the
    caller after it has been reported.
    """
    sink = sink or LoggingRecordSink()

    async with AiohttpTransport(timeout=settings.http_timeout) as transport:
        runner = SyncRunner(
            credentials=settings.credentials,
            playlist_ids=settings.playlist_ids,
            token_provider=TokenProvider(transport, auth_url=settings.spotify_token_url),
            playlist_reader=PlaylistReader(transport, sink=sink, base_url=settings.spotify_api_base_url),
            sink=sink
        )
        return await runner.run_or_raise()
