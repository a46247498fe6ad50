"""
Base HTTP plumbing shared by the Spotify token and playlist components.
Defines the error hierarchy, the injectable fetch interface and the
aiohttp-backed transport used in production.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Dict, Optional

import aiohttp

logger = logging.getLogger(__name__)

class SyncError(Exception):
    """Base exception for every failure a sync step can produce."""

    def __init__(self, message: str, detail: Optional[str] = None, status: Optional[int] = None):
        super().__init__(message)
        self.detail = detail
        self.status = status

class AuthenticationError(SyncError):
    """Exception raised when the token endpoint rejects the credentials."""
    pass

class PlaylistFetchError(SyncError):
    """Exception raised when a playlist request returns a non-success status."""

    def __init__(self, playlist_id: str, message: str, detail: Optional[str] = None, status: Optional[int] = None):
        super().__init__(message, detail=detail, status=status)
        self.playlist_id = playlist_id

class ResponseParseError(SyncError):
    """Exception raised when a response body is not the JSON we expect."""

    def __init__(self, source: str, message: str, detail: Optional[str] = None, playlist_id: Optional[str] = None):
        super().__init__(message, detail=detail)
        self.source = source
        self.playlist_id = playlist_id

class TransportError(SyncError):
    """Exception raised when the request never produced an HTTP response."""
    pass

@dataclass(frozen=True)
class HttpResponse:
    """Status and raw body of a completed HTTP exchange."""
    status: int
    body: str
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

# method, url, headers, form data -> response
HttpFetch = Callable[[str, str, Dict[str, str], Optional[Dict[str, str]]], Awaitable[HttpResponse]]

class AiohttpTransport:
    """HttpFetch implementation on top of a single aiohttp session.

    One transport is opened per sync run and closed when the run ends, so
    nothing (connections, cookies, tokens) survives between runs.
    """

    def __init__(self, timeout: Optional[float] = 30):
        self.timeout = timeout
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def _ensure_session(self):
        """Ensure HTTP session is created."""
        if self.session is None or self.session.closed:
            timeout = aiohttp.ClientTimeout(total=self.timeout)
            self.session = aiohttp.ClientSession(timeout=timeout)

    async def close(self):
        """Close the HTTP session."""
        if self.session and not self.session.closed:
            await self.session.close()

    async def __call__(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        data: Optional[Dict[str, str]] = None
    ) -> HttpResponse:
        """Issue one request and return its status and body without raising on status."""
        await self._ensure_session()

        try:
            async with self.session.request(method, url, headers=headers, data=data) as response:
                body = await response.text()
                return HttpResponse(
                    status=response.status,
                    body=body,
                    headers=dict(response.headers)
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"HTTP {method} {url} failed: {e!r}")
            raise TransportError(f"Request to {url} failed: {e!r}") from e
