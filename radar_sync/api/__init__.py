"""Spotify API components used by the sync job."""

from .base_client import (
    SyncError,
    AuthenticationError,
    PlaylistFetchError,
    ResponseParseError,
    TransportError,
    HttpResponse,
    HttpFetch,
    AiohttpTransport
)
from .token_provider import TokenProvider
from .playlist_reader import PlaylistReader

__all__ = [
    'SyncError',
    'AuthenticationError',
    'PlaylistFetchError',
    'ResponseParseError',
    'TransportError',
    'HttpResponse',
    'HttpFetch',
    'AiohttpTransport',
    'TokenProvider',
    'PlaylistReader'
]
