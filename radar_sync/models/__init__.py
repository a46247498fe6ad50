"""Data models for the playlist sync job."""

from .credentials import Credentials, AccessToken
from .playlist import PlaylistSummary, TrackRef
from .schemas import TokenResponse, PlaylistResponse

__all__ = [
    'Credentials',
    'AccessToken',
    'PlaylistSummary',
    'TrackRef',
    'TokenResponse',
    'PlaylistResponse'
]
