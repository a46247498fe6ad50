"""
Spotify playlist reader.
Fetches a playlist with a bearer token and reports its name and track count.
"""

import json
import logging
from typing import Optional
from urllib.parse import quote

from pydantic import ValidationError

from radar_sync.api.base_client import HttpFetch, AuthenticationError, PlaylistFetchError, ResponseParseError
from radar_sync.models.credentials import AccessToken
from radar_sync.models.playlist import PlaylistSummary
from radar_sync.models.schemas import PlaylistResponse
from radar_sync.utils.record_sink import RecordSink, LoggingRecordSink

logger = logging.getLogger(__name__)

SPOTIFY_API_BASE_URL = "https://api.spotify.com/v1"

class PlaylistReader:
    """Reads playlist metadata from the Spotify Web API."""

    def __init__(
        self,
        fetch: HttpFetch,
        sink: Optional[RecordSink] = None,
        base_url: str = SPOTIFY_API_BASE_URL
    ):
        self.fetch = fetch
        self.sink = sink or LoggingRecordSink()
        self.base_url = base_url.rstrip('/')

    def playlist_url(self, playlist_id: str) -> str:
        return f"{self.base_url}/playlists/{quote(playlist_id, safe='')}"

    async def fetch_playlist(self, token: AccessToken, playlist_id: str) -> PlaylistSummary:
        """
        Fetch one playlist and emit its summary record.

        Token expiry is not checked here; an expired token surfaces as a
        non-success response from the API.

        Args:
            token: Bearer token acquired for this run
            playlist_id: Spotify playlist identifier

        Returns:
            PlaylistSummary built from the response

        Raises:
            AuthenticationError: The token is empty
            PlaylistFetchError: The API answered with a non-success status
            ResponseParseError: The body is not JSON or has no usable ``name``
        """
        if not token.is_usable:
            raise AuthenticationError("Access token is empty")

        headers = {"Authorization": token.authorization_header}
        response = await self.fetch("GET", self.playlist_url(playlist_id), headers, None)

        if not response.ok:
            raise PlaylistFetchError(
                playlist_id,
                f"Failed to get playlist {playlist_id} (HTTP {response.status})",
                detail=response.body,
                status=response.status
            )

        try:
            body = PlaylistResponse.model_validate(json.loads(response.body))
        except json.JSONDecodeError as e:
            raise ResponseParseError(
                "playlist", f"Playlist {playlist_id} response is not valid JSON: {e}",
                detail=response.body, playlist_id=playlist_id
            ) from e
        except ValidationError as e:
            raise ResponseParseError(
                "playlist", f"Playlist {playlist_id} response has invalid fields",
                detail=str(e), playlist_id=playlist_id
            ) from e

        summary = PlaylistSummary.from_spotify_data(body, playlist_id)

        self.sink.info(
            f"Retrieved playlist: {summary.name} with {summary.total_track_count} tracks",
            playlist_id=summary.id,
            name=summary.name,
            total_track_count=summary.total_track_count
        )

        return summary
