"""
Pytest configuration and shared fixtures for the playlist sync tests.
"""

import json
import pytest

from radar_sync.api.base_client import HttpResponse
from radar_sync.models.credentials import Credentials, AccessToken
from radar_sync.utils.record_sink import MemoryRecordSink

class FakeFetch:
    """HttpFetch double answering from a (method, url) route table."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def add(self, method, url, status=200, body=None):
        if not isinstance(body, str):
            body = json.dumps(body)
        self.routes[(method, url)] = HttpResponse(status=status, body=body)

    def calls_to(self, prefix):
        return [call for call in self.calls if call["url"].startswith(prefix)]

    async def __call__(self, method, url, headers, data=None):
        self.calls.append({"method": method, "url": url, "headers": headers, "data": data})
        response = self.routes[(method, url)]
        if isinstance(response, Exception):
            raise response
        return response

@pytest.fixture
def credentials():
    """Sample client credentials."""
    return Credentials(client_id="test_client_id", client_secret="test_client_secret")

@pytest.fixture
def access_token():
    """Sample bearer token."""
    return AccessToken(value="abc", token_type="Bearer", expires_in_seconds=3600)

@pytest.fixture
def memory_sink():
    """Record sink that keeps everything in memory."""
    return MemoryRecordSink()

@pytest.fixture
def fake_fetch():
    """Empty fake transport; tests register routes with ``add``."""
    return FakeFetch()

@pytest.fixture
def sample_playlist_response():
    """Full playlist body as returned by the Spotify API."""
    return {
        "id": "radar123",
        "name": "Radar",
        "description": "Fresh finds",
        "tracks": {
            "total": 3,
            "items": [
                {
                    "added_at": "2024-05-03T03:00:00Z",
                    "track": {"id": "t1", "name": "First", "uri": "spotify:track:t1"}
                },
                {
                    "added_at": "2024-05-03T03:01:00Z",
                    "track": None
                },
                {
                    "added_at": "2024-05-03T03:02:00Z",
                    "track": {"id": "t3", "name": "Third", "uri": "spotify:track:t3"}
                }
            ]
        }
    }
