"""
Application settings and configuration management.
Handles environment variables for Spotify credentials, target playlists,
the weekly schedule and logging.
"""

import os
from typing import List, Optional
from dataclasses import dataclass
from zoneinfo import ZoneInfoNotFoundError
from dotenv import load_dotenv

from radar_sync.models.credentials import Credentials
from radar_sync.services.scheduler import WeeklySchedule
from radar_sync.utils.validators import normalize_playlist_ids, split_csv

load_dotenv()

# Per-playlist variables, appended after SPOTIFY_PLAYLIST_IDS.
NAMED_PLAYLIST_VARS = [
    "SPOTIFY_RADAR_PLAYLIST_ID",
    "SPOTIFY_BACHATA2024_PLAYLIST_ID"
]

@dataclass
class APIConfig:
    """Configuration for the Spotify endpoints."""
    token_url: str = "https://accounts.spotify.com/api/token"
    base_url: str = "https://api.spotify.com/v1"
    timeout: float = 30

class Settings:
    """Main application settings."""

    def __init__(self):
        # Spotify API Configuration
        self.spotify = APIConfig(
            token_url=os.getenv("SPOTIFY_TOKEN_URL", APIConfig.token_url),
            base_url=os.getenv("SPOTIFY_API_BASE_URL", APIConfig.base_url),
            timeout=float(os.getenv("HTTP_TIMEOUT", APIConfig.timeout))
        )
        self.SPOTIFY_CLIENT_ID = os.getenv("SPOTIFY_CLIENT_ID")
        self.SPOTIFY_CLIENT_SECRET = os.getenv("SPOTIFY_CLIENT_SECRET")

        # Target playlists, in configured order
        raw_ids = split_csv(os.getenv("SPOTIFY_PLAYLIST_IDS", ""))
        raw_ids.extend(os.getenv(name) for name in NAMED_PLAYLIST_VARS)
        self.playlist_ids: List[str] = normalize_playlist_ids(raw_ids)

        # Weekly trigger: second minute hour day month weekday
        self.sync_schedule = os.getenv("SYNC_SCHEDULE", "0 0 3 * * 5")
        self.sync_timezone = os.getenv("SYNC_TIMEZONE", "UTC")

        # Logging Configuration
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        self.log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @property
    def credentials(self) -> Credentials:
        return Credentials(
            client_id=self.SPOTIFY_CLIENT_ID or "",
            client_secret=self.SPOTIFY_CLIENT_SECRET or ""
        )

    @property
    def spotify_token_url(self) -> str:
        return self.spotify.token_url

    @property
    def spotify_api_base_url(self) -> str:
        return self.spotify.base_url

    @property
    def http_timeout(self) -> Optional[float]:
        return self.spotify.timeout

    def schedule(self) -> WeeklySchedule:
        """Build the weekly schedule from SYNC_SCHEDULE and SYNC_TIMEZONE.

        Raises ValueError naming the variable when either one is unusable.
        """
        try:
            return WeeklySchedule.from_cron(self.sync_schedule, self.sync_timezone)
        except ZoneInfoNotFoundError as e:
            raise ValueError(f"Unknown SYNC_TIMEZONE: {self.sync_timezone}") from e
        except ValueError as e:
            raise ValueError(f"Invalid schedule {self.sync_schedule!r} ({self.sync_timezone}): {e}") from e

    def validate(self) -> bool:
        """Validate that required configuration is present."""
        required_vars = []

        if not self.SPOTIFY_CLIENT_ID:
            required_vars.append("SPOTIFY_CLIENT_ID")
        if not self.SPOTIFY_CLIENT_SECRET:
            required_vars.append("SPOTIFY_CLIENT_SECRET")
        if not self.playlist_ids:
            required_vars.append("SPOTIFY_PLAYLIST_IDS")

        if required_vars:
            raise ValueError(f"Missing required environment variables: {', '.join(required_vars)}")

        return True
