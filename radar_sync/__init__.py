"""Weekly Spotify playlist sync job."""

__version__ = "1.0.0"
