"""Environment-driven configuration for the playlist sync job."""
