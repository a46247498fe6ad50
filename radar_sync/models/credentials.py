"""
Client credentials and the bearer token they are exchanged for.
"""

from dataclasses import dataclass

@dataclass(frozen=True)
class Credentials:
    """Spotify application credentials for the client-credentials flow."""
    client_id: str
    client_secret: str

    def __repr__(self) -> str:
        return f"Credentials(client_id={self.client_id!r}, client_secret='***')"

@dataclass(frozen=True)
class AccessToken:
    """Short-lived bearer token, valid for the rest of one sync run."""
    value: str
    token_type: str = "Bearer"
    expires_in_seconds: int = 3600

    def __repr__(self) -> str:
        return f"AccessToken(token_type={self.token_type!r}, expires_in_seconds={self.expires_in_seconds})"

    @property
    def is_usable(self) -> bool:
        return bool(self.value)

    @property
    def authorization_header(self) -> str:
        # Spotify returns "Bearer" but the header scheme is fixed regardless.
        return f"Bearer {self.value}"
