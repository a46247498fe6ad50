"""Pydantic models for the Spotify token and playlist response bodies."""
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class SpotifyBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class TokenResponse(SpotifyBaseModel):
    access_token: str = Field(min_length=1)
    token_type: Optional[str] = "Bearer"
    expires_in: Optional[int] = 3600

    @field_validator("token_type", "expires_in", mode="before")
    @classmethod
    def null_to_default(cls, value: Any, info) -> Any:
        # A null value is treated as absent.
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class SpotifyTrack(SpotifyBaseModel):
    # Local files come back without an id, and sometimes without a name.
    id: Optional[str] = None
    name: Optional[str] = None
    uri: Optional[str] = None


class PlaylistTrackItem(SpotifyBaseModel):
    added_at: Optional[str] = None
    track: Optional[SpotifyTrack] = None


class PlaylistTracks(SpotifyBaseModel):
    total: int = 0
    items: List[PlaylistTrackItem] = Field(default_factory=list)

    @field_validator("items", mode="before")
    @classmethod
    def keep_readable_items(cls, value: Any) -> Any:
        """Drop items that are not track objects; the total still comes from the API."""
        if value is None:
            return []
        if not isinstance(value, list):
            return value

        items = []
        for raw in value:
            if not isinstance(raw, dict):
                continue
            try:
                items.append(PlaylistTrackItem.model_validate(raw))
            except ValidationError:
                continue
        return items


class PlaylistResponse(SpotifyBaseModel):
    id: Optional[str] = None
    name: str
    description: Optional[str] = None
    tracks: Optional[PlaylistTracks] = None
