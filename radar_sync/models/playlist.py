"""
Playlist summary model built from a Spotify playlist response.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional, List

from .schemas import PlaylistResponse, PlaylistTrackItem

@dataclass(frozen=True)
class TrackRef:
    """A track as listed inside a playlist."""
    id: Optional[str]
    name: str
    uri: Optional[str] = None
    added_at: Optional[str] = None

    @classmethod
    def from_spotify_item(cls, item: PlaylistTrackItem) -> Optional['TrackRef']:
        """Create TrackRef from a playlist item; None when the item carries no track."""
        if item.track is None:
            return None

        return cls(
            id=item.track.id,
            name=item.track.name or "",
            uri=item.track.uri,
            added_at=item.added_at
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "uri": self.uri,
            "added_at": self.added_at
        }

@dataclass(frozen=True)
class PlaylistSummary:
    """Read-only snapshot of a playlist as returned by one fetch."""
    id: str
    name: str
    description: Optional[str] = None
    total_track_count: int = 0
    tracks: List[TrackRef] = field(default_factory=list)

    @property
    def listed_track_count(self) -> int:
        """Number of tracks included in this response page."""
        return len(self.tracks)

    def to_dict(self) -> Dict[str, Any]:
        """Convert summary to dictionary representation."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "total_track_count": self.total_track_count,
            "tracks": [track.to_dict() for track in self.tracks]
        }

    @classmethod
    def from_spotify_data(cls, response: PlaylistResponse, playlist_id: str) -> 'PlaylistSummary':
        """
        Create PlaylistSummary from a parsed Spotify playlist response.

        A response without a ``tracks`` object yields an empty summary with a
        total of zero. Item order is kept as the API returned it.

        Args:
            response: Validated playlist body
            playlist_id: Identifier that was requested, used when the body has no id

        Returns:
            PlaylistSummary
        """
        tracks: List[TrackRef] = []
        total = 0

        if response.tracks is not None:
            total = response.tracks.total
            for item in response.tracks.items:
                track = TrackRef.from_spotify_item(item)
                if track is not None:
                    tracks.append(track)

        return cls(
            id=response.id or playlist_id,
            name=response.name,
            description=response.description,
            total_track_count=total,
            tracks=tracks
        )
