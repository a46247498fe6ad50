"""
Input normalisation for configured playlist identifiers.
"""

from typing import Iterable, List

PLAYLIST_URL_MARKER = "open.spotify.com/playlist/"
PLAYLIST_URI_PREFIX = "spotify:playlist:"

def extract_playlist_id(value: str) -> str:
    """
    Reduce a playlist URL or URI to its bare identifier.

    Args:
        value: Playlist id, ``https://open.spotify.com/playlist/<id>?si=...`` URL
            or ``spotify:playlist:<id>`` URI

    Returns:
        The identifier with surrounding whitespace removed
    """
    s = value.strip()

    if PLAYLIST_URL_MARKER in s:
        s = s.split(PLAYLIST_URL_MARKER, 1)[1]
        s = s.split('?')[0].split('/')[0]
    elif s.startswith(PLAYLIST_URI_PREFIX):
        s = s[len(PLAYLIST_URI_PREFIX):]

    return s

def normalize_playlist_ids(values: Iterable[str]) -> List[str]:
    """Normalise ids, dropping blanks and duplicates while keeping first-seen order."""
    seen = set()
    result = []

    for value in values:
        if value is None:
            continue
        playlist_id = extract_playlist_id(value)
        if not playlist_id or playlist_id in seen:
            continue
        seen.add(playlist_id)
        result.append(playlist_id)

    return result

def split_csv(value: str) -> List[str]:
    """Split a comma separated environment value."""
    if not value:
        return []
    return [part.strip() for part in value.split(',') if part.strip()]
