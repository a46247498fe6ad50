"""Utility modules for the playlist sync job."""

from .record_sink import Record, RecordSink, LoggingRecordSink, MemoryRecordSink
from .validators import extract_playlist_id, normalize_playlist_ids, split_csv

__all__ = [
    'Record',
    'RecordSink',
    'LoggingRecordSink',
    'MemoryRecordSink',
    'extract_playlist_id',
    'normalize_playlist_ids',
    'split_csv'
]
