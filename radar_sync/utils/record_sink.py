"""
Observability sinks that receive the outcome records of a sync run.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

logger = logging.getLogger("radar_sync.records")

@dataclass
class Record:
    """A single reported outcome."""
    level: str
    message: str
    fields: Dict[str, Any] = field(default_factory=dict)
    error: Optional[BaseException] = None

class RecordSink(ABC):
    """Destination for informational and error records."""

    @abstractmethod
    def info(self, message: str, **fields: Any) -> None:
        pass

    @abstractmethod
    def error(self, message: str, error: Optional[BaseException] = None, **fields: Any) -> None:
        pass

class LoggingRecordSink(RecordSink):
    """Sink that writes records through the logging module."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logger

    def info(self, message: str, **fields: Any) -> None:
        self.log.info(message, extra={"record_fields": fields})

    def error(self, message: str, error: Optional[BaseException] = None, **fields: Any) -> None:
        detail = getattr(error, "detail", None)
        if error is not None:
            message = f"{message}: {error}"
        if detail:
            message = f"{message} ({detail})"
        self.log.error(message, extra={"record_fields": fields})

class MemoryRecordSink(RecordSink):
    """Sink that keeps every record in memory, for tests and dry runs."""

    def __init__(self):
        self.records: List[Record] = []

    def info(self, message: str, **fields: Any) -> None:
        self.records.append(Record("info", message, fields))

    def error(self, message: str, error: Optional[BaseException] = None, **fields: Any) -> None:
        self.records.append(Record("error", message, fields, error))

    @property
    def infos(self) -> List[Record]:
        return [r for r in self.records if r.level == "info"]

    @property
    def errors(self) -> List[Record]:
        return [r for r in self.records if r.level == "error"]

    def clear(self) -> None:
        self.records.clear()
