import itertools
import logging
import threading
from collections import deque
from typing import Any, Deque, Dict, List, Optional

from pwmonitor.runtime.config import MonitorSettings, get_settings

# Longest string kept in a ring entry's details; decode errors can quote whole records.
MAX_DETAIL_LENGTH = 200


class RingBufferHandler(logging.Handler):
    """Keeps the most recent log records in memory as structured entries."""

    def __init__(self, max_entries: int = 200):
        super().__init__()
        self._entries: Deque[Dict] = deque(maxlen=max_entries)
        self._seq = itertools.count(1)
        self._lock = threading.Lock()

    @property
    def max_entries(self) -> Optional[int]:
        return self._entries.maxlen

    def emit(self, record: logging.LogRecord) -> None:
        with self._lock:
            self._entries.append(
                {
                    "seq": next(self._seq),
                    "event": record.getMessage(),
                    "level": record.levelname,
                    "logger": record.name,
                    "ts": record.created,
                    "details": clip_details(getattr(record, "details", None)),
                }
            )

    def get_events(self, since: int = 0) -> List[Dict]:
        """Entries still in the ring whose ``seq`` is greater than ``since``."""
        with self._lock:
            return [entry for entry in self._entries if entry["seq"] > since]

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


def clip_details(details: Optional[dict]) -> dict:
    if not details:
        return {}
    cleaned: dict[str, Any] = {}
    for key, value in details.items():
        if isinstance(value, str) and len(value) > MAX_DETAIL_LENGTH:
            value = value[:MAX_DETAIL_LENGTH] + "..."
        cleaned[key] = value
    return cleaned


def create_logger(name: str, ring_size: int) -> logging.Logger:
    logger = logging.getLogger(name)
    if any(isinstance(h, RingBufferHandler) for h in logger.handlers):
        return logger
    logger.setLevel(logging.DEBUG)
    handler = RingBufferHandler(max_entries=ring_size)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(settings: Optional[MonitorSettings] = None) -> logging.Logger:
    settings = settings or get_settings()
    return create_logger(settings.logger_name, settings.log_ring_size)


def ring_buffer(logger: logging.Logger) -> Optional[RingBufferHandler]:
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None
