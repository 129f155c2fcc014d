"""
In-Memory Storage Implementations

Used by the test suite and for throwaway sessions. They satisfy the same
interfaces as the file-backed store, so ledger code cannot tell them apart.
"""

from collections import deque
from typing import Optional

from moneymate.models.audit import AuditEvent
from moneymate.services.storage.interface import (
    AuditStorageInterface,
    ByteStoreInterface,
    NotFoundError,
)


class InMemoryByteStore(ByteStoreInterface):
    """Dict-backed byte store."""

    def __init__(self, initial: Optional[dict[str, bytes]] = None):
        self._data: dict[str, bytes] = dict(initial or {})
        self.write_count = 0

    def read(self, name: str) -> bytes:
        try:
            return self._data[name]
        except KeyError:
            raise NotFoundError(f"No stored resource named {name!r}")

    def write(self, name: str, data: bytes) -> None:
        self._data[name] = bytes(data)
        self.write_count += 1

    def exists(self, name: str) -> bool:
        return name in self._data

    def delete(self, name: str) -> None:
        self._data.pop(name, None)


class InMemoryAuditStorage(AuditStorageInterface):
    """
    Keeps audit events in memory, oldest first.

    With `max_events` set, the oldest events are dropped once the limit
    is reached.
    """

    def __init__(self, max_events: Optional[int] = None):
        self._events: deque[AuditEvent] = deque(maxlen=max_events)

    @property
    def max_events(self) -> Optional[int]:
        return self._events.maxlen

    @property
    def events(self) -> list[AuditEvent]:
        return list(self._events)

    def append_event(self, event: AuditEvent) -> bool:
        self._events.append(event)
        return True

    def get_recent_events(self, limit: int = 100) -> list[AuditEvent]:
        return list(reversed(self._events))[:limit]
