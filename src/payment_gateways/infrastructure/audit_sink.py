from __future__ import annotations

from threading import Lock
from typing import TYPE_CHECKING, TextIO

from payment_gateways.application.ports import AuditSink

if TYPE_CHECKING:
    from payment_gateways.domain.entities import LogEntry


class InMemoryAuditSink(AuditSink):
    """Audit sink keeping entries in a list, for tests and embedding.

    Implementation notes:
    - A single lock serializes appends and snapshots
    - entries returns a tuple snapshot; later appends do not mutate it
    - Unbounded: entries are never evicted
    """

    def __init__(self) -> None:
        self._entries: list[LogEntry] = []
        self._lock = Lock()

    def append(self, entry: LogEntry) -> None:
        with self._lock:
            self._entries.append(entry)

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        with self._lock:
            return tuple(self._entries)

    def entries_for(self, family_name: str) -> tuple[LogEntry, ...]:
        return tuple(e for e in self.entries if e.family_name == family_name)


class StreamAuditSink(AuditSink):
    """Audit sink writing one formatted line per entry to a text stream.

    Writes and flushes happen under a lock so lines from concurrent
    dispatches never interleave. The stream is not owned: the caller
    closes it.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._lock = Lock()

    def append(self, entry: LogEntry) -> None:
        line = entry.format() + "\n"
        with self._lock:
            self._stream.write(line)
            self._stream.flush()
