from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payment_gateways.domain.entities import LogEntry


class AuditSink(ABC):
    """Port for the append-only audit trail.

    Contract:
    - append() records entries in call order
    - Implementations shared between threads MUST serialize appends so
      concurrent audit lines are never interleaved or corrupted
    - append() MAY raise; transaction loggers swallow sink failures so they
      never affect a payment outcome

    The sink only guarantees ordering and family tagging. Storage medium
    (memory, console, file, aggregator) is up to the implementation.
    """

    @abstractmethod
    def append(self, entry: LogEntry) -> None:
        """Append one audit entry.

        Args:
            entry: The entry to record.
        """
