from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


@dataclass(frozen=True, slots=True)
class LogEntry:
    """One audit line for a completed transaction.

    Entries are append-only; they have no identity beyond their position
    in the sink they were written to.
    """

    timestamp: datetime
    family_name: str
    message: str

    def format(self) -> str:
        """Render the entry as a single human-readable audit line."""
        return f"[{self.family_name} Log] {self.timestamp.isoformat()}: {self.message}"
