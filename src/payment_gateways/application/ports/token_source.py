from __future__ import annotations

from abc import ABC, abstractmethod


class TokenSource(ABC):
    """Port for the opaque part of transaction references.

    Contract:
    - next_token() MUST NOT repeat a token within the process (collision
      probability must be negligible for random implementations)
    - Tokens MUST NOT be predictable from previous tokens in production
    - Implementations MUST be safe to call from multiple threads
    """

    @abstractmethod
    def next_token(self) -> str:
        """Return a new opaque token."""
        ...
