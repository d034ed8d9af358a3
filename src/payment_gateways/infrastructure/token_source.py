from __future__ import annotations

import itertools
from threading import Lock
from uuid import uuid4

from payment_gateways.application.ports import TokenSource

UUID_HEX_LENGTH = 32
MIN_TOKEN_LENGTH = 8


class UuidTokenSource(TokenSource):
    """Token source backed by random UUID4 values.

    uuid4() draws 122 random bits from os.urandom, so tokens are not
    guessable. The hex form is truncated for display. Character 12 is the
    fixed version digit "4", so the default of 16 characters carries 60
    random bits, enough that collisions over millions of references are
    negligible.
    """

    def __init__(self, length: int = 16) -> None:
        if not MIN_TOKEN_LENGTH <= length <= UUID_HEX_LENGTH:
            raise ValueError(
                f"token length must be between {MIN_TOKEN_LENGTH} and {UUID_HEX_LENGTH}, got {length}"
            )
        self._length = length

    def next_token(self) -> str:
        return uuid4().hex[: self._length]


class SequentialTokenSource(TokenSource):
    """Deterministic token source for tests.

    Produces zero-padded counters ("00000001", "00000002", ...). Predictable
    by construction: NEVER use it outside tests.
    """

    def __init__(self, start: int = 1, width: int = 8) -> None:
        self._counter = itertools.count(start)
        self._width = width
        self._lock = Lock()

    def next_token(self) -> str:
        with self._lock:
            value = next(self._counter)
        return f"{value:0{self._width}d}"
