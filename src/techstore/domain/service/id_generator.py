"""Id generation strategies for orders and appointments.

Ids look like ``ord-k3j9x0a`` / ``apt-000001``: a prefix, a dash and a
suffix of at least six characters.  Handlers take an IdGenerator so tests
can use the sequential one and assert on exact ids.
"""

from __future__ import annotations

import secrets
import string
from abc import ABC, abstractmethod
from itertools import count

ORDER_PREFIX = "ord"
APPOINTMENT_PREFIX = "apt"

_ALPHABET = string.ascii_lowercase + string.digits


class IdGenerator(ABC):

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix

    def __call__(self) -> str:
        return f"{self.prefix}-{self._suffix()}"

    @abstractmethod
    def _suffix(self) -> str:
        """Return the part after the dash."""


class RandomIdGenerator(IdGenerator):
    """Random base-36 suffix; not meant to be unguessable."""

    def __init__(self, prefix: str, length: int = 7) -> None:
        super().__init__(prefix)
        if length < 6:
            raise ValueError("Id suffix must be at least 6 characters")
        self._length = length

    def _suffix(self) -> str:
        return "".join(secrets.choice(_ALPHABET) for _ in range(self._length))


class SequentialIdGenerator(IdGenerator):
    """Monotonic counter: ``ord-000001``, ``ord-000002``, ..."""

    def __init__(self, prefix: str, start: int = 1) -> None:
        super().__init__(prefix)
        self._counter = count(start)

    def _suffix(self) -> str:
        return f"{next(self._counter):06d}"
