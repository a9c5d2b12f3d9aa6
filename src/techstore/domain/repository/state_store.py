"""Abstract key-value store for session state.

This is the durable-store shim the session repositories sit on.  It is
best-effort by contract: ``load`` never raises for missing or corrupt
data and ``save`` never raises for storage failures.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class StateStore(ABC):

    @abstractmethod
    def load(self, key: str, default: Any) -> Any:
        """Return the stored value for *key*, or *default* if absent or unreadable."""

    @abstractmethod
    def save(self, key: str, value: Any) -> None:
        """Serialize and store *value*; storage failures are swallowed."""
