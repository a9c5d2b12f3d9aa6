"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.  Configuration comes
from environment variables so tests can point everything at a temp dir.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from techstore.domain.model.catalog import Catalog
from techstore.domain.service.id_generator import (
    APPOINTMENT_PREFIX,
    ORDER_PREFIX,
    RandomIdGenerator,
)
from techstore.infrastructure.catalog_loader import DEFAULT_CATALOG_PATH, load_catalog
from techstore.infrastructure.persistence.json_state_store import JsonFileStateStore
from techstore.infrastructure.persistence.state_appointment_repository import (
    StateAppointmentRepository,
    StateDraftRepository,
)
from techstore.infrastructure.persistence.state_cart_repository import (
    StateCartRepository,
)
from techstore.infrastructure.persistence.state_order_repository import (
    StateOrderRepository,
)

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
STATE_FILE = "session.json"
DEFAULT_PORT = 3001


def data_dir() -> Path:
    return Path(os.environ.get("TECHSTORE_DATA_DIR", _DEFAULT_DATA_DIR))


def catalog_path() -> Path:
    return Path(os.environ.get("TECHSTORE_CATALOG", DEFAULT_CATALOG_PATH))


def debug_enabled() -> bool:
    return bool(os.environ.get("TECHSTORE_DEBUG"))


@lru_cache(maxsize=None)
def _catalog_for(path: Path) -> Catalog:
    return load_catalog(path)


def catalog() -> Catalog:
    """The catalog is read once per process and then shared."""
    return _catalog_for(catalog_path())


def state_store() -> JsonFileStateStore:
    return JsonFileStateStore(data_dir() / STATE_FILE)


def cart_repository() -> StateCartRepository:
    return StateCartRepository(state_store())


def order_repository() -> StateOrderRepository:
    return StateOrderRepository(state_store())


def appointment_repository() -> StateAppointmentRepository:
    return StateAppointmentRepository(state_store())


def draft_repository() -> StateDraftRepository:
    return StateDraftRepository(state_store())


def order_ids() -> RandomIdGenerator:
    return RandomIdGenerator(ORDER_PREFIX)


def appointment_ids() -> RandomIdGenerator:
    return RandomIdGenerator(APPOINTMENT_PREFIX)
