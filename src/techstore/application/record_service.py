"""Record Service: the server-side list store for orders and appointments.

Two append-only collections held in process memory.  Records are stored
exactly as received: no schema check, no duplicate-id detection.  Newest
records come first.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

Record = dict[str, Any]


class RecordService:

    def __init__(self) -> None:
        self._orders: list[Record] = []
        self._appointments: list[Record] = []

    def create_order(self, record: Record) -> Any:
        self._orders.insert(0, record)
        logger.info("Stored order record %s", record.get("id"))
        return record.get("id")

    def create_appointment(self, record: Record) -> Any:
        self._appointments.insert(0, record)
        logger.info("Stored appointment record %s", record.get("id"))
        return record.get("id")

    def list_orders(self) -> list[Record]:
        return list(self._orders)

    def list_appointments(self) -> list[Record]:
        return list(self._appointments)
