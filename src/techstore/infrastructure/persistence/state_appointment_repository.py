"""StateStore-backed implementations of AppointmentRepository and DraftRepository."""

from __future__ import annotations

from typing import Any

from techstore.domain.model.appointment import Appointment, AppointmentDraft
from techstore.domain.repository.appointment_repository import (
    AppointmentRepository,
    DraftRepository,
)
from techstore.domain.repository.state_store import StateStore
from techstore.infrastructure.persistence.records import (
    appointment_from_raw,
    appointment_to_raw,
    draft_from_raw,
    draft_to_raw,
    load_or_default,
)

APPOINTMENTS_KEY = "ts_appts"
DRAFT_KEY = "ts_schedule_draft"


class StateAppointmentRepository(AppointmentRepository):

    def __init__(self, store: StateStore) -> None:
        self._store = store

    def list_all(self) -> list[Appointment]:
        return load_or_default(self._store, APPOINTMENTS_KEY, self._to_domain, list)

    def add(self, appointment: Appointment) -> None:
        self._persist([appointment, *self.list_all()])

    def remove(self, appointment_id: str) -> bool:
        current = self.list_all()
        remaining = [a for a in current if a.id != appointment_id]
        self._persist(remaining)
        return len(remaining) != len(current)

    def _persist(self, appointments: list[Appointment]) -> None:
        self._store.save(APPOINTMENTS_KEY, [appointment_to_raw(a) for a in appointments])

    @staticmethod
    def _to_domain(raw: list[dict[str, Any]]) -> list[Appointment]:
        return [appointment_from_raw(item) for item in raw]


class StateDraftRepository(DraftRepository):

    def __init__(self, store: StateStore) -> None:
        self._store = store

    def get(self) -> AppointmentDraft:
        return load_or_default(self._store, DRAFT_KEY, draft_from_raw, AppointmentDraft)

    def save(self, draft: AppointmentDraft) -> None:
        self._store.save(DRAFT_KEY, draft_to_raw(draft))
