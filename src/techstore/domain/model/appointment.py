"""Service appointments and the draft form that precedes them.

An Appointment is created from a complete draft and only ever goes away
through cancellation; there is no update-in-place.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from datetime import date
from enum import Enum
from functools import lru_cache

from techstore.domain.exceptions import ValidationError

OPENING_HOUR = 9
CLOSING_HOUR = 18
SLOT_MINUTES = 30


class EquipmentType(Enum):
    NOTEBOOK = "notebook"
    SMARTPHONE = "smartphone"
    PC = "pc"


SERVICE_ISSUES: dict[EquipmentType, tuple[str, ...]] = {
    EquipmentType.NOTEBOOK: (
        "Tela quebrada",
        "Troca de SSD/RAM",
        "Formatação e Backup",
        "Bateria fraca",
        "Lentidão",
    ),
    EquipmentType.SMARTPHONE: (
        "Troca de tela",
        "Bateria",
        "Conector de carga",
        "Câmera",
        "Água/oxidação",
    ),
    EquipmentType.PC: (
        "Montagem",
        "Upgrade GPU/CPU",
        "Reinstalação Windows",
        "Limpeza",
        "Diagnóstico",
    ),
}


def issues_for(equipment: EquipmentType | str) -> tuple[str, ...]:
    """The enumerated issue list offered for an equipment type."""
    return SERVICE_ISSUES[parse_equipment(equipment)]


def parse_equipment(value: EquipmentType | str) -> EquipmentType:
    if isinstance(value, EquipmentType):
        return value
    try:
        return EquipmentType(value)
    except ValueError as exc:
        raise ValidationError(f"Unknown equipment type: '{value}'") from exc


@lru_cache(maxsize=None)
def time_slots() -> tuple[str, ...]:
    """Half-hour labels from 09:00 through 18:00, both ends included."""
    slots = []
    minute = OPENING_HOUR * 60
    while minute <= CLOSING_HOUR * 60:
        slots.append(f"{minute // 60:02d}:{minute % 60:02d}")
        minute += SLOT_MINUTES
    return tuple(slots)


@dataclass(frozen=True)
class AppointmentDraft:
    """In-progress scheduling form.

    ``date`` and ``time`` stay as the raw strings the form holds
    (``YYYY-MM-DD`` and ``HH:MM``); empty means "not chosen yet".
    """

    equipment: EquipmentType = EquipmentType.NOTEBOOK
    issue: str = SERVICE_ISSUES[EquipmentType.NOTEBOOK][0]
    name: str = ""
    email: str = ""
    phone: str = ""
    date: str = ""
    time: str = ""
    details: str = ""

    REQUIRED = ("name", "email", "phone", "date", "time")

    @property
    def missing_fields(self) -> list[str]:
        return [name for name in self.REQUIRED if not getattr(self, name).strip()]

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields

    def with_changes(self, **changes: str) -> AppointmentDraft:
        """Return a copy with some fields replaced; unknown names are rejected."""
        known = {f.name for f in fields(self)}
        unknown = set(changes) - known
        if unknown:
            raise ValidationError(f"Unknown draft field(s): {', '.join(sorted(unknown))}")
        if "equipment" in changes:
            changes["equipment"] = parse_equipment(changes["equipment"])  # type: ignore[assignment]
        return replace(self, **changes)


@dataclass(frozen=True)
class Appointment:
    """A booked service visit; removed only by cancellation."""

    id: str
    equipment: EquipmentType
    issue: str
    name: str
    email: str
    phone: str
    date: date
    time: str
    details: str = ""

    @staticmethod
    def from_draft(appointment_id: str, draft: AppointmentDraft) -> Appointment:
        if not draft.is_complete:
            raise ValidationError(
                "Appointment is missing: " + ", ".join(draft.missing_fields)
            )
        try:
            day = date.fromisoformat(draft.date)
        except ValueError as exc:
            raise ValidationError(f"Invalid appointment date: '{draft.date}'") from exc
        return Appointment(
            id=appointment_id,
            equipment=draft.equipment,
            issue=draft.issue,
            name=draft.name,
            email=draft.email,
            phone=draft.phone,
            date=day,
            time=draft.time,
            details=draft.details,
        )


def min_date(today: date) -> str:
    """Earliest date a date picker should accept, as an ISO string."""
    return today.isoformat()
