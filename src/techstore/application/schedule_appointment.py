"""Application service: Schedule Appointment use case.

Builds an Appointment from the draft form and puts it at the front of
the appointment history.  The earliest-date rule belongs to whoever
presents the date picker; it is not re-checked here.
"""

from __future__ import annotations

import logging

from techstore.application.dto import Notice, ScheduleResult
from techstore.application.mappers import appointment_to_dto
from techstore.domain.exceptions import SchedulingBlockedError
from techstore.domain.model.appointment import Appointment, AppointmentDraft
from techstore.domain.repository.appointment_repository import (
    AppointmentRepository,
    DraftRepository,
)
from techstore.domain.service.id_generator import IdGenerator

logger = logging.getLogger(__name__)


class ScheduleAppointmentHandler:

    def __init__(
        self,
        appointment_repo: AppointmentRepository,
        draft_repo: DraftRepository,
        next_id: IdGenerator,
    ) -> None:
        self._appointment_repo = appointment_repo
        self._draft_repo = draft_repo
        self._next_id = next_id

    @staticmethod
    def can_submit(draft: AppointmentDraft) -> bool:
        return draft.is_complete

    def handle(self, draft: AppointmentDraft | None = None) -> ScheduleResult:
        """Create the appointment from *draft*, or from the stored draft."""
        if draft is None:
            draft = self._draft_repo.get()
        if not self.can_submit(draft):
            raise SchedulingBlockedError(
                "Fill in " + ", ".join(draft.missing_fields) + " before scheduling"
            )

        appointment = Appointment.from_draft(self._next_id(), draft)
        self._appointment_repo.add(appointment)

        logger.info(
            "Appointment %s booked for %s %s",
            appointment.id, appointment.date, appointment.time,
        )
        return ScheduleResult(
            appointment=appointment_to_dto(appointment),
            notice=Notice(
                title="Agendamento criado!",
                description=f"{draft.date} às {draft.time}",
            ),
        )
