"""Application service: Show Appointments use case (query)."""

from __future__ import annotations

from techstore.application.dto import AppointmentDTO
from techstore.application.mappers import appointment_to_dto
from techstore.domain.repository.appointment_repository import AppointmentRepository


class ShowAppointmentsHandler:

    def __init__(self, appointment_repo: AppointmentRepository) -> None:
        self._appointment_repo = appointment_repo

    def handle(self) -> list[AppointmentDTO]:
        return [appointment_to_dto(a) for a in self._appointment_repo.list_all()]
