"""Application service: Cancel Appointment use case.

Cancelling an id that is not in the history is a no-op, not an error.
"""

from __future__ import annotations

import logging

from techstore.domain.repository.appointment_repository import AppointmentRepository

logger = logging.getLogger(__name__)


class CancelAppointmentHandler:

    def __init__(self, appointment_repo: AppointmentRepository) -> None:
        self._appointment_repo = appointment_repo

    def handle(self, appointment_id: str) -> bool:
        removed = self._appointment_repo.remove(appointment_id)
        if not removed:
            logger.debug("No appointment %s to cancel", appointment_id)
        return removed
