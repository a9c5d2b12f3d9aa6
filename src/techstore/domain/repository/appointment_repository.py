"""Abstract repositories for appointments and the scheduling draft."""

from __future__ import annotations

from abc import ABC, abstractmethod

from techstore.domain.model.appointment import Appointment, AppointmentDraft


class AppointmentRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Appointment]:
        """Return every appointment, most recent first."""

    @abstractmethod
    def add(self, appointment: Appointment) -> None:
        """Put a new appointment at the front of the history."""

    @abstractmethod
    def remove(self, appointment_id: str) -> bool:
        """Drop the appointment with that id; False if there was none."""


class DraftRepository(ABC):

    @abstractmethod
    def get(self) -> AppointmentDraft:
        """Return the stored draft, or a fresh default one."""

    @abstractmethod
    def save(self, draft: AppointmentDraft) -> None:
        """Persist the draft as it is now."""
