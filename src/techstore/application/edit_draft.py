"""Application service: Edit Draft use case.

Every change to the scheduling form is saved immediately so the draft
survives restarts.
"""

from __future__ import annotations

from techstore.domain.model.appointment import AppointmentDraft
from techstore.domain.repository.appointment_repository import DraftRepository


class EditDraftHandler:

    def __init__(self, draft_repo: DraftRepository) -> None:
        self._draft_repo = draft_repo

    def current(self) -> AppointmentDraft:
        return self._draft_repo.get()

    def handle(self, **changes: str) -> AppointmentDraft:
        draft = self._draft_repo.get().with_changes(**changes)
        self._draft_repo.save(draft)
        return draft

    def reset(self) -> AppointmentDraft:
        draft = AppointmentDraft()
        self._draft_repo.save(draft)
        return draft
