"""Integration tests for scheduling, cancelling and the draft form."""

import pytest

from techstore.application.cancel_appointment import CancelAppointmentHandler
from techstore.application.edit_draft import EditDraftHandler
from techstore.application.schedule_appointment import ScheduleAppointmentHandler
from techstore.application.show_appointments import ShowAppointmentsHandler
from techstore.domain.exceptions import SchedulingBlockedError, ValidationError
from techstore.domain.model.appointment import AppointmentDraft
from techstore.domain.service.id_generator import SequentialIdGenerator
from tests.fakes import FakeAppointmentRepository, FakeDraftRepository

COMPLETE = AppointmentDraft(
    name="Bruno",
    email="bruno@example.com",
    phone="11 99999-0000",
    date="2026-10-21",
    time="14:00",
    details="Não liga",
)


def _setup(draft: AppointmentDraft | None = None):
    appointment_repo = FakeAppointmentRepository()
    draft_repo = FakeDraftRepository(draft)
    handler = ScheduleAppointmentHandler(
        appointment_repo, draft_repo, next_id=SequentialIdGenerator("apt")
    )
    return handler, appointment_repo, draft_repo


class TestSchedule:

    def test_creates_appointment_at_front(self):
        handler, repo, _ = _setup()
        handler.handle(COMPLETE)
        result = handler.handle(COMPLETE.with_changes(name="Carla"))

        appointments = repo.list_all()
        assert [a.id for a in appointments] == ["apt-000002", "apt-000001"]
        assert result.appointment.name == "Carla"

    def test_ids_are_unique(self):
        handler, repo, _ = _setup()
        for _ in range(5):
            handler.handle(COMPLETE)
        ids = [a.id for a in repo.list_all()]
        assert len(set(ids)) == 5

    def test_notice_has_date_and_time(self):
        handler, _, _ = _setup()
        result = handler.handle(COMPLETE)
        assert result.notice.title == "Agendamento criado!"
        assert result.notice.description == "2026-10-21 às 14:00"

    def test_uses_stored_draft_by_default(self):
        handler, repo, _ = _setup(COMPLETE)
        result = handler.handle()
        assert result.appointment.phone == "11 99999-0000"
        assert len(repo.list_all()) == 1

    def test_draft_survives_scheduling(self):
        handler, _, draft_repo = _setup(COMPLETE)
        handler.handle()
        assert draft_repo.get() == COMPLETE

    @pytest.mark.parametrize("field", ["name", "email", "phone", "date", "time"])
    def test_blocked_when_required_field_empty(self, field):
        handler, repo, _ = _setup()
        draft = COMPLETE.with_changes(**{field: ""})
        assert not handler.can_submit(draft)
        with pytest.raises(SchedulingBlockedError, match=field):
            handler.handle(draft)
        assert repo.list_all() == []


class TestCancel:

    def test_removes_only_that_appointment(self):
        handler, repo, _ = _setup()
        first = handler.handle(COMPLETE).appointment
        second = handler.handle(COMPLETE).appointment
        third = handler.handle(COMPLETE).appointment

        assert CancelAppointmentHandler(repo).handle(second.id) is True

        remaining = [a.id for a in ShowAppointmentsHandler(repo).handle()]
        assert remaining == [third.id, first.id]

    def test_unknown_id_is_noop(self):
        handler, repo, _ = _setup()
        handler.handle(COMPLETE)
        assert CancelAppointmentHandler(repo).handle("apt-nope") is False
        assert len(repo.list_all()) == 1


class TestEditDraft:

    def test_changes_are_saved(self):
        draft_repo = FakeDraftRepository()
        EditDraftHandler(draft_repo).handle(name="Dani", equipment="smartphone")
        stored = draft_repo.get()
        assert stored.name == "Dani"
        assert stored.equipment.value == "smartphone"

    def test_reset(self):
        draft_repo = FakeDraftRepository(COMPLETE)
        EditDraftHandler(draft_repo).reset()
        assert draft_repo.get() == AppointmentDraft()

    def test_unknown_equipment(self):
        with pytest.raises(ValidationError):
            EditDraftHandler(FakeDraftRepository()).handle(equipment="tablet")
