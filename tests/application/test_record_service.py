"""Unit tests for the in-memory Record Service."""

from techstore.application.record_service import RecordService


def test_create_returns_id_and_prepends():
    service = RecordService()
    assert service.create_order({"id": "ord-1", "total": 10}) == "ord-1"
    service.create_order({"id": "ord-2"})
    assert [r["id"] for r in service.list_orders()] == ["ord-2", "ord-1"]


def test_duplicate_ids_coexist():
    service = RecordService()
    service.create_appointment({"id": "apt-1", "nome": "a"})
    service.create_appointment({"id": "apt-1", "nome": "b"})
    assert len(service.list_appointments()) == 2


def test_collections_are_independent():
    service = RecordService()
    service.create_order({"id": "ord-1"})
    assert service.list_appointments() == []


def test_listing_returns_a_copy():
    service = RecordService()
    service.create_order({"id": "ord-1"})
    service.list_orders().clear()
    assert len(service.list_orders()) == 1
