"""Tests for loading the catalog JSON."""

import json
from decimal import Decimal

import pytest

from techstore.domain.exceptions import ValidationError
from techstore.domain.model.product import Category
from techstore.domain.model.value_objects import Money
from techstore.infrastructure.catalog_loader import load_catalog


def test_shipped_catalog():
    catalog = load_catalog()
    assert [p.id for p in catalog] == ["p1", "p2", "p3", "p4", "p5", "p6"]

    ssd = catalog.get("p4")
    assert ssd.price == Money.of("499.90")
    assert ssd.category is Category.COMPONENTS
    assert ssd.rating == Decimal("4.8")
    assert ssd.specs[0] == "PCIe 4.0"
    assert catalog.get("p5").price == Money.of("349.00")


def test_custom_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([{
        "id": "x1", "name": "Mouse", "description": "USB", "price": "50.00",
        "category": "components", "rating": "4", "stock": 3,
    }]), encoding="utf-8")
    assert load_catalog(path).get("x1").name == "Mouse"


def test_missing_file_is_an_error(tmp_path):
    with pytest.raises(ValidationError, match="Cannot read catalog"):
        load_catalog(tmp_path / "nope.json")


def test_bad_entry_is_an_error(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([{"id": "x1", "name": "Mouse", "price": "-1"}]), encoding="utf-8")
    with pytest.raises(ValidationError, match="Invalid catalog"):
        load_catalog(path)
