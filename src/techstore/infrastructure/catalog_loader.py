"""Loads the product catalog from a JSON file.

Unlike session state, a broken catalog is a configuration error and is
reported, not papered over.
"""

from __future__ import annotations

import json
from pathlib import Path

from techstore.domain.exceptions import ValidationError
from techstore.domain.model.catalog import Catalog
from techstore.infrastructure.persistence.records import MALFORMED, product_from_raw

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "catalog.json"


def load_catalog(file_path: Path = DEFAULT_CATALOG_PATH) -> Catalog:
    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ValidationError(f"Cannot read catalog {file_path}: {exc}") from exc

    try:
        return Catalog(product_from_raw(item) for item in raw)
    except MALFORMED as exc:
        raise ValidationError(f"Invalid catalog {file_path}: {exc}") from exc
