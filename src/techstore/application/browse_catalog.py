"""Application service: Browse Catalog use case (query)."""

from __future__ import annotations

from techstore.application.dto import ProductDTO
from techstore.application.mappers import product_to_dto
from techstore.domain.model.catalog import Catalog
from techstore.domain.model.product import Category


class BrowseCatalogHandler:

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def handle(
        self,
        category: Category | str | None = None,
        query: str = "",
    ) -> list[ProductDTO]:
        return [product_to_dto(p) for p in self._catalog.filter(category, query)]
