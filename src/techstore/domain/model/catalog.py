"""Catalog: the read-only product list used as filtering input.

A Catalog is built once at start-up and handed to whatever needs it;
there is no module-level product list.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from techstore.domain.exceptions import EntityNotFoundError, ValidationError
from techstore.domain.model.product import Category, Product

ALL_CATEGORIES = "all"


class Catalog:

    def __init__(self, products: Iterable[Product]) -> None:
        self._products: tuple[Product, ...] = tuple(products)
        seen: set[str] = set()
        for product in self._products:
            if product.id in seen:
                raise ValidationError(f"Duplicate product id in catalog: '{product.id}'")
            seen.add(product.id)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)

    @property
    def products(self) -> tuple[Product, ...]:
        return self._products

    def get(self, product_id: str) -> Product:
        for product in self._products:
            if product.id == product_id:
                return product
        raise EntityNotFoundError(f"Product not found: '{product_id}'")

    def filter(
        self,
        category: Category | str | None = None,
        query: str = "",
    ) -> list[Product]:
        """Products in *category* whose name or description contains *query*.

        ``None`` or ``"all"`` disables the category filter and an empty
        query matches everything.  Catalog order is preserved.
        """
        wanted = _resolve_category(category)
        return [
            p
            for p in self._products
            if (wanted is None or p.category == wanted) and p.matches(query)
        ]


def _resolve_category(category: Category | str | None) -> Category | None:
    if category is None or category == ALL_CATEGORIES:
        return None
    if isinstance(category, Category):
        return category
    try:
        return Category(category)
    except ValueError as exc:
        raise ValidationError(f"Unknown category: '{category}'") from exc
