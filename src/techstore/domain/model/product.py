"""Product entity and the category enumeration.

Products are defined once when the catalog is loaded and never change
afterwards.  ``stock`` is informational only; nothing decrements it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from techstore.domain.exceptions import ValidationError
from techstore.domain.model.value_objects import Money

MAX_RATING = Decimal("5")


class Category(Enum):
    LAPTOPS = "laptops"
    PHONES = "phones"
    MONITORS = "monitors"
    COMPONENTS = "components"


@dataclass(frozen=True)
class Product:
    """A product in the catalog."""

    id: str
    name: str
    description: str
    price: Money
    category: Category
    rating: Decimal
    stock: int
    image: str = ""
    specs: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.id or not self.id.strip():
            raise ValidationError("Product id is required")
        if not self.name or not self.name.strip():
            raise ValidationError(f"Product '{self.id}' needs a name")
        if not Decimal("0") <= self.rating <= MAX_RATING:
            raise ValidationError(
                f"Rating for '{self.id}' must be between 0 and {MAX_RATING}, "
                f"got {self.rating}"
            )
        if self.stock < 0:
            raise ValidationError(f"Stock for '{self.id}' cannot be negative")

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match against name or description."""
        needle = query.lower()
        return needle in self.name.lower() or needle in self.description.lower()
