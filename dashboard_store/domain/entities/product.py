"""Domain entity for catalogue products."""

from dataclasses import dataclass
from enum import Enum

from .common import coerce_enum


class ProductCategory(str, Enum):
    ELECTRONICS = "Electronics"
    ACCESSORIES = "Accessories"
    CLOTHING = "Clothing"
    HOME = "Home"
    BOOKS = "Books"
    SPORTS = "Sports"
    OTHER = "Other"


class ProductStatus(str, Enum):
    """Stock tier, always derived from ``Product.stock``."""

    IN_STOCK = "In Stock"
    LOW_STOCK = "Low Stock"
    OUT_OF_STOCK = "Out of Stock"


@dataclass(frozen=True)
class Product:
    """A product in the catalogue.

    ``status`` is a derived field: the store recomputes it from ``stock``
    on every write, see ``dashboard_store.domain.rules``. ``created_at``
    is stamped once at creation and never changes afterwards.
    """

    id: str
    name: str
    description: str
    price: float
    category: ProductCategory
    stock: int | float  # NaN when the form input was not numeric
    status: ProductStatus
    created_at: str  # ISO date

    def __post_init__(self) -> None:
        coerce_enum(self, "category", ProductCategory)
        coerce_enum(self, "status", ProductStatus)
