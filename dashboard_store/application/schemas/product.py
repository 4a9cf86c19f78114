"""Pydantic schemas for the Product collection.

``status`` is absent from ``ProductCreate``: it is derived from ``stock``
when the store builds the record.
"""

from pydantic import Field

from dashboard_store.domain.entities import ProductCategory, ProductStatus

from .base import IsoDate, Number, RecordSchema


class ProductCreate(RecordSchema):
    """Schema for creating a new product."""

    name: str = ""
    description: str = ""
    price: Number = 0.0
    category: ProductCategory = ProductCategory.ELECTRONICS
    stock: Number = 0


class ProductRecord(RecordSchema):
    """Persisted shape of a product under the ``products`` key."""

    id: str = Field(min_length=1)
    name: str
    description: str
    price: Number
    category: ProductCategory
    stock: Number
    status: ProductStatus
    created_at: IsoDate
