"""Derived-field rules — pure functions that recompute dependent attributes.

Product stock tiers:
    stock <= 0      → Out of Stock
    1 <= stock <= 5 → Low Stock
    stock > 5       → In Stock

A NaN stock fails both comparisons and lands in "In Stock".
"""

import math
from dataclasses import replace

from dashboard_store.domain.entities.product import Product, ProductStatus

LOW_STOCK_THRESHOLD = 5


def stock_status(stock: object) -> ProductStatus:
    """Map a stock level to its status tier. Non-numeric stock counts as NaN."""
    stock = parse_number(stock)
    if stock <= 0:
        return ProductStatus.OUT_OF_STOCK
    if stock <= LOW_STOCK_THRESHOLD:
        return ProductStatus.LOW_STOCK
    return ProductStatus.IN_STOCK


def apply_stock_status(product: Product) -> Product:
    """Return ``product`` with ``status`` consistent with ``stock``.

    Idempotent; returns the same instance when nothing changes.
    """
    status = stock_status(product.stock)
    if product.status == status:
        return product
    return replace(product, status=status)


def parse_number(raw: object) -> float:
    """Convert raw form input to a number, or NaN when it is not numeric."""
    if isinstance(raw, bool):
        return math.nan
    if isinstance(raw, (int, float)):
        return raw
    try:
        return float(str(raw).strip())
    except ValueError:
        return math.nan


def preview_stock_status(raw_stock: object) -> ProductStatus:
    """Status a create/edit form should display while the stock field is edited."""
    return stock_status(parse_number(raw_stock))
