"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartItemSpec:
    """Input: what the customer asked for (product name + quantity)."""

    product_name: str
    quantity: int


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog entry as displayed to the user."""

    name: str
    price: str  # formatted, e.g. "15.00"
    promotion: str  # empty when the product has no promotion


@dataclass(frozen=True)
class InvoiceDTO:
    """Output: a checked-out cart."""

    text: str
    total: str
    coupon: str  # empty when no coupon was used
