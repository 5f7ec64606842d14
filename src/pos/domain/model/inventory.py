"""Inventory aggregate — the product and coupon catalog.

The Inventory is append-only: products and coupons are registered once
and never removed.  It is also the factory for carts.

Registration is expected to finish before carts start reading from the
catalog; the Inventory does no locking of its own.  Registered Product
and Coupon instances are immutable and safe to share between carts.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from pos.domain.exceptions import (
    DuplicateCoupon,
    InvalidProduct,
    NotFound,
    ValidationError,
)
from pos.domain.model.cart import Cart
from pos.domain.model.coupon import Coupon, create_coupon
from pos.domain.model.product import Product
from pos.domain.model.promotion import create_promotion
from pos.domain.model.value_objects import Money

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MAX_NAME_LENGTH = 40
MIN_PRICE = Money(Decimal("0.01"))
MAX_PRICE = Money(Decimal("999.99"))


class Inventory:

    def __init__(self) -> None:
        self._products: list[Product] = []
        self._coupons: list[Coupon] = []

    @property
    def products(self) -> tuple[Product, ...]:
        return tuple(self._products)

    @property
    def coupons(self) -> tuple[Coupon, ...]:
        return tuple(self._coupons)

    # --- Registration ---------------------------------------------------------

    def register(
        self,
        name: str,
        price: str | int | float | Decimal,
        promotion: Mapping[str, Any] | None = None,
    ) -> Product:
        """Add a product to the catalog.

        Raises InvalidProduct when the name is longer than 40 characters,
        the price is outside 0.01..999.99 or the name is already taken.
        A malformed *promotion* raises ConfigurationError.
        """
        if not isinstance(name, str):
            raise InvalidProduct(f"Product name must be a string, got {name!r}")
        if len(name) > MAX_NAME_LENGTH:
            raise InvalidProduct(
                f"Product name '{name}' is longer than {MAX_NAME_LENGTH} characters"
            )

        try:
            money = Money.of(price)
        except ValidationError as exc:
            raise InvalidProduct(f"Invalid price for '{name}': {price!r}") from exc
        if not MIN_PRICE <= money <= MAX_PRICE:
            raise InvalidProduct(
                f"Price of '{name}' must be within {MIN_PRICE}..{MAX_PRICE}, got {money}"
            )

        if self._find_product(name) is not None:
            raise InvalidProduct(f"Product '{name}' already exists")

        product = Product(name=name, price=money, promotion=create_promotion(promotion))
        self._products.append(product)
        logger.info("Registered product %r at %s", name, money)
        return product

    def register_coupon(self, name: str, spec: Mapping[str, Any]) -> Coupon:
        """Add a named coupon.  Raises DuplicateCoupon if the name is taken."""
        if self._find_coupon(name) is not None:
            raise DuplicateCoupon(f"A coupon named '{name}' already exists")

        coupon = create_coupon(name, spec)
        self._coupons.append(coupon)
        logger.info("Registered coupon %r", name)
        return coupon

    # --- Lookups --------------------------------------------------------------

    def get_item(self, name: str) -> Product:
        product = self._find_product(name)
        if product is None:
            logger.warning("Unknown product requested: %r", name)
            raise NotFound(f"Product not found: '{name}'")
        return product

    def get_coupon(self, name: str) -> Coupon:
        coupon = self._find_coupon(name)
        if coupon is None:
            logger.warning("Unknown coupon requested: %r", name)
            raise NotFound(f"Coupon not found: '{name}'")
        return coupon

    def new_cart(self) -> Cart:
        return Cart(self)

    # --- Internal helpers -----------------------------------------------------

    def _find_product(self, name: str) -> Product | None:
        for product in self._products:
            if product.name == name:
                return product
        return None

    def _find_coupon(self, name: str) -> Coupon | None:
        for coupon in self._coupons:
            if coupon.name == name:
                return coupon
        return None
