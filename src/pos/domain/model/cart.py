"""Cart aggregate: line items plus at most one coupon.

A Cart is bound to the Inventory that created it and only ever reads from
it.  Carts are not safe for concurrent mutation; callers sharing one must
synchronise externally.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pos.domain.exceptions import InvalidQuantity
from pos.domain.model.coupon import Coupon, NoCoupon
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.domain.service.invoice_formatter import InvoiceFormatter

if TYPE_CHECKING:
    from pos.domain.model.inventory import Inventory

logger = logging.getLogger(__name__)

MAX_ITEM_COUNT = 99


class LineItem:
    """One product row in a cart.

    Invariant: ``0 <= count <= MAX_ITEM_COUNT``.  Violating changes are
    rejected, never clamped.
    """

    def __init__(self, product: Product, count: int = 0) -> None:
        if not 0 <= count <= MAX_ITEM_COUNT:
            raise InvalidQuantity(
                f"Quantity of {product.name} must be within 0..{MAX_ITEM_COUNT}, got {count}"
            )
        self._product = product
        self._count = count

    @property
    def product(self) -> Product:
        return self._product

    @property
    def count(self) -> int:
        return self._count

    @property
    def name(self) -> str:
        return self._product.name

    def increase(self, amount: int) -> None:
        new_count = self._count + amount
        if amount < 0 or new_count > MAX_ITEM_COUNT:
            raise InvalidQuantity(
                f"Cannot add {amount} of {self.name} "
                f"(have {self._count}, limit is {MAX_ITEM_COUNT})"
            )
        self._count = new_count

    # --- Pricing --------------------------------------------------------------

    @property
    def gross_price(self) -> Money:
        return self._product.price * self._count

    @property
    def discount(self) -> Money:
        return self._product.promotion.calculate_discount(self._count, self._product.price)

    @property
    def net_price(self) -> Money:
        return self.gross_price - self.discount

    @property
    def is_discounted(self) -> bool:
        return self._product.promotion.is_active

    @property
    def promotion_description(self) -> str:
        return self._product.promotion.describe()

    def __repr__(self) -> str:
        return f"LineItem({self.name!r}, count={self._count})"


class Cart:
    """Accumulates line items in insertion order against one Inventory."""

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory
        self._items: list[LineItem] = []
        self._coupon: Coupon = NoCoupon()

    @property
    def items(self) -> tuple[LineItem, ...]:
        return tuple(self._items)

    @property
    def coupon(self) -> Coupon:
        return self._coupon

    # --- Mutations ------------------------------------------------------------

    def add(self, product_name: str, amount: int = 1) -> None:
        """Add *amount* units of a product, merging with an existing row.

        Raises NotFound for unknown products and InvalidQuantity when the
        row count would leave 0..99.  A rejected call changes nothing.
        """
        product = self._inventory.get_item(product_name)

        item = self._find_item(product.name)
        try:
            if item is not None:
                item.increase(amount)
            else:
                self._items.append(LineItem(product, amount))
        except InvalidQuantity:
            logger.warning("Rejected adding %s x %r", amount, product_name)
            raise
        logger.debug("Added %s x %r to cart", amount, product_name)

    def use(self, coupon_name: str) -> None:
        """Apply a coupon, replacing any previously used one."""
        self._coupon = self._inventory.get_coupon(coupon_name)
        logger.debug("Using coupon %r", coupon_name)

    # --- Computed values ------------------------------------------------------

    def subtotal(self) -> Money:
        result = Money.zero()
        for item in self._items:
            result = result + item.net_price
        return result

    def coupon_discount(self) -> Money:
        return self._coupon.calculate_discount(self.subtotal())

    def total(self) -> Money:
        subtotal = self.subtotal()
        return subtotal - self._coupon.calculate_discount(subtotal)

    def invoice(self) -> str:
        return InvoiceFormatter().format(self)

    # --- Internal helpers -----------------------------------------------------

    def _find_item(self, product_name: str) -> LineItem | None:
        for item in self._items:
            if item.name == product_name:
                return item
        return None
