"""Application service: Checkout use case.

Builds a fresh cart from the customer's item list, applies an optional
coupon and renders the invoice.
"""

from __future__ import annotations

import logging

from pos.application.dto import CartItemSpec, InvoiceDTO
from pos.domain.model.inventory import Inventory

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(
        self,
        item_specs: list[CartItemSpec],
        coupon_name: str | None = None,
    ) -> InvoiceDTO:
        """Price a cart.

        Items are added in the given order, so repeated product names are
        merged into one row.  Any domain error aborts the checkout.
        """
        cart = self._inventory.new_cart()
        for spec in item_specs:
            cart.add(spec.product_name, spec.quantity)

        if coupon_name:
            cart.use(coupon_name)

        total = cart.total()
        logger.info("Checked out %d line item(s), total %s", len(cart.items), total)
        return InvoiceDTO(
            text=cart.invoice(),
            total=str(total),
            coupon=cart.coupon.name,
        )
