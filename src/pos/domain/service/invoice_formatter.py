"""Domain service: Invoice formatting.

Renders a cart as a fixed-width text table.  The layout is a contract
other tools compare against, so column widths never change:

    +------------------------------------------------+----------+
    | Name                                       qty |    price |
    +------------------------------------------------+----------+
    | Widget                                       3 |    30.00 |
    |   (buy 2, get 1 free)                          |   -10.00 |
    +------------------------------------------------+----------+
    | TOTAL                                          |    20.00 |
    +------------------------------------------------+----------+
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pos.domain.model.value_objects import Money

if TYPE_CHECKING:
    from pos.domain.model.cart import Cart, LineItem

DELIMITER_LINE = "+" + "-" * 48 + "+" + "-" * 10 + "+\n"


def _amount(money: Money) -> str:
    return f"{money.cents:8.2f}"


def _negated(money: Money) -> str:
    # a zero discount still prints as -0.00
    return f"{money.cents.copy_negate():8.2f}"


class InvoiceFormatter:

    def format(self, cart: Cart) -> str:
        parts = [self._header()]
        parts.extend(self._product_entry(item) for item in cart.items)
        parts.append(self._coupon_entry(cart))
        parts.append(self._footer(cart.total()))
        return "".join(parts)

    # --- Sections -------------------------------------------------------------

    @staticmethod
    def _header() -> str:
        return (
            DELIMITER_LINE
            + f"| {'Name':<42} qty | {'price':>8} |\n"
            + DELIMITER_LINE
        )

    @staticmethod
    def _product_entry(item: LineItem) -> str:
        entry = f"| {item.name:<42} {item.count:>3} | {_amount(item.gross_price)} |\n"
        if item.is_discounted:
            description = f"({item.promotion_description})"
            entry += f"|   {description:<44} | {_negated(item.discount)} |\n"
        return entry

    @staticmethod
    def _coupon_entry(cart: Cart) -> str:
        if not cart.coupon.is_active:
            return ""
        return (
            f"| {cart.coupon.describe():<46} | {_negated(cart.coupon_discount())} |\n"
        )

    @staticmethod
    def _footer(total: Money) -> str:
        return (
            DELIMITER_LINE
            + f"| {'TOTAL':<46} | {_amount(total)} |\n"
            + DELIMITER_LINE
        )
