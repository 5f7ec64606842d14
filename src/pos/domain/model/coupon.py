"""Coupons: named, cart-level discount policies.

Like promotions, coupons form a closed set of frozen variants sharing
``name``, ``calculate_discount(subtotal)`` and ``describe()``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Union

from pos.domain.exceptions import ConfigurationError, ValidationError
from pos.domain.model.promotion import check_percent
from pos.domain.model.value_objects import Money


@dataclass(frozen=True)
class NoCoupon:
    """The coupon every cart starts with."""

    name: str = ""
    is_active = False

    def calculate_discount(self, subtotal: Money) -> Money:
        return Money.zero()

    def describe(self) -> str:
        return ""


@dataclass(frozen=True)
class PercentCoupon:

    name: str
    percent: int | float | Decimal
    is_active = True

    def __post_init__(self) -> None:
        check_percent(self.percent)

    def calculate_discount(self, subtotal: Money) -> Money:
        return subtotal.percent(self.percent)

    def describe(self) -> str:
        return f"Coupon {self.name} - {int(self.percent)}% off"


@dataclass(frozen=True)
class FlatAmountCoupon:
    """A fixed amount off, capped at the subtotal."""

    name: str
    amount: Money
    is_active = True

    def calculate_discount(self, subtotal: Money) -> Money:
        return min(subtotal, self.amount)

    def describe(self) -> str:
        return f"Coupon {self.name} - {self.amount} off"


Coupon = Union[NoCoupon, PercentCoupon, FlatAmountCoupon]


def create_coupon(name: str, spec: Mapping[str, Any]) -> Coupon:
    """Build the coupon *name* from a single-key spec.

    ``{"percent": 10}`` gives a PercentCoupon, ``{"amount": "5.00"}`` a
    FlatAmountCoupon.
    """
    if not isinstance(spec, Mapping) or len(spec) != 1:
        raise ConfigurationError(
            f"Coupon '{name}' spec must have exactly one entry, got {spec!r}"
        )

    tag, attrs = next(iter(spec.items()))
    if tag == "percent":
        return PercentCoupon(name, attrs)
    if tag == "amount":
        try:
            amount = Money.of(attrs)
        except ValidationError as exc:
            raise ConfigurationError(f"Coupon '{name}': {exc}") from exc
        return FlatAmountCoupon(name, amount)
    raise ConfigurationError(f"Unknown coupon type: '{tag}'")
