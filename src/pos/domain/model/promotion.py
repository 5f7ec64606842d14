"""Promotions — per-product discount policies applied to a line item.

A promotion is one of a closed set of variants.  Each variant is a frozen
dataclass exposing the same two operations:

- ``calculate_discount(count, unit_price)`` -> Money
- ``describe()`` -> str, the text shown on the invoice

``create_promotion()`` turns a registration spec such as
``{"get_one_free": 3}`` into exactly one variant.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Union

from pos.domain.exceptions import ConfigurationError
from pos.domain.model.value_objects import Money


def ordinalize(number: int) -> str:
    """Render *number* with its English ordinal suffix (1st, 2nd, 11th...)."""
    if 11 <= number % 100 <= 13:
        return f"{number}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"


def check_percent(percent: Any) -> None:
    """Percents may be any real number within 0..100."""
    if isinstance(percent, bool) or not isinstance(percent, (int, float, Decimal)):
        raise ConfigurationError(f"Discount percent must be a number, got {percent!r}")
    if isinstance(percent, Decimal) and percent.is_nan():
        raise ConfigurationError("Discount percent cannot be NaN")
    if not 0 <= percent <= 100:
        raise ConfigurationError(f"Discount percent must be within 0..100, got {percent}")


@dataclass(frozen=True)
class NoPromotion:

    is_active = False

    def calculate_discount(self, count: int, unit_price: Money) -> Money:
        return Money.zero()

    def describe(self) -> str:
        return ""


@dataclass(frozen=True)
class GetOneFree:
    """Every ``frequency``-th unit is free."""

    frequency: int
    is_active = True

    def __post_init__(self) -> None:
        if isinstance(self.frequency, bool) or not isinstance(self.frequency, int):
            raise ConfigurationError(f"Frequency must be an integer, got {self.frequency!r}")
        if self.frequency < 2:
            raise ConfigurationError(f"Frequency must be at least 2, got {self.frequency}")

    def calculate_discount(self, count: int, unit_price: Money) -> Money:
        return unit_price * (count // self.frequency)

    def describe(self) -> str:
        return f"buy {self.frequency - 1}, get 1 free"


@dataclass(frozen=True)
class Package:
    """``percent`` off every unit that belongs to a whole package of ``size``."""

    size: int
    percent: int | float | Decimal
    is_active = True

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise ConfigurationError(f"Package size must be an integer, got {self.size!r}")
        if self.size < 1:
            raise ConfigurationError(f"Package size must be at least 1, got {self.size}")
        check_percent(self.percent)

    def calculate_discount(self, count: int, unit_price: Money) -> Money:
        discounted_units = count - count % self.size
        return (unit_price * discounted_units).percent(self.percent)

    def describe(self) -> str:
        return f"get {int(self.percent)}% off for every {self.size}"


@dataclass(frozen=True)
class Threshold:
    """``percent`` off every unit bought after the first ``threshold``."""

    threshold: int
    percent: int | float | Decimal
    is_active = True

    def __post_init__(self) -> None:
        if isinstance(self.threshold, bool) or not isinstance(self.threshold, int):
            raise ConfigurationError(f"Threshold must be an integer, got {self.threshold!r}")
        if self.threshold < 0:
            raise ConfigurationError(f"Threshold cannot be negative, got {self.threshold}")
        check_percent(self.percent)

    def calculate_discount(self, count: int, unit_price: Money) -> Money:
        if count <= self.threshold:
            return Money.zero()
        return (unit_price * (count - self.threshold)).percent(self.percent)

    def describe(self) -> str:
        return f"{int(self.percent)}% off of every after the {ordinalize(self.threshold)}"


Promotion = Union[NoPromotion, GetOneFree, Package, Threshold]


def _pair(tag: str, attrs: Any) -> tuple[Any, Any]:
    """Unpack ``{3: 20}`` or ``[3, 20]`` into a two-tuple."""
    if isinstance(attrs, Mapping) and len(attrs) == 1:
        return next(iter(attrs.items()))
    if isinstance(attrs, (list, tuple)) and len(attrs) == 2:
        return attrs[0], attrs[1]
    raise ConfigurationError(
        f"Promotion '{tag}' expects a single pair like {{size: percent}}, got {attrs!r}"
    )


def create_promotion(spec: Mapping[str, Any] | None = None) -> Promotion:
    """Build the promotion described by a single-key *spec* mapping.

    ``None`` or an empty mapping means the product has no promotion.
    """
    if not spec:
        return NoPromotion()
    if not isinstance(spec, Mapping) or len(spec) != 1:
        raise ConfigurationError(f"Promotion spec must have exactly one entry, got {spec!r}")

    tag, attrs = next(iter(spec.items()))
    if tag == "get_one_free":
        return GetOneFree(attrs)
    if tag == "package":
        size, percent = _pair(tag, attrs)
        return Package(size, percent)
    if tag == "threshold":
        threshold, percent = _pair(tag, attrs)
        return Threshold(threshold, percent)
    raise ConfigurationError(f"Unknown promotion type: '{tag}'")
