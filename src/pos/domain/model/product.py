"""Product aggregate.

Products are created once by ``Inventory.register()`` and never change
afterwards, so every cart can share the same instance.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.model.promotion import NoPromotion, Promotion
from pos.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:

    name: str
    price: Money
    promotion: Promotion = NoPromotion()
