"""Application service: Show Catalog use case (query)."""

from __future__ import annotations

from pos.application.dto import ProductDTO
from pos.domain.model.inventory import Inventory


class ShowCatalogHandler:

    def __init__(self, inventory: Inventory) -> None:
        self._inventory = inventory

    def handle(self) -> list[ProductDTO]:
        return [
            ProductDTO(
                name=product.name,
                price=str(product.price),
                promotion=product.promotion.describe(),
            )
            for product in self._inventory.products
        ]
