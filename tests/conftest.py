"""Shared pytest fixtures: a small grocery catalog."""

import json

import pytest

from pos.domain.model.inventory import Inventory


@pytest.fixture
def inventory() -> Inventory:
    inventory = Inventory()

    inventory.register("Green Tea", "0.79", {"get_one_free": 3})
    inventory.register("Black Coffee", "1.99", {"package": {2: 20}})
    inventory.register("Milk", "1.49", {"threshold": {10: 50}})
    inventory.register("Cereal", "2.49")

    inventory.register_coupon("TEA-TIME", {"percent": 20})
    inventory.register_coupon("FIVE", {"amount": "5.00"})

    return inventory


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps(
            {
                "products": [
                    {"name": "Green Tea", "price": "0.79", "promotion": {"get_one_free": 3}},
                    {"name": "Black Coffee", "price": "1.99", "promotion": {"package": {"2": 20}}},
                    {"name": "Milk", "price": "1.49", "promotion": {"threshold": [10, 50]}},
                    {"name": "Cereal", "price": 2.49},
                ],
                "coupons": [
                    {"name": "TEA-TIME", "coupon": {"percent": 20}},
                    {"name": "FIVE", "coupon": {"amount": "5.00"}},
                ],
            }
        ),
        encoding="utf-8",
    )
    return path
