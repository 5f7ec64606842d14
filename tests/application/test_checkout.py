"""Tests for the Checkout and Show Catalog use cases."""

import pytest

from pos.application.checkout import CheckoutHandler
from pos.application.dto import CartItemSpec, ProductDTO
from pos.application.show_catalog import ShowCatalogHandler
from pos.domain.exceptions import InvalidQuantity, NotFound


class TestCheckoutHappyPath:

    def test_total_and_coupon(self, inventory):
        handler = CheckoutHandler(inventory)
        dto = handler.handle(
            [CartItemSpec("Green Tea", 8), CartItemSpec("Cereal", 1)],
            coupon_name="FIVE",
        )
        # 6.32 - 1.58 + 2.49 = 7.23, minus 5.00
        assert dto.total == "2.23"
        assert dto.coupon == "FIVE"
        assert "| Coupon FIVE - 5.00 off" in dto.text

    def test_without_coupon(self, inventory):
        dto = CheckoutHandler(inventory).handle([CartItemSpec("Cereal", 2)])
        assert dto.total == "4.98"
        assert dto.coupon == ""
        assert "Coupon" not in dto.text

    def test_repeated_items_merge(self, inventory):
        dto = CheckoutHandler(inventory).handle(
            [CartItemSpec("Cereal", 1), CartItemSpec("Cereal", 2)]
        )
        assert "| Cereal                                       3 |" in dto.text

    def test_each_checkout_uses_a_fresh_cart(self, inventory):
        handler = CheckoutHandler(inventory)
        handler.handle([CartItemSpec("Cereal", 1)])
        dto = handler.handle([CartItemSpec("Cereal", 1)])
        assert dto.total == "2.49"


class TestCheckoutValidation:

    def test_unknown_product(self, inventory):
        with pytest.raises(NotFound, match="Product not found"):
            CheckoutHandler(inventory).handle([CartItemSpec("Bread", 1)])

    def test_unknown_coupon(self, inventory):
        with pytest.raises(NotFound, match="Coupon not found"):
            CheckoutHandler(inventory).handle([CartItemSpec("Cereal", 1)], "NOPE")

    def test_quantity_over_limit(self, inventory):
        with pytest.raises(InvalidQuantity):
            CheckoutHandler(inventory).handle(
                [CartItemSpec("Cereal", 60), CartItemSpec("Cereal", 40)]
            )


class TestShowCatalog:

    def test_lists_products_in_registration_order(self, inventory):
        products = ShowCatalogHandler(inventory).handle()
        assert products == [
            ProductDTO("Green Tea", "0.79", "buy 2, get 1 free"),
            ProductDTO("Black Coffee", "1.99", "get 20% off for every 2"),
            ProductDTO("Milk", "1.49", "50% off of every after the 10th"),
            ProductDTO("Cereal", "2.49", ""),
        ]
