"""Tests for the Product aggregate."""

import pytest
from protean.exceptions import ValidationError
from storefront.catalogue.events import InventoryDecremented, ProductCreated
from storefront.catalogue.product import Product


class TestProductCreation:
    def test_create_stores_price_as_decimal_text(self):
        product = Product.create(title="Widget", price="10.50", inventory_count=5)
        assert product.price == "10.50"
        assert product.inventory_count == 5

    def test_create_normalizes_numeric_price(self):
        product = Product.create(title="Widget", price=12.5, inventory_count=1)
        assert product.price == "12.5"

    def test_create_generates_id(self):
        product = Product.create(title="Widget", price="1", inventory_count=0)
        assert product.id is not None

    def test_create_raises_event(self):
        product = Product.create(title="Widget", price="3", inventory_count=2)
        assert len(product._events) == 1
        event = product._events[0]
        assert isinstance(event, ProductCreated)
        assert event.price == "3"
        assert event.inventory_count == 2

    def test_negative_price_is_rejected(self):
        with pytest.raises(ValidationError):
            Product.create(title="Widget", price="-1", inventory_count=1)

    @pytest.mark.parametrize("price", ["Infinity", "-Infinity", "NaN"])
    def test_non_finite_price_is_rejected(self, price):
        with pytest.raises(ValidationError) as exc_info:
            Product.create(title="Widget", price=price, inventory_count=1)
        assert exc_info.value.messages["price"] == [f"price ({price}) is not a finite amount"]

    @pytest.mark.parametrize("price", ["-0", "-0.00"])
    def test_negative_zero_price_is_stored_unsigned(self, price):
        product = Product.create(title="Widget", price=price, inventory_count=1)
        assert not product.price.startswith("-")

    def test_non_numeric_price_is_rejected(self):
        with pytest.raises(ValidationError):
            Product.create(title="Widget", price="ten", inventory_count=1)

    def test_negative_inventory_is_rejected(self):
        with pytest.raises(ValidationError):
            Product.create(title="Widget", price="1", inventory_count=-1)


class TestDecrementInventory:
    def test_decrement(self):
        product = Product.create(title="Widget", price="1", inventory_count=5)
        product.decrement_inventory(3, cart_id="cart-001")
        assert product.inventory_count == 2

    def test_decrement_to_zero(self):
        product = Product.create(title="Widget", price="1", inventory_count=5)
        product.decrement_inventory(5, cart_id="cart-001")
        assert product.inventory_count == 0

    def test_decrement_raises_event(self):
        product = Product.create(title="Widget", price="1", inventory_count=5)
        product._events.clear()
        product.decrement_inventory(2, cart_id="cart-001")
        assert len(product._events) == 1
        event = product._events[0]
        assert isinstance(event, InventoryDecremented)
        assert event.previous_count == 5
        assert event.new_count == 3

    def test_cannot_go_negative(self):
        product = Product.create(title="Widget", price="1", inventory_count=2)
        with pytest.raises(ValidationError):
            product.decrement_inventory(3, cart_id="cart-001")
        assert product.inventory_count == 2
