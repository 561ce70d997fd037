"""BDD tests for the cart checkout walkthrough."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, scenarios, then, when
from storefront.cart.cart import Cart
from storefront.cart.completion import CompleteCart
from storefront.cart.items import AddProductToCart, RemoveProductFromCart
from storefront.cart.management import CreateCart
from storefront.catalogue.creation import CreateProduct
from storefront.catalogue.product import Product
from storefront.errors import StorefrontError

scenarios("features/cart_checkout.feature")


@pytest.fixture()
def context():
    return {"products": {}, "cart_id": None, "error": None}


def _process(context, command):
    try:
        return current_domain.process(command, asynchronous=False)
    except StorefrontError as exc:
        context["error"] = exc


def _cart(context):
    return current_domain.repository_for(Cart).get(context["cart_id"])


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{title}" priced "{price}" with {count:d} in stock'))
def a_product(context, title, price, count):
    product = current_domain.process(
        CreateProduct(title=title, price=price, inventory_count=count),
        asynchronous=False,
    )
    context["products"][title] = str(product.id)


@given("an empty cart")
def an_empty_cart(context):
    cart = current_domain.process(CreateCart(), asynchronous=False)
    context["cart_id"] = str(cart.id)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('{qty:d} units of "{title}" are added to the cart'))
def add_units(context, qty, title):
    _process(
        context,
        AddProductToCart(product_id=context["products"][title], cart_id=context["cart_id"], qty=qty),
    )


@when(parsers.cfparse('{qty:d} units of "{title}" are removed from the cart'))
def remove_units(context, qty, title):
    _process(
        context,
        RemoveProductFromCart(product_id=context["products"][title], cart_id=context["cart_id"], qty=qty),
    )


@when("the cart is completed")
def complete_cart(context):
    _process(context, CompleteCart(cart_id=context["cart_id"]))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the cart total is "{total}"'))
def cart_total_is(context, total):
    assert _cart(context).total == total


@then(parsers.cfparse("the cart has {count:d} line item"))
def cart_has_one_line_item(context, count):
    assert len(_cart(context).items) == count


@then(parsers.cfparse("the cart has {count:d} line items"))
def cart_has_line_items(context, count):
    assert len(_cart(context).items) == count


@then(parsers.cfparse('the "{title}" line item has quantity {qty:d}'))
def line_item_quantity(context, title, qty):
    item = _cart(context).item_for(context["products"][title])
    assert item is not None
    assert item.qty == qty


@then(parsers.cfparse('the completion fails with "{error_name}"'))
def completion_fails(context, error_name):
    assert context["error"] is not None
    assert type(context["error"]).__name__ == error_name


@then(parsers.cfparse('"{title}" has {count:d} in stock'))
def product_stock(context, title, count):
    product = current_domain.repository_for(Product).get(context["products"][title])
    assert product.inventory_count == count


@then("the cart is completed")
def cart_is_completed(context):
    assert context["error"] is None
    assert _cart(context).completed is True


@then("the cart is not completed")
def cart_is_not_completed(context):
    assert _cart(context).completed is False
