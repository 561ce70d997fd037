import pytest
from protean import current_domain
from storefront.catalogue.product import Product
from storefront.cart.cart import Cart


@pytest.fixture()
def make_product():
    """Factory: persist a product and return it."""

    def _make(title="Widget", price="10", inventory_count=5):
        product = Product.create(title=title, price=price, inventory_count=inventory_count)
        current_domain.repository_for(Product).add(product)
        return product

    return _make


@pytest.fixture()
def product(make_product):
    return make_product()


@pytest.fixture()
def cart():
    cart = Cart.create()
    current_domain.repository_for(Cart).add(cart)
    return cart
