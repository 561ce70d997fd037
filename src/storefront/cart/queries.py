"""Read-only cart lookups."""

from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.shared.store import store_errors


def get_cart(cart_id):
    with store_errors():
        return current_domain.repository_for(Cart).fetch(cart_id)
