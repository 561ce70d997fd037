"""Cart management: opening new carts."""

from protean import handle
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.domain import storefront


@storefront.command(part_of="Cart")
class CreateCart:
    """Open a blank cart: no items, total of 0, not completed."""


@storefront.command_handler(part_of=Cart)
class ManageCartHandler:
    @handle(CreateCart)
    def create_cart(self, command):
        cart = Cart.create()
        current_domain.repository_for(Cart).add(cart)
        return cart
