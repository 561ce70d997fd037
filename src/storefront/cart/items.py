"""Cart item management: commands and handler.

Adding performs no inventory check; stock is only validated when the cart
is completed, so a cart may hold more units than are in stock until then.
"""

import structlog
from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart, validate_quantity
from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.errors import DanglingCartItem, ItemNotInCart, ProductNotFound

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Cart")
class AddProductToCart:
    product_id = Identifier(required=True)
    cart_id = Identifier(required=True)
    qty = Integer(required=True)


@storefront.command(part_of="Cart")
class RemoveProductFromCart:
    product_id = Identifier(required=True)
    cart_id = Identifier(required=True)
    qty = Integer(required=True)


@storefront.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(AddProductToCart)
    def add_product_to_cart(self, command):
        validate_quantity(command.qty)

        repo = current_domain.repository_for(Cart)
        cart = repo.fetch(command.cart_id)
        cart.ensure_open()

        product = current_domain.repository_for(Product).find(command.product_id)
        if product is None:
            raise ProductNotFound(command.product_id)

        item = cart.add_product(product, command.qty)
        repo.add(cart)

        logger.info(
            "Product added to cart",
            cart_id=str(cart.id),
            product_id=str(product.id),
            qty=command.qty,
            item_qty=item.qty,
            cart_total=cart.total,
        )
        return cart

    @handle(RemoveProductFromCart)
    def remove_product_from_cart(self, command):
        validate_quantity(command.qty)

        repo = current_domain.repository_for(Cart)
        cart = repo.fetch(command.cart_id)
        cart.ensure_open()

        item = cart.item_for(command.product_id)
        if item is None:
            raise ItemNotInCart(command.product_id, command.cart_id)

        product = current_domain.repository_for(Product).find(item.product_id)
        if product is None:
            raise DanglingCartItem(item.id, item.product_id)

        cart.remove_product(product, command.qty)
        repo.add(cart)

        logger.info(
            "Product removed from cart",
            cart_id=str(cart.id),
            product_id=str(product.id),
            qty=command.qty,
            cart_total=cart.total,
        )
        return cart
