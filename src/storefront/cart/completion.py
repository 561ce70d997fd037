"""Cart completion: settle inventory for every line item and close the cart.

Every line item is checked against its product's inventory before any
product is touched. The decrements, and the cart update, are written in the
handler's unit of work, so a failure part-way leaves no partial settlement.
"""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.errors import DanglingCartItem, InsufficientInventory

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Cart")
class CompleteCart:
    cart_id = Identifier(required=True)


@storefront.command_handler(part_of=Cart)
class CompleteCartHandler:
    @handle(CompleteCart)
    def complete_cart(self, command):
        repo = current_domain.repository_for(Cart)
        product_repo = current_domain.repository_for(Product)

        cart = repo.fetch(command.cart_id)
        cart.ensure_open()

        for item in cart.items:
            product = self._resolve(product_repo, item)
            if not product.has_inventory_for(item.qty):
                logger.warning(
                    "Insufficient inventory to complete cart",
                    cart_id=str(cart.id),
                    product_id=str(product.id),
                    inventory_count=product.inventory_count,
                    requested=item.qty,
                )
                raise InsufficientInventory(product.id, product.title, product.inventory_count, item.qty)

        for item in cart.items:
            product = self._resolve(product_repo, item)
            product.decrement_inventory(item.qty, cart_id=cart.id)
            product_repo.add(product)

        cart.complete()
        repo.add(cart)

        logger.info(
            "Cart completed",
            cart_id=str(cart.id),
            item_count=len(cart.items),
            total=cart.total,
        )
        return cart

    @staticmethod
    def _resolve(product_repo, item):
        product = product_repo.find(item.product_id)
        if product is None:
            raise DanglingCartItem(item.id, item.product_id)
        return product
