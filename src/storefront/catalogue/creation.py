"""Product creation: command and handler."""

import structlog
from protean import handle
from protean.fields import Integer, String
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Product")
class CreateProduct:
    title = String(required=True, max_length=255)
    price = String(required=True, max_length=50)
    inventory_count = Integer(required=True, min_value=0)


@storefront.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        product = Product.create(
            title=command.title,
            price=command.price,
            inventory_count=command.inventory_count,
        )
        current_domain.repository_for(Product).add(product)

        logger.info(
            "Product created",
            product_id=str(product.id),
            title=product.title,
            price=product.price,
            inventory_count=product.inventory_count,
        )
        return product
