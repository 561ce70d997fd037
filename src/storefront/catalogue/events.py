"""Domain events for the Product aggregate."""

from protean.fields import Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductCreated:
    """A product was added to the catalogue."""

    __version__ = "v1"

    product_id = Identifier(required=True)
    title = String(required=True, max_length=255)
    price = String(required=True, max_length=50)
    inventory_count = Integer(required=True)


@storefront.event(part_of="Product")
class InventoryDecremented:
    """Units of a product were committed to a completed cart."""

    __version__ = "v1"

    product_id = Identifier(required=True)
    cart_id = Identifier(required=True)
    quantity = Integer(required=True)
    previous_count = Integer(required=True)
    new_count = Integer(required=True)
