"""Domain events for the Cart aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Cart")
class CartCreated:
    """An empty cart was opened."""

    __version__ = "v1"

    cart_id = Identifier(required=True)


@storefront.event(part_of="Cart")
class CartItemAdded:
    """Units of a product were added to the cart."""

    __version__ = "v1"

    cart_id = Identifier(required=True)
    item_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    item_total = String(required=True, max_length=50)
    cart_total = String(required=True, max_length=50)


@storefront.event(part_of="Cart")
class CartItemRemoved:
    """Units of a product were taken out of the cart.

    ``remaining_quantity`` is 0 when the line item was deleted.
    """

    __version__ = "v1"

    cart_id = Identifier(required=True)
    item_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    remaining_quantity = Integer(required=True)
    cart_total = String(required=True, max_length=50)


@storefront.event(part_of="Cart")
class CartCompleted:
    """Inventory was settled for every line item and the cart was closed."""

    __version__ = "v1"

    cart_id = Identifier(required=True)
    total = String(required=True, max_length=50)
    item_count = Integer(required=True)
    completed_at = DateTime(required=True)
