"""Failure taxonomy for cart and catalogue operations.

Every error carries a human-readable message and the HTTP status the API
surface renders it with. None of them are retried.
"""


class StorefrontError(Exception):
    status_code = 400

    def __init__(self, message, **details):
        super().__init__(message)
        self.message = message
        self.details = details or None

    @property
    def code(self):
        return type(self).__name__


class InvalidQuantity(StorefrontError):
    def __init__(self, qty):
        super().__init__(f"quantity ({qty}) has to be greater than 0", qty=qty)


class CartNotFound(StorefrontError):
    status_code = 404

    def __init__(self, cart_id):
        super().__init__(f"invalid cart id ({cart_id})", cart_id=str(cart_id))


class ProductNotFound(StorefrontError):
    status_code = 404

    def __init__(self, product_id):
        super().__init__(f"product ({product_id}) does not exist", product_id=str(product_id))


class ItemNotInCart(StorefrontError):
    status_code = 404

    def __init__(self, product_id, cart_id):
        super().__init__(
            "product does not belong to cart",
            product_id=str(product_id),
            cart_id=str(cart_id),
        )


class CartAlreadyCompleted(StorefrontError):
    status_code = 409

    def __init__(self, cart_id):
        super().__init__(f"cart ({cart_id}) is already completed", cart_id=str(cart_id))


class InsufficientInventory(StorefrontError):
    status_code = 409

    def __init__(self, product_id, title, available, requested):
        super().__init__(
            f"insufficient inventory for {title} ({product_id}): "
            f"inventory count ({available}) / cart qty ({requested})",
            product_id=str(product_id),
            available=available,
            requested=requested,
        )
        self.product_id = str(product_id)
        self.available = available
        self.requested = requested


class DanglingCartItem(StorefrontError):
    status_code = 409

    def __init__(self, item_id, product_id):
        super().__init__(
            "cart contains non-existing product",
            item_id=str(item_id),
            product_id=str(product_id),
        )


class StoreFailure(StorefrontError):
    """The record store rejected or failed a read or write."""

    status_code = 500

    def __init__(self, message):
        super().__init__(f"store failure: {message}")
