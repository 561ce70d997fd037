"""Storefront bounded context: Product Catalogue and Shopping Cart.

Tracks products with finite inventory, builds carts from product quantities,
and settles inventory when a cart is completed.
"""

from protean.domain import Domain

storefront = Domain(name="storefront")
