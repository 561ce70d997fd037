"""Read-only catalogue lookups."""

from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.errors import ProductNotFound
from storefront.shared.store import store_errors


def get_product(product_id):
    with store_errors():
        product = current_domain.repository_for(Product).find(product_id)
    if product is None:
        raise ProductNotFound(product_id)
    return product


def find_products_by_title(title):
    with store_errors():
        return current_domain.repository_for(Product).find_by_title(title)


def list_products(in_stock_only=False):
    """All products, or only those with ``inventory_count > 0``."""
    with store_errors():
        return current_domain.repository_for(Product).list_all(in_stock_only=in_stock_only)
