"""FastAPI routes for the Storefront domain.

Each operation is exposed under its own name (also used as the OpenAPI
``operationId``): reads under ``/query``, writes under ``/mutation``.
"""

from fastapi import APIRouter

from storefront.api.schemas import (
    CartObject,
    CartQuantityRequest,
    CompleteCartRequest,
    CreateProductRequest,
    ProductObject,
)
from storefront.cart.completion import CompleteCart
from storefront.cart.items import AddProductToCart, RemoveProductFromCart
from storefront.cart.management import CreateCart
from storefront.cart.queries import get_cart as load_cart
from storefront.catalogue.creation import CreateProduct
from storefront.catalogue.queries import find_products_by_title, get_product, list_products
from storefront.shared.decimal_text import to_text
from storefront.shared.store import dispatch

query_router = APIRouter(prefix="/query", tags=["queries"])
mutation_router = APIRouter(prefix="/mutation", tags=["mutations"])


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------
@query_router.get("/getCart", operation_id="getCart", response_model=CartObject)
async def get_cart(cart_id: str) -> CartObject:
    return CartObject.from_cart(load_cart(cart_id))


@query_router.get("/getProductById", operation_id="getProductById", response_model=ProductObject)
async def get_product_by_id(product_id: str) -> ProductObject:
    return ProductObject.from_product(get_product(product_id))


@query_router.get("/getProductByTitle", operation_id="getProductByTitle", response_model=list[ProductObject])
async def get_product_by_title(product_title: str) -> list[ProductObject]:
    return [ProductObject.from_product(p) for p in find_products_by_title(product_title)]


@query_router.get("/getAllProducts", operation_id="getAllProducts", response_model=list[ProductObject])
async def get_all_products(filter_no_inventory: bool) -> list[ProductObject]:
    """All products; only those in stock when ``filter_no_inventory`` is true."""
    return [ProductObject.from_product(p) for p in list_products(in_stock_only=filter_no_inventory)]


# ---------------------------------------------------------------------------
# Mutations
# ---------------------------------------------------------------------------
@mutation_router.post("/createCart", operation_id="createCart", response_model=CartObject)
async def create_cart() -> CartObject:
    cart = dispatch(CreateCart())
    return CartObject.from_cart(cart)


@mutation_router.post("/createProduct", operation_id="createProduct", response_model=ProductObject)
async def create_product(body: CreateProductRequest) -> ProductObject:
    command = CreateProduct(
        title=body.title,
        price=to_text(body.price),
        inventory_count=body.inventory_count,
    )
    product = dispatch(command)
    return ProductObject.from_product(product)


@mutation_router.post("/addProductToCart", operation_id="addProductToCart", response_model=CartObject)
async def add_product_to_cart(body: CartQuantityRequest) -> CartObject:
    command = AddProductToCart(
        product_id=body.product_id,
        cart_id=body.cart_id,
        qty=body.qty,
    )
    cart = dispatch(command)
    return CartObject.from_cart(cart)


@mutation_router.post("/removeProductFromCart", operation_id="removeProductFromCart", response_model=CartObject)
async def remove_product_from_cart(body: CartQuantityRequest) -> CartObject:
    command = RemoveProductFromCart(
        product_id=body.product_id,
        cart_id=body.cart_id,
        qty=body.qty,
    )
    cart = dispatch(command)
    return CartObject.from_cart(cart)


@mutation_router.post("/completeCart", operation_id="completeCart", response_model=CartObject)
async def complete_cart(body: CompleteCartRequest) -> CartObject:
    cart = dispatch(CompleteCart(cart_id=body.cart_id))
    return CartObject.from_cart(cart)
