"""Pydantic request/response schemas for the Storefront API.

These are external contracts, separate from the internal Protean commands.
Field names, including ``_id``, are part of the contract.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, StrictInt


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class CartObject(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    items: list[str]
    total: str
    completed: bool

    @classmethod
    def from_cart(cls, cart):
        return cls(
            id=str(cart.id),
            items=cart.item_ids(),
            total=cart.total,
            completed=bool(cart.completed),
        )


class ProductObject(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    title: str
    price: str
    inventory_count: int

    @classmethod
    def from_product(cls, product):
        return cls(
            id=str(product.id),
            title=product.title,
            price=product.price,
            inventory_count=product.inventory_count,
        )


# ---------------------------------------------------------------------------
# Mutation Request Schemas
# ---------------------------------------------------------------------------
class CreateProductRequest(BaseModel):
    title: str
    price: Decimal
    inventory_count: int

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Espresso Beans 1kg",
                    "price": 24.5,
                    "inventory_count": 40,
                }
            ]
        }
    }


class CartQuantityRequest(BaseModel):
    product_id: str
    cart_id: str
    qty: StrictInt


class CompleteCartRequest(BaseModel):
    cart_id: str
