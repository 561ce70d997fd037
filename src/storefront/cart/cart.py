"""Cart aggregate: line items of product quantities with a running total.

A cart is open until it is completed; completion is terminal. Line item and
cart totals are decimal text, accumulated by adding or subtracting
``price × qty`` on every mutation rather than recomputed from the items.
"""

from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError
from protean.fields import Boolean, DateTime, HasMany, Identifier, Integer, String

from storefront.cart.events import CartCompleted, CartCreated, CartItemAdded, CartItemRemoved
from storefront.domain import storefront
from storefront.errors import CartAlreadyCompleted, CartNotFound, InvalidQuantity, ItemNotInCart
from storefront.shared.decimal_text import add_to_total, line_amount


def validate_quantity(qty):
    if isinstance(qty, bool) or not isinstance(qty, int) or qty <= 0:
        raise InvalidQuantity(qty)


@storefront.entity(part_of="Cart")
class CartLineItem:
    product_id = Identifier(required=True)
    qty = Integer(required=True, min_value=1)
    total = String(required=True, max_length=50)  # Decimal text


@storefront.aggregate
class Cart:
    items = HasMany(CartLineItem)
    total = String(required=True, max_length=50, default="0")  # Decimal text
    completed = Boolean(default=False)
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls):
        now = datetime.now(UTC)
        cart = cls(total="0", completed=False, created_at=now, updated_at=now)
        cart.raise_(CartCreated(cart_id=str(cart.id)))
        return cart

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def item_for(self, product_id):
        """The live line item for ``product_id``, or None."""
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def item_ids(self):
        return [str(i.id) for i in self.items]

    def ensure_open(self):
        if self.completed:
            raise CartAlreadyCompleted(self.id)

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_product(self, product, qty):
        """Add ``qty`` units of ``product``, merging into its existing line item."""
        validate_quantity(qty)
        self.ensure_open()

        amount = line_amount(product.price, qty)
        item = self.item_for(product.id)

        if item:
            item.qty += qty
            item.total = add_to_total(item.total, amount)
        else:
            item = CartLineItem(
                product_id=str(product.id),
                qty=qty,
                total=add_to_total("0", amount),
            )
            self.add_items(item)

        self.total = add_to_total(self.total, amount)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                item_id=str(item.id),
                product_id=str(product.id),
                quantity=qty,
                item_total=item.total,
                cart_total=self.total,
            )
        )
        return item

    def remove_product(self, product, qty):
        """Take up to ``qty`` units of ``product`` out of the cart.

        Requests beyond the quantity present are clamped to it; a line item
        whose quantity reaches zero is deleted.
        """
        validate_quantity(qty)
        self.ensure_open()

        item = self.item_for(product.id)
        if item is None:
            raise ItemNotInCart(product.id, self.id)

        removed = min(qty, item.qty)
        remaining = item.qty - removed
        amount = line_amount(product.price, removed)
        item_id = str(item.id)

        if remaining > 0:
            item.qty = remaining
            item.total = add_to_total(item.total, -amount)
        else:
            self.remove_items(item)

        self.total = add_to_total(self.total, -amount)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemRemoved(
                cart_id=str(self.id),
                item_id=item_id,
                product_id=str(product.id),
                quantity=removed,
                remaining_quantity=remaining,
                cart_total=self.total,
            )
        )

    # -------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------
    def complete(self):
        """Close the cart. Inventory must already have been settled."""
        self.ensure_open()

        now = datetime.now(UTC)
        self.completed = True
        self.updated_at = now

        self.raise_(
            CartCompleted(
                cart_id=str(self.id),
                total=self.total,
                item_count=len(self.items),
                completed_at=now,
            )
        )


@storefront.repository(part_of=Cart)
class CartRepository:
    def fetch(self, cart_id):
        """Load a cart, raising ``CartNotFound`` when it does not exist."""
        try:
            return self.get(str(cart_id))
        except ObjectNotFoundError:
            raise CartNotFound(cart_id)
