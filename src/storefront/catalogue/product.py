"""Product aggregate: a catalogue entry with a price and a finite inventory."""

from decimal import InvalidOperation

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Integer, String

from storefront.catalogue.events import InventoryDecremented, ProductCreated
from storefront.domain import storefront
from storefront.shared.decimal_text import to_decimal, to_text


@storefront.aggregate
class Product:
    title = String(required=True, max_length=255)
    price = String(required=True, max_length=50)  # Decimal text
    inventory_count = Integer(required=True, min_value=0)

    @classmethod
    def create(cls, title, price, inventory_count):
        try:
            amount = to_decimal(price)
        except InvalidOperation:
            raise ValidationError({"price": [f"price ({price}) is not a decimal amount"]})
        if not amount.is_finite():
            raise ValidationError({"price": [f"price ({price}) is not a finite amount"]})
        if amount < 0:
            raise ValidationError({"price": [f"price ({price}) cannot be negative"]})
        if amount == 0:
            amount = amount.copy_abs()

        product = cls(title=title, price=to_text(amount), inventory_count=inventory_count)
        product.raise_(
            ProductCreated(
                product_id=str(product.id),
                title=product.title,
                price=product.price,
                inventory_count=product.inventory_count,
            )
        )
        return product

    def has_inventory_for(self, qty):
        return self.inventory_count >= qty

    def decrement_inventory(self, qty, cart_id):
        """Commit ``qty`` units to a completed cart."""
        if not self.has_inventory_for(qty):
            raise ValidationError({"inventory_count": ["Inventory cannot go negative"]})

        previous = self.inventory_count
        self.inventory_count = previous - qty

        self.raise_(
            InventoryDecremented(
                product_id=str(self.id),
                cart_id=str(cart_id),
                quantity=qty,
                previous_count=previous,
                new_count=self.inventory_count,
            )
        )


@storefront.repository(part_of=Product)
class ProductRepository:
    def find(self, product_id):
        """Return the product, or None when it does not exist."""
        try:
            return self.get(str(product_id))
        except ObjectNotFoundError:
            return None

    def find_by_title(self, title):
        return self._dao.query.filter(title=title).all().items

    def list_all(self, in_stock_only=False):
        query = self._dao.query
        if in_stock_only:
            query = query.filter(inventory_count__gt=0)
        return query.all().items
