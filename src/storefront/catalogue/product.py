"""Product aggregate root.

Products carry no required fields: admins may create a bare record and fill
it in later. Price and stock are still range-checked by their fields.
"""

import json
from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Integer, String, Text

from storefront.domain import storefront
from storefront.shared.paging import fetch_all

# Fields an admin may set through create/update
EDITABLE_FIELDS = ("name", "description", "price", "category", "stock", "image")


@storefront.aggregate
class Product:
    """A sellable item with a current price and an on-hand stock count."""

    name: String(max_length=255)
    description: Text()
    price: Float(min_value=0.0, default=0.0)
    stock: Integer(min_value=0, default=0)
    category: String(max_length=100)
    image: Text()  # URL or data URI captured by the admin app
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def create(cls, **fields):
        from storefront.catalogue.events import ProductCreated

        now = datetime.now(UTC)
        values = {key: value for key, value in fields.items() if key in EDITABLE_FIELDS and value is not None}
        product = cls(**values, created_at=now, updated_at=now)
        product.raise_(
            ProductCreated(
                product_id=product.id,
                name=product.name,
                price=product.price,
                stock=product.stock,
                category=product.category,
                created_at=now,
            )
        )
        return product

    def update(self, **fields):
        """Overwrite every supplied field; ``None`` means "leave unchanged"."""
        from storefront.catalogue.events import ProductUpdated

        changed = {key: value for key, value in fields.items() if key in EDITABLE_FIELDS and value is not None}
        for key, value in changed.items():
            setattr(self, key, value)

        now = datetime.now(UTC)
        self.updated_at = now

        if changed:
            self.raise_(
                ProductUpdated(
                    product_id=self.id,
                    changed_fields=json.dumps(changed),
                    updated_at=now,
                )
            )

    def reduce_stock(self, quantity):
        """Take ``quantity`` units out of stock for a placed order."""
        from storefront.catalogue.events import StockReduced

        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})
        if quantity > self.stock:
            raise ValidationError(
                {"stock": [f"Insufficient stock for product {self.id}: requested {quantity}, available {self.stock}"]}
            )

        self.stock -= quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            StockReduced(
                product_id=self.id,
                quantity=quantity,
                remaining=self.stock,
            )
        )


@storefront.repository(part_of=Product)
class ProductRepository:
    """Catalogue queries beyond lookup by identifier."""

    def find_all(self) -> list[Product]:
        return fetch_all(self._dao.query.order_by("created_at"))

    def find_by_category(self, category: str) -> list[Product]:
        return fetch_all(self._dao.query.filter(category=category).order_by("created_at"))
