"""Shopping Cart aggregate — one per user, created lazily, emptied at checkout.

A cart holds at most one line per product. Setting a product that is already
present overwrites its quantity; nothing here looks at stock.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer

from storefront.domain import storefront
from storefront.ordering.cart.events import CartCleared, CartItemRemoved, CartItemSet


@storefront.entity(part_of="Cart")
class CartItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@storefront.aggregate
class Cart:
    user_id = Identifier(required=True)
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def one_line_per_product(self):
        product_ids = [str(item.product_id) for item in self.items]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"items": ["A product can appear only once in a cart"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, user_id):
        now = datetime.now(UTC)
        return cls(user_id=user_id, created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def find_item(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def set_item(self, product_id, quantity):
        """Put ``quantity`` units of a product in the cart, replacing any previous quantity."""
        existing = self.find_item(product_id)
        previous_quantity = None

        if existing:
            previous_quantity = existing.quantity
            existing.quantity = quantity
        else:
            self.add_items(CartItem(product_id=product_id, quantity=quantity))

        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemSet(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                product_id=str(product_id),
                quantity=quantity,
                previous_quantity=previous_quantity,
            )
        )

    def remove_product(self, product_id):
        """Drop a product from the cart. Removing an absent product is a no-op."""
        item = self.find_item(product_id)
        if item is None:
            return

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartItemRemoved(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                product_id=str(product_id),
            )
        )

    def clear(self):
        """Empty the cart. The cart record itself survives."""
        for item in list(self.items):
            self.remove_items(item)

        now = datetime.now(UTC)
        self.updated_at = now

        self.raise_(
            CartCleared(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                cleared_at=now,
            )
        )

    @property
    def is_empty(self):
        return not self.items


@storefront.repository(part_of=Cart)
class CartRepository:
    def find_for_user(self, user_id) -> Cart | None:
        """Return the user's cart, or ``None`` if they never added anything."""
        carts = self._dao.query.filter(user_id=str(user_id)).all().items
        return carts[0] if carts else None
