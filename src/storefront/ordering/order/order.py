"""Order aggregate — an immutable record of a checkout.

Items and the total are captured when the order is placed and never
recomputed, even if catalogue prices change later. Status is the only
mutable field and admins may move it in any direction.
"""

import json
import math
from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from storefront.domain import storefront
from storefront.ordering.order.events import OrderPlaced, OrderStatusChanged
from storefront.shared.paging import fetch_all


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"


@storefront.entity(part_of="Order")
class OrderItem:
    """A product, the quantity bought and the unit price paid at checkout."""

    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)

    @property
    def line_total(self):
        return self.quantity * self.unit_price


@storefront.aggregate
class Order:
    user_id = Identifier(required=True)
    items = HasMany(OrderItem)
    total = Float(required=True, min_value=0.0)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def total_matches_line_totals(self):
        if not self.items:
            return
        expected = sum(item.line_total for item in self.items)
        if not math.isclose(self.total, expected, abs_tol=1e-9):
            raise ValidationError({"total": [f"Order total {self.total} does not match its items ({expected})"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, user_id, items):
        """Create a pending order from ``(product_id, quantity, unit_price)`` snapshots."""
        if not items:
            raise ValidationError({"items": ["An order must contain at least one item"]})

        now = datetime.now(UTC)
        order_items = [
            OrderItem(product_id=product_id, quantity=quantity, unit_price=unit_price)
            for product_id, quantity, unit_price in items
        ]
        total = sum(item.line_total for item in order_items)

        order = cls(
            user_id=user_id,
            total=total,
            status=OrderStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )
        with atomic_change(order):
            for item in order_items:
                order.add_items(item)

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=str(user_id),
                items=json.dumps(
                    [
                        {
                            "product_id": str(item.product_id),
                            "quantity": item.quantity,
                            "unit_price": item.unit_price,
                        }
                        for item in order_items
                    ]
                ),
                total=total,
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Status lifecycle
    # -------------------------------------------------------------------
    def change_status(self, new_status):
        """Overwrite the status. Any of the four values may follow any other."""
        try:
            target = OrderStatus(new_status)
        except ValueError:
            raise ValidationError(
                {"status": [f"Invalid status '{new_status}'. Expected one of: {', '.join(s.value for s in OrderStatus)}"]}
            ) from None

        previous = self.status
        self.status = target.value
        now = datetime.now(UTC)
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                previous_status=previous,
                new_status=target.value,
                changed_at=now,
            )
        )


@storefront.repository(part_of=Order)
class OrderRepository:
    def find_for_user(self, user_id) -> list[Order]:
        """Every order the user placed, newest first."""
        return fetch_all(self._dao.query.filter(user_id=str(user_id)).order_by("-created_at"))

    def find_all(self) -> list[Order]:
        return fetch_all(self._dao.query.order_by("-created_at"))

    def count_for_user(self, user_id) -> int:
        return self._dao.query.filter(user_id=str(user_id)).all().total
