"""Tests for the Order aggregate."""

import json

import pytest
from protean import atomic_change
from protean.exceptions import ValidationError

from storefront.ordering.order.events import OrderPlaced, OrderStatusChanged
from storefront.ordering.order.order import Order, OrderItem, OrderStatus


def _place(items=None):
    return Order.place(user_id="user-001", items=items or [("prod-a", 2, 100.0), ("prod-b", 1, 50.0)])


class TestPlaceOrder:
    def test_total_is_sum_of_line_totals(self):
        order = _place()
        assert order.total == 250.0

    def test_new_order_is_pending(self):
        assert _place().status == OrderStatus.PENDING.value

    def test_items_keep_snapshot_prices(self):
        order = _place()
        assert [(i.product_id, i.quantity, i.unit_price) for i in order.items] == [
            ("prod-a", 2, 100.0),
            ("prod-b", 1, 50.0),
        ]

    def test_place_raises_event(self):
        order = _place()
        event = next(e for e in order._events if isinstance(e, OrderPlaced))
        assert event.total == 250.0
        assert len(json.loads(event.items)) == 2

    def test_empty_order_rejected(self):
        with pytest.raises(ValidationError):
            Order.place(user_id="user-001", items=[])

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError):
            Order.place(user_id="user-001", items=[("prod-a", 0, 10.0)])


class TestOrderItem:
    def test_line_total(self):
        assert OrderItem(product_id="p", quantity=3, unit_price=12.5).line_total == 37.5


class TestChangeStatus:
    @pytest.mark.parametrize("status", [s.value for s in OrderStatus])
    def test_any_known_status_accepted(self, status):
        order = _place()
        order.change_status(status)
        assert order.status == status

    def test_status_can_move_backwards(self):
        order = _place()
        order.change_status("delivered")
        order.change_status("pending")
        assert order.status == "pending"

    def test_unknown_status_rejected(self):
        order = _place()
        with pytest.raises(ValidationError) as exc:
            order.change_status("lost")
        assert "status" in exc.value.messages
        assert order.status == "pending"

    def test_change_raises_event(self):
        order = _place()
        order.change_status("shipped")
        event = next(e for e in order._events if isinstance(e, OrderStatusChanged))
        assert event.previous_status == "pending"
        assert event.new_status == "shipped"

    def test_total_unchanged_by_status_change(self):
        order = _place()
        order.change_status("processing")
        assert order.total == 250.0


class TestTotalInvariant:
    def test_total_cannot_drift_from_items(self):
        order = _place()
        with pytest.raises(ValidationError) as exc:
            with atomic_change(order):
                order.total = 999.0
        assert "does not match its items" in str(exc.value)

    def test_extra_item_without_total_rejected(self):
        order = _place()
        with pytest.raises(ValidationError):
            with atomic_change(order):
                order.add_items(OrderItem(product_id="prod-c", quantity=1, unit_price=5.0))

    def test_fractional_prices_accepted(self):
        order = Order.place(user_id="user-001", items=[("prod-a", 3, 0.1), ("prod-b", 1, 0.2)])
        assert order.total == pytest.approx(0.5)
