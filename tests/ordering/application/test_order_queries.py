"""Application tests for the order read side."""

from datetime import UTC, datetime, timedelta

import pytest
from protean import current_domain

from storefront.identity.access import AuthorizationError
from storefront.ordering.order.order import Order
from storefront.ordering.order.queries import get_order, list_all_orders, list_orders_for


def _persist_order(user_id, product_id="prod-a", placed_at=None):
    order = Order.place(user_id=user_id, items=[(product_id, 1, 10.0)])
    if placed_at is not None:
        order.created_at = placed_at
    current_domain.repository_for(Order).add(order)
    return order


class TestListOrdersFor:
    def test_only_callers_orders(self, make_user, identity_of):
        alice = make_user()
        bob = make_user()
        _persist_order(str(alice.id))
        _persist_order(str(bob.id))

        orders = list_orders_for(identity_of(alice))
        assert [o["user_id"] for o in orders] == [str(alice.id)]

    def test_newest_first(self, make_user, identity_of):
        user = make_user()
        now = datetime.now(UTC)
        older = _persist_order(str(user.id), placed_at=now - timedelta(days=2))
        newer = _persist_order(str(user.id), placed_at=now)

        orders = list_orders_for(identity_of(user))
        assert [o["id"] for o in orders] == [newer.id, older.id]

    def test_products_embedded(self, make_user, make_product, identity_of):
        user = make_user()
        product = make_product(name="Apple Watch Series 8")
        _persist_order(str(user.id), product_id=product.id)

        item = list_orders_for(identity_of(user))[0]["items"][0]
        assert item["product"]["name"] == "Apple Watch Series 8"

    def test_no_orders(self, make_user, identity_of):
        assert list_orders_for(identity_of(make_user())) == []


class TestListAllOrders:
    def test_admin_sees_every_order_with_owner(self, make_user, identity_of):
        admin = make_user(role="admin")
        shopper = make_user(username="user1", email="user1@test.tn")
        _persist_order(str(shopper.id))
        _persist_order(str(admin.id))

        orders = list_all_orders(identity_of(admin))
        assert len(orders) == 2
        owner = next(o["user"] for o in orders if o["user_id"] == str(shopper.id))
        assert owner["email"] == "user1@test.tn"
        assert "password_hash" not in owner

    def test_missing_owner_resolves_to_none(self, make_user, identity_of):
        admin = make_user(role="admin")
        _persist_order("ghost-user")
        assert list_all_orders(identity_of(admin))[0]["user"] is None

    def test_non_admin_is_refused(self, make_user, identity_of):
        shopper = make_user()
        _persist_order(str(shopper.id))
        with pytest.raises(AuthorizationError):
            list_all_orders(identity_of(shopper))


class TestGetOrder:
    def test_view_shape(self):
        order = _persist_order("user-001")
        view = get_order(order.id)
        assert view["total"] == 10.0
        assert view["status"] == "pending"
        assert view["items"][0]["unit_price"] == 10.0


class TestLargeOrderHistories:
    def test_caller_sees_every_order_newest_first(self, make_user, identity_of):
        user = make_user()
        start = datetime.now(UTC) - timedelta(days=1)
        for minute in range(120):
            _persist_order(str(user.id), placed_at=start + timedelta(minutes=minute))

        orders = list_orders_for(identity_of(user))
        assert len(orders) == 120
        timestamps = [o["created_at"] for o in orders]
        assert timestamps == sorted(timestamps, reverse=True)

    def test_admin_sees_every_order(self, make_user, identity_of):
        admin = make_user(role="admin")
        for _ in range(120):
            _persist_order("user-001")
        assert len(list_all_orders(identity_of(admin))) == 120

    def test_order_count_is_not_capped(self):
        for _ in range(105):
            _persist_order("user-001")
        assert current_domain.repository_for(Order).count_for_user("user-001") == 105
