"""Application tests for checkout: cart to pending order."""

import pytest
from protean import current_domain
from protean.exceptions import ValidationError

from storefront.catalogue.management import DeleteProduct, UpdateProduct
from storefront.catalogue.product import Product
from storefront.ordering.cart.cart import Cart
from storefront.ordering.cart.items import AddToCart
from storefront.ordering.checkout import PlaceOrder
from storefront.ordering.order.order import Order


def _add(user_id, product, quantity):
    current_domain.process(
        AddToCart(user_id=user_id, product_id=product.id, quantity=quantity),
        asynchronous=False,
    )


def _checkout(user_id="user-001"):
    return current_domain.process(PlaceOrder(user_id=user_id), asynchronous=False)


class TestSuccessfulCheckout:
    def test_total_and_pending_status(self, make_product):
        product_a = make_product(name="A", price=100.0, stock=10)
        product_b = make_product(name="B", price=50.0, stock=10)
        _add("user-001", product_a, 2)
        _add("user-001", product_b, 1)

        order_id = _checkout()

        order = current_domain.repository_for(Order).get(order_id)
        assert order.total == 250.0
        assert order.status == "pending"
        assert order.user_id == "user-001"
        assert sorted((i.product_id, i.quantity, i.unit_price) for i in order.items) == sorted(
            [(product_a.id, 2, 100.0), (product_b.id, 1, 50.0)]
        )

    def test_cart_is_emptied_but_kept(self, make_product):
        product = make_product()
        _add("user-001", product, 1)
        _checkout()

        cart = current_domain.repository_for(Cart).find_for_user("user-001")
        assert cart is not None
        assert cart.is_empty

    def test_stock_is_decremented(self, make_product):
        product_a = make_product(stock=5)
        product_b = make_product(stock=3)
        _add("user-001", product_a, 3)
        _add("user-001", product_b, 3)
        _checkout()

        repo = current_domain.repository_for(Product)
        assert repo.get(product_a.id).stock == 2
        assert repo.get(product_b.id).stock == 0

    def test_later_price_change_does_not_touch_order(self, make_product):
        product = make_product(price=100.0)
        _add("user-001", product, 2)
        order_id = _checkout()

        current_domain.process(UpdateProduct(product_id=product.id, price=999.0), asynchronous=False)

        order = current_domain.repository_for(Order).get(order_id)
        assert order.items[0].unit_price == 100.0
        assert order.total == 200.0

    def test_second_checkout_of_same_cart_is_rejected(self, make_product):
        product = make_product()
        _add("user-001", product, 1)
        _checkout()
        with pytest.raises(ValidationError):
            _checkout()


class TestRejectedCheckout:
    def test_missing_cart(self):
        with pytest.raises(ValidationError) as exc:
            _checkout()
        assert exc.value.messages == {"cart": ["Cart empty"]}
        assert current_domain.repository_for(Order).find_all() == []

    def test_empty_cart(self, make_product):
        from storefront.ordering.cart.items import RemoveFromCart

        product = make_product()
        _add("user-001", product, 1)
        current_domain.process(RemoveFromCart(user_id="user-001", product_id=product.id), asynchronous=False)

        with pytest.raises(ValidationError):
            _checkout()
        assert current_domain.repository_for(Order).find_all() == []

    def test_insufficient_stock_writes_nothing(self, make_product):
        plenty = make_product(name="Plenty", stock=10)
        scarce = make_product(name="Scarce", stock=1)
        _add("user-001", plenty, 2)
        _add("user-001", scarce, 5)

        with pytest.raises(ValidationError) as exc:
            _checkout()
        assert "stock" in exc.value.messages

        repo = current_domain.repository_for(Product)
        assert repo.get(plenty.id).stock == 10
        assert repo.get(scarce.id).stock == 1
        assert current_domain.repository_for(Order).find_all() == []
        assert len(current_domain.repository_for(Cart).find_for_user("user-001").items) == 2

    def test_deleted_product_rejected(self, make_product):
        product = make_product()
        _add("user-001", product, 1)
        current_domain.process(DeleteProduct(product_id=product.id), asynchronous=False)

        with pytest.raises(ValidationError) as exc:
            _checkout()
        assert "cart" in exc.value.messages
        assert current_domain.repository_for(Order).find_all() == []
