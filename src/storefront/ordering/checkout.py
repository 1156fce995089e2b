"""Checkout — turns the user's cart into a pending order.

The handler runs inside a single unit of work: stock decrements, the new
order and the emptied cart are committed together or not at all. Stock for
every line is verified before anything is written, so a short line rejects
the whole checkout instead of leaving earlier decrements behind.

Two checkouts racing on the same product in separate requests are not
serialised; both may read the same stock level.
"""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.ordering.cart.cart import Cart
from storefront.ordering.order.order import Order
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Order")
class PlaceOrder:
    """Check out the user's cart. Payment is simulated and carries no data."""

    user_id = Identifier(required=True)


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        cart_repo = current_domain.repository_for(Cart)
        product_repo = current_domain.repository_for(Product)

        # 1. Load the cart
        cart = cart_repo.find_for_user(command.user_id)
        if cart is None or cart.is_empty:
            raise ValidationError({"cart": ["Cart empty"]})

        # 2. Resolve products and snapshot current prices
        lines = []
        for item in cart.items:
            try:
                product = product_repo.get(item.product_id)
            except ObjectNotFoundError:
                raise ValidationError(
                    {"cart": [f"Product {item.product_id} is no longer available"]}
                ) from None

            if product.stock < item.quantity:
                raise ValidationError(
                    {
                        "stock": [
                            f"Insufficient stock for {product.name or product.id}: "
                            f"requested {item.quantity}, available {product.stock}"
                        ]
                    }
                )
            lines.append((product, item.quantity, product.price))

        # 3-5. Decrement stock and record the order with its frozen total
        for product, quantity, _ in lines:
            product.reduce_stock(quantity)
            product_repo.add(product)

        order = Order.place(
            user_id=command.user_id,
            items=[(str(product.id), quantity, price) for product, quantity, price in lines],
        )
        current_domain.repository_for(Order).add(order)

        # 6. Empty the cart but keep the record
        cart.clear()
        cart_repo.add(cart)

        logger.info(
            "order_placed",
            order_id=str(order.id),
            user_id=str(command.user_id),
            item_count=len(lines),
            total=order.total,
        )
        return str(order.id)
