"""FastAPI routes for the Ordering domain — carts, checkout and orders."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from storefront.identity.access import Identity
from storefront.identity.api.dependencies import current_identity, require_admin
from storefront.ordering.api.schemas import (
    AddToCartRequest,
    AdminOrderResponse,
    CartResponse,
    CheckoutResponse,
    OrderResponse,
    RemoveFromCartRequest,
    UpdateOrderStatusRequest,
)
from storefront.ordering.cart.items import AddToCart, RemoveFromCart
from storefront.ordering.cart.queries import get_cart
from storefront.ordering.checkout import PlaceOrder
from storefront.ordering.order.queries import get_order, list_all_orders, list_orders_for
from storefront.ordering.order.status import UpdateOrderStatus

# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.get("", response_model=CartResponse)
async def read_cart(caller: Identity = Depends(current_identity)) -> CartResponse:
    return CartResponse(**get_cart(caller.user_id))


@cart_router.post("/add", response_model=CartResponse)
async def add_to_cart(body: AddToCartRequest, caller: Identity = Depends(current_identity)) -> CartResponse:
    command = AddToCart(
        user_id=caller.user_id,
        product_id=body.product_id,
        quantity=body.quantity,
    )
    current_domain.process(command, asynchronous=False)
    return CartResponse(**get_cart(caller.user_id))


@cart_router.post("/remove", response_model=CartResponse)
async def remove_from_cart(body: RemoveFromCartRequest, caller: Identity = Depends(current_identity)) -> CartResponse:
    command = RemoveFromCart(
        user_id=caller.user_id,
        product_id=body.product_id,
    )
    current_domain.process(command, asynchronous=False)
    return CartResponse(**get_cart(caller.user_id))


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("/checkout", status_code=201, response_model=CheckoutResponse)
async def checkout(caller: Identity = Depends(current_identity)) -> CheckoutResponse:
    """Turn the caller's cart into a pending order.

    Payment is simulated: the client confirms it before calling and nothing
    about it reaches the server.
    """
    order_id = current_domain.process(PlaceOrder(user_id=caller.user_id), asynchronous=False)
    return CheckoutResponse(order=OrderResponse(**get_order(order_id)))


@order_router.get("/my", response_model=list[OrderResponse])
async def my_orders(caller: Identity = Depends(current_identity)) -> list[OrderResponse]:
    return [OrderResponse(**order) for order in list_orders_for(caller)]


@order_router.get("", response_model=list[AdminOrderResponse])
async def all_orders(caller: Identity = Depends(require_admin)) -> list[AdminOrderResponse]:
    return [AdminOrderResponse(**order) for order in list_all_orders(caller)]


@order_router.put(
    "/{order_id}/status",
    response_model=OrderResponse,
    dependencies=[Depends(require_admin)],
)
async def update_order_status(order_id: str, body: UpdateOrderStatusRequest) -> OrderResponse:
    command = UpdateOrderStatus(order_id=order_id, status=body.status)
    current_domain.process(command, asynchronous=False)
    return OrderResponse(**get_order(order_id))
