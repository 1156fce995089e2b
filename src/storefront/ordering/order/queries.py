"""Read-side views of orders, with products and owners embedded."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.catalogue.queries import resolve_product
from storefront.identity.access import Identity, authorize
from storefront.identity.user import Role, User, user_view
from storefront.ordering.order.order import Order


def order_view(order: Order) -> dict:
    return {
        "id": str(order.id),
        "user_id": str(order.user_id),
        "items": [
            {
                "product_id": str(item.product_id),
                "product": resolve_product(item.product_id),
                "quantity": item.quantity,
                "unit_price": item.unit_price,
            }
            for item in order.items
        ],
        "total": order.total,
        "status": order.status,
        "created_at": order.created_at,
        "updated_at": order.updated_at,
    }


def _resolve_user(user_id) -> dict | None:
    try:
        return user_view(current_domain.repository_for(User).get(user_id))
    except ObjectNotFoundError:
        return None


def get_order(order_id) -> dict:
    return order_view(current_domain.repository_for(Order).get(order_id))


def list_orders_for(caller: Identity) -> list[dict]:
    """All orders placed by the caller, newest first."""
    orders = current_domain.repository_for(Order).find_for_user(caller.user_id)
    return [order_view(order) for order in orders]


def list_all_orders(caller: Identity) -> list[dict]:
    """Every order in the store with its owner embedded. Admins only."""
    authorize(caller, {Role.ADMIN})

    orders = current_domain.repository_for(Order).find_all()
    return [{**order_view(order), "user": _resolve_user(order.user_id)} for order in orders]
