"""Read-side view of a user's cart with products embedded."""

from protean.utils.globals import current_domain

from storefront.catalogue.queries import resolve_product
from storefront.ordering.cart.cart import Cart


def get_cart(user_id) -> dict:
    """Return the user's cart. A user without a cart gets an empty one, never an error."""
    cart = current_domain.repository_for(Cart).find_for_user(user_id)
    if cart is None:
        return {"id": None, "user_id": str(user_id), "items": [], "updated_at": None}

    return {
        "id": str(cart.id),
        "user_id": str(cart.user_id),
        "items": [
            {
                "product_id": str(item.product_id),
                "product": resolve_product(item.product_id),
                "quantity": item.quantity,
            }
            for item in cart.items
        ],
        "updated_at": cart.updated_at,
    }
