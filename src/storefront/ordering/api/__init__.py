"""Ordering domain API package."""

from storefront.ordering.api.routes import cart_router, order_router

__all__ = ["cart_router", "order_router"]
