"""Domain events for the Cart aggregate."""

from protean.fields import DateTime, Identifier, Integer

from storefront.domain import storefront


@storefront.event(part_of="Cart")
class CartItemSet:
    """A product was put in the cart, or its quantity was overwritten."""

    __version__ = 1

    cart_id = Identifier(required=True)
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    previous_quantity = Integer()  # None when the product was not in the cart


@storefront.event(part_of="Cart")
class CartItemRemoved:
    __version__ = 1

    cart_id = Identifier(required=True)
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.event(part_of="Cart")
class CartCleared:
    """All items were dropped, normally because the cart was checked out."""

    __version__ = 1

    cart_id = Identifier(required=True)
    user_id = Identifier(required=True)
    cleared_at = DateTime(required=True)
