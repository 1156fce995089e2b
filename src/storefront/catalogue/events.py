"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductCreated:
    """A product was added to the catalogue."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String()
    price = Float(required=True)
    stock = Integer(required=True)
    category = String()
    created_at = DateTime(required=True)


@storefront.event(part_of="Product")
class ProductUpdated:
    """Admin edited one or more product fields."""

    __version__ = 1

    product_id = Identifier(required=True)
    changed_fields = Text(required=True)  # JSON: {field: new value}
    updated_at = DateTime(required=True)


@storefront.event(part_of="Product")
class StockReduced:
    """Stock left the warehouse because an order was placed."""

    __version__ = 1

    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    remaining = Integer(required=True)
