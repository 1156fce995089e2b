"""Read-side helpers for products."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product


def product_view(product: Product) -> dict:
    return {
        "id": str(product.id),
        "name": product.name,
        "description": product.description,
        "price": product.price,
        "stock": product.stock,
        "category": product.category,
        "image": product.image,
        "created_at": product.created_at,
        "updated_at": product.updated_at,
    }


def list_products(category: str | None = None) -> list[dict]:
    repo = current_domain.repository_for(Product)
    products = repo.find_by_category(category) if category else repo.find_all()
    return [product_view(p) for p in products]


def get_product(product_id: str) -> dict:
    """Return one product; raises ``ObjectNotFoundError`` if it does not exist."""
    return product_view(current_domain.repository_for(Product).get(product_id))


def resolve_product(product_id: str) -> dict | None:
    """Embed a referenced product, or ``None`` once it has been deleted."""
    try:
        return get_product(product_id)
    except ObjectNotFoundError:
        return None
