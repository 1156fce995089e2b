"""FastAPI endpoints for the Catalogue: public reads, admin writes."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from storefront.catalogue.api.schemas import (
    MessageResponse,
    ProductFields,
    ProductMutationResponse,
    ProductResponse,
)
from storefront.catalogue.management import CreateProduct, DeleteProduct, UpdateProduct
from storefront.catalogue.queries import get_product, list_products
from storefront.identity.api.dependencies import require_admin

product_router = APIRouter(prefix="/products", tags=["products"])


# --- Public endpoints ---


@product_router.get("", response_model=list[ProductResponse])
async def get_products(category: str | None = None) -> list[ProductResponse]:
    return [ProductResponse(**product) for product in list_products(category=category)]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_single_product(product_id: str) -> ProductResponse:
    return ProductResponse(**get_product(product_id))


# --- Admin endpoints ---


@product_router.post(
    "",
    status_code=201,
    response_model=ProductMutationResponse,
    dependencies=[Depends(require_admin)],
)
async def create_product(body: ProductFields) -> ProductMutationResponse:
    command = CreateProduct(**body.model_dump(exclude_none=True))
    product_id = current_domain.process(command, asynchronous=False)
    return ProductMutationResponse(message="Product created", product=ProductResponse(**get_product(product_id)))


@product_router.put(
    "/{product_id}",
    response_model=ProductMutationResponse,
    dependencies=[Depends(require_admin)],
)
async def update_product(product_id: str, body: ProductFields) -> ProductMutationResponse:
    command = UpdateProduct(product_id=product_id, **body.model_dump(exclude_none=True))
    current_domain.process(command, asynchronous=False)
    return ProductMutationResponse(message="Updated", product=ProductResponse(**get_product(product_id)))


@product_router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    dependencies=[Depends(require_admin)],
)
async def delete_product(product_id: str) -> MessageResponse:
    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
    return MessageResponse(message="Deleted")
