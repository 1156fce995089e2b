"""Pydantic request/response schemas for the Ordering API.

Request bodies accept both snake_case names and the camelCase names the
mobile client sends (``productId``, ``qty``).
"""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field

from storefront.catalogue.api.schemas import ProductResponse
from storefront.identity.api.schemas import UserResponse


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class AddToCartRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"productId": "prod-001", "qty": 2}]}}

    product_id: str = Field(..., validation_alias=AliasChoices("product_id", "productId"))
    quantity: int = Field(..., ge=1, validation_alias=AliasChoices("quantity", "qty"))


class RemoveFromCartRequest(BaseModel):
    product_id: str = Field(..., validation_alias=AliasChoices("product_id", "productId"))


class CartItemResponse(BaseModel):
    product_id: str
    product: ProductResponse | None = None
    quantity: int


class CartResponse(BaseModel):
    id: str | None = None
    user_id: str
    items: list[CartItemResponse] = []
    updated_at: datetime | None = None


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class UpdateOrderStatusRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "shipped"}]}}

    status: str


class OrderItemResponse(BaseModel):
    product_id: str
    product: ProductResponse | None = None
    quantity: int
    unit_price: float


class OrderResponse(BaseModel):
    id: str
    user_id: str
    items: list[OrderItemResponse]
    total: float
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AdminOrderResponse(OrderResponse):
    user: UserResponse | None = None


class CheckoutResponse(BaseModel):
    message: str = "Order created"
    order: OrderResponse
