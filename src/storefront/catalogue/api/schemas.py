"""Pydantic request/response schemas for the Catalogue API."""

from datetime import datetime

from pydantic import BaseModel, Field


class ProductFields(BaseModel):
    """Free-form product field set. Every field is optional on create and update."""

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Laptop HP",
                    "description": "Ordinateur portable HP 15.6 pouces, Intel Core i5, 8GB RAM",
                    "price": 2499,
                    "category": "Informatique",
                    "stock": 15,
                    "image": "https://images.unsplash.com/photo-1496181133206-80ce9b88a853?w=400",
                }
            ]
        }
    }

    name: str | None = Field(None, max_length=255)
    description: str | None = None
    price: float | None = Field(None, ge=0)
    category: str | None = Field(None, max_length=100)
    stock: int | None = Field(None, ge=0)
    image: str | None = None


class ProductResponse(BaseModel):
    id: str
    name: str | None = None
    description: str | None = None
    price: float
    stock: int
    category: str | None = None
    image: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProductMutationResponse(BaseModel):
    message: str
    product: ProductResponse


class MessageResponse(BaseModel):
    message: str
