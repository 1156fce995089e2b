"""Pydantic request/response schemas for the authentication API."""

from datetime import datetime

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "username": "user1",
                    "email": "user1@test.tn",
                    "password": "user123",
                }
            ]
        }
    }

    username: str = Field(..., min_length=1, max_length=50)
    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=128)


class LoginRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"email": "admin@ecommerce.tn", "password": "admin123"}]}}

    email: str
    password: str


class UserResponse(BaseModel):
    id: str
    username: str
    email: str
    role: str
    created_at: datetime | None = None


class RegisterResponse(BaseModel):
    message: str = "User registered"
    user_id: str


class LoginResponse(BaseModel):
    token: str
    user: UserResponse


class ProfileResponse(UserResponse):
    order_count: int = 0
