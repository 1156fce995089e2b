"""FastAPI routes for registration, login and the caller's profile."""

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from storefront.identity.access import Identity
from storefront.identity.api.dependencies import current_identity
from storefront.identity.api.schemas import (
    LoginRequest,
    LoginResponse,
    ProfileResponse,
    RegisterRequest,
    RegisterResponse,
    UserResponse,
)
from storefront.identity.authentication import login
from storefront.identity.registration import RegisterUser
from storefront.identity.user import User, user_view
from storefront.ordering.order.order import Order

auth_router = APIRouter(prefix="/auth", tags=["auth"])


@auth_router.post("/register", status_code=201, response_model=RegisterResponse)
async def register(body: RegisterRequest) -> RegisterResponse:
    command = RegisterUser(
        username=body.username,
        email=body.email,
        password=body.password,
    )
    result = current_domain.process(command, asynchronous=False)
    return RegisterResponse(user_id=result)


@auth_router.post("/login", response_model=LoginResponse)
async def login_user(body: LoginRequest) -> LoginResponse:
    token, user = login(body.email, body.password)
    return LoginResponse(token=token, user=UserResponse(**user_view(user)))


@auth_router.get("/me", response_model=ProfileResponse)
async def me(caller: Identity = Depends(current_identity)) -> ProfileResponse:
    user = current_domain.repository_for(User).get(caller.user_id)
    order_count = current_domain.repository_for(Order).count_for_user(caller.user_id)
    return ProfileResponse(**user_view(user), order_count=order_count)
