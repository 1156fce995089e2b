"""Storefront FastAPI application.

Every request runs inside the storefront domain context, so routes can reach
repositories and process commands through ``current_domain``.

Usage:
    uvicorn storefront.app:create_app --factory --host 0.0.0.0 --port 8000 --reload
"""

import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.catalogue.api import product_router
from storefront.config import get_settings
from storefront.domain import storefront
from storefront.identity.api import auth_router
from storefront.ordering.api import cart_router, order_router
from storefront.shared.errors import install_error_handlers
from storefront.utils.logging import add_context, clear_context, get_logger

# Router imports above pull in every command module, so they are registered
# with the domain before create_app() calls init().

logger = get_logger(__name__)


def build_app() -> FastAPI:
    """Assemble the HTTP application around an already initialized domain."""
    settings = get_settings()

    app = FastAPI(
        title="Storefront API",
        description="E-commerce backend: catalogue, carts, checkout and orders",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the storefront domain context and bind request details to the log context."""
        add_context(
            request_id=request.headers.get("x-request-id") or str(uuid.uuid4()),
            method=request.method,
            path=request.url.path,
        )
        try:
            with storefront.domain_context():
                response = await call_next(request)
            return response
        finally:
            clear_context()

    # -----------------------------------------------------------------------
    # Routers
    # -----------------------------------------------------------------------
    app.include_router(auth_router)
    app.include_router(product_router)
    app.include_router(cart_router)
    app.include_router(order_router)

    install_error_handlers(app)

    # -----------------------------------------------------------------------
    # Health
    # -----------------------------------------------------------------------
    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": storefront.name})

    return app


def create_app() -> FastAPI:
    """Initialize the domain and build the application. Used by uvicorn's ``--factory``."""
    storefront.init()

    if get_settings().seed_demo_data:
        from storefront.seed import seed_demo_data

        with storefront.domain_context():
            seed_demo_data()

    logger.info("app_created", domain=storefront.name)
    return build_app()
