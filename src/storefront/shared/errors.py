"""HTTP error mapping shared by every router.

Protean's handlers cover domain validation. The storefront adds missing
records, access-gate failures, malformed request bodies and a catch-all that
reports the underlying message as a 500.
"""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError
from protean.integrations.fastapi import register_exception_handlers

from storefront.identity.access import AuthenticationError, AuthorizationError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


async def authentication_error_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
    logger.info("request_unauthenticated", path=request.url.path, reason=str(exc))
    return JSONResponse(status_code=401, content={"error": str(exc)})


async def authorization_error_handler(request: Request, exc: AuthorizationError) -> JSONResponse:
    logger.info("request_forbidden", path=request.url.path, reason=str(exc))
    return JSONResponse(status_code=403, content={"error": str(exc)})


async def not_found_error_handler(request: Request, exc: ObjectNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": str(exc)})


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "details": jsonable_encoder(exc.errors())},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("request_failed", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=500, content={"error": str(exc)})


def install_error_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)
    app.add_exception_handler(ObjectNotFoundError, not_found_error_handler)
    app.add_exception_handler(AuthenticationError, authentication_error_handler)
    app.add_exception_handler(AuthorizationError, authorization_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
