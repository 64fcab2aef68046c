"""
Global error handling
=====================

Convertit les erreurs en réponses {success: false, message, error?}.

- AppError (erreurs métier typées) → leur status_code
- RequestValidationError (corps JSON / id invalides) → 400
- HTTPException Starlette 404/405 (route inconnue) → 404 "Route not found."
- toute autre exception → 500, traceback dans `error` seulement en development
"""

import logging
import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_api.api.responses import error_body
from todo_api.core.errors import AppError

logger = logging.getLogger(__name__)


def _is_development(request: Request) -> bool:
    return request.app.state.settings.is_development


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.detail)
    detail = exc.detail if _is_development(request) else None
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message, detail))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    detail = None
    if _is_development(request):
        detail = "; ".join(
            f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}" for err in exc.errors()
        )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Invalid request.", detail),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=error_body("Route not found."))
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def error_handler_middleware(request: Request, call_next):
    """
    Filet de sécurité le plus externe : toute exception non prévue devient une 500.
    """
    try:
        return await call_next(request)
    except Exception as e:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        detail = "".join(traceback.format_exception(type(e), e, e.__traceback__)) if _is_development(request) else None
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("Internal server error.", detail),
        )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.middleware("http")(error_handler_middleware)
