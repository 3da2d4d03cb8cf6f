"""Request logging and error translation for the relay."""
from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from quotex.api.schemas.query import ErrorResponse
from quotex.core.errors import ProviderError, ValidationError

logger = logging.getLogger(__name__)


async def log_requests(request: Request, call_next):
    start_time = time.time()

    logger.info(f"📨 Incoming: {request.method} {request.url.path}")

    response = await call_next(request)

    process_time = (time.time() - start_time) * 1000
    logger.info(
        f"📤 Response: {request.method} {request.url.path} "
        f"Status={response.status_code} Time={process_time:.2f}ms"
    )

    return response


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning(f"Rejected {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content=ErrorResponse(error=str(exc)).model_dump())


async def provider_error_handler(request: Request, exc: ProviderError) -> JSONResponse:
    logger.error(f"❌ Upstream error ({exc.provider or 'unknown'}): {exc}")
    return JSONResponse(status_code=500, content=ErrorResponse(error=str(exc)).model_dump())


def register_middleware(app: FastAPI) -> None:
    app.middleware("http")(log_requests)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(ProviderError, provider_error_handler)
