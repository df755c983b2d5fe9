"""
FastAPI application for the DogService RPC surface.

``create_app`` wires logging, the v1 router, the error handlers and the
upstream adapter lifecycle. Run it with ``dogapi serve`` or directly::

    uvicorn --factory api.app:create_app --port 50051

The adapter (and its single shared ``httpx.AsyncClient``) is opened at startup
and closed at shutdown. Tests pass their own ``source`` instead.
"""

import logging
from contextlib import AsyncExitStack, asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from adapters.dog_ceo import DogCeoClient
from api.routes import router as dog_router
from core.config import AppSettings
from core.domain.models import ErrorResponse
from core.errors import ErrorCode, ServiceError
from core.interfaces.dog_source import DogImageSource
from core.logging_config import setup_logging
from core.services.dog_service import DogService

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


def _error_response(code: ErrorCode, message: str, detail: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(code=code.value, message=message, detail=detail)
    return JSONResponse(status_code=code.http_status(), content=body.model_dump())


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    if exc.code is ErrorCode.INVALID_ARGUMENT:
        logger.info("rejected %s: %s", request.url.path, exc)
    return _error_response(exc.code, exc.message, exc.detail)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are argument errors, same as failed translator checks."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    message = "invalid request: " + "; ".join(problems)
    logger.info("rejected %s: %s", request.url.path, message)
    return _error_response(ErrorCode.INVALID_ARGUMENT, message)


def create_app(
    settings: Optional[AppSettings] = None,
    *,
    source: Optional[DogImageSource] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings : AppSettings, optional
        Application settings; read from the environment when omitted.
    source : DogImageSource, optional
        Upstream implementation to use instead of the dog.ceo adapter. When
        given, its lifecycle belongs to the caller.
    """
    settings = settings or AppSettings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        async with AsyncExitStack() as stack:
            upstream = source
            if upstream is None:
                upstream = await stack.enter_async_context(DogCeoClient(settings))
                logger.info("proxying %s", settings.upstream_base_url)
            app.state.dog_service = DogService(upstream)
            yield

    app = FastAPI(title="DogService", version="0.1.0", lifespan=lifespan)
    app.include_router(dog_router, prefix=API_PREFIX)
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    @app.get("/health", summary="Health check")
    async def health_check() -> dict:
        return {"status": "ok"}

    return app
