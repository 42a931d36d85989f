"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from lishe.api.admin import router as admin_router
from lishe.api.coach import router as coach_router
from lishe.api.foods import router as foods_router
from lishe.api.meals import router as meals_router
from lishe.api.profiles import router as profiles_router
from lishe.api.reminders import router as reminders_router
from lishe.app_logging import configure_logging
from lishe.containers import AppContainer
from lishe.errors import LisheError

API_PREFIX = "/api"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state_container: AppContainer = app.state.container
        if state_container.settings.seed_catalog:
            try:
                state_container.catalog_service.seed_defaults()
            except Exception:
                logger.exception("Failed to seed the food catalog")
        yield
        await state_container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(LisheError)
    async def handle_app_error(request: Request, exc: LisheError) -> JSONResponse:
        if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "Request failed: %s", exc.message, extra={"path": request.url.path}
            )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_first_validation_error(exc),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error", extra={"path": request.url.path})
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal Server Error"},
        )

    app.include_router(admin_router)
    for router in (
        profiles_router,
        foods_router,
        meals_router,
        reminders_router,
        coach_router,
    ):
        app.include_router(router, prefix=API_PREFIX)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _first_validation_error(exc: RequestValidationError) -> dict[str, object]:
    """Return the first failing field's message."""
    errors = exc.errors()
    if not errors:
        return {"message": "Invalid input"}
    first = errors[0]
    location = [
        str(part)
        for part in first.get("loc", ())
        if part not in {"body", "query", "path"}
    ]
    payload: dict[str, object] = {"message": str(first.get("msg", "Invalid input"))}
    if location:
        payload["field"] = ".".join(location)
    return payload
