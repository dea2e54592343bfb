import logging
import traceback
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from bootpane.config.settings import Settings
from bootpane.exceptions import InvalidConfigError
from bootpane.router import router

logger = logging.getLogger("bootpane")


@asynccontextmanager
async def lifespan(app: FastAPI) -> Any:
    settings = Settings()
    app.state.settings = settings
    logger.info(f"Widget id prefix: {settings.widget_id_prefix}")

    yield

    logger.info("Application shutdown completed")


def create_app() -> FastAPI:
    app = FastAPI(
        title="bootpane",
        description="Server-side Bootstrap widgets",
        lifespan=lifespan,
    )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, e: HTTPException) -> JSONResponse:
        logger.error(f"HTTP {e.status_code}: {e.detail} - {request.method} {request.url}")
        return JSONResponse(
            status_code=e.status_code,
            content={"detail": e.detail},
        )

    @app.exception_handler(InvalidConfigError)
    async def invalid_config_handler(request: Request, e: InvalidConfigError) -> JSONResponse:
        logger.error(f"Invalid widget configuration on {request.method} {request.url}: {e}")
        return JSONResponse(
            status_code=422,
            content={"detail": str(e)},
        )

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(request: Request, e: ValidationError) -> JSONResponse:
        logger.error(f"Validation error on {request.method} {request.url}: {e}")
        return JSONResponse(
            status_code=422,
            content={"detail": "Validation error", "errors": e.errors()},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, e: Exception) -> JSONResponse:
        logger.error(f"Unhandled exception on {request.method} {request.url}:")
        logger.error(traceback.format_exc())
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error", "error": str(e)},
        )

    app.include_router(router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
