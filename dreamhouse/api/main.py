"""FastAPI application factory."""

from __future__ import annotations
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dreamhouse import config
from dreamhouse.api.routes import router

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    logger.warning("Rejected request to %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=400,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": type(exc).__name__, "detail": None},
    )


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Dreamhouse Geometry Generator",
        description="Parametric building massing, roofs and floor plans",
        version="0.1.0",
    )

    # CORS: the mobile/web viewer runs on another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ValueError, value_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(router, prefix="/api")

    return app


app = create_app()
