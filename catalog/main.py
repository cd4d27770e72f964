# catalog/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from catalog.api.artists import router as artists_router
from catalog.api.maintenance import router as maintenance_router
from catalog.api.releases import router as releases_router
from catalog.config import configure_logging, get_settings
from catalog.db.engine import get_engine
from catalog.db.schema import create_schema
from catalog.errors import CatalogError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    if settings.CREATE_SCHEMA:
        # honour dependency overrides so tests never touch the default database
        engine_factory = app.dependency_overrides.get(get_engine, get_engine)
        create_schema(engine_factory())
        logger.info("Catalog schema ready")
    yield


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title="Music Catalog API",
        version="0.1.0",
        lifespan=lifespan,
    )

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        content = {"error": exc.message}
        if exc.info is not None:
            content["info"] = exc.info
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # malformed bodies are client errors like missing fields: 400, not 422
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request", "info": str(exc.errors())},
        )

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        logger.exception("Store error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": "Unexpected error", "info": str(exc)},
        )

    @app.get("/")
    def root():
        return {"success": True}

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(artists_router)
    app.include_router(releases_router)
    if settings.SCHEMA_ROUTES:
        app.include_router(maintenance_router)

    return app


app = create_app()
