"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from campus_events.api.v1 import router as api_v1_router
from campus_events.config import get_settings
from campus_events.dependencies.store import open_store
from campus_events.errors import NotFoundError, StoreError, StoreUnavailable, ValidationError
from campus_events.models.base import Base, get_engine

logger = logging.getLogger(__name__)
settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    logger.info("Starting %s (%s store)...", settings.app_name, settings.store_backend)
    if settings.store_backend == "sql":
        async with get_engine().begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables verified")

    if settings.seed_default_categories:
        async with open_store() as store:
            added = await store.seed_default_categories()
        if added:
            logger.info("Seeded %d default categories", added)

    yield
    logger.info("Shutting down...")
    if settings.store_backend == "sql":
        await get_engine().dispose()


app = FastAPI(
    title=settings.app_name,
    description="Campus events and clubs with preference-based event recommendations",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(api_v1_router)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    status_code = 503 if isinstance(exc, StoreUnavailable) else 500
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "app": settings.app_name,
        "store": settings.store_backend,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
