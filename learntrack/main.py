"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from learntrack.config import configure_logging, get_settings
from learntrack.database import create_tables, dispose_engine, initialize_database
from learntrack.domain.common.exceptions import DomainError
from learntrack.exceptions import status_code_for
from learntrack.infrastructure.catalog.routers import categories, tags
from learntrack.infrastructure.learning.routers import (
    dependencies,
    learning_items,
    modules,
    reports,
)

settings = get_settings()
configure_logging(settings.ENVIRONMENT)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    initialize_database(settings)
    if settings.ENVIRONMENT != "production":
        # Production schemas are managed by `alembic upgrade head`
        create_tables()
    logger.info("application_started", environment=settings.ENVIRONMENT)
    yield
    dispose_engine()


app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DomainError)
async def domain_error_handler(_request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error("domain_invariant_violated", error=type(exc).__name__, detail=exc.message)
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": exc.message,
            "error": type(exc).__name__,
            "details": jsonable_encoder(exc.details),
        },
    )


for router_module in (learning_items, modules, dependencies, reports, categories, tags):
    app.include_router(router_module.router, prefix=settings.API_V1_PREFIX)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
