"""FastAPI application for the Heidelberg reader."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from heidelberg.config import configure_logging, get_settings
from heidelberg.domain.common.exceptions import DomainError
from heidelberg.exceptions import HeidelbergError
from heidelberg.infrastructure.common.routers import settings as settings_router
from heidelberg.infrastructure.common.schemas import HealthResponse, MessageResponse
from heidelberg.infrastructure.reading.routers import reader

settings = get_settings()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    configure_logging(settings.ENVIRONMENT)
    logger.info("application_started", environment=settings.ENVIRONMENT, max_page=settings.MAX_PAGE)
    yield
    logger.info("application_stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    docs_url=f"{settings.API_V1_PREFIX}/docs",
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(HeidelbergError)
async def heidelberg_error_handler(_request: Request, exc: HeidelbergError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(DomainError)
async def domain_error_handler(_request: Request, exc: DomainError) -> JSONResponse:
    logger.warning("domain_error", error=str(exc))
    return JSONResponse(status_code=400, content={"detail": exc.message})


api_router = APIRouter(prefix=settings.API_V1_PREFIX)
api_router.include_router(settings_router.router)


@api_router.get("/")
async def api_root() -> dict[str, str]:
    """API v1 root."""
    return {
        "message": f"{settings.PROJECT_NAME} v1",
        "version": settings.VERSION,
        "docs": f"{settings.API_V1_PREFIX}/docs",
    }


app.include_router(api_router)
app.include_router(reader.router)


@app.get("/")
async def root() -> MessageResponse:
    return MessageResponse(message=f"Welcome to {settings.PROJECT_NAME}")


@app.get("/health")
async def health() -> HealthResponse:
    return HealthResponse(status="healthy")
