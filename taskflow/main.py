"""
TASKFLOW - Main Application

Session-authenticated task API backed by a relational store.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskflow.auth import auth_router
from taskflow.config import settings
from taskflow.database import database
from taskflow.errors import AppError, InternalError, ValidationError, describe_validation_error
from taskflow.middleware import SECURITY_HEADERS, BodySizeLimitMiddleware, SecurityHeadersMiddleware
from taskflow.schemas import OkResponse
from taskflow.security import validate_security_config
from taskflow.tasks import tasks_router

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    validate_security_config()
    await database.connect()
    logger.info("%s %s started", settings.APP_NAME, settings.APP_VERSION)

    yield

    await database.disconnect()
    logger.info("%s stopped", settings.APP_NAME)


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Minimal task manager with cookie sessions",
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    lifespan=lifespan,
)

app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.MAX_BODY_BYTES)
app.add_middleware(SecurityHeadersMiddleware)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=ValidationError.status_code,
        content={"error": describe_validation_error(exc.errors())},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=InternalError.status_code,
        content={"error": InternalError.default_message},
        # runs outside the header middleware
        headers=SECURITY_HEADERS,
    )


@app.get("/healthz", response_model=OkResponse, tags=["Health"])
async def health_check() -> OkResponse:
    """
    Health check endpoint.

    Used by container health checks and load balancers.
    """
    return OkResponse()


app.include_router(auth_router)
app.include_router(tasks_router)
