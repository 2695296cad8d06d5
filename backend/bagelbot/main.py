"""FastAPI application entry point."""

from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from bagelbot import __version__
from bagelbot.api import entries, root, store_status
from bagelbot.api.errors import register_error_handlers
from bagelbot.config import settings
from bagelbot.db import dispose_engine, init_db
from bagelbot.logging import bind_request_context, setup_logging

# Configure logging before anything else
setup_logging()

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup/shutdown events."""
    logger.info("Starting BagelBot backend", debug=settings.debug, port=settings.port)

    if settings.uses_default_store_key:
        logger.warning(
            "Store status API key is the built-in default; set STORE_STATUS_API_KEY",
            header=settings.store_status_key_header,
        )

    if settings.create_tables_on_startup:
        await init_db()
        logger.info("Database tables initialized")

    yield

    logger.info("Shutting down BagelBot backend")
    await dispose_engine()
    logger.info("Database connections disposed")


app = FastAPI(
    title="BagelBot API",
    description="Order intake backend with daily order numbering",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.backend_cors_origins,
    allow_credentials="*" not in settings.backend_cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    """Tag every log line of a request with its id, method and path."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
    bind_request_context(request_id, request.method, request.url.path)
    response = await call_next(request)
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


register_error_handlers(app)

app.include_router(root.router, tags=["root"])
app.include_router(entries.router)
app.include_router(store_status.router)
