from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api import chat, contact, portfolio, site
from app.clients.completion import CompletionClient
from app.core.config import Settings, load_settings
from app.core.dependencies import build_container
from app.core.errors import RequestValidationFailure
from app.core.http_policy import build_http_policy_middleware
from app.core.logging import configure_logging

logger = logging.getLogger(__name__)


def _log_loop_exception(loop: asyncio.AbstractEventLoop, context: dict[str, Any]) -> None:
    exc = context.get("exception")
    logger.error("Unhandled error in event loop: %s", context.get("message"), exc_info=exc)


async def _validation_error_handler(
    request: Request, exc: RequestValidationFailure
) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=400, content={"success": False, "message": exc.message})


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.info("Invalid request body for %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=400, content={"success": False, "message": "Invalid request body"}
    )


def create_app(
    settings: Settings | None = None,
    completion_client: CompletionClient | None = None,
) -> FastAPI:
    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        asyncio.get_running_loop().set_exception_handler(_log_loop_exception)
        logger.info("Server running at http://localhost:%s", settings.port)
        logger.info("Serving files from: %s", settings.static_dir)
        logger.info("Environment: %s", settings.environment)
        if settings.is_production:
            logger.info("CORS restricted to %s", settings.site_origin)
        yield

    app = FastAPI(title="portfolio-backend", version="1.0.0", lifespan=lifespan)
    app.state.container = build_container(settings, completion_client)
    app.middleware("http")(build_http_policy_middleware(settings))
    app.add_exception_handler(RequestValidationFailure, _validation_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.include_router(portfolio.router)
    app.include_router(contact.router)
    app.include_router(chat.router)
    # Catch-all; must stay last.
    app.include_router(site.router)
    return app


def run() -> None:
    import uvicorn

    settings = load_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        proxy_headers=settings.is_production,
        forwarded_allow_ips="*" if settings.is_production else None,
    )
