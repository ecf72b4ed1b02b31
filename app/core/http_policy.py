from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse

from app.core.config import Settings

logger = logging.getLogger(__name__)

HSTS_VALUE = "max-age=31536000; includeSubDomains"
INTERNAL_ERROR_MESSAGE = "Internal server error"

_SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}

_CORS_ALLOW_HEADERS = "Origin, X-Requested-With, Content-Type, Accept, Authorization"
_CORS_ALLOW_METHODS = "GET, POST, PUT, DELETE, OPTIONS"


def security_headers(settings: Settings) -> dict[str, str]:
    headers = dict(_SECURITY_HEADERS)
    if settings.is_production:
        headers["Strict-Transport-Security"] = HSTS_VALUE
    return headers


def cors_headers(settings: Settings) -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": settings.site_origin if settings.is_production else "*",
        "Access-Control-Allow-Headers": _CORS_ALLOW_HEADERS,
        "Access-Control-Allow-Methods": _CORS_ALLOW_METHODS,
        "Access-Control-Allow-Credentials": "true",
    }


def build_http_policy_middleware(
    settings: Settings,
) -> Callable[[Request, Callable[[Request], Awaitable[Response]]], Awaitable[Response]]:
    """Attach hardening and CORS headers to every response; answer preflights directly.

    Errors that escape the route handlers are logged and turned into a JSON 500 here,
    so those responses carry the same headers.
    """
    headers = {**security_headers(settings), **cors_headers(settings)}

    async def apply_http_policy(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if request.method == "OPTIONS":
            response = Response(status_code=200)
        else:
            try:
                response = await call_next(request)
            except Exception:  # noqa: BLE001
                logger.exception("Unhandled error on %s %s", request.method, request.url.path)
                response = JSONResponse(
                    status_code=500,
                    content={"success": False, "message": INTERNAL_ERROR_MESSAGE},
                )
        response.headers.update(headers)
        return response

    return apply_http_policy
