"""ASGI middleware: per-request access log and a last-resort FAILED response."""

from __future__ import annotations

import time
import traceback

from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from fnol_agent.core.result import failed_result


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and latency; tag upload size when known."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        start = time.time()
        response = await call_next(request)
        logger.info(
            "{method} {path} -> {status} ({ms:.0f}ms, {size} bytes in)",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            ms=(time.time() - start) * 1000,
            size=request.headers.get("content-length", "0"),
        )
        return response


class ExceptionHandlerMiddleware(BaseHTTPMiddleware):
    """Turn anything that escapes a route into a 500 with a FAILED result body.

    The processor already converts pipeline faults into FAILED results, so
    this only sees errors raised outside it (e.g. an unreadable PDF).
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                "Unhandled exception on {method} {path}: {err}\n{tb}",
                method=request.method,
                path=request.url.path,
                err=exc,
                tb=traceback.format_exc(),
            )
            return JSONResponse(status_code=500, content=failed_result(exc).to_payload())
