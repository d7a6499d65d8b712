"""
This module mounts the CORS interceptor on a FastAPI application.

The middleware lets the rest of the application produce its response first and
then annotates that response, so header values set upstream (such as an
existing `Vary` directive) are preserved. It must be registered after every
other middleware: Starlette runs the last registered middleware outermost,
which makes this the final step to touch headers before the response is sent.
"""

from collections.abc import Callable
from typing import Any, cast

from fastapi import FastAPI, Request, Response
from starlette.datastructures import MutableHeaders

from ...headers import HEADER_DELIM, HEADER_ORIGIN, HEADER_VARY
from ...interceptor import CorsInterceptor
from ...my_logging import debug_log
from ...policy import CorsPolicy, is_allowed_origin


def merge_vary_lines(headers: MutableHeaders) -> None:
    """
    Folds repeated `Vary` header lines into a single comma-separated value.

    The interceptor reads and writes `Vary` as one value, so every directive
    has to be on that line before it appends `Origin`.
    """
    values = headers.getlist(HEADER_VARY)
    if len(values) > 1:
        headers[HEADER_VARY] = HEADER_DELIM.join(values)


def add_cors_middleware(app: FastAPI, policy: CorsPolicy) -> CorsInterceptor:
    """
    Adds the CORS middleware to the FastAPI application.

    Requests are never rejected here. A disallowed origin passes through with
    no CORS headers and a preflight to a route without an OPTIONS handler keeps
    whatever status the application produced.

    Args:
        app: The `FastAPI` application instance.
        policy: The policy applied to every response.

    Returns:
        The interceptor bound to the application.
    """
    interceptor = CorsInterceptor(policy)

    @app.middleware("http")
    async def cors_headers(request: Request, call_next: Callable[[Request], Any]) -> Response:
        """Middleware function to annotate responses with CORS headers."""
        response = await call_next(request)

        origin = request.headers.get(HEADER_ORIGIN)
        if not is_allowed_origin(policy.allowed_origins, origin or ""):
            # Denied responses keep their headers exactly as produced
            if origin:
                debug_log("CORS origin not allowed", origin=origin, method=request.method, path=request.url.path)
            return cast(Response, response)

        merge_vary_lines(response.headers)
        interceptor.apply(request.method, origin, response.headers)

        return cast(Response, response)

    return interceptor
