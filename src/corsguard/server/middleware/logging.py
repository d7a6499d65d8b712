"""
This module provides a request timing middleware for FastAPI.

Each response gets an `X-Process-Time` header. With `CORSGUARD_DEBUG` set, a
line per request records the method, path, status, the request `Origin` and
the `Vary` value the CORS step will extend.
"""

import time
from collections.abc import Callable
from typing import Any, cast

from fastapi import FastAPI, Request, Response

from ...headers import HEADER_ORIGIN, HEADER_VARY
from ...my_logging import debug_log

PROCESS_TIME_HEADER = "X-Process-Time"


def add_logging_middleware(app: FastAPI) -> None:
    """
    Adds a request timing middleware to the FastAPI application.

    Register it before the CORS middleware so its header is already on the
    response when CORS annotation runs.

    Args:
        app: The `FastAPI` application instance.
    """

    @app.middleware("http")
    async def time_requests(request: Request, call_next: Callable[[Request], Any]) -> Response:
        start_time = time.perf_counter()

        response = await call_next(request)

        process_time = time.perf_counter() - start_time
        response.headers[PROCESS_TIME_HEADER] = f"{process_time:.6f}"

        debug_log(
            f"{request.method} {request.url.path}",
            status=response.status_code,
            origin=request.headers.get(HEADER_ORIGIN, "-"),
            vary=response.headers.get(HEADER_VARY, "-"),
            process_time=f"{process_time:.3f}s",
        )

        return cast(Response, response)
