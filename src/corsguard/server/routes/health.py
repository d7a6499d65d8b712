"""
This module defines the health check endpoint for the corsguard server.

Besides liveness it reports whether the bound CORS policy admits any origin,
which catches a deployment that silently denies every cross-origin caller.
"""

import time
from typing import Any

from fastapi import APIRouter, Request

from ... import __version__
from ...my_logging import debug_log
from ...policy import WILDCARD_ORIGIN
from ..models.response import HealthResponse

router = APIRouter(tags=["health"])

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> Any:
    """
    Reports server status, version, uptime and the size of the origin allow-list.
    """
    policy = request.app.state.cors_interceptor.policy
    uptime = time.time() - _start_time

    if not policy.allowed_origins:
        debug_log("Health check: CORS policy allows no origins")

    return HealthResponse(
        status="healthy",
        version=__version__,
        uptime=uptime,
        allowed_origins=len(policy.allowed_origins),
        wildcard_origin=WILDCARD_ORIGIN in policy.allowed_origins,
    )
