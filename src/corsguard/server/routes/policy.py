"""
This module exposes the active CORS policy as a read-only endpoint.
"""

from typing import Any

from fastapi import APIRouter, Request

from ..models.response import PolicyResponse

router = APIRouter(tags=["cors"])


@router.get("/cors/policy", response_model=PolicyResponse)
async def get_policy(request: Request) -> Any:
    """Returns the CORS policy bound to this application."""
    return PolicyResponse.from_policy(request.app.state.cors_interceptor.policy)
