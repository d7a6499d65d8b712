"""
This module defines the Pydantic models for API responses.
"""

from pydantic import BaseModel, Field

from ...policy import CorsPolicy


class HealthResponse(BaseModel):
    """
    Represents the response model for the server health check endpoint.

    Attributes:
        status: The health status of the server (e.g., 'healthy').
        version: The version number of the corsguard application.
        uptime: The uptime of the server in seconds.
        allowed_origins: The number of entries in the origin allow-list.
        wildcard_origin: Whether the allow-list contains `"*"`.
    """

    status: str = Field(..., description="Server health status")
    version: str = Field(..., description="corsguard version")
    uptime: float | None = Field(None, description="Server uptime in seconds")
    allowed_origins: int = Field(0, description="Number of configured CORS origins")
    wildcard_origin: bool = Field(False, description="Whether any origin is allowed")

    model_config = {
        "json_schema_extra": {
            "examples": [{"status": "healthy", "version": "0.1.0", "uptime": 3600.5, "allowed_origins": 2, "wildcard_origin": False}]
        }
    }


class PolicyResponse(BaseModel):
    """Represents the CORS policy the server is enforcing."""

    allowed_origins: list[str] = Field(default_factory=list, description="Exact-match origins, or '*' for any origin")
    allowed_methods: list[str] = Field(default_factory=list, description="Methods advertised in preflight responses")
    allowed_headers: list[str] = Field(default_factory=list, description="Headers advertised in preflight responses")
    allow_credentials: bool = Field(False, description="Whether Access-Control-Allow-Credentials is sent")
    allow_max_age: int = Field(0, description="Preflight cache lifetime in seconds; <= 0 disables the header")
    exposed_headers: list[str] = Field(default_factory=list, description="Headers readable by browser scripts")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "allowed_origins": ["https://app.example.test"],
                    "allowed_methods": ["GET", "POST"],
                    "allowed_headers": ["Content-Type"],
                    "allow_credentials": True,
                    "allow_max_age": 600,
                    "exposed_headers": ["Content-Length"],
                }
            ]
        }
    }

    @classmethod
    def from_policy(cls, policy: CorsPolicy) -> "PolicyResponse":
        return cls(**policy.to_dict())
