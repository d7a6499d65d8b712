"""corsguard - Cross-Origin Resource Sharing interceptor."""

__version__ = "0.1.0"

from .interceptor import CorsInterceptor
from .policy import CorsPolicy, is_allowed_origin

__all__ = [
    "CorsInterceptor",
    "CorsPolicy",
    "is_allowed_origin",
]
