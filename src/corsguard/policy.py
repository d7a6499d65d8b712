"""
This module defines the CORS policy and the origin-match predicate.

A `CorsPolicy` is built once at startup and shared read-only by every request.
The header values derived from it are joined at construction time so that the
interceptor only copies cached strings per request.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .headers import HEADER_DELIM

WILDCARD_ORIGIN = "*"


def is_allowed_origin(allowed_origins: Iterable[str], origin: str) -> bool:
    """
    Checks an `Origin` value against the allowed origins.

    Comparison is exact string equality, with no case or port normalization.
    A `"*"` entry matches any origin, including the empty string.

    Args:
        allowed_origins: The configured origins, possibly containing `"*"`.
        origin: The request `Origin` header value ("" when absent).

    Returns:
        True if the origin matches an entry or a wildcard is configured.
    """
    for allowed in allowed_origins:
        if allowed == origin or allowed == WILDCARD_ORIGIN:
            return True
    return False


def _string_tuple(name: str, values: Iterable[str]) -> tuple[str, ...]:
    # A bare string would otherwise split into single characters
    if isinstance(values, (str, bytes)):
        raise TypeError(f"{name} must be a list of strings, got {values!r}")
    result = tuple(values)
    for value in result:
        if not isinstance(value, str):
            raise TypeError(f"{name} entries must be strings, got {value!r}")
    return result


@dataclass(frozen=True)
class CorsPolicy:
    """
    Immutable CORS configuration.

    Attributes:
        allowed_origins: Exact-match origins, or `"*"` to allow any origin.
        allowed_methods: Methods advertised in preflight responses.
        allowed_headers: Headers advertised in preflight responses.
        allow_credentials: Whether to emit `Access-Control-Allow-Credentials`.
        allow_max_age: Preflight cache lifetime in seconds; `<= 0` suppresses the header.
        exposed_headers: Headers browser scripts are allowed to read.
    """

    allowed_origins: tuple[str, ...] = ()
    allowed_methods: tuple[str, ...] = ()
    allowed_headers: tuple[str, ...] = ()
    allow_credentials: bool = False
    allow_max_age: int = 0
    exposed_headers: tuple[str, ...] = ()

    joined_allowed_headers: str = field(init=False, repr=False, compare=False)
    joined_allowed_methods: str = field(init=False, repr=False, compare=False)
    joined_exposed_headers: str = field(init=False, repr=False, compare=False)
    joined_max_age: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Copy caller lists so they cannot change the policy later
        for name in ("allowed_origins", "allowed_methods", "allowed_headers", "exposed_headers"):
            object.__setattr__(self, name, _string_tuple(name, getattr(self, name)))

        if not isinstance(self.allow_credentials, bool):
            raise TypeError(f"allow_credentials must be a bool, got {self.allow_credentials!r}")
        if isinstance(self.allow_max_age, bool) or not isinstance(self.allow_max_age, int):
            raise TypeError(f"allow_max_age must be an int, got {self.allow_max_age!r}")

        object.__setattr__(self, "joined_allowed_headers", HEADER_DELIM.join(self.allowed_headers))
        object.__setattr__(self, "joined_allowed_methods", HEADER_DELIM.join(self.allowed_methods))
        object.__setattr__(self, "joined_exposed_headers", HEADER_DELIM.join(self.exposed_headers))
        object.__setattr__(self, "joined_max_age", str(self.allow_max_age))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CorsPolicy":
        """Create a CorsPolicy from a mapping of option names, ignoring unknown keys."""
        options = ("allowed_origins", "allowed_methods", "allowed_headers", "allow_credentials", "allow_max_age", "exposed_headers")
        return cls(**{k: v for k, v in data.items() if k in options})

    def to_dict(self) -> dict[str, Any]:
        """Convert the policy options to plain JSON types."""
        return {
            "allowed_origins": list(self.allowed_origins),
            "allowed_methods": list(self.allowed_methods),
            "allowed_headers": list(self.allowed_headers),
            "allow_credentials": self.allow_credentials,
            "allow_max_age": self.allow_max_age,
            "exposed_headers": list(self.exposed_headers),
        }
