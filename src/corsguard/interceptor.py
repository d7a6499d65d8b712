"""
This module implements the CORS interceptor.

The interceptor is a single step in a middleware chain. For each request it
reads the method and the `Origin` header, consults the policy, and annotates
the response headers. It never rejects a request: a disallowed origin simply
gets no CORS headers, and the chain always continues.
"""

from collections.abc import Callable, MutableMapping
from typing import TypeVar

from .headers import (
    HEADER_ALLOW_CREDENTIALS,
    HEADER_ALLOW_HEADERS,
    HEADER_ALLOW_METHODS,
    HEADER_ALLOW_ORIGIN,
    HEADER_DELIM,
    HEADER_EXPOSE_HEADERS,
    HEADER_MAX_AGE,
    HEADER_ORIGIN,
    HEADER_VARY,
    METHOD_OPTIONS,
)
from .policy import CorsPolicy, is_allowed_origin

T = TypeVar("T")


class CorsInterceptor:
    """
    Applies a `CorsPolicy` to outgoing responses.

    The policy is captured at construction and only read afterwards, so one
    interceptor can serve any number of concurrent requests.
    """

    def __init__(self, policy: CorsPolicy) -> None:
        self.policy = policy

    def apply(self, method: str, origin: str | None, response_headers: MutableMapping[str, str]) -> bool:
        """
        Annotates the response headers for one request.

        Args:
            method: The request method as received. Only an exact `"OPTIONS"`
                is treated as a preflight.
            origin: The request `Origin` header, or None when absent.
            response_headers: The mutable response header collection.

        Returns:
            True if the origin was allowed and headers were written, False if
            the response was left untouched.
        """
        policy = self.policy
        origin = origin or ""

        if not is_allowed_origin(policy.allowed_origins, origin):
            return False

        # Echo the request origin even on a wildcard match so credentialed requests work
        response_headers[HEADER_ALLOW_ORIGIN] = origin

        if policy.allow_credentials:
            response_headers[HEADER_ALLOW_CREDENTIALS] = "true"

        vary = response_headers.get(HEADER_VARY) or ""
        if vary:
            vary += HEADER_DELIM
        response_headers[HEADER_VARY] = vary + HEADER_ORIGIN

        if policy.exposed_headers:
            response_headers[HEADER_EXPOSE_HEADERS] = policy.joined_exposed_headers

        if method != METHOD_OPTIONS:
            return True

        if policy.allowed_headers:
            response_headers[HEADER_ALLOW_HEADERS] = policy.joined_allowed_headers

        if policy.allowed_methods:
            response_headers[HEADER_ALLOW_METHODS] = policy.joined_allowed_methods

        if policy.allow_max_age > 0:
            response_headers[HEADER_MAX_AGE] = policy.joined_max_age

        return True

    def handle(
        self,
        method: str,
        origin: str | None,
        response_headers: MutableMapping[str, str],
        call_next: Callable[[], T],
    ) -> T:
        """
        Annotates the response and hands off to the next step in the chain.

        `call_next` is invoked exactly once, after all header mutations, and
        whatever it returns or raises is passed through unchanged.
        """
        self.apply(method, origin, response_headers)
        return call_next()

    __call__ = handle
