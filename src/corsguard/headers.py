"""Header names and tokens used when annotating CORS responses."""

HEADER_DELIM = ", "

METHOD_OPTIONS = "OPTIONS"

HEADER_ORIGIN = "Origin"
HEADER_VARY = "Vary"
HEADER_ALLOW_ORIGIN = "Access-Control-Allow-Origin"
HEADER_ALLOW_CREDENTIALS = "Access-Control-Allow-Credentials"
HEADER_ALLOW_HEADERS = "Access-Control-Allow-Headers"
HEADER_ALLOW_METHODS = "Access-Control-Allow-Methods"
HEADER_EXPOSE_HEADERS = "Access-Control-Expose-Headers"
HEADER_MAX_AGE = "Access-Control-Max-Age"

CORS_RESPONSE_HEADERS = (
    HEADER_ALLOW_ORIGIN,
    HEADER_ALLOW_CREDENTIALS,
    HEADER_ALLOW_HEADERS,
    HEADER_ALLOW_METHODS,
    HEADER_EXPOSE_HEADERS,
    HEADER_MAX_AGE,
)
