"""Error taxonomy for catalog API calls.

Every failure raised by the client core is one of four kinds, all sharing
the ``CatalogError`` base so callers can catch a single type:

- NotFound: the HTTP layer answered 404, body ignored
- ApiError: the envelope parsed but its ``code`` was not 200
- TransportFailure: no usable response (DNS, TLS, reset, timeout)
- DecodeFailure: the body is not an envelope, or ``results`` has the wrong shape
"""

from typing import Optional


class CatalogError(Exception):
    """Base class for all catalog client errors."""


class NotFound(CatalogError):
    """The server answered with HTTP 404."""

    def __init__(self, url: Optional[str] = None):
        self.url = url
        super().__init__(f"404 Not found: {url}" if url else "404 Not found")


class ApiError(CatalogError):
    """The service returned an envelope with a non-200 ``code``.

    Attributes:
        message: Service-supplied message, passed through unmodified
        code: Envelope code
    """

    def __init__(self, message: str, code: Optional[int] = None):
        self.message = message
        self.code = code
        super().__init__(message)


class TransportFailure(CatalogError):
    """The request could not be completed at the network level."""


class DecodeFailure(CatalogError):
    """The response body could not be decoded into the expected shape."""
