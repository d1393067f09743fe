"""HTTP infrastructure for pycomicget (async-only).

Uses httpx directly; the catalog client's transport handle is a plain
``httpx.AsyncClient``.
"""

from pycomicget.http.client import (
    create_client,  # Returns AsyncClient
    create_retry_decorator,
)
from pycomicget.http.headers import PROTOCOL_HEADERS, load_headers_from_file

__all__ = [
    "create_client",
    "create_retry_decorator",
    "PROTOCOL_HEADERS",
    "load_headers_from_file",
]
