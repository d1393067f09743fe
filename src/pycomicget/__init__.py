"""
pycomicget - An async client for a comic catalog API.

This package issues authenticated calls against the catalog service, unwraps
its ``{code, message, results}`` response envelope and returns typed models.
The transport and API host can be swapped at runtime (mirrors, proxies).
"""

__version__ = "1.0.0"

from pycomicget.client.api import Client
from pycomicget.config import Config
from pycomicget.errors import (
    ApiError,
    CatalogError,
    DecodeFailure,
    NotFound,
    TransportFailure,
)

__all__ = [
    "Client",
    "Config",
    "ApiError",
    "CatalogError",
    "DecodeFailure",
    "NotFound",
    "TransportFailure",
    "__version__",
]
