"""Catalog API client: connection state, dispatch and envelope decoding."""

from pycomicget.client.api import Client
from pycomicget.client.dispatch import Dispatcher, RawResponse
from pycomicget.client.envelope import Envelope, decode
from pycomicget.client.state import ConnectionSnapshot, ConnectionState

__all__ = [
    "Client",
    "ConnectionSnapshot",
    "ConnectionState",
    "Dispatcher",
    "Envelope",
    "RawResponse",
    "decode",
]
