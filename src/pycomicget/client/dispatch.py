"""Authenticated request dispatch against a connection snapshot.

The dispatcher turns (method, path, params) into a fully authenticated
HTTP request, sends it, and hands back the raw status code and body. It
does not interpret the body; see ``pycomicget.client.envelope`` for that.
"""

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from pycomicget.client.state import ConnectionState
from pycomicget.errors import TransportFailure
from pycomicget.http.headers import PROTOCOL_HEADERS

logger = logging.getLogger(__name__)

_SCALAR_TYPES = (str, int, float, bool, type(None))


@dataclass(frozen=True)
class RawResponse:
    """Status code and body captured before any interpretation."""

    status_code: int
    text: str
    url: str


def flatten_params(params: Mapping) -> Dict[str, Any]:
    """Check that params form a flat mapping of string keys to scalars.

    Args:
        params: Parameter mapping supplied by the caller

    Returns:
        A plain dict copy of the mapping

    Raises:
        TypeError: If params is not a mapping, a key is not a string, or a
            value is not a scalar
    """
    if not isinstance(params, Mapping):
        raise TypeError(f"params must be a mapping, got {type(params).__name__}")

    flat = {}
    for key, value in params.items():
        if not isinstance(key, str):
            raise TypeError(f"param keys must be strings, got {key!r}")
        if not isinstance(value, _SCALAR_TYPES):
            raise TypeError(
                f"param {key!r} must be a scalar, got {type(value).__name__}"
            )
        flat[key] = value
    return flat


class Dispatcher:
    """Sends catalog API requests using the client's connection state.

    Attributes:
        state: Connection state read (never written) by each dispatch
    """

    def __init__(self, state: ConnectionState):
        self.state = state

    async def dispatch(
        self,
        method: str,
        path: str,
        params: Mapping,
        timeout: Optional[float] = None,
    ) -> RawResponse:
        """Send one API request and capture the raw response.

        GET requests carry params in the query string; every other verb
        sends them as a form-urlencoded body. The URL is the host snapshot
        followed by ``path`` verbatim, so ``path`` must start with a slash.

        Args:
            method: HTTP verb
            path: Path appended to the API host
            params: Flat key/value mapping
            timeout: Optional bound in seconds on send plus body read

        Returns:
            RawResponse with status code and body text

        Raises:
            TypeError: If params is not a flat scalar mapping
            TransportFailure: On any network-level failure or timeout
        """
        flat = flatten_params(params)
        method = method.upper()

        snapshot = await self.state.snapshot()
        url = f"{snapshot.host}{path}"

        if method == "GET":
            request_kwargs = {"params": flat}
        else:
            request_kwargs = {"data": flat}

        logger.debug(f"{method} {url} {flat}")
        response = await _bounded(
            _send(snapshot.transport, method, url, PROTOCOL_HEADERS, request_kwargs),
            timeout,
            url,
        )
        logger.debug(f"{response.status_code} {response.text}")
        return response

    async def raw_fetch(self, url: str, timeout: Optional[float] = None) -> bytes:
        """GET an absolute URL and return its body bytes unconditionally.

        No protocol headers are attached and the status code is not
        inspected: a 404 page comes back as its body bytes.

        Raises:
            TransportFailure: On any network-level failure or timeout
        """
        transport = await self.state.get_transport()
        logger.debug(f"GET {url} (raw)")
        return await _bounded(_fetch_bytes(transport, url), timeout, url)


async def _bounded(coro, timeout: Optional[float], url: str):
    """Await coro, converting a timeout expiry into TransportFailure."""
    if timeout is None:
        return await coro
    try:
        return await asyncio.wait_for(coro, timeout)
    except asyncio.TimeoutError as e:
        raise TransportFailure(f"Request to {url} timed out after {timeout}s") from e


async def _send(
    transport: httpx.AsyncClient,
    method: str,
    url: str,
    headers: Dict[str, str],
    request_kwargs: Dict[str, Any],
) -> RawResponse:
    # Reading inside the stream context releases the connection on cancellation
    try:
        async with transport.stream(method, url, headers=headers, **request_kwargs) as response:
            await response.aread()
            return RawResponse(
                status_code=response.status_code,
                text=response.text,
                url=str(response.request.url),
            )
    except (httpx.RequestError, httpx.InvalidURL) as e:
        raise TransportFailure(f"{method} {url} failed: {e}") from e


async def _fetch_bytes(transport: httpx.AsyncClient, url: str) -> bytes:
    try:
        async with transport.stream("GET", url) as response:
            return await response.aread()
    except (httpx.RequestError, httpx.InvalidURL) as e:
        raise TransportFailure(f"GET {url} failed: {e}") from e
