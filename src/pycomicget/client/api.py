"""Catalog API client.

Each operation binds a verb, a path and a typed parameter set to the
dispatch + envelope pipeline::

    async with Client() as client:
        page = await client.comic_search("name", "onepunch", limit=10, offset=0)
        for comic in page.items:
            print(comic.name)

The transport handle and API host can be swapped at any time (mirror hosts,
proxy injection) without rebuilding the client. Calls already in flight keep
the configuration they started with.
"""

from collections.abc import Mapping
from typing import Optional, Type, TypeVar

import httpx

from pycomicget.client.dispatch import Dispatcher
from pycomicget.client.envelope import decode
from pycomicget.client.state import ConnectionState
from pycomicget.config import Config
from pycomicget.http.client import create_client
from pycomicget.models.comic import (
    ComicChapter,
    ComicData,
    ComicInSearch,
    ComicQuery,
    Page,
    RankItem,
    Tags,
)
from pycomicget.models.params import (
    ChapterParams,
    PlatformParams,
    RankParams,
    SearchParams,
)

T = TypeVar("T")


class Client:
    """Async client for the comic catalog API.

    Attributes:
        config: Configuration the client was built from
    """

    def __init__(
        self,
        transport: Optional[httpx.AsyncClient] = None,
        host: Optional[str] = None,
        config: Optional[Config] = None,
    ):
        """Initialize the client.

        Args:
            transport: httpx.AsyncClient to send requests with; one is
                created from ``config`` (and closed by ``aclose``) if omitted
            host: API host including scheme, without trailing slash
            config: Configuration object
        """
        self.config = config or Config()
        self._owned_transport: Optional[httpx.AsyncClient] = None
        if transport is None:
            transport = create_client(self.config)
            self._owned_transport = transport

        self._state = ConnectionState(transport, host or self.config.api_host)
        self._dispatcher = Dispatcher(self._state)

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the transport this client created, if any."""
        if self._owned_transport is not None:
            await self._owned_transport.aclose()
            self._owned_transport = None

    # Connection configuration

    async def get_transport(self) -> httpx.AsyncClient:
        return await self._state.get_transport()

    async def set_transport(self, transport: httpx.AsyncClient) -> None:
        await self._state.set_transport(transport)

    async def get_host(self) -> str:
        return await self._state.get_host()

    async def set_host(self, host: str) -> None:
        await self._state.set_host(host)

    async def api_host_string(self) -> str:
        return await self._state.get_host()

    async def configure(
        self,
        transport: Optional[httpx.AsyncClient] = None,
        host: Optional[str] = None,
    ) -> None:
        """Swap transport and host together; see ``ConnectionState.configure``."""
        await self._state.configure(transport=transport, host=host)

    # Core pipeline

    async def request(
        self,
        method: str,
        path: str,
        params: Mapping,
        shape: Type[T],
        timeout: Optional[float] = None,
    ) -> T:
        """Send a request and decode its envelope into ``shape``.

        Args:
            method: HTTP verb
            path: Path appended to the API host (leading slash required)
            params: Flat key/value mapping
            shape: Expected type of the envelope's ``results``
            timeout: Optional bound in seconds on the whole call

        Returns:
            The decoded payload

        Raises:
            NotFound, ApiError, TransportFailure, DecodeFailure
        """
        raw = await self._dispatcher.dispatch(method, path, params, timeout=timeout)
        return decode(raw.status_code, raw.text, shape, url=raw.url)

    # Operations

    async def tags(self, timeout: Optional[float] = None) -> Tags:
        """Fetch the tag taxonomy."""
        return await self.request(
            "GET",
            "/api/v3/h5/filter/comic/tags",
            PlatformParams().to_params(),
            Tags,
            timeout=timeout,
        )

    async def comic_search(
        self,
        q_type: str,
        q: str,
        limit: int,
        offset: int,
        timeout: Optional[float] = None,
    ) -> Page[ComicInSearch]:
        """Search the catalog.

        Args:
            q_type: Field to search ("" for everything, "name", "author", "local")
            q: Query text
            limit: Page size
            offset: Items to skip
        """
        params = SearchParams(q=q, q_type=q_type, limit=limit, offset=offset)
        return await self.request(
            "GET",
            "/api/v3/search/comic",
            params.to_params(),
            Page[ComicInSearch],
            timeout=timeout,
        )

    async def comic_rank(
        self,
        date_type: str,
        offset: int,
        limit: int,
        timeout: Optional[float] = None,
    ) -> Page[RankItem]:
        """List ranked items for a date bucket ("day", "week", "month", "total")."""
        params = RankParams(date_type=date_type, offset=offset, limit=limit)
        return await self.request(
            "GET",
            "/api/v3/ranks",
            params.to_params(),
            Page[RankItem],
            timeout=timeout,
        )

    async def comic(self, path_word: str, timeout: Optional[float] = None) -> ComicData:
        """Fetch the detail record of one item by its path word."""
        return await self.request(
            "GET",
            f"/api/v3/comic2/{path_word}",
            PlatformParams().to_params(),
            ComicData,
            timeout=timeout,
        )

    async def comic_chapter(
        self,
        comic_path_word: str,
        group_path_word: str,
        limit: int,
        offset: int,
        timeout: Optional[float] = None,
    ) -> Page[ComicChapter]:
        """List one page of chapters in a group of an item."""
        params = ChapterParams(offset=offset, limit=limit)
        return await self.request(
            "GET",
            f"/api/v3/comic/{comic_path_word}/group/{group_path_word}/chapters",
            params.to_params(),
            Page[ComicChapter],
            timeout=timeout,
        )

    async def comic_query(self, path_word: str, timeout: Optional[float] = None) -> ComicQuery:
        """Fetch availability and reading state of one item."""
        return await self.request(
            "GET",
            f"/api/v3/comic2/{path_word}/query",
            PlatformParams().to_params(),
            ComicQuery,
            timeout=timeout,
        )

    async def download_image(self, url: str, timeout: Optional[float] = None) -> bytes:
        """Fetch raw bytes from an absolute URL.

        No envelope and no status check: whatever body the server sends is
        returned. Only ``TransportFailure`` can be raised.
        """
        return await self._dispatcher.raw_fetch(url, timeout=timeout)
