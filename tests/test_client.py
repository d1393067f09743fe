"""Tests for the catalog operations on Client."""

import asyncio

import httpx
import pytest

from pycomicget.client.api import Client
from pycomicget.errors import ApiError, DecodeFailure, NotFound, TransportFailure
from pycomicget.models.comic import ComicChapter, Page

from tests.conftest import (
    API_HOST,
    COMIC_CHAPTER,
    COMIC_DATA,
    COMIC_IN_SEARCH,
    COMIC_QUERY,
    RANK_ITEM,
    TAGS,
    Recorder,
    envelope,
    mock_transport,
    page,
)


def query_params(request: httpx.Request) -> dict:
    return dict(request.url.params)


@pytest.mark.asyncio
async def test_tags(client, recorder):
    recorder.body = envelope(TAGS)

    tags = await client.tags()

    assert recorder.last.url.path == "/api/v3/h5/filter/comic/tags"
    assert query_params(recorder.last) == {"platform": "3"}
    assert tags.theme[0].path_word == "rexue"
    assert tags.theme[0].count == 1200
    assert tags.ordering[0].path_word == "-datetime_updated"


@pytest.mark.asyncio
async def test_comic_search(client, recorder):
    recorder.body = envelope(page([COMIC_IN_SEARCH], total=1, limit=10, offset=0))

    result = await client.comic_search("name", "one punch", 10, 0)

    assert recorder.last.method == "GET"
    assert recorder.last.url.path == "/api/v3/search/comic"
    assert query_params(recorder.last) == {
        "platform": "3",
        "limit": "10",
        "offset": "0",
        "q": "one punch",
        "q_type": "name",
    }
    assert result.total == 1
    assert result.items[0].name == "一拳超人"
    assert not result.has_more


@pytest.mark.asyncio
async def test_comic_rank(client, recorder):
    recorder.body = envelope(page([RANK_ITEM], total=500, limit=1, offset=5))

    result = await client.comic_rank("week", 5, 1)

    assert recorder.last.url.path == "/api/v3/ranks"
    assert query_params(recorder.last) == {
        "platform": "3",
        "date_type": "week",
        "offset": "5",
        "limit": "1",
    }
    assert result.items[0].sort == 1
    assert result.items[0].comic.theme[0].name == "热血"


@pytest.mark.asyncio
async def test_comic_detail(client, recorder):
    recorder.body = envelope(COMIC_DATA)

    data = await client.comic("yiquanchaoren")

    assert recorder.last.url.path == "/api/v3/comic2/yiquanchaoren"
    assert query_params(recorder.last) == {"platform": "3"}
    assert data.comic.uuid == "1f2e3d4c"
    assert data.comic.status.display == "连载中"
    assert data.comic.last_chapter.name == "第200话"
    assert set(data.groups) == {"default", "tankobon"}
    assert data.groups["tankobon"].count == 28


@pytest.mark.asyncio
async def test_comic_chapter(client, recorder):
    recorder.body = envelope(page([COMIC_CHAPTER], total=200, limit=100, offset=0))

    result = await client.comic_chapter("yiquanchaoren", "default", 100, 0)

    assert recorder.last.url.path == "/api/v3/comic/yiquanchaoren/group/default/chapters"
    assert query_params(recorder.last) == {"offset": "0", "limit": "100", "platform": "3"}
    assert isinstance(result, Page)
    assert isinstance(result.items[0], ComicChapter)
    assert result.items[0].next == "c-2"
    assert result.has_more


@pytest.mark.asyncio
async def test_comic_query(client, recorder):
    recorder.body = envelope(COMIC_QUERY)

    result = await client.comic_query("yiquanchaoren")

    assert recorder.last.url.path == "/api/v3/comic2/yiquanchaoren/query"
    assert result.browse.chapter_name == "第12话"
    assert result.is_login


@pytest.mark.asyncio
async def test_page_serializes_items_under_wire_name(client, recorder):
    recorder.body = envelope(page([COMIC_CHAPTER]))

    result = await client.comic_chapter("yiquanchaoren", "default", 20, 0)

    assert "list" in result.model_dump(by_alias=True)


@pytest.mark.asyncio
async def test_operation_not_found(client, recorder):
    recorder.status_code = 404
    recorder.body = "<html>not found</html>"

    with pytest.raises(NotFound):
        await client.comic("missing")


@pytest.mark.asyncio
async def test_operation_api_error(client, recorder):
    recorder.body = envelope(None, code=210, message="漫画不存在")

    with pytest.raises(ApiError) as exc_info:
        await client.comic("missing")

    assert exc_info.value.message == "漫画不存在"


@pytest.mark.asyncio
async def test_operation_shape_mismatch(client, recorder):
    recorder.body = envelope({"list": "not a list", "total": 1, "limit": 1, "offset": 0})

    with pytest.raises(DecodeFailure):
        await client.comic_search("", "x", 1, 0)


@pytest.mark.asyncio
async def test_generic_request_with_form_body(client, recorder):
    recorder.body = envelope({"id": 7})

    result = await client.request("POST", "/api/v3/member/collect/comic", {"comic_id": "1f2e3d4c", "is_collect": 1}, dict)

    assert result == {"id": 7}
    assert recorder.last.url.query == b""
    assert recorder.last.content == b"comic_id=1f2e3d4c&is_collect=1"


@pytest.mark.asyncio
async def test_download_image_bypasses_envelope(client, recorder):
    recorder.status_code = 404
    recorder.body = '{"code":500,"message":"not an envelope here"}'

    content = await client.download_image("https://cdn.test/c/1.webp")

    assert content == b'{"code":500,"message":"not an envelope here"}'


@pytest.mark.asyncio
async def test_download_image_transport_failure(config):
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    client = Client(transport=mock_transport(handler), host=API_HOST, config=config)

    with pytest.raises(TransportFailure):
        await client.download_image("https://unreachable.invalid/1.jpg")


@pytest.mark.asyncio
async def test_in_flight_call_keeps_host_it_started_with(config):
    started = asyncio.Event()
    release = asyncio.Event()
    seen = []

    async def handler(request):
        seen.append(str(request.url))
        started.set()
        await release.wait()
        return httpx.Response(200, text=envelope({}))

    client = Client(transport=mock_transport(handler), host="https://a.example", config=config)

    call = asyncio.create_task(client.request("GET", "/ping", {}, dict))
    await started.wait()
    await client.set_host("https://b.example")
    release.set()
    await call

    assert seen == ["https://a.example/ping"]

    await client.request("GET", "/ping", {}, dict)
    assert seen[-1] == "https://b.example/ping"


@pytest.mark.asyncio
async def test_set_transport_routes_new_calls(client, recorder, config):
    proxy_recorder = Recorder(body=envelope(TAGS))

    await client.set_transport(mock_transport(proxy_recorder))
    await client.tags()

    assert recorder.requests == []
    assert len(proxy_recorder.requests) == 1


@pytest.mark.asyncio
async def test_configure_and_host_accessors(client):
    await client.configure(host="https://mirror.test")

    assert await client.get_host() == "https://mirror.test"
    assert await client.api_host_string() == "https://mirror.test"


@pytest.mark.asyncio
async def test_concurrent_calls_share_one_client(client, recorder):
    recorder.body = envelope(TAGS)

    results = await asyncio.gather(*(client.tags() for _ in range(10)))

    assert len(results) == 10
    assert len(recorder.requests) == 10


@pytest.mark.asyncio
async def test_owned_transport_is_closed(config):
    async with Client(config=config) as client:
        transport = await client.get_transport()

    assert transport.is_closed


@pytest.mark.asyncio
async def test_supplied_transport_is_left_open(config):
    transport = mock_transport(Recorder())

    async with Client(transport=transport, config=config):
        pass

    assert not transport.is_closed
