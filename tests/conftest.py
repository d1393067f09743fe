"""Shared fixtures: fake catalog responses served through httpx.MockTransport."""

import json

import httpx
import pytest

from pycomicget.client.api import Client
from pycomicget.config import Config

API_HOST = "https://api.test"


def envelope(results=None, code=200, message="ok") -> str:
    return json.dumps({"code": code, "message": message, "results": results})


def mock_transport(handler) -> httpx.AsyncClient:
    """Wrap a request handler (sync or async) in an httpx.AsyncClient."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class Recorder:
    """Request handler that records requests and replays a fixed response."""

    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self.body = envelope({}) if body is None else body
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def config():
    return Config(api_host=API_HOST, proxy=None, show_progress=False)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def client(recorder, config):
    return Client(transport=mock_transport(recorder), host=API_HOST, config=config)


COMIC_IN_SEARCH = {
    "name": "一拳超人",
    "alias": "One Punch Man",
    "path_word": "yiquanchaoren",
    "cover": "https://cdn.test/cover/yiquanchaoren.jpg",
    "ban": 0,
    "img_type": 2,
    "author": [{"name": "ONE", "path_word": "one", "alias": None}],
    "popular": 123456,
}

RANK_ITEM = {
    "sort": 1,
    "sort_last": 2,
    "rise_sort": 1,
    "rise_num": 3,
    "date_type": 1,
    "popular": 9001,
    "comic": {
        "name": "一拳超人",
        "path_word": "yiquanchaoren",
        "cover": "https://cdn.test/cover/yiquanchaoren.jpg",
        "author": [{"name": "ONE", "path_word": "one"}],
        "theme": [{"name": "热血", "path_word": "rexue"}],
        "females": [],
        "males": [],
        "popular": 9001,
        "datetime_updated": "2024-01-02",
    },
}

COMIC_DATA = {
    "is_banned": False,
    "is_lock": False,
    "is_login": False,
    "is_mobile_bind": False,
    "is_vip": False,
    "popular": 42,
    "comic": {
        "uuid": "1f2e3d4c",
        "name": "一拳超人",
        "alias": "One Punch Man",
        "path_word": "yiquanchaoren",
        "cover": "https://cdn.test/cover/yiquanchaoren.jpg",
        "brief": "A hero for fun.",
        "region": {"display": "日本", "value": 0},
        "status": {"display": "连载中", "value": 0},
        "author": [{"name": "ONE", "path_word": "one"}],
        "theme": [{"name": "热血", "path_word": "rexue"}],
        "popular": 42,
        "datetime_updated": "2024-01-02",
        "last_chapter": {"uuid": "c-200", "name": "第200话"},
        "b_404": False,
        "b_hidden": False,
        "ban": 0,
        "seo_baidu": "ignored",
    },
    "groups": {
        "default": {"path_word": "default", "count": 200, "name": "默认"},
        "tankobon": {"path_word": "tankobon", "count": 28, "name": "单行本"},
    },
}

COMIC_CHAPTER = {
    "index": 0,
    "uuid": "c-1",
    "count": 200,
    "ordered": 10,
    "size": 30,
    "name": "第1话",
    "comic_id": "1f2e3d4c",
    "comic_path_word": "yiquanchaoren",
    "group_id": None,
    "group_path_word": "default",
    "type": 1,
    "img_type": 2,
    "news": "",
    "datetime_created": "2015-06-01",
    "prev": None,
    "next": "c-2",
}

COMIC_QUERY = {
    "browse": {
        "comic_uuid": "1f2e3d4c",
        "path_word": "yiquanchaoren",
        "chapter_uuid": "c-12",
        "chapter_name": "第12话",
    },
    "collect": 1,
    "is_lock": False,
    "is_login": True,
    "is_mobile_bind": False,
    "is_vip": False,
}

TAGS = {
    "ordering": [{"name": "更新时间", "path_word": "-datetime_updated"}],
    "theme": [{"name": "热血", "path_word": "rexue", "count": 1200}],
    "top": [{"name": "日漫", "path_word": "japan"}],
}


def page(items, total=None, limit=20, offset=0):
    return {
        "list": items,
        "total": len(items) if total is None else total,
        "limit": limit,
        "offset": offset,
    }
