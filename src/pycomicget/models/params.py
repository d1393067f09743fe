"""Typed per-operation request parameters.

Each operation builds one of these and serializes it at the dispatch
boundary with ``to_params()``, which yields the flat key/value mapping that
becomes the query string (GET) or the form body (other verbs).
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict

# Platform code the mobile app identifies itself with
PLATFORM = 3


class _Params:
    def to_params(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PlatformParams(_Params):
    """Parameters for calls that only carry the platform code."""

    platform: int = PLATFORM


@dataclass(frozen=True)
class SearchParams(_Params):
    """Parameters for a catalog search.

    Attributes:
        q: Query text
        q_type: Field to search: "" (everything), "name", "author" or "local"
        limit: Page size
        offset: Items to skip
    """

    q: str
    q_type: str = ""
    limit: int = 20
    offset: int = 0
    platform: int = PLATFORM


@dataclass(frozen=True)
class RankParams(_Params):
    """Parameters for a ranking listing.

    Attributes:
        date_type: Ranking window: "day", "week", "month" or "total"
        offset: Items to skip
        limit: Page size
    """

    date_type: str
    offset: int = 0
    limit: int = 20
    platform: int = PLATFORM


@dataclass(frozen=True)
class ChapterParams(_Params):
    offset: int = 0
    limit: int = 100
    platform: int = PLATFORM
