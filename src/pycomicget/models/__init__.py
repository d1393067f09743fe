"""Data models for pycomicget."""

from pycomicget.models.comic import (
    Author,
    Browse,
    ClassifyItem,
    ComicChapter,
    ComicData,
    ComicDetail,
    ComicInRank,
    ComicInSearch,
    ComicQuery,
    Group,
    LastChapter,
    Page,
    RankItem,
    Tag,
    Tags,
)
from pycomicget.models.params import (
    PLATFORM,
    ChapterParams,
    PlatformParams,
    RankParams,
    SearchParams,
)

__all__ = [
    "Author",
    "Browse",
    "ClassifyItem",
    "ComicChapter",
    "ComicData",
    "ComicDetail",
    "ComicInRank",
    "ComicInSearch",
    "ComicQuery",
    "Group",
    "LastChapter",
    "Page",
    "RankItem",
    "Tag",
    "Tags",
    "PLATFORM",
    "ChapterParams",
    "PlatformParams",
    "RankParams",
    "SearchParams",
]
