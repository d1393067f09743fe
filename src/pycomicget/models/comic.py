"""Catalog payload models (pydantic v2).

These are the shapes extracted from the ``results`` field of an API
envelope. Unknown fields are ignored; fields the service does not always
send are optional.
"""

from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class CatalogModel(BaseModel):
    """Base for all payload models."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Page(CatalogModel, Generic[T]):
    """One page of a paginated listing.

    The service calls the item array ``list``; it is exposed here as
    ``items`` and serialized back under its wire name.
    """

    items: List[T] = Field(default_factory=list, alias="list")
    total: int
    limit: int
    offset: int

    @property
    def has_more(self) -> bool:
        """Whether another page follows this one."""
        return self.offset + len(self.items) < self.total


class Tag(CatalogModel):
    name: str
    path_word: str
    count: Optional[int] = None


class Tags(CatalogModel):
    """Tag taxonomy used to filter the catalog."""

    ordering: List[Tag] = Field(default_factory=list)
    theme: List[Tag] = Field(default_factory=list)
    top: List[Tag] = Field(default_factory=list)


class Author(CatalogModel):
    name: str
    path_word: str
    alias: Optional[str] = None


class ClassifyItem(CatalogModel):
    """A labelled enumeration value such as status or region."""

    display: str
    value: Any = None


class LastChapter(CatalogModel):
    uuid: str
    name: str


class ComicInSearch(CatalogModel):
    name: str
    path_word: str
    cover: str
    alias: Optional[str] = None
    ban: int = 0
    img_type: Optional[int] = None
    author: List[Author] = Field(default_factory=list)
    popular: int = 0


class ComicInRank(CatalogModel):
    name: str
    path_word: str
    cover: str
    author: List[Author] = Field(default_factory=list)
    theme: List[Tag] = Field(default_factory=list)
    img_type: Optional[int] = None
    popular: int = 0
    datetime_updated: Optional[str] = None


class RankItem(CatalogModel):
    """A single entry in a ranking list."""

    sort: int
    comic: ComicInRank
    sort_last: Optional[int] = None
    rise_sort: Optional[int] = None
    rise_num: Optional[int] = None
    date_type: Optional[int] = None
    popular: int = 0


class Group(CatalogModel):
    """A chapter group (main series, volumes, extras...)."""

    path_word: str
    name: str
    count: int = 0


class ComicDetail(CatalogModel):
    uuid: str
    name: str
    path_word: str
    cover: str
    alias: Optional[str] = None
    brief: Optional[str] = None
    region: Optional[ClassifyItem] = None
    status: Optional[ClassifyItem] = None
    author: List[Author] = Field(default_factory=list)
    theme: List[Tag] = Field(default_factory=list)
    popular: int = 0
    datetime_updated: Optional[str] = None
    last_chapter: Optional[LastChapter] = None
    b_404: bool = False
    b_hidden: bool = False
    ban: int = 0
    img_type: Optional[int] = None


class ComicData(CatalogModel):
    """Detail record for one catalog item."""

    comic: ComicDetail
    groups: Dict[str, Group] = Field(default_factory=dict)
    popular: int = 0
    is_banned: bool = False
    is_lock: bool = False
    is_login: bool = False
    is_mobile_bind: bool = False
    is_vip: bool = False


class ComicChapter(CatalogModel):
    index: int
    uuid: str
    name: str
    comic_path_word: str
    group_path_word: str
    count: int = 0
    ordered: int = 0
    size: int = 0
    type: int = 1
    comic_id: Optional[str] = None
    group_id: Optional[str] = None
    img_type: Optional[int] = None
    news: Optional[str] = None
    datetime_created: Optional[str] = None
    prev: Optional[str] = None
    next: Optional[str] = None


class Browse(CatalogModel):
    """Reading progress of the current user on one item."""

    comic_uuid: str
    path_word: Optional[str] = None
    chapter_uuid: Optional[str] = None
    chapter_name: Optional[str] = None


class ComicQuery(CatalogModel):
    """Availability and per-user state for one catalog item."""

    browse: Optional[Browse] = None
    collect: Optional[int] = None
    is_lock: bool = False
    is_login: bool = False
    is_mobile_bind: bool = False
    is_vip: bool = False
