# catalog_service/paging.py

"""
Page specification and page results for paginated, sorted queries.

Sort parameters follow the `field` / `field,direction` convention, e.g.
`?sort=price,desc&sort=name`. Without any sort key, results are ordered by id
ascending.
"""
import math
from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, List, Optional, TypeVar

from .exceptions import InvalidRequestError

T = TypeVar("T")
R = TypeVar("R")

SORTABLE_FIELDS = ("id", "name", "description", "price")
ASC = "asc"
DESC = "desc"


@dataclass(frozen=True)
class SortKey:
    field: str
    direction: str = ASC


DEFAULT_SORT = (SortKey("id", ASC),)


@dataclass(frozen=True)
class PageSpec:
    page: int = 0
    size: int = 20
    sort: tuple = DEFAULT_SORT

    @property
    def offset(self) -> int:
        return self.page * self.size


def parse_sort(values: Optional[Iterable[str]]) -> tuple:
    """Turn raw `sort` query values into an ordered tuple of SortKey."""
    keys = []
    for raw in values or ():
        parts = [part.strip() for part in raw.split(",")]
        name = parts[0]
        if name not in SORTABLE_FIELDS:
            raise InvalidRequestError(
                "sort", f"unknown sort field '{name}', expected one of {', '.join(SORTABLE_FIELDS)}"
            )
        direction = parts[1].lower() if len(parts) > 1 and parts[1] else ASC
        if direction not in (ASC, DESC) or len(parts) > 2:
            raise InvalidRequestError("sort", f"invalid sort expression '{raw}'")
        keys.append(SortKey(name, direction))
    return tuple(keys) or DEFAULT_SORT


@dataclass
class Page(Generic[T]):
    content: List[T]
    page: int
    size: int
    total_elements: int
    total_pages: int = field(init=False)

    def __post_init__(self):
        self.total_pages = math.ceil(self.total_elements / self.size)

    @property
    def first(self) -> bool:
        return self.page == 0

    @property
    def last(self) -> bool:
        return self.page + 1 >= self.total_pages

    def map(self, fn: Callable[[T], R]) -> "Page[R]":
        return Page([fn(item) for item in self.content], self.page, self.size, self.total_elements)
