"""Index pagination: fixed-size slices of the sorted post list with neighbor links"""

import math
from dataclasses import dataclass

from pressure.core.entry import Entry
from pressure.core.urls import index_page_url, index_url
from pressure.errors import PageOutOfRange


@dataclass(frozen=True)
class IndexPage:
    posts: list[Entry]
    number: int
    count: int
    prev_url: str = ""
    next_url: str = ""

    @property
    def has_prev(self) -> bool:
        return bool(self.prev_url)

    @property
    def has_next(self) -> bool:
        return bool(self.next_url)


def page_count(total: int, page_size: int) -> int:
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    return math.ceil(total / page_size)


def _prev_url(number: int) -> str:
    if number <= 1:
        return ""
    if number == 2:
        return index_url()
    return index_page_url(number - 1)


def paginate(posts: list[Entry], page_size: int, page_number: int) -> IndexPage:
    """Return page `page_number` (1-indexed) of `posts`.

    Raises PageOutOfRange outside [1, page_count], which includes every
    page number when there are no posts.
    """
    count = page_count(len(posts), page_size)
    if not 1 <= page_number <= count:
        raise PageOutOfRange(f"Page {page_number} out of range (1..{count})")

    start = (page_number - 1) * page_size
    return IndexPage(
        posts=posts[start:min(len(posts), page_number * page_size)],
        number=page_number,
        count=count,
        prev_url=_prev_url(page_number),
        next_url=index_page_url(page_number + 1) if page_number < count else "",
    )
