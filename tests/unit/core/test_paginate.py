"""Unit tests for core/paginate.py"""

from pathlib import Path

import pytest

from pressure.core.entry import Entry, EntryKind
from pressure.core.paginate import page_count, paginate
from pressure.errors import PageOutOfRange


def _posts(n: int) -> list[Entry]:
    return [Entry(kind=EntryKind.post, filepath=Path(f"{i}.md")) for i in range(n)]


@pytest.mark.parametrize("n,size,expected", [(0, 5, 0), (1, 5, 1), (5, 5, 1), (6, 5, 2), (11, 5, 3), (7, 1, 7)])
def test_page_count(n, size, expected):
    assert page_count(n, size) == expected


@pytest.mark.parametrize("n,size", [(1, 1), (5, 2), (12, 5), (10, 5), (3, 10)])
def test_slices_partition_list(n, size):
    """Concatenating every page reproduces the list exactly once each."""
    posts = _posts(n)
    count = page_count(n, size)
    joined = [p for i in range(1, count + 1) for p in paginate(posts, size, i).posts]
    assert joined == posts


def test_first_page_links():
    page = paginate(_posts(12), 5, 1)
    assert page.prev_url == ""
    assert not page.has_prev
    assert page.next_url == "/page/2/"
    assert page.count == 3


def test_second_page_prev_is_index():
    """Page 2 links back to the canonical index rather than /page/1/."""
    page = paginate(_posts(12), 5, 2)
    assert page.prev_url == "/"
    assert page.next_url == "/page/3/"


def test_last_page_links():
    page = paginate(_posts(12), 5, 3)
    assert page.prev_url == "/page/2/"
    assert page.next_url == ""
    assert not page.has_next
    assert len(page.posts) == 2


def test_single_page_has_no_links():
    page = paginate(_posts(3), 5, 1)
    assert page.prev_url == "" and page.next_url == ""


@pytest.mark.parametrize("n,number", [(12, 0), (12, 4), (12, -1), (0, 1), (0, 0)])
def test_out_of_range(n, number):
    """Page numbers outside [1, page_count] fail, including every page of an empty list."""
    with pytest.raises(PageOutOfRange):
        paginate(_posts(n), 5, number)


def test_bad_page_size():
    with pytest.raises(ValueError):
        paginate(_posts(3), 0, 1)
