"""URL builders for the routes the serving layer exposes"""

from urllib.parse import quote


INDEX_URL = "/"
ARCHIVE_URL = "/archive/"
NOT_FOUND_URL = "/404.html"


def index_url() -> str:
    return INDEX_URL


def index_page_url(page_number: int) -> str:
    return f"/page/{page_number}/"


def post_url(year: int, month: int, day: int, slug: str) -> str:
    return f"/post/{year:04d}/{month:02d}/{day:02d}/{quote(slug)}/"


def category_url(name: str) -> str:
    return f"/category/{quote(name, safe='')}/"


def tag_url(name: str) -> str:
    return f"/tag/{quote(name, safe='')}/"
