"""Unit tests for instance.py"""

from datetime import datetime

import pytest

from pressure.instance import Instance
from pressure.errors import BadURL, NotFound, PageOutOfRange


@pytest.fixture(name="inst")
def inst_fixture(site_root, monkeypatch):
    monkeypatch.delenv("PRESSURE_POSTS_PER_PAGE", raising=False)
    return Instance.open(site_root)


def test_open_derives_folders(inst, site_root):
    root = site_root.resolve()
    assert inst.root_folder == root
    assert inst.posts_folder == root / "posts"
    assert inst.pages_folder == root / "pages"
    assert inst.static_folder == root / "static"
    assert inst.template_folder == root / "theme" / "templates"
    assert inst.theme_static_folder == root / "theme" / "static"
    assert inst.raw_folder == root / "raw"
    assert inst.settings.site.title == "My Blog"


def test_load_post_sets_url(inst):
    """Permalink lookups carry their canonical url."""
    post = inst.load_post(2020, 8, 31, "test")
    assert post.url == "/post/2020/08/31/test/"
    assert post.categories == ["Dev"]
    assert "<h2>喵</h2>" in post.content


def test_load_post_raw(inst):
    post = inst.load_post(2020, 8, 31, "test", raw=True)
    assert post.content.startswith("## 喵")


def test_load_post_missing(inst):
    with pytest.raises(NotFound):
        inst.load_post(2020, 1, 1, "missing")


def test_archive(inst):
    """The archive lists every post metadata-only, newest first, with urls."""
    posts = inst.archive()
    assert [p.url for p in posts] == ["/post/2020/12/27/test-no-content/", "/post/2020/08/31/test/"]
    assert all(p.content == "" for p in posts)
    assert posts[0].created == datetime(2020, 12, 27)


def test_index_page_loads_content_for_slice_only(site_root):
    """Only posts on the requested page get content."""
    inst = Instance.open(site_root, overrides={"posts_per_page": 1})
    first = inst.index_page(1)
    assert first.count == 2
    assert first.next_url == "/page/2/"
    assert first.posts[0].filepath.name == "2020-12-27-test-no-content.md"

    second = inst.index_page(2)
    assert second.prev_url == "/"
    assert second.next_url == ""
    assert "<h2>喵</h2>" in second.posts[0].content


def test_index_page_out_of_range(inst):
    with pytest.raises(PageOutOfRange):
        inst.index_page(2)


def test_category_and_tag(inst):
    assert [p.title for p in inst.category("Dev")] == ["测试"]
    assert [p.title for p in inst.tag("rust")] == ["测试"]
    assert inst.tag("nonexistent") == []


def test_terms(inst):
    assert inst.terms("tags") == [("blog", 1), ("rust", 1)]


def test_load_page(inst):
    page = inst.load_page("test.html")
    assert page.url == "/test.html"
    assert page.tags == ["foo"]


def test_load_page_bad_url(inst):
    with pytest.raises(BadURL):
        inst.load_page("../pressure.yaml")


def test_resolve_raw(inst):
    """Raw passthrough lookups are confined to raw/."""
    assert inst.resolve_raw("robots.txt") == inst.raw_folder / "robots.txt"
    with pytest.raises(NotFound):
        inst.resolve_raw("missing.txt")
    with pytest.raises(BadURL):
        inst.resolve_raw("../pressure.yaml")
    with pytest.raises(BadURL):
        inst.resolve_raw("robots\x00.txt")


def test_end_to_end_scan(inst):
    """Two posts from a full scan, newest first; the Dev post has categories ['Dev']."""
    report = inst.scan_posts(meta_only=False)
    assert len(report.posts) == 2
    assert report.skipped == []
    assert report.posts[0].created > report.posts[1].created
    assert inst.load_post(2020, 8, 31, "test", meta_only=False).categories == ["Dev"]
