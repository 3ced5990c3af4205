"""Root test configuration: a sample pressure instance on disk"""

from pathlib import Path

import pytest


CONFIG_YAML = """\
site:
  title: My Blog
  subtitle: Here is my blog.
  author: Someone
posts_per_page: 5
"""

POST_TEST_MD = """\
---
title: 测试
categories: Dev
tags: [rust, blog]
created: 2020-08-31 10:30:00
---

## 喵

Hello from the first post.
"""

PAGE_TEST_MD = """\
---
title: Foo bar 中文
tags:
  - foo
categories: bar
---

FOO BAR!

BAZ
"""

ABOUT_INDEX_MD = """\
# About

This is the about page.
"""


@pytest.fixture(name="site_root")
def site_root_fixture(tmp_path) -> Path:
    """A minimal instance: config, two posts, two pages, one raw file and some clutter."""
    root = tmp_path / "site"
    for sub in ("posts", "pages/about", "static", "theme/templates", "theme/static", "raw"):
        (root / sub).mkdir(parents=True)
    (root / "pressure.yaml").write_text(CONFIG_YAML, encoding="utf-8")

    posts = root / "posts"
    (posts / "2020-08-31-test.md").write_text(POST_TEST_MD, encoding="utf-8")
    (posts / "2020-12-27-test-no-content.md").write_text("", encoding="utf-8")
    (posts / "README.txt").write_text("not a post", encoding="utf-8")
    (posts / "draft.md").write_text("# Draft\n", encoding="utf-8")

    pages = root / "pages"
    (pages / "test.md").write_text(PAGE_TEST_MD, encoding="utf-8")
    (pages / "about" / "index.md").write_text(ABOUT_INDEX_MD, encoding="utf-8")

    (root / "raw" / "robots.txt").write_text("User-agent: *\n", encoding="utf-8")
    return root


@pytest.fixture(name="posts_dir")
def posts_dir_fixture(site_root) -> Path:
    return site_root / "posts"


@pytest.fixture(name="pages_dir")
def pages_dir_fixture(site_root) -> Path:
    return site_root / "pages"
