"""Post discovery, loading and chronological ordering"""

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime
from functools import cmp_to_key
from pathlib import Path
from typing import NamedTuple, Optional

from pressure.core.canonical import MetaDefaults
from pressure.core.entry import Entry, EntryKind, load_entry
from pressure.core.render import Renderer, render_markdown
from pressure.errors import EntryIOError, PressError


logger = logging.getLogger(__name__)

POST_FILENAME_RE = re.compile(r'^(\d{4})-(\d{2})-(\d{2})-(.+)\.md$')


class PostKey(NamedTuple):
    """Identity of a post: (year, month, day, slug), encoded as YYYY-MM-DD-slug.md."""
    year: int
    month: int
    day: int
    slug: str

    @property
    def filename(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}-{self.slug}.md"

    @property
    def default_title(self) -> str:
        return self.slug.replace("-", " ")

    @property
    def midnight(self) -> Optional[datetime]:
        """Midnight of the filename date, or None when it is not a real calendar date."""
        try:
            return datetime(self.year, self.month, self.day)
        except ValueError:
            return None

    @classmethod
    def from_filename(cls, name: str) -> Optional["PostKey"]:
        m = POST_FILENAME_RE.match(name)
        if m is None:
            return None
        year, month, day, slug = m.groups()
        return cls(int(year), int(month), int(day), slug)


@dataclass
class ScanReport:
    """Result of a posts-folder scan: loaded posts plus the files that were skipped and why."""
    posts: list[Entry] = field(default_factory=list)
    skipped: list[tuple[Path, str]] = field(default_factory=list)


def load_post(
    posts_folder: Path,
    key: PostKey,
    meta_only: bool = False,
    renderer: Optional[Renderer] = render_markdown,
    ) -> Entry:
    """Load one post by its filename key. Raises NotFound if the file does not exist."""
    defaults = MetaDefaults(title=key.default_title, created=key.midnight)
    return load_entry(EntryKind.post, Path(posts_folder) / key.filename, meta_only, renderer, defaults)


def _compare_created(a: Entry, b: Entry) -> int:
    """Newest first; an entry without a created date sorts ahead of dated ones."""
    if a.created is None and b.created is None:
        return 0
    if a.created is None:
        return -1
    if b.created is None:
        return 1
    if a.created > b.created:
        return -1
    if a.created < b.created:
        return 1
    return 0


def sort_posts(posts: list[Entry]) -> list[Entry]:
    return sorted(posts, key=cmp_to_key(_compare_created))


def scan_posts(
    posts_folder: Path,
    meta_only: bool = False,
    renderer: Optional[Renderer] = render_markdown,
    ) -> ScanReport:
    """Load every YYYY-MM-DD-slug.md file in posts_folder, sorted newest first.

    Files that do not match the naming convention are ignored. Matching files
    that fail to load are recorded in ScanReport.skipped and never abort the scan.
    """
    try:
        names = sorted(p.name for p in Path(posts_folder).iterdir())
    except OSError as e:
        raise EntryIOError(f"Cannot list posts folder {posts_folder}: {e}") from e

    report = ScanReport()
    for name in names:
        key = PostKey.from_filename(name)
        if key is None:
            logger.debug("Ignoring %s: not a post filename", name)
            continue
        try:
            report.posts.append(load_post(posts_folder, key, meta_only, renderer))
        except PressError as e:
            logger.warning("Skipping post %s: %s", name, e)
            report.skipped.append((Path(posts_folder) / name, str(e)))

    report.posts = sort_posts(report.posts)
    return report


def load_posts(
    posts_folder: Path,
    meta_only: bool = False,
    renderer: Optional[Renderer] = render_markdown,
    ) -> list[Entry]:
    return scan_posts(posts_folder, meta_only, renderer).posts
