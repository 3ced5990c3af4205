"""Instance: the constructed-once site context passed to every request handler"""

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from pressure.config import Settings, load_config
from pressure.core.entry import Entry, load_content
from pressure.core.filters import by_category, by_tag, collect_terms
from pressure.core.pages import contained_path, load_page
from pressure.core.paginate import IndexPage, paginate
from pressure.core.posts import PostKey, ScanReport, load_post, scan_posts
from pressure.core.render import Renderer, make_renderer
from pressure.core.urls import post_url
from pressure.errors import NotFound


class Instance(BaseModel):
    """Root folder, derived subfolders and settings. Immutable and safe to share across requests."""
    model_config = ConfigDict(frozen=True)

    root_folder:         Path
    static_folder:       Path
    template_folder:     Path
    theme_static_folder: Path
    posts_folder:        Path
    pages_folder:        Path
    raw_folder:          Path
    settings:            Settings

    @classmethod
    def open(cls, root: Path, overrides: dict[str, Any] = None) -> "Instance":
        """Build an Instance from a root folder holding pressure.yaml."""
        root = Path(root).resolve()
        return cls(
            root_folder=root,
            static_folder=root / "static",
            template_folder=root / "theme" / "templates",
            theme_static_folder=root / "theme" / "static",
            posts_folder=root / "posts",
            pages_folder=root / "pages",
            raw_folder=root / "raw",
            settings=load_config(root, overrides),
        )

    @property
    def renderer(self) -> Renderer:
        return make_renderer(self.settings.parser_config)

    def _renderer(self, raw: bool) -> Optional[Renderer]:
        return None if raw else self.renderer

    # --- posts ---

    def load_post(self, year: int, month: int, day: int, slug: str, meta_only: bool = False,
                  raw: bool = False) -> Entry:
        """Permalink lookup; the returned entry carries its url."""
        key = PostKey(year, month, day, slug)
        post = load_post(self.posts_folder, key, meta_only, self._renderer(raw))
        return post.with_url(post_url(*key))

    def scan_posts(self, meta_only: bool = True, raw: bool = False) -> ScanReport:
        report = scan_posts(self.posts_folder, meta_only, self._renderer(raw))
        report.posts = [_with_post_url(p) for p in report.posts]
        return report

    def load_posts(self, meta_only: bool = True, raw: bool = False) -> list[Entry]:
        return self.scan_posts(meta_only, raw).posts

    def index_page(self, page_number: int = 1, raw: bool = False) -> IndexPage:
        """Paginate metadata-only posts and load content for the requested slice only."""
        page = paginate(self.load_posts(meta_only=True), self.settings.posts_per_page, page_number)
        renderer = self._renderer(raw)
        return IndexPage(
            posts=[load_content(p, renderer) for p in page.posts],
            number=page.number,
            count=page.count,
            prev_url=page.prev_url,
            next_url=page.next_url,
        )

    def archive(self) -> list[Entry]:
        return self.load_posts(meta_only=True)

    def category(self, name: str) -> list[Entry]:
        return by_category(self.load_posts(meta_only=True), name)

    def tag(self, name: str) -> list[Entry]:
        return by_tag(self.load_posts(meta_only=True), name)

    def terms(self, field: str) -> list[tuple[str, int]]:
        return collect_terms(self.load_posts(meta_only=True), field)

    # --- pages and raw files ---

    def load_page(self, rel_url: str, raw: bool = False) -> Entry:
        page = load_page(self.pages_folder, rel_url, self._renderer(raw))
        return page.with_url("/" + rel_url.lstrip("/"))

    def resolve_raw(self, rel_url: str) -> Path:
        """Path of a passthrough file under raw/; NotFound when absent."""
        path = contained_path(self.raw_folder, rel_url)
        if not path.is_file():
            raise NotFound(f"No raw file: {rel_url}")
        return path


def _with_post_url(post: Entry) -> Entry:
    key = PostKey.from_filename(post.filepath.name)
    return post.with_url(post_url(*key)) if key else post
