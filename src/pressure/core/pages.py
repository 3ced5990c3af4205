"""Page resolution: map a request-relative URL onto a markdown file under the pages root"""

from pathlib import Path
from typing import Optional

from pressure.core.canonical import MetaDefaults
from pressure.core.entry import Entry, EntryKind, load_entry
from pressure.core.render import Renderer, render_markdown
from pressure.errors import BadURL


def contained_path(root: Path, rel_url: str) -> Path:
    """Join rel_url onto root and resolve it; BadURL if the result leaves root."""
    if "\x00" in rel_url:
        raise BadURL(f"Null byte in path: {rel_url!r}")
    root = Path(root).resolve()
    try:
        path = (root / rel_url.lstrip("/")).resolve()
    except (OSError, ValueError) as e:
        raise BadURL(f"Unresolvable path {rel_url!r}: {e}") from e
    if not path.is_relative_to(root):
        raise BadURL(f"Path escapes root: {rel_url!r}")
    return path


def resolve_page_path(pages_root: Path, rel_url: str) -> Path:
    """Return the markdown file a page URL refers to.

    foo/ -> foo/index.md, foo.html -> foo.md, foo -> foo.md, foo.md as-is.
    Any other extension is a BadURL so callers can try a raw asset instead.
    """
    path = contained_path(pages_root, rel_url)
    if path.is_dir():
        path = path / "index.md"
    elif path.suffix == ".html":
        path = path.with_suffix(".md")
    elif path.suffix == "":
        path = path.with_name(path.name + ".md")

    if path.suffix != ".md":
        raise BadURL(f"Bad page path: {rel_url!r}")
    return path


def load_page(
    pages_root: Path,
    rel_url: str,
    renderer: Optional[Renderer] = render_markdown,
    ) -> Entry:
    """Resolve and load a page. Raises BadURL for structural rejects, NotFound when no file exists."""
    path = resolve_page_path(pages_root, rel_url)
    defaults = MetaDefaults(title=path.stem.replace("-", " "))
    return load_entry(EntryKind.page, path, renderer=renderer, defaults=defaults)
