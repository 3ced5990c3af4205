"""Entry model and single-file loading for posts and pages"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pressure.core.canonical import CanonicalMeta, MetaDefaults, canonicalize_meta, format_timestamp
from pressure.core.frontmatter import parse_frontmatter
from pressure.core.render import Renderer, render_markdown
from pressure.core.value import Value
from pressure.errors import EntryIOError, NotFound


class EntryKind(str, Enum):
    post = "post"
    page = "page"
    unknown = "unknown"


@dataclass(frozen=True)
class Entry:
    """One loaded post or page. Read-only; use with_url()/load_content() for derived copies."""
    kind: EntryKind
    filepath: Path
    url: Optional[str] = None
    metadata: Value = field(default_factory=Value.mapping)
    created: Optional[datetime] = None
    updated: Optional[datetime] = None
    content: str = ""

    @property
    def title(self) -> str:
        val = self.metadata.get("title")
        if val is None or val.as_string() is None:
            return ""
        return val.as_string()

    def terms(self, key: str) -> list[str]:
        """String members of the categories/tags array."""
        items = self.metadata.get(key)
        arr = items.as_array() if items is not None else None
        return [s for s in (v.as_string() for v in arr or ()) if s is not None]

    @property
    def categories(self) -> list[str]:
        return self.terms("categories")

    @property
    def tags(self) -> list[str]:
        return self.terms("tags")

    def with_url(self, url: str) -> "Entry":
        return replace(self, url=url)

    def to_context(self) -> dict[str, Any]:
        """Template/JSON context: metadata keys at top level plus entry fields."""
        meta = self.metadata.to_python()
        ctx = dict(meta)
        ctx.update({
            "kind": self.kind.value,
            "url": self.url or "",
            "filepath": str(self.filepath),
            "meta": meta,
            "created": format_timestamp(self.created) if self.created else "",
            "updated": format_timestamp(self.updated) if self.updated else "",
            "content": self.content,
        })
        return ctx


def _read_text(filepath: Path) -> tuple[Path, str]:
    """Resolve and read a file, mapping a missing file to NotFound and other failures to EntryIOError."""
    try:
        resolved = Path(filepath).resolve(strict=True)
        if not resolved.is_file():
            raise NotFound(f"Not a file: {filepath}")
        return resolved, resolved.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise NotFound(f"No such entry: {filepath}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise EntryIOError(f"Cannot read {filepath}: {e}") from e


def _body_content(body: str, renderer: Optional[Renderer]) -> str:
    text = body.strip()
    if renderer is None:
        return text
    return renderer(text)


def load_entry(
    kind: EntryKind,
    filepath: Path,
    meta_only: bool = False,
    renderer: Optional[Renderer] = render_markdown,
    defaults: MetaDefaults = MetaDefaults(),
    ) -> Entry:
    """Load and canonicalize a markdown entry.

    meta_only skips body processing entirely (content is ''). renderer=None
    keeps the trimmed raw markdown instead of rendering it.
    Raises NotFound, EntryIOError, ParseError or FrontMatterTypeError.
    """
    resolved, raw = _read_text(filepath)
    parsed = parse_frontmatter(raw)
    canon: CanonicalMeta = canonicalize_meta(parsed.frontmatter, defaults)
    return Entry(
        kind=kind,
        filepath=resolved,
        metadata=canon.metadata,
        created=canon.created,
        updated=canon.updated,
        content="" if meta_only else _body_content(parsed.body, renderer),
    )


def load_content(entry: Entry, renderer: Optional[Renderer] = render_markdown) -> Entry:
    """Return a copy of a metadata-only entry with its body loaded."""
    _, raw = _read_text(entry.filepath)
    return replace(entry, content=_body_content(parse_frontmatter(raw).body, renderer))
