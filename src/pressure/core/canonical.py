"""Metadata canonicalization: list-typed tags/categories, default title, resolved dates"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from pressure.core.value import Value, ValueKind


logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"
LIST_KEYS = ("categories", "tags")


@dataclass(frozen=True)
class MetaDefaults:
    title: Optional[str] = None
    created: Optional[datetime] = None


@dataclass(frozen=True)
class CanonicalMeta:
    metadata: Value
    created: Optional[datetime] = None
    updated: Optional[datetime] = None


def parse_timestamp(text: str) -> Optional[datetime]:
    """Parse 'YYYY-MM-DD HH:MM:SS', falling back to 'YYYY-MM-DD' at midnight; None on failure."""
    for fmt in (TIMESTAMP_FORMAT, DATE_FORMAT):
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def format_timestamp(dt: datetime) -> str:
    return dt.strftime(TIMESTAMP_FORMAT)


def _as_list(key: str, val: Optional[Value]) -> Value:
    if val is None or val.is_null():
        return Value.array()
    if val.kind is ValueKind.array:
        return val
    if val.kind is ValueKind.string:
        return Value.array([val])
    logger.warning("Ignoring %s of type %s; expected a string or a list", key, val.kind.value)
    return Value.array()


def _resolve_date(meta: Value, key: str, default: Optional[datetime]) -> tuple[Value, Optional[datetime]]:
    """Parse meta[key]; on failure blank it, when absent fall back to default (or blank)."""
    raw = meta.get(key)
    text = raw.as_string() if raw is not None else None
    if text is not None:
        dt = parse_timestamp(text)
        if dt is None:
            return meta.with_item(key, Value.string("")), None
        return meta.with_item(key, Value.string(format_timestamp(dt))), dt
    if default is not None:
        return meta.with_item(key, Value.string(format_timestamp(default))), default
    return meta.with_item(key, Value.string("")), None


def canonicalize_meta(meta: Value, defaults: MetaDefaults = MetaDefaults()) -> CanonicalMeta:
    """Normalize a parsed front matter mapping. Never raises on bad field values."""
    for key in LIST_KEYS:
        meta = meta.with_item(key, _as_list(key, meta.get(key)))

    if "title" not in meta:
        meta = meta.with_item("title", Value.string(defaults.title or ""))

    meta, created = _resolve_date(meta, "created", defaults.created)
    meta, updated = _resolve_date(meta, "updated", None)
    return CanonicalMeta(metadata=meta, created=created, updated=updated)
