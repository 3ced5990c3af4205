"""Category and tag filtering over loaded posts"""

from collections import Counter

from pressure.core.entry import Entry


TERM_FIELDS = ("categories", "tags")


def _check_field(field: str) -> None:
    if field not in TERM_FIELDS:
        raise ValueError(f"Unknown term field {field!r}; expected one of {TERM_FIELDS}")


def filter_posts(posts: list[Entry], field: str, target: str) -> list[Entry]:
    """Posts whose `field` array contains `target` exactly (case-sensitive), in original order."""
    _check_field(field)
    return [p for p in posts if target in p.terms(field)]


def by_category(posts: list[Entry], name: str) -> list[Entry]:
    return filter_posts(posts, "categories", name)


def by_tag(posts: list[Entry], name: str) -> list[Entry]:
    return filter_posts(posts, "tags", name)


def collect_terms(posts: list[Entry], field: str) -> list[tuple[str, int]]:
    """Distinct terms of `field` across posts with the number of posts carrying each, sorted by term."""
    _check_field(field)
    counts = Counter(t for p in posts for t in set(p.terms(field)))
    return sorted(counts.items())
