"""CLI command implementations"""

import json
import logging
from typing import Annotated, Optional

import typer

from pressure.core.entry import Entry
from pressure.core.filters import TERM_FIELDS
from pressure.errors import PressError
from pressure.instance import Instance


RootOpt = Annotated[str, typer.Option("--root", "-r", help="Instance root folder (holds pressure.yaml)")]
VerboseOpt = Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")]
RawOpt = Annotated[bool, typer.Option("--raw", help="Print markdown instead of rendered HTML")]
JsonOpt = Annotated[bool, typer.Option("--json", help="Print the entry context as JSON")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _instance(root: str, verbose: bool = False) -> Instance:
    """Configure logging and open the instance with standard CLI error handling."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return Instance.open(root)
    except PressError as e:
        _fail("Cannot open instance", e)


def _echo_post_line(post: Entry) -> None:
    created = post.created.strftime("%Y-%m-%d") if post.created else "----------"
    typer.echo(f"{created}  {post.title}  {post.url or ''}")


def _echo_entry(entry: Entry, as_json: bool) -> None:
    if as_json:
        typer.echo(json.dumps(entry.to_context(), indent=2, ensure_ascii=False))
        return
    typer.echo(f"# {entry.title}")
    if entry.created:
        typer.echo(f"created: {entry.created}")
    if entry.categories:
        typer.echo(f"categories: {', '.join(entry.categories)}")
    if entry.tags:
        typer.echo(f"tags: {', '.join(entry.tags)}")
    typer.echo("")
    typer.echo(entry.content)


def list_cmd(
    root: RootOpt = ".",
    page: Annotated[int, typer.Option("--page", "-p", help="Index page number")] = 1,
    category: Annotated[Optional[str], typer.Option("--category", help="Only posts in this category")] = None,
    tag: Annotated[Optional[str], typer.Option("--tag", help="Only posts with this tag")] = None,
    all_posts: Annotated[bool, typer.Option("--all", help="List every post (archive)")] = False,
    verbose: VerboseOpt = False,
    ):
    """List posts newest first: one index page, the archive, or a category/tag listing."""
    inst = _instance(root, verbose)
    try:
        if category is not None:
            posts = inst.category(category)
        elif tag is not None:
            posts = inst.tag(tag)
        elif all_posts:
            posts = inst.archive()
        else:
            index = inst.index_page(page)
            posts = index.posts
            typer.echo(f"Page {index.number} of {index.count}")
    except PressError as e:
        _fail("Listing failed", e)

    for post in posts:
        _echo_post_line(post)


def show_cmd(
    year: Annotated[int, typer.Argument(help="Post year")],
    month: Annotated[int, typer.Argument(help="Post month")],
    day: Annotated[int, typer.Argument(help="Post day")],
    slug: Annotated[str, typer.Argument(help="Post slug")],
    root: RootOpt = ".",
    raw: RawOpt = False,
    as_json: JsonOpt = False,
    verbose: VerboseOpt = False,
    ):
    """Print a single post by its permalink parts."""
    inst = _instance(root, verbose)
    try:
        post = inst.load_post(year, month, day, slug, raw=raw)
    except PressError as e:
        _fail(f"Cannot load post {year:04d}-{month:02d}-{day:02d}-{slug}", e)
    _echo_entry(post, as_json)


def page_cmd(
    url: Annotated[str, typer.Argument(help="Page path relative to pages/, e.g. about/ or about.html")],
    root: RootOpt = ".",
    raw: RawOpt = False,
    as_json: JsonOpt = False,
    verbose: VerboseOpt = False,
    ):
    """Print a single page by its URL path."""
    inst = _instance(root, verbose)
    try:
        entry = inst.load_page(url, raw=raw)
    except PressError as e:
        _fail(f"Cannot load page {url!r}", e)
    _echo_entry(entry, as_json)


def check_cmd(
    root: RootOpt = ".",
    verbose: VerboseOpt = False,
    ):
    """Scan the posts folder and report files that failed to load."""
    inst = _instance(root, verbose)
    try:
        report = inst.scan_posts(meta_only=True)
    except PressError as e:
        _fail("Scan failed", e)

    for path, reason in report.skipped:
        typer.echo(f"  skipped: {path.name}: {reason}")
    typer.echo(f"Scan complete - {len(report.posts)} loaded, {len(report.skipped)} skipped")
    if report.skipped:
        raise typer.Exit(1)


def terms_cmd(
    field: Annotated[str, typer.Argument(help="categories or tags")],
    root: RootOpt = ".",
    verbose: VerboseOpt = False,
    ):
    """List distinct categories or tags with their post counts."""
    if field not in TERM_FIELDS:
        _fail(f"Unknown field {field!r}; expected one of: {', '.join(TERM_FIELDS)}")
    inst = _instance(root, verbose)
    try:
        terms = inst.terms(field)
    except PressError as e:
        _fail("Scan failed", e)
    if not terms:
        typer.echo(f"No {field} found.")
        return
    for name, count in terms:
        typer.echo(f"{name}\t{count}")
