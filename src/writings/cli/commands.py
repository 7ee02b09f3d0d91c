"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from writings.config import Settings, load_config
from writings.core.browse import flatten_groups, build_group_index, page_list, paginate
from writings.core.export import export_site
from writings.core.models import PostSummary
from writings.core.scoring import ALL_GROUPS, search_posts
from writings.core.store import PostStore
from writings.core.utils.dates import format_display_date
from writings.logging_config import configure_logging


ContentDir = Annotated[Optional[str], typer.Option("--content-dir", help="Directory of Markdown posts")]
Verbose = Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _store(content_dir: Optional[str], verbose: bool, overrides: dict = None) -> PostStore:
    configure_logging(verbose=verbose)
    settings = _settings(overrides={"content_dir": content_dir, **(overrides or {})})
    return PostStore.from_settings(settings)


def _echo_post(post: PostSummary, show_tags: bool = True) -> None:
    meta = [format_display_date(post.date), post.reading_time]
    if show_tags and post.tags:
        meta.append(", ".join(post.tags))
    typer.echo(f"{post.slug}  {post.title}")
    typer.echo(f"    {' · '.join(meta)}")


def _pager(total: int, page: int) -> str:
    """'1 2 [3] 4 … 9 10'"""
    labels = []
    for p in page_list(total, page):
        if p is None:
            labels.append("…")
        else:
            labels.append(f"[{p}]" if p == page else str(p))
    return " ".join(labels)


def build_cmd(
    content_dir: ContentDir = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    verbose: Verbose = False,
    ):
    """Load every post and write the JSON export."""
    store = _store(content_dir, verbose, {"output_dir": out})
    output_dir = Path(store.settings.output_dir)
    try:
        written = export_site(store, output_dir)
    except OSError as e:
        _fail("Export failed", e)
    typer.echo(f"Exported {len(store.load())} post(s) ({len(written)} file(s)) to {output_dir}/")


def list_cmd(
    content_dir: ContentDir = None,
    page: Annotated[int, typer.Option("--page", help="Page of the chronological index")] = 1,
    page_size: Annotated[Optional[int], typer.Option("--page-size", help="Entries per page")] = None,
    verbose: Verbose = False,
    ):
    """List posts newest first, one page at a time."""
    store = _store(content_dir, verbose, {"page_size": page_size})
    posts = store.list_summaries()
    if not posts:
        typer.echo(f"No posts found in {store.content_dir}.")
        raise typer.Exit(1)

    entries, page, total = paginate(posts, page, store.settings.page_size)
    for post in entries:
        _echo_post(post, show_tags=False)
    if total > 1:
        typer.echo(f"Page {_pager(total, page)}")


def tags_cmd(content_dir: ContentDir = None, verbose: Verbose = False):
    """Print every distinct tag."""
    store = _store(content_dir, verbose)
    for tag in store.all_tags():
        typer.echo(tag)


def groups_cmd(content_dir: ContentDir = None, verbose: Verbose = False):
    """Print the tag-group tree with post counts."""
    store = _store(content_dir, verbose)
    summary = store.group_tree()
    flattened, _ = flatten_groups(summary.groups)
    typer.echo(f"All ({len(summary.flat_posts)})")
    for group in flattened:
        typer.echo(f"{'  ' * (group.depth + 1)}{group.label} ({group.count})  [{group.slug}]")
    typer.echo(f"Updated: {format_display_date(summary.updated_at)}")


def search_cmd(
    query: Annotated[str, typer.Argument(help="Text to look for in title, summary, tags, and body")] = "",
    content_dir: ContentDir = None,
    group: Annotated[str, typer.Option("--group", help="Limit to a group slug, e.g. science/physics")] = ALL_GROUPS,
    verbose: Verbose = False,
    ):
    """Search posts, optionally within one group."""
    store = _store(content_dir, verbose)
    summary = store.group_tree()
    index = build_group_index(summary.groups)
    if group != ALL_GROUPS and group not in index:
        _fail(f"Unknown group: {group}")

    results = search_posts(summary.flat_posts, query, group, index)
    if not results:
        typer.echo("Nothing matched your filter.")
        raise typer.Exit(1)
    for post in results:
        _echo_post(post)


def related_cmd(
    slug: Annotated[str, typer.Argument(help="Slug of the post")],
    content_dir: ContentDir = None,
    limit: Annotated[Optional[int], typer.Option("--limit", help="Max related posts")] = None,
    verbose: Verbose = False,
    ):
    """Show posts related to SLUG by shared tags and series."""
    store = _store(content_dir, verbose, {"related_limit": limit})
    if store.get_by_slug(slug) is None:
        _fail(f"No post with slug: {slug}")
    for post in store.related(slug):
        _echo_post(post)


def show_cmd(
    slug: Annotated[str, typer.Argument(help="Slug of the post")],
    content_dir: ContentDir = None,
    html: Annotated[bool, typer.Option("--html", help="Print the rendered html")] = False,
    verbose: Verbose = False,
    ):
    """Print a post's metadata and heading outline."""
    store = _store(content_dir, verbose)
    post = store.get_by_slug(slug)
    if post is None:
        _fail(f"No post with slug: {slug}")

    _echo_post(post)
    if post.series:
        typer.echo(f"    series: {post.series}")
    typer.echo(f"    {post.excerpt}")
    for heading in post.headings:
        typer.echo(f"{'  ' * heading.level}#{heading.id}  {heading.title}")
    if html:
        typer.echo(post.html)
