"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from mdblog.config import Settings, load_config
from mdblog.core.errors import ContentError
from mdblog.core.export import write_manifest
from mdblog.core.index import ContentIndex, load_index
from mdblog.core.models import Post
from mdblog.core.query import (
    all_tags,
    latest_posts,
    list_published,
    paginate,
    parse_page_number,
    posts_by_tag,
    sort_by_date,
)
from mdblog.core.render import format_date, render_html
from mdblog.core.routes import RoutePolicy, enumerate_routes, resolve_route


ContentOpt = Annotated[Optional[str], typer.Option("--content-dir", help="Post source directory")]
PolicyOpt = Annotated[Optional[str], typer.Option("--route-policy", help="published or unlisted")]


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


def _index(settings: Settings) -> ContentIndex:
    """Load the content index; any ingestion error aborts the command."""
    try:
        return load_index(settings.content_dir)
    except ContentError as e:
        _fail("Content build failed", e)


def _echo_post(post: Post) -> None:
    tags = f"  [{', '.join(post.tags)}]" if post.tags else ""
    typer.echo(f"  {format_date(post.date):<20} {post.slug_as_params}  {post.title}{tags}")


def build_cmd(
    content: ContentOpt = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    policy: PolicyOpt = None,
    ):
    """Ingest all posts and write posts.json + routes.json."""
    settings = _settings(overrides={"content_dir": content, "output_dir": out, "route_policy": policy})
    index = _index(settings)
    posts_path, routes_path = write_manifest(index, Path(settings.output_dir), RoutePolicy(settings.route_policy))
    published = len(list_published(index))
    typer.echo(f"Indexed {len(index)} post(s), {published} published")
    typer.echo(f"  {posts_path}")
    typer.echo(f"  {routes_path}")


def list_cmd(
    page: Annotated[Optional[str], typer.Option("--page", help="1-indexed page number")] = None,
    tag: Annotated[Optional[str], typer.Option("--tag", help="Only posts with this tag")] = None,
    content: ContentOpt = None,
    ):
    """List published posts, newest first, one page at a time."""
    settings = _settings(overrides={"content_dir": content})
    posts = list_published(_index(settings))
    if tag:
        posts = posts_by_tag(posts, tag)
    result = paginate(sort_by_date(posts), settings.page_size, parse_page_number(page))

    if not result.items:
        typer.echo("Nothing to see here yet")
    for post in result.items:
        _echo_post(post)
    typer.echo(f"Page {result.page_number} of {result.total_pages}")


def latest_cmd(
    count: Annotated[Optional[int], typer.Option("--count", help="Number of posts")] = None,
    content: ContentOpt = None,
    ):
    """Show the most recent published posts."""
    settings = _settings(overrides={"content_dir": content, "latest_count": count})
    for post in latest_posts(_index(settings), settings.latest_count):
        _echo_post(post)


def show_cmd(
    slug: Annotated[str, typer.Argument(help="Post path, e.g. 2024/hello-world")],
    html: Annotated[bool, typer.Option("--html", help="Render the body to HTML")] = False,
    content: ContentOpt = None,
    policy: PolicyOpt = None,
    ):
    """Print a single post."""
    settings = _settings(overrides={"content_dir": content, "route_policy": policy})
    post = resolve_route(_index(settings), slug.strip('/').split('/'), RoutePolicy(settings.route_policy))
    if post is None:
        typer.echo(f"Not found: {slug}", err=True)
        raise typer.Exit(1)

    typer.echo(post.title)
    if post.description:
        typer.echo(post.description)
    typer.echo(format_date(post.date))
    typer.echo("")
    typer.echo(render_html(post.body, settings.parser_config) if html else post.body)


def routes_cmd(
    content: ContentOpt = None,
    policy: PolicyOpt = None,
    ):
    """Print every static route the generator should build."""
    settings = _settings(overrides={"content_dir": content, "route_policy": policy})
    for route in enumerate_routes(_index(settings), RoutePolicy(settings.route_policy)):
        typer.echo("/posts/" + "/".join(route))


def tags_cmd(content: ContentOpt = None):
    """Count published posts per tag."""
    settings = _settings(overrides={"content_dir": content})
    for name, count in all_tags(list_published(_index(settings))).items():
        typer.echo(f"  {name}: {count}")
