"""Export the built index as posts.json + routes.json for the site generator"""

import json
import logging
from pathlib import Path

from mdblog.core.index import ContentIndex
from mdblog.core.models import Post
from mdblog.core.routes import RoutePolicy, enumerate_routes


logger = logging.getLogger(__name__)

POSTS_FILE = "posts.json"
ROUTES_FILE = "routes.json"


def build_post_record(post: Post) -> dict:
    """Manifest entry for one post, keyed the way the page templates read it."""
    return {
        "slug": post.slug,
        "slugAsParams": post.slug_as_params,
        "title": post.title,
        "description": post.description,
        "date": post.date,
        "tags": list(post.tags),
        "published": post.published,
        "body": post.body,
        "sourcePath": post.source_path,
    }


def build_routes(index: ContentIndex, policy: RoutePolicy) -> list[dict]:
    """One {"slug": [segments]} entry per route."""
    return [{"slug": list(route)} for route in enumerate_routes(index, policy)]


def write_manifest(
    index: ContentIndex,
    output_dir: Path,
    policy: RoutePolicy = RoutePolicy.published,
    ) -> tuple[Path, Path]:
    """Write posts.json and routes.json into output_dir.

    posts.json lists every post (drafts included, flagged by 'published');
    routes.json lists only what the route policy allows.
    Returns (posts_path, routes_path).
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    posts_path = output_dir / POSTS_FILE
    routes_path = output_dir / ROUTES_FILE

    routes = build_routes(index, policy)
    staged = {
        posts_path: json.dumps([build_post_record(p) for p in index], indent=2, ensure_ascii=False),
        routes_path: json.dumps(routes, indent=2, ensure_ascii=False),
    }
    # both temp files are complete before either target is replaced
    tmp_paths = {path: path.with_name(path.name + ".tmp") for path in staged}
    try:
        for path, text in staged.items():
            tmp_paths[path].write_text(text, encoding="utf-8")
        for path, tmp in tmp_paths.items():
            tmp.replace(path)
    finally:
        for tmp in tmp_paths.values():
            tmp.unlink(missing_ok=True)
    logger.info("wrote %d posts and %d routes to %s", len(index), len(routes), output_dir)
    return posts_path, routes_path
