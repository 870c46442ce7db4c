"""Static route enumeration for the site generator"""

from enum import Enum
from typing import Sequence

from mdblog.core.index import ContentIndex
from mdblog.core.models import Post
from mdblog.core.query import find_by_slug


class RoutePolicy(str, Enum):
    """Which posts get a static route, and which resolve by direct link."""
    published = "published"     # routes and lookups agree: drafts are hidden everywhere
    unlisted = "unlisted"       # every post gets a route; drafts stay out of listings only


def enumerate_routes(index: ContentIndex, policy: RoutePolicy = RoutePolicy.published) -> list[tuple[str, ...]]:
    """One tuple of path segments per routable post, in index order."""
    policy = RoutePolicy(policy)
    return [
        tuple(post.slug_as_params.split('/'))
        for post in index
        if post.published or policy is RoutePolicy.unlisted
    ]


def resolve_route(
    index: ContentIndex,
    segments: Sequence[str] | str,
    policy: RoutePolicy = RoutePolicy.published,
    ) -> Post | None:
    """find_by_slug honoring the policy, so every enumerated route resolves."""
    policy = RoutePolicy(policy)
    return find_by_slug(index, segments, include_unpublished=policy is RoutePolicy.unlisted)
