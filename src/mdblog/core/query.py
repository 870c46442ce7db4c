"""Pure query functions over a ContentIndex: filter, sort, paginate, resolve"""

import math
import re
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Sequence

from mdblog.core.index import ContentIndex
from mdblog.core.models import Post


PAGE_NUMBER_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Page:
    """One page of a listing plus the metadata the pagination control needs."""
    items:       tuple[Post, ...]
    page_number: int
    page_size:   int
    total_pages: int
    total_items: int

    @property
    def has_previous(self) -> bool:
        return self.page_number > 1

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages


def list_published(index: ContentIndex) -> list[Post]:
    """Published posts in index order."""
    return [p for p in index if p.published]


def sort_by_date(posts: Iterable[Post]) -> list[Post]:
    """Newest first; equal dates fall back to slug ascending."""
    by_slug = sorted(posts, key=lambda p: p.slug)
    return sorted(by_slug, key=lambda p: p.published_at, reverse=True)


def paginate(posts: Sequence[Post], page_size: int, page_number: int) -> Page:
    """Slice out 1-indexed page_number. Out-of-range pages are empty, never an error."""
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    total_items = len(posts)
    total_pages = math.ceil(total_items / page_size)
    if 1 <= page_number <= total_pages:
        items = tuple(posts[page_size * (page_number - 1):page_size * page_number])
    else:
        items = ()
    return Page(
        items=items,
        page_number=page_number,
        page_size=page_size,
        total_pages=total_pages,
        total_items=total_items,
    )


def find_by_slug(
    index: ContentIndex,
    segments: Sequence[str] | str,
    include_unpublished: bool = False,
    ) -> Post | None:
    """Resolve route segments (or an already-joined path) to a post.

    Returns None when nothing matches or the match is unpublished, so hidden
    drafts look exactly like missing posts. include_unpublished lifts the
    second rule for the 'unlisted' route policy.
    """
    key = segments.strip('/') if isinstance(segments, str) else '/'.join(segments)
    post = index.get(key)
    if post is None or not (post.published or include_unpublished):
        return None
    return post


def latest_posts(index: ContentIndex, count: int) -> list[Post]:
    """The newest `count` published posts (home page)."""
    return sort_by_date(list_published(index))[:max(count, 0)]


def parse_page_number(raw: str | int | None) -> int:
    """Page number from a query parameter; missing, non-numeric or 0 means page 1."""
    if raw is None:
        return 1
    text = str(raw).strip()
    if not PAGE_NUMBER_RE.fullmatch(text):
        return 1
    return int(text) or 1


def posts_by_tag(posts: Iterable[Post], tag: str) -> list[Post]:
    return [p for p in posts if tag in p.tags]


def all_tags(posts: Iterable[Post]) -> dict[str, int]:
    """Tag -> post count, most used first, then alphabetical."""
    counts = Counter(t for p in posts for t in p.tags)
    return dict(sorted(counts.items(), key=lambda kv: (-kv[1], kv[0])))
