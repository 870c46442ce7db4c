"""Immutable content index and the per-process build cache"""

import logging
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator

from mdblog.core.errors import DuplicateSlugError
from mdblog.core.models import Post
from mdblog.core.parse import parse_dir


logger = logging.getLogger(__name__)

_cache: dict[Path, "ContentIndex"] = {}
_lock = threading.Lock()


class ContentIndex:
    """Read-only collection of every ingested post, addressable by slug_as_params."""

    __slots__ = ('_posts', '_by_params')

    def __init__(self, posts: Iterable[Post]):
        posts = tuple(posts)
        by_params: dict[str, Post] = {}
        for post in posts:
            other = by_params.get(post.slug_as_params)
            if other is not None:
                raise DuplicateSlugError(
                    f"duplicate slug '{post.slug}' (also used by {other.source_path or other.slug})",
                    post.source_path or None,
                )
            by_params[post.slug_as_params] = post
        self._posts = posts
        self._by_params = MappingProxyType(by_params)

    @property
    def posts(self) -> tuple[Post, ...]:
        return self._posts

    def get(self, slug_as_params: str) -> Post | None:
        """Exact lookup regardless of publication state."""
        return self._by_params.get(slug_as_params)

    def __len__(self) -> int:
        return len(self._posts)

    def __iter__(self) -> Iterator[Post]:
        return iter(self._posts)

    def __repr__(self) -> str:
        return f"ContentIndex({len(self._posts)} posts)"


def build_index(root: Path | str) -> ContentIndex:
    """Parse and validate every source file under root. Raises ContentError."""
    index = ContentIndex(parse_dir(Path(root)))
    published = sum(1 for p in index if p.published)
    logger.info("indexed %d posts (%d published) from %s", len(index), published, root)
    return index


def load_index(root: Path | str) -> ContentIndex:
    """Return the cached index for root, building it on first use.

    Concurrent callers are serialized; a failed build caches nothing.
    """
    key = Path(root).resolve()
    with _lock:
        index = _cache.get(key)
        if index is None:
            index = build_index(key)
            _cache[key] = index
        else:
            logger.debug("reusing cached index for %s", key)
        return index


def clear_index_cache() -> None:
    """Drop all cached indexes so the next load_index re-reads sources."""
    with _lock:
        _cache.clear()
