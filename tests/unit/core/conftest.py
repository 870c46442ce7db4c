"""Shared fixtures for core unit tests"""

import pytest

from mdblog.core.index import ContentIndex
from mdblog.core.models import Post


@pytest.fixture(name="blog")
def blog_fixture(write_post):
    """A small content tree: three published posts, one draft, one nested, one index page."""
    write_post("hello-world.md", title="Hello World", date="2024-01-01", tags=["python", "blog"], published=True)
    write_post("2024/second-post.md", title="Second Post", date="2024-06-01", tags=["python"], published=True)
    write_post("draft.md", title="Draft", date="2024-07-01", published=False)
    write_post("guides/index.md", title="Guides", date="2023-05-05", description="All guides", published=True)
    return write_post.root


@pytest.fixture(name="make_post")
def make_post_fixture():
    def _make(slug: str, date: str = "2024-01-01", published: bool = True, **fields) -> Post:
        return Post(slug=slug, title=fields.pop("title", slug.strip("/")), date=date, published=published, **fields)
    return _make


@pytest.fixture(name="index")
def index_fixture(make_post):
    """Index built directly from Post records, skipping the filesystem."""
    return ContentIndex([
        make_post("/a", "2024-01-01"),
        make_post("/b", "2024-06-01"),
        make_post("/c", "2024-06-01"),
        make_post("/drafts/d", "2024-12-01", published=False),
        make_post("/nested/e", "2023-03-03", tags=("python",)),
    ])
