"""Unit tests for core/parse.py"""

import pytest

from mdblog.core.errors import ContentError
from mdblog.core.models import Post
from mdblog.core.parse import _strip_frontmatter, discover_files, parse_dir, parse_file


def test_strip_frontmatter_with_yaml():
    """_strip_frontmatter extracts YAML header and returns body."""
    text = "---\ntitle: Hello\n---\n# Body\n"
    fm, body = _strip_frontmatter(text)
    assert fm == {"title": "Hello"}
    assert body == "# Body\n"


def test_strip_frontmatter_no_frontmatter():
    """_strip_frontmatter returns empty dict and full text when no header."""
    text = "# No frontmatter\n"
    fm, body = _strip_frontmatter(text)
    assert fm == {}
    assert body == text


def test_strip_frontmatter_at_end_of_file():
    fm, body = _strip_frontmatter("---\ntitle: Hello\n---")
    assert fm == {"title": "Hello"}
    assert body == ""


def test_strip_frontmatter_ignores_bom():
    fm, _ = _strip_frontmatter("\ufeff---\ntitle: Hello\n---\nBody\n")
    assert fm == {"title": "Hello"}


def test_strip_frontmatter_rejects_non_mapping():
    with pytest.raises(ValueError, match="expected a mapping"):
        _strip_frontmatter("---\n- a\n- b\n---\nBody\n")


def test_discover_files_non_md_skipped(tmp_path):
    """discover_files ignores non-.md/.mdx files."""
    (tmp_path / "notes.txt").write_text("text")
    assert discover_files(tmp_path) == []


def test_discover_files_dir(tmp_path):
    """discover_files finds all .md and .mdx files recursively, sorted."""
    (tmp_path / "b.md").write_text("b")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "a.mdx").write_text("a")
    assert discover_files(tmp_path) == [tmp_path / "b.md", sub / "a.mdx"]


def test_parse_file_builds_post(write_post):
    path = write_post("2024/Hello World.md", title="Hello", date="2024-01-01", tags=["x"], published=True)
    post = parse_file(path, write_post.root)
    assert isinstance(post, Post)
    assert post.slug == "/2024/hello-world"
    assert post.slug_as_params == "2024/hello-world"
    assert post.title == "Hello"
    assert post.date == "2024-01-01"
    assert post.tags == ("x",)
    assert post.published is True
    assert post.source_path == "2024/Hello World.md"


def test_parse_file_body_passes_through_untouched(write_post):
    text = "---\ntitle: T\ndate: 2024-01-01\n---\n<Callout>mdx stays *as is*</Callout>\n"
    post = parse_file(write_post("c.mdx", text=text), write_post.root)
    assert post.body == "<Callout>mdx stays *as is*</Callout>\n"


def test_parse_file_published_defaults_false(write_post):
    post = parse_file(write_post("p.md", title="T", date="2024-01-01"), write_post.root)
    assert post.published is False


def test_parse_file_missing_frontmatter(write_post):
    path = write_post("plain.md", text="# Hello\n\nWorld.\n")
    with pytest.raises(ContentError, match="plain.md: invalid frontmatter") as exc:
        parse_file(path, write_post.root)
    assert "title" in str(exc.value) and "date" in str(exc.value)
    assert exc.value.path == "plain.md"


def test_parse_file_unparseable_date(write_post):
    path = write_post("p.md", title="T", date="not-a-date")
    with pytest.raises(ContentError, match="unparseable date"):
        parse_file(path, write_post.root)


def test_parse_file_impossible_yaml_date(write_post):
    """A YAML timestamp that is not a real calendar day is a content error, not a crash."""
    path = write_post("p.md", title="T", date="2024-02-30")
    with pytest.raises(ContentError):
        parse_file(path, write_post.root)


def test_parse_file_date_out_of_range(write_post):
    path = write_post("p.md", title="T", date="0001-01-01T00:00:00+05:00")
    with pytest.raises(ContentError, match="p.md: invalid frontmatter: date"):
        parse_file(path, write_post.root)


def test_parse_file_invalid_yaml(write_post):
    path = write_post("p.md", text="---\ntitle: [unclosed\n---\nBody\n")
    with pytest.raises(ContentError, match="Invalid YAML frontmatter"):
        parse_file(path, write_post.root)


def test_parse_file_unknown_field(write_post):
    path = write_post("p.md", title="T", date="2024-01-01", draft=True)
    with pytest.raises(ContentError, match="draft"):
        parse_file(path, write_post.root)


def test_parse_dir_missing_root(tmp_path):
    with pytest.raises(ContentError, match="content directory not found"):
        parse_dir(tmp_path / "nope")


def test_parse_dir_one_post_per_file(blog):
    posts = parse_dir(blog)
    assert [p.slug for p in posts] == ["/2024/second-post", "/draft", "/guides", "/hello-world"]
