"""Root test configuration: index cache isolation and runtime artifact cleanup"""

import shutil
from pathlib import Path

import pytest

from mdblog.core.index import clear_index_cache


_PROJECT_ROOT = Path(__file__).parent.parent

_CLEANUP_DIRS = [".mdblog"]


@pytest.fixture(autouse=True)
def fresh_index_cache():
    """Each test starts without a cached index."""
    clear_index_cache()
    yield
    clear_index_cache()


@pytest.fixture(scope="session", autouse=True)
def cleanup_artifacts():
    """Remove output directories created during the test session."""
    yield
    for name in _CLEANUP_DIRS:
        p = _PROJECT_ROOT / name
        if p.exists():
            shutil.rmtree(p)


def make_source(title: str = "Post", date: str = "2024-01-01", **fields) -> str:
    """Build a source file with YAML front matter and a short body."""
    lines = [f"title: {title}", f"date: {date}"]
    for key, value in fields.items():
        if isinstance(value, bool):
            value = str(value).lower()
        elif isinstance(value, list):
            value = "[" + ", ".join(value) + "]"
        lines.append(f"{key}: {value}")
    return "---\n" + "\n".join(lines) + "\n---\n\n# " + title + "\n\nBody text.\n"


@pytest.fixture(name="write_post")
def write_post_fixture(tmp_path):
    """Write a post under tmp_path/content and return its path."""
    root = tmp_path / "content"

    def _write(rel: str, text: str = None, **fields) -> Path:
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text if text is not None else make_source(**fields), encoding="utf-8")
        return path

    root.mkdir()
    _write.root = root
    return _write
