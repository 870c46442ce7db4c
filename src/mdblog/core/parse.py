"""File discovery, frontmatter extraction, and Post construction"""

import logging
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from mdblog.core.errors import ContentError
from mdblog.core.models import Frontmatter, Post
from mdblog.core.utils.slug import path_slug


logger = logging.getLogger(__name__)

FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---[ \t]*(?:\r?\n|\Z)', re.DOTALL)
MD_EXTENSIONS = {'.md', '.mdx'}


def _strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    text = text.lstrip('\ufeff')
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def _describe(error: ValidationError) -> str:
    """Flatten pydantic errors into 'field: message; field: message'."""
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or 'frontmatter'}: {err['msg']}"
        for err in error.errors()
    )


def discover_files(root: Path) -> list[Path]:
    """Return sorted .md/.mdx files under root."""
    return sorted(p for p in root.rglob('*') if p.is_file() and p.suffix.lower() in MD_EXTENSIONS)


def parse_file(path: Path, root: Path) -> Post:
    """Parse one source file into a validated Post. Raises ContentError."""
    rel = path.relative_to(root)
    try:
        raw = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise ContentError(f"cannot read file: {e}", rel.as_posix()) from e

    try:
        frontmatter, body = _strip_frontmatter(raw)
        fm = Frontmatter.model_validate(frontmatter)
    except ValidationError as e:
        raise ContentError(f"invalid frontmatter: {_describe(e)}", rel.as_posix()) from e
    except ValueError as e:
        raise ContentError(str(e), rel.as_posix()) from e

    try:
        slug = path_slug(rel)
    except ValueError as e:
        raise ContentError(str(e), rel.as_posix()) from e

    logger.debug("parsed %s -> %s", rel.as_posix(), slug)
    return Post(
        slug=slug,
        title=fm.title,
        date=fm.date,
        description=fm.description,
        tags=tuple(fm.tags),
        published=fm.published,
        body=body,
        source_path=rel.as_posix(),
    )


def parse_dir(root: Path) -> list[Post]:
    """Parse every source file under root, in discovery order."""
    if not root.is_dir():
        raise ContentError("content directory not found", root)
    return [parse_file(p, root) for p in discover_files(root)]
