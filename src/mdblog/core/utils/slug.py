"""Slug generation for post identifiers"""

import re
from pathlib import PurePath


INDEX_STEM = 'index'


def slugify(text: str) -> str:
    """Convert text to a lowercase, hyphen-separated URL-safe slug."""
    text = text.lower()
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-')


def path_slug(rel_path: PurePath) -> str:
    """Derive '/seg/seg' from a path relative to the content root.

    Each segment is slugified and the extension dropped; a trailing 'index'
    file names its directory (guides/index.md -> /guides).
    Raises ValueError if any segment slugifies to nothing.
    """
    parts = [*rel_path.parent.parts, rel_path.stem]
    if len(parts) > 1 and parts[-1].lower() == INDEX_STEM:
        parts.pop()
    segments = [slugify(p) for p in parts]
    if not all(segments):
        raise ValueError(f"cannot derive a slug from path '{rel_path.as_posix()}'")
    return '/' + '/'.join(segments)


def slug_as_params(slug: str) -> str:
    """Return slug with the leading path separator removed."""
    return slug.lstrip('/')
