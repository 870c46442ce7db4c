"""Post record and the front matter schema it is validated against"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator

from mdblog.core.utils.dates import normalize_date, parse_instant
from mdblog.core.utils.slug import slug_as_params


def _check_title(v: str) -> str:
    if not v.strip():
        raise ValueError("title must not be blank")
    return v


class Frontmatter(BaseModel):
    """Metadata block at the head of a post source file. Unknown keys are rejected."""
    model_config = ConfigDict(extra='forbid')

    title: str = Field(min_length=1)
    date: str
    description: Optional[str] = None
    tags: list[str] = []
    published: StrictBool = False

    @field_validator('title')
    @classmethod
    def _title_not_blank(cls, v: str) -> str:
        return _check_title(v)

    @field_validator('date', mode='before')
    @classmethod
    def _normalize_date(cls, v: Any) -> str:
        return normalize_date(v)

    @field_validator('tags', mode='before')
    @classmethod
    def _coerce_tags(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v

    @field_validator('tags')
    @classmethod
    def _dedupe_tags(cls, v: list[str]) -> list[str]:
        return list(dict.fromkeys(v))


class Post(BaseModel):
    """A single ingested post. Immutable once built."""
    model_config = ConfigDict(frozen=True)

    slug: str
    title: str = Field(min_length=1)
    date: str
    description: Optional[str] = None
    tags: tuple[str, ...] = ()
    published: bool = False
    body: str = ""                  # opaque; only the renderer looks inside
    source_path: str = ""           # relative to the content root

    @field_validator('title')
    @classmethod
    def _title_not_blank(cls, v: str) -> str:
        return _check_title(v)

    @field_validator('date', mode='before')
    @classmethod
    def _normalize_date(cls, v: Any) -> str:
        return normalize_date(v)

    @property
    def slug_as_params(self) -> str:
        return slug_as_params(self.slug)

    @property
    def published_at(self) -> datetime:
        return parse_instant(self.date)
