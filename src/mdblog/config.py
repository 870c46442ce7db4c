"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    content_dir:   str = Field(default="content/posts", description="Root directory of post source files")
    output_dir:    str = Field(default=".mdblog",       description="Directory for posts.json + routes.json")
    page_size:     int = Field(default=5, ge=1, description="Posts per listing page")
    latest_count:  int = Field(default=5, ge=1, description="Posts shown under 'latest posts'")
    route_policy:  str = Field(default="published", pattern="^(published|unlisted)$",
                               description="published: routes for published posts only; unlisted: routes for all")
    parser_config: str = Field(default="commonmark", description="MarkdownIt parser preset name")

    site_name:        str = "hanul.dev"
    site_url:         str = "https://hanul.dev"
    site_description: str = "Hanul's dev blog"
    site_author:      str = "Hanul"
    github_url:       str = "https://github.com/ImJiyun"


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDBLOG_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDBLOG_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
