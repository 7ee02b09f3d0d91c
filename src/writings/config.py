"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "WRITINGS_"


class Settings(BaseModel):
    app_name:          str  = "writings"
    content_dir:       str  = Field(default="content/posts", description="Directory holding the Markdown posts")
    output_dir:        str  = Field(default="dist",          description="Directory for exported JSON files")
    parser_config:     str  = Field(default="gfm-like",      description="MarkdownIt parser preset name")
    linkify:           bool = Field(default=True,  description="Turn bare URLs into links")
    allow_html:        bool = Field(default=False, description="Pass raw HTML in posts through unescaped")
    heading_max_level: int  = Field(default=4,   ge=1, le=6, description="Deepest heading level given an anchor id")
    excerpt_length:    int  = Field(default=180, ge=2,  description="Max characters in a generated excerpt")
    words_per_minute:  int  = Field(default=200, ge=1,  description="Reading speed used for reading time")
    latest_limit:      int  = Field(default=3,   ge=0,  description="Posts returned by latest()")
    related_limit:     int  = Field(default=3,   ge=0,  description="Posts returned by related()")
    page_size:         int  = Field(default=10,  ge=1,  description="Entries per page in the chronological index")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then WRITINGS_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
