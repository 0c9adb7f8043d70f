"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:         str  = "mdposts"
    content_dir:      str  = Field(default="content/blog", description="Directory holding the post .md files")
    output_dir:       str  = Field(default="dist",         description="Directory for exported HTML + JSON files")
    default_author:   str  = Field(default="SilicogenAI",  description="Author used when a post names none")
    words_per_minute: int  = Field(default=200, ge=1,      description="Reading speed for read-time estimates")
    parser_config:    str  = Field(default="gfm-like", pattern="^(gfm-like|commonmark|default|js-default|zero)$",
                                   description="MarkdownIt parser preset name")
    linkify:          bool = Field(default=True,           description="Autolink bare URLs in post bodies")
    code_theme:       str  = Field(default="one-dark",     description="Pygments style for fenced code")
    strict_slugs:     bool = Field(default=False,          description="Reject catalogs with duplicate slugs")
    log_level:        str  = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDPOSTS_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDPOSTS_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValueError as e:
        raise ValueError(f"Invalid settings: {e}") from e
