"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:      str  = "mdblocks"
    generate_ids:  bool = Field(default=True, description="Random uuid4 block ids; False gives empty ids")
    frontmatter:   bool = Field(default=True, description="Strip and parse a leading YAML metadata block")
    parser_config: str  = Field(default="gfm-like", description="MarkdownIt parser preset name")
    output_format: str  = Field(default="json", pattern="^(json|yaml)$", description="json or yaml")
    output_dir:    str  = Field(default="dist", description="Directory for exported document files")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDBLOCKS_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"MDBLOCKS_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
