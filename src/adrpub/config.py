"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:      str = "adrpub"
    src_dir:       str = Field(default="./content/src",   description="Directory holding the ADR markdown sources")
    out_dir:       str = Field(default="./content/out",   description="Directory the rendered HTML files are written to")
    files_dir:     str = Field(default="./content/files", description="Static assets copied into out_dir before rendering")
    template_path: str = Field(default="./content/template.html", description="HTML template with the two placeholders")
    index_name:    str = Field(default="index.md",  description="Source document never listed in the navigation index")
    source_ext:    str = Field(default=".md",       pattern=r"^\.\w+$", description="Extension of source documents")
    output_ext:    str = Field(default=".html",     pattern=r"^\.\w+$", description="Extension of rendered documents")
    parser_config: str = Field(
        default="commonmark",
        pattern="^(commonmark|gfm-like|default|js-default|zero)$",
        description="MarkdownIt parser preset name",
    )
    log_level:     str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR)$", description="adrpub log level")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then ADRPUB_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"ADRPUB_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
