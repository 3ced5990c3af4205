"""Instance configuration: settings schema and pressure.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pressure.errors import ConfigError


CONFIG_FILE = "pressure.yaml"
ENV_PREFIX = "PRESSURE_"


class SiteSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    title:       str
    subtitle:    Optional[str] = None
    description: Optional[str] = None
    author:      Optional[str] = None
    timezone:    Optional[str] = None


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    site:           SiteSettings
    posts_per_page: int = Field(default=5, ge=1, description="Posts per index page")
    parser_config:  str = Field(default="gfm-like", description="MarkdownIt parser preset name")


def load_config(root: Path, overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from <root>/pressure.yaml, then PRESSURE_<FIELD> env vars, then non-None overrides."""
    path = Path(root) / CONFIG_FILE
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid {CONFIG_FILE}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if name == "site":
            continue
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid {CONFIG_FILE}: {e}") from e
