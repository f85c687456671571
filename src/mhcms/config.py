"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from mhcms.core.decoders import DEFAULT_OBJECT_DECODERS, ObjectDecoder


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "MHCMS_"


class Settings(BaseModel):
    app_name:         str = "mhcms"
    log_level:        str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
                                  description="Root logging level for the CLI")
    object_languages: str = Field(default="yaml,json", description="Comma-separated object decoders to enable")
    indent:           int = Field(default=2, ge=0, description="JSON indentation of CLI output")
    max_depth:        int = Field(default=6, ge=1, le=6, description="Deepest section level materialized by the CLI")

    @field_validator("object_languages")
    @classmethod
    def _known_languages(cls, value: str) -> str:
        """Normalize to 'a,b' and reject languages without a default decoder."""
        names = [n.strip() for n in value.split(",") if n.strip()]
        unknown = sorted(set(names) - DEFAULT_OBJECT_DECODERS.keys())
        if unknown:
            raise ValueError(f"Unknown object language(s): {', '.join(unknown)}")
        return ",".join(dict.fromkeys(names))

    def decoder_overrides(self) -> dict[str, Optional[ObjectDecoder]]:
        """Map each default object language left out of object_languages to None (disabled)."""
        enabled = set(self.object_languages.split(","))
        return {n: None for n in DEFAULT_OBJECT_DECODERS if n not in enabled}


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Build Settings for one CLI run.

    Sources, lowest precedence first: ./config.yaml, MHCMS_<FIELD> env vars,
    then non-None CLI overrides. Raises ValueError for unreadable YAML and
    pydantic ValidationError for bad values, unknown object languages included.
    """
    data: dict[str, Any] = {}
    config_path = Path(CONFIG_FILE)
    if config_path.exists():
        try:
            data = yaml.safe_load(config_path.read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    data.update({
        name: val for name in Settings.model_fields
        if (val := os.getenv(f"{ENV_PREFIX}{name.upper()}"))
    })
    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
