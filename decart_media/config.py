"""Configuration for Decart adapters."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from pydantic import BaseModel, Field

from decart_media.errors import ConfigError, ConfigErrorKind

DEFAULT_API_KEY_ENV = "DECART_API_KEY"
DEFAULT_BASE_URL = "https://api.decart.ai"


class DecartConfig(BaseModel):
    """Connection settings shared by the image and video adapters."""

    model_config = {"frozen": True}

    api_key: Optional[str] = None
    api_key_env: str = DEFAULT_API_KEY_ENV
    base_url: Optional[str] = None
    timeout: float = Field(default=300.0, gt=0)

    def resolve_api_key(self, environ: Optional[Mapping[str, str]] = None) -> str:
        """Return the explicit key, else the one named by ``api_key_env``.

        ``environ`` defaults to the process environment.
        """
        if self.api_key:
            return self.api_key

        env = os.environ if environ is None else environ
        key = env.get(self.api_key_env)
        if not key:
            raise ConfigError(
                ConfigErrorKind.MISSING_API_KEY,
                f"{self.api_key_env} is required. Set it in environment "
                "variables or use create_decart_image/create_decart_video "
                "with an explicit API key.",
            )
        return key


def load_config(path: Path) -> DecartConfig:
    """Load adapter settings from a YAML file.

    A top-level ``decart:`` section is used when present, otherwise the whole
    document.
    """
    raw = load_yaml_file(path)
    section = raw.get("decart", raw)
    return DecartConfig(**section)


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML file and return its contents as a dict."""
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    with open(path) as f:
        return yaml.safe_load(f) or {}
