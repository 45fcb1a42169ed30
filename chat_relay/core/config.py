"""Application configuration loading utilities."""

from __future__ import annotations

import pathlib
from functools import lru_cache
from typing import List

import yaml
from pydantic import BaseModel, Field

BASE_DIR = pathlib.Path(__file__).resolve().parent.parent
DEFAULT_CONFIG_PATH = BASE_DIR / "config" / "providers.yaml"


class ProviderModel(BaseModel):
    id: str
    name: str
    base_url: str
    endpoint_path: str
    timeout: float = Field(default=60.0, gt=0)
    models: List[str] = Field(default_factory=list)


class AppConfig(BaseModel):
    default_provider: str = "openai"
    providers: List[ProviderModel]


@lru_cache(maxsize=1)
def load_config(path: pathlib.Path | None = None) -> AppConfig:
    """Load provider configuration from YAML."""
    config_path = path or DEFAULT_CONFIG_PATH
    raw = yaml.safe_load(config_path.read_text())
    return AppConfig(**raw)
