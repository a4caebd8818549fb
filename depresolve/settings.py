"""Runtime configuration for depresolve."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import __version__
from .modules.dependency.domain import (
    DEFAULT_REMOTE_RESOLVER,
    LAYOUT_FLAT,
    MAVEN_CENTRAL_URL,
)


def _default_cache_dir() -> str:
    return str(Path.home() / ".depresolve" / "cache")


class Settings(BaseSettings):
    """Configuration values mapped from ``DEPRESOLVE_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DEPRESOLVE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "depresolve"
    version: str = __version__
    log_level: str = "INFO"

    # Resolution policy
    offline: bool = False
    deps_properties: Optional[str] = Field(None, description="Properties mapping used when offline")
    dependency_dir: str = "."
    dependency_layout: Literal["flat", "maven"] = LAYOUT_FLAT
    remote_resolver: str = DEFAULT_REMOTE_RESOLVER

    # Remote repository used by the cached resolver
    repo_url: str = MAVEN_CENTRAL_URL
    repo_username: Optional[str] = None
    repo_password: Optional[str] = None
    cache_dir: str = Field(default_factory=_default_cache_dir)
    download_timeout: float = 30.0


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance for dependency injection."""
    return Settings()
