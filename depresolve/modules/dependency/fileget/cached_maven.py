"""Remote-and-cache resolver used when the chain is not offline."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

import httpx

from depresolve.modules.dependency.domain import ArtifactCoordinates, ArtifactNotFoundError
from depresolve.modules.dependency.util import join_path

from .maven_downloader import MavenDownloader

if TYPE_CHECKING:
    from depresolve.settings import Settings

LOCK_STRIPES = 64


class CachedMavenDependencyResolver:
    """Download artifacts from a Maven repository and keep them in a local cache.

    The cache mirrors the repository layout, so a coordinate is only fetched
    once per cache directory.
    """

    def __init__(self, settings: Settings, downloader: Optional[MavenDownloader] = None) -> None:
        self.cache_dir = Path(settings.cache_dir).expanduser()
        self.downloader = downloader or MavenDownloader(settings)
        self.log = logging.getLogger(self.__class__.__name__)
        self._locks = tuple(threading.Lock() for _ in range(LOCK_STRIPES))

    def cache_path(self, coordinates: ArtifactCoordinates) -> Path:
        return join_path(self.cache_dir, *coordinates.path_segments)

    def _lock_for(self, coordinates: ArtifactCoordinates) -> threading.Lock:
        return self._locks[hash(coordinates.short_name) % len(self._locks)]

    def resolve_one(self, coordinates: ArtifactCoordinates) -> Path:
        target = self.cache_path(coordinates)
        # a coordinate is never downloaded twice at once; unrelated ones rarely share a stripe
        with self._lock_for(coordinates):
            try:
                return self.downloader.download(coordinates, target)
            except httpx.HTTPStatusError as exc:
                if exc.response.status_code == 404:
                    raise ArtifactNotFoundError(
                        coordinates, f"not in {self.downloader.base_url}"
                    ) from exc
                raise

    def resolve_all(self, coordinates: ArtifactCoordinates) -> List[Path]:
        return [self.resolve_one(coordinates)]

    def close(self) -> None:
        self.downloader.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self.cache_dir)!r}, repo={self.downloader.base_url!r})"


def create_cached_maven_resolver(settings: Settings) -> CachedMavenDependencyResolver:
    return CachedMavenDependencyResolver(settings)
