"""Assembly of the layered resolver chain from configuration.

Resolution order:

1. If ``depresolve-deps.properties`` is found on the search path, coordinates
   listed there win.
2. If ``offline`` is set and ``deps_properties`` is configured, coordinates are
   resolved from that properties file only.
3. If ``offline`` is set without ``deps_properties``, coordinates are resolved
   by convention under ``dependency_dir``.
4. Otherwise the remote resolver named by ``remote_resolver`` downloads and
   caches them.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Sequence

from depresolve.modules.dependency.domain import DEPS_PROPERTIES_RESOURCE, ArtifactCoordinates
from depresolve.modules.dependency.util import find_on_search_path, path_from_url

from .base import DependencyResolver
from .local import LocalDependencyResolver
from .properties import PropertiesDependencyResolver
from .registry import ResolverRegistry

if TYPE_CHECKING:
    from depresolve.settings import Settings

log = logging.getLogger(__name__)


def _as_path(location: str) -> Path:
    if location.startswith("file:"):
        return path_from_url(location)
    return Path(location).expanduser()


class ResolutionChainBuilder:
    """Translate settings into a single composed resolver."""

    def __init__(
        self,
        settings: Settings,
        *,
        registry: Optional[ResolverRegistry] = None,
        search_path: Optional[Sequence[str]] = None,
    ) -> None:
        self.settings = settings
        self.registry = registry or ResolverRegistry.default()
        self.search_path = search_path

    def build_base(self) -> DependencyResolver:
        settings = self.settings
        if settings.offline and settings.deps_properties:
            properties_path = _as_path(settings.deps_properties)
            log.info("Offline: resolving dependencies from %s", properties_path)
            return PropertiesDependencyResolver(properties_path, None)
        if settings.offline:
            log.info(
                "Offline: resolving dependencies under %s (%s layout)",
                settings.dependency_dir,
                settings.dependency_layout,
            )
            return LocalDependencyResolver(_as_path(settings.dependency_dir), settings.dependency_layout)
        log.info("Online: resolving dependencies with %s", settings.remote_resolver)
        return self.registry.create(settings.remote_resolver, settings)

    def find_override_resource(self) -> Optional[Path]:
        search_path = sys.path if self.search_path is None else self.search_path
        return find_on_search_path(DEPS_PROPERTIES_RESOURCE, search_path)

    def build(self) -> DependencyResolver:
        resolver = self.build_base()
        override = self.find_override_resource()
        if override is not None:
            log.info("Using dependency overrides from %s", override)
            resolver = PropertiesDependencyResolver(override, resolver)
        return resolver


class ChainedDependencyResolver:
    """Single entry point for resolution; built once, reused for every call."""

    def __init__(self, delegate: DependencyResolver) -> None:
        self._delegate = delegate

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        registry: Optional[ResolverRegistry] = None,
        search_path: Optional[Sequence[str]] = None,
    ) -> "ChainedDependencyResolver":
        builder = ResolutionChainBuilder(settings, registry=registry, search_path=search_path)
        return cls(builder.build())

    @property
    def delegate(self) -> DependencyResolver:
        return self._delegate

    def resolve_one(self, coordinates: ArtifactCoordinates) -> Path:
        return self._delegate.resolve_one(coordinates)

    def resolve_all(self, coordinates: ArtifactCoordinates) -> List[Path]:
        return self._delegate.resolve_all(coordinates)

    def close(self) -> None:
        """Release resources held by any layer (HTTP clients of remote resolvers)."""

        layer: Optional[object] = self._delegate
        while layer is not None:
            close = getattr(layer, "close", None)
            if callable(close):
                close()
            layer = getattr(layer, "delegate", None)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._delegate!r})"
