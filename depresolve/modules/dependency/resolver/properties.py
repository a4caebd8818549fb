"""Resolver backed by a static ``coordinate = path`` mapping resource."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from depresolve.modules.dependency.domain import (
    ArtifactCoordinates,
    ArtifactNotFoundError,
    ResolverConfigurationError,
)
from depresolve.modules.dependency.util import PropertiesFormatError, load_properties

from .base import DependencyResolver


class PropertiesDependencyResolver:
    """Resolve coordinates through a properties mapping, with an optional fallback.

    Each value lists one or more paths separated by ``os.pathsep`` (for example
    the binary jar followed by its sources jar). Relative paths are taken
    relative to the directory holding the properties resource.
    """

    def __init__(self, properties_path: Path, delegate: Optional[DependencyResolver] = None) -> None:
        self.properties_path = Path(properties_path)
        self.delegate = delegate
        self.log = logging.getLogger(self.__class__.__name__)
        self._mapping: Mapping[str, Tuple[Path, ...]] = MappingProxyType(self._load())
        self.log.debug(
            "Loaded %d dependency mappings from %s (fallback=%s)",
            len(self._mapping),
            self.properties_path,
            type(delegate).__name__ if delegate else "-",
        )

    def _load(self) -> Dict[str, Tuple[Path, ...]]:
        try:
            entries = load_properties(self.properties_path)
        except (OSError, UnicodeDecodeError, PropertiesFormatError) as exc:
            raise ResolverConfigurationError(
                f"couldn't read dependencies from {self.properties_path}: {exc}",
                source=str(self.properties_path),
            ) from exc

        base_dir = self.properties_path.parent
        mapping: Dict[str, Tuple[Path, ...]] = {}
        for key, value in entries.items():
            paths = tuple(
                self._absolutize(base_dir, part.strip())
                for part in value.split(os.pathsep)
                if part.strip()
            )
            if not paths:
                raise ResolverConfigurationError(
                    f"couldn't read dependencies from {self.properties_path}: no path for {key!r}",
                    source=str(self.properties_path),
                )
            mapping[key] = paths
        return mapping

    @staticmethod
    def _absolutize(base_dir: Path, location: str) -> Path:
        path = Path(location)
        if path.is_absolute():
            return path
        return base_dir / path

    @property
    def mapping(self) -> Mapping[str, Tuple[Path, ...]]:
        return self._mapping

    def __contains__(self, coordinates: ArtifactCoordinates) -> bool:
        return coordinates.short_name in self._mapping

    def resolve_one(self, coordinates: ArtifactCoordinates) -> Path:
        paths = self._mapping.get(coordinates.short_name)
        if paths is not None:
            return paths[0]
        if self.delegate is not None:
            return self.delegate.resolve_one(coordinates)
        raise ArtifactNotFoundError(coordinates, f"no entry in {self.properties_path}")

    def resolve_all(self, coordinates: ArtifactCoordinates) -> List[Path]:
        paths = self._mapping.get(coordinates.short_name)
        if paths is not None:
            return list(paths)
        if self.delegate is not None:
            return self.delegate.resolve_all(coordinates)
        raise ArtifactNotFoundError(coordinates, f"no entry in {self.properties_path}")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self.properties_path)!r}, delegate={self.delegate!r})"
