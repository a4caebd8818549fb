"""Resolver contract shared by every strategy in the chain."""

from __future__ import annotations

from pathlib import Path
from typing import List, Protocol, runtime_checkable

from depresolve.modules.dependency.domain import ArtifactCoordinates


@runtime_checkable
class DependencyResolver(Protocol):
    """Locates local artifacts for coordinates."""

    def resolve_one(self, coordinates: ArtifactCoordinates) -> Path:  # pragma: no cover - interface
        ...

    def resolve_all(self, coordinates: ArtifactCoordinates) -> List[Path]:  # pragma: no cover - interface
        ...
