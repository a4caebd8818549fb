"""Convention-based resolver rooted at a local dependency directory."""

from __future__ import annotations

from pathlib import Path
from typing import List, Union

from depresolve.modules.dependency.domain import LAYOUT_FLAT, LAYOUT_MAVEN, ArtifactCoordinates
from depresolve.modules.dependency.util import join_path


class LocalDependencyResolver:
    """Compute where an artifact should live under ``base_dir``.

    Existence on disk is not checked; callers that need it test the returned path.
    """

    def __init__(self, base_dir: Union[str, Path] = ".", layout: str = LAYOUT_FLAT) -> None:
        if layout not in (LAYOUT_FLAT, LAYOUT_MAVEN):
            raise ValueError(f"unknown dependency layout {layout!r}")
        self.base_dir = Path(base_dir)
        self.layout = layout

    def resolve_one(self, coordinates: ArtifactCoordinates) -> Path:
        if self.layout == LAYOUT_MAVEN:
            return join_path(self.base_dir, *coordinates.path_segments)
        return join_path(self.base_dir, coordinates.file_name)

    def resolve_all(self, coordinates: ArtifactCoordinates) -> List[Path]:
        classifiers = coordinates.classifiers
        if not classifiers:
            return [self.resolve_one(coordinates)]
        return [self.resolve_one(coordinates.with_classifier(name)) for name in classifiers]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self.base_dir)!r}, layout={self.layout!r})"
