"""Domain objects for dependency resolution."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from .constants import DEFAULT_EXTENSION

_FORBIDDEN_CHARS = ("/", "\\", "\x00")


@dataclass(frozen=True)
class ArtifactCoordinates:
    """Represents a Maven-style artifact coordinate.

    The lookup key (``short_name``) uses the Gradle notation
    ``group:artifact:version[:classifier][@extension]``; the extension only
    appears when it differs from ``jar``.
    """

    group_id: str
    artifact_id: str
    version: str
    classifier: Optional[str] = None
    extension: str = DEFAULT_EXTENSION

    def __post_init__(self) -> None:
        missing = [
            name
            for name in ("group_id", "artifact_id", "version")
            if not (getattr(self, name) or "").strip()
        ]
        if missing:
            raise ValueError(f"artifact coordinates require {', '.join(missing)}")
        if not self.extension:
            object.__setattr__(self, "extension", DEFAULT_EXTENSION)
        if self.classifier == "":
            object.__setattr__(self, "classifier", None)

        # fields become file and directory names
        for name in ("group_id", "artifact_id", "version", "classifier", "extension"):
            value = getattr(self, name)
            if value is None:
                continue
            if any(char in value for char in _FORBIDDEN_CHARS) or ".." in value:
                raise ValueError(f"{name} {value!r} must not contain path separators or '..'")
        if self.group_id.startswith(".") or self.group_id.endswith("."):
            raise ValueError(f"group_id {self.group_id!r} must not start or end with '.'")

    @classmethod
    def parse(cls, text: str) -> "ArtifactCoordinates":
        """Parse ``group:artifact:version[:classifier][@extension]``."""

        notation = (text or "").strip()
        extension = DEFAULT_EXTENSION
        if "@" in notation:
            notation, extension = notation.rsplit("@", 1)
            if not extension:
                raise ValueError(f"empty extension in coordinate {text!r}")
        parts = notation.split(":")
        if len(parts) not in (3, 4):
            raise ValueError(
                f"coordinate {text!r} must look like group:artifact:version[:classifier][@extension]"
            )
        classifier = parts[3] if len(parts) == 4 else None
        if classifier == "":
            raise ValueError(f"empty classifier in coordinate {text!r}")
        return cls(parts[0], parts[1], parts[2], classifier=classifier, extension=extension)

    @property
    def short_name(self) -> str:
        key = f"{self.group_id}:{self.artifact_id}:{self.version}"
        if self.classifier:
            key += f":{self.classifier}"
        if self.extension != DEFAULT_EXTENSION:
            key += f"@{self.extension}"
        return key

    @property
    def classifiers(self) -> Tuple[str, ...]:
        """Classifiers explicitly requested, in request order."""

        if not self.classifier:
            return ()
        return tuple(part.strip() for part in self.classifier.split(",") if part.strip())

    @property
    def file_name(self) -> str:
        name = f"{self.artifact_id}-{self.version}"
        if self.classifier:
            name += f"-{self.classifier}"
        return f"{name}.{self.extension}"

    @property
    def path_segments(self) -> List[str]:
        group_path = self.group_id.replace(".", "/")
        return [group_path, self.artifact_id, self.version, self.file_name]

    def with_classifier(self, classifier: Optional[str]) -> "ArtifactCoordinates":
        return replace(self, classifier=classifier)

    def without_classifier(self) -> "ArtifactCoordinates":
        return replace(self, classifier=None)

    def __str__(self) -> str:
        return self.short_name
