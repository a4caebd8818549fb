"""Errors raised while building or walking a resolver chain."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .artifact import ArtifactCoordinates


class DependencyResolutionError(RuntimeError):
    """Base class for resolution failures."""


class ResolverConfigurationError(DependencyResolutionError):
    """Raised when a resolver cannot be constructed from its configuration.

    Fatal: surfaces at chain construction time and is never retried.
    """

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        super().__init__(message)
        self.source = source


class ArtifactNotFoundError(DependencyResolutionError, LookupError):
    """Raised when no layer of the chain can locate an artifact."""

    def __init__(self, coordinates: "ArtifactCoordinates", detail: Optional[str] = None) -> None:
        message = f"could not resolve artifact for {coordinates.short_name}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.coordinates = coordinates
