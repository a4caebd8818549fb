"""Dependency resolution module exports."""

from .domain import ArtifactCoordinates, ArtifactNotFoundError, ResolverConfigurationError
from .resolver import ChainedDependencyResolver, ResolutionChainBuilder

__all__ = [
    "ArtifactCoordinates",
    "ArtifactNotFoundError",
    "ChainedDependencyResolver",
    "ResolutionChainBuilder",
    "ResolverConfigurationError",
]
