from .artifact import ArtifactCoordinates
from .constants import (
    DEFAULT_EXTENSION,
    DEFAULT_REMOTE_RESOLVER,
    DEPS_PROPERTIES_RESOURCE,
    LAYOUT_FLAT,
    LAYOUT_MAVEN,
    MAVEN_CENTRAL_URL,
)
from .exceptions import (
    ArtifactNotFoundError,
    DependencyResolutionError,
    ResolverConfigurationError,
)

__all__ = [
    "ArtifactCoordinates",
    "ArtifactNotFoundError",
    "DependencyResolutionError",
    "ResolverConfigurationError",
    "DEFAULT_EXTENSION",
    "DEFAULT_REMOTE_RESOLVER",
    "DEPS_PROPERTIES_RESOURCE",
    "LAYOUT_FLAT",
    "LAYOUT_MAVEN",
    "MAVEN_CENTRAL_URL",
]
