"""Remote artifact retrieval."""

from .cached_maven import CachedMavenDependencyResolver, create_cached_maven_resolver
from .maven_downloader import MavenDownloader

__all__ = ["CachedMavenDependencyResolver", "MavenDownloader", "create_cached_maven_resolver"]
