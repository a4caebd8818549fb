"""Name-based lookup of resolver implementations."""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING, Callable, Dict, List

from depresolve.modules.dependency.domain import DEFAULT_REMOTE_RESOLVER, ResolverConfigurationError

from .base import DependencyResolver

if TYPE_CHECKING:
    from depresolve.settings import Settings

log = logging.getLogger(__name__)

ResolverFactory = Callable[["Settings"], DependencyResolver]


def _cached_maven_factory(settings: Settings) -> DependencyResolver:
    # imported here so offline chains never load the HTTP stack
    from depresolve.modules.dependency.fileget import create_cached_maven_resolver

    return create_cached_maven_resolver(settings)


class ResolverRegistry:
    """Maps resolver names to factories.

    Names that are not registered may be given as ``package.module:attribute``;
    the attribute is imported and called with the settings.
    """

    def __init__(self) -> None:
        self._factories: Dict[str, ResolverFactory] = {}

    def register(self, name: str, factory: ResolverFactory) -> None:
        self._factories[name] = factory

    def names(self) -> List[str]:
        return sorted(self._factories)

    def _lookup(self, name: str) -> ResolverFactory:
        if name in self._factories:
            return self._factories[name]
        module_name, sep, attribute = name.partition(":")
        if not sep or not module_name or not attribute:
            raise ResolverConfigurationError(
                f"unknown resolver {name!r}; registered: {', '.join(self.names()) or '-'}",
                source=name,
            )
        try:
            module = importlib.import_module(module_name)
        except ImportError as exc:
            raise ResolverConfigurationError(f"couldn't import resolver module {module_name!r}: {exc}", source=name) from exc
        try:
            factory = getattr(module, attribute)
        except AttributeError as exc:
            raise ResolverConfigurationError(f"{module_name!r} has no resolver {attribute!r}", source=name) from exc
        if not callable(factory):
            raise ResolverConfigurationError(f"resolver {name!r} is not callable", source=name)
        return factory

    def create(self, name: str, settings: Settings) -> DependencyResolver:
        factory = self._lookup(name)
        try:
            resolver = factory(settings)
        except ResolverConfigurationError:
            raise
        except Exception as exc:  # noqa: BLE001
            raise ResolverConfigurationError(f"couldn't create resolver {name!r}: {exc}", source=name) from exc
        if not isinstance(resolver, DependencyResolver):
            raise ResolverConfigurationError(
                f"resolver {name!r} produced {type(resolver).__name__}, which lacks resolve_one/resolve_all",
                source=name,
            )
        log.debug("Created resolver %s -> %r", name, resolver)
        return resolver

    @classmethod
    def default(cls) -> "ResolverRegistry":
        registry = cls()
        registry.register(DEFAULT_REMOTE_RESOLVER, _cached_maven_factory)
        return registry
