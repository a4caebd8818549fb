"""Wiring of settings into the long-lived resolver chain."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from .modules.dependency import ChainedDependencyResolver
from .modules.dependency.resolver import ResolverRegistry
from .settings import Settings

log = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Holds the settings and the resolver chain built from them.

    Construction fails with ``ResolverConfigurationError`` when the chain
    cannot be assembled.
    """

    settings: Settings
    registry: Optional[ResolverRegistry] = None
    search_path: Optional[Sequence[str]] = None
    resolver: ChainedDependencyResolver = field(init=False)

    def __post_init__(self) -> None:
        log.info(
            "########### offline=%s deps_properties=%s dependency_dir=%s ############",
            self.settings.offline,
            self.settings.deps_properties or "-",
            self.settings.dependency_dir,
        )
        self.resolver = ChainedDependencyResolver.from_settings(
            self.settings,
            registry=self.registry,
            search_path=self.search_path,
        )
        log.info("Resolver chain ready: %r", self.resolver)

    def close(self) -> None:
        log.info("Closing resolver chain")
        self.resolver.close()
