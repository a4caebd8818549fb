"""Resolver strategies and chain assembly."""

from .base import DependencyResolver
from .chain import ChainedDependencyResolver, ResolutionChainBuilder
from .local import LocalDependencyResolver
from .properties import PropertiesDependencyResolver
from .registry import ResolverFactory, ResolverRegistry

__all__ = [
    "ChainedDependencyResolver",
    "DependencyResolver",
    "LocalDependencyResolver",
    "PropertiesDependencyResolver",
    "ResolutionChainBuilder",
    "ResolverFactory",
    "ResolverRegistry",
]
