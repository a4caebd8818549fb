from pathlib import Path

import pytest

from depresolve.modules.dependency.domain import ResolverConfigurationError
from depresolve.modules.dependency.fileget import CachedMavenDependencyResolver
from depresolve.modules.dependency.resolver import LocalDependencyResolver, ResolverRegistry
from depresolve.settings import Settings


def build_settings(tmp_path, **overrides) -> Settings:
    defaults = {"cache_dir": str(tmp_path / "cache")}
    defaults.update(overrides)
    return Settings(_env_file=None, **defaults)


def test_default_registry_creates_cached_maven_resolver(tmp_path):
    registry = ResolverRegistry.default()
    resolver = registry.create("cached-maven", build_settings(tmp_path))
    assert isinstance(resolver, CachedMavenDependencyResolver)
    assert resolver.cache_dir == tmp_path / "cache"
    assert registry.names() == ["cached-maven"]


def test_module_attribute_lookup(tmp_path):
    name = "depresolve.modules.dependency.fileget.cached_maven:CachedMavenDependencyResolver"
    resolver = ResolverRegistry().create(name, build_settings(tmp_path))
    assert isinstance(resolver, CachedMavenDependencyResolver)


def test_registered_factory_is_used(tmp_path):
    registry = ResolverRegistry()
    registry.register("local", lambda settings: LocalDependencyResolver(settings.dependency_dir))
    resolver = registry.create("local", build_settings(tmp_path, dependency_dir="/deps"))
    assert resolver.base_dir == Path("/deps")


@pytest.mark.parametrize(
    "name",
    [
        "no-such-resolver",
        "depresolve.no_such_module:Resolver",
        "depresolve.modules.dependency.fileget.cached_maven:Missing",
        "depresolve.modules.dependency.domain.constants:MAVEN_CENTRAL_URL",
    ],
)
def test_failed_lookup_is_configuration_error(tmp_path, name):
    with pytest.raises(ResolverConfigurationError) as excinfo:
        ResolverRegistry.default().create(name, build_settings(tmp_path))
    assert excinfo.value.source == name
    assert name.split(":")[-1] in str(excinfo.value) or name.split(":")[0] in str(excinfo.value)


def test_factory_failure_keeps_cause(tmp_path):
    def broken(settings):
        raise OSError("cache dir not writable")

    registry = ResolverRegistry()
    registry.register("broken", broken)
    with pytest.raises(ResolverConfigurationError) as excinfo:
        registry.create("broken", build_settings(tmp_path))
    assert "cache dir not writable" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_factory_must_return_a_resolver(tmp_path):
    registry = ResolverRegistry()
    registry.register("odd", lambda settings: object())
    with pytest.raises(ResolverConfigurationError):
        registry.create("odd", build_settings(tmp_path))
