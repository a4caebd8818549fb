import os
from pathlib import Path

import pytest

from depresolve.modules.dependency.domain import (
    ArtifactCoordinates,
    ArtifactNotFoundError,
    ResolverConfigurationError,
)
from depresolve.modules.dependency.resolver import LocalDependencyResolver, PropertiesDependencyResolver

BAR = ArtifactCoordinates("org.foo", "bar", "1.0")
MISSING = ArtifactCoordinates("org.foo", "nope", "9.9")


def write_properties(tmp_path: Path, text: str, name: str = "deps.properties") -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_resolve_one_returns_mapped_path(tmp_path):
    resolver = PropertiesDependencyResolver(write_properties(tmp_path, "org.foo:bar:1.0 = /libs/bar-1.0.jar\n"))
    assert resolver.resolve_one(BAR) == Path("/libs/bar-1.0.jar")
    assert BAR in resolver
    assert MISSING not in resolver


def test_resolve_all_keeps_recorded_order(tmp_path):
    value = os.pathsep.join(["/libs/bar-1.0.jar", "/libs/bar-1.0-sources.jar"])
    resolver = PropertiesDependencyResolver(write_properties(tmp_path, f"org.foo:bar:1.0={value}\n"))
    assert resolver.resolve_all(BAR) == [Path("/libs/bar-1.0.jar"), Path("/libs/bar-1.0-sources.jar")]
    assert resolver.resolve_one(BAR) == Path("/libs/bar-1.0.jar")


def test_relative_paths_resolve_against_properties_dir(tmp_path):
    resolver = PropertiesDependencyResolver(write_properties(tmp_path, "org.foo:bar:1.0=libs/bar.jar\n"))
    assert resolver.resolve_one(BAR) == tmp_path / "libs" / "bar.jar"


def test_classifier_is_part_of_the_key(tmp_path):
    text = "org.foo:bar:1.0=/libs/bar.jar\norg.foo:bar:1.0:sources=/libs/bar-src.jar\n"
    resolver = PropertiesDependencyResolver(write_properties(tmp_path, text))
    assert resolver.resolve_one(BAR.with_classifier("sources")) == Path("/libs/bar-src.jar")


def test_missing_key_without_delegate_names_coordinate(tmp_path):
    resolver = PropertiesDependencyResolver(write_properties(tmp_path, "org.foo:bar:1.0=/libs/bar.jar\n"))
    with pytest.raises(ArtifactNotFoundError) as excinfo:
        resolver.resolve_one(MISSING)
    assert "org.foo:nope:9.9" in str(excinfo.value)
    assert excinfo.value.coordinates == MISSING
    with pytest.raises(ArtifactNotFoundError):
        resolver.resolve_all(MISSING)


def test_missing_key_falls_back_to_delegate(tmp_path):
    delegate = LocalDependencyResolver(tmp_path / "deps")
    resolver = PropertiesDependencyResolver(
        write_properties(tmp_path, "org.foo:bar:1.0=/libs/bar.jar\n"), delegate
    )
    assert resolver.resolve_one(MISSING) == tmp_path / "deps" / "nope-9.9.jar"
    assert resolver.resolve_all(MISSING) == [tmp_path / "deps" / "nope-9.9.jar"]
    assert resolver.resolve_one(BAR) == Path("/libs/bar.jar")


def test_mapping_is_read_only(tmp_path):
    resolver = PropertiesDependencyResolver(write_properties(tmp_path, "org.foo:bar:1.0=/libs/bar.jar\n"))
    with pytest.raises(TypeError):
        resolver.mapping["org.foo:bar:1.0"] = (Path("/elsewhere.jar"),)


def test_unreadable_resource_is_configuration_error(tmp_path):
    missing = tmp_path / "absent.properties"
    with pytest.raises(ResolverConfigurationError) as excinfo:
        PropertiesDependencyResolver(missing)
    assert str(missing) in str(excinfo.value)
    assert excinfo.value.source == str(missing)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_malformed_resource_is_configuration_error(tmp_path):
    with pytest.raises(ResolverConfigurationError):
        PropertiesDependencyResolver(write_properties(tmp_path, "org.foo:bar:1.0=\\u12\n"))


def test_entry_without_path_is_configuration_error(tmp_path):
    with pytest.raises(ResolverConfigurationError) as excinfo:
        PropertiesDependencyResolver(write_properties(tmp_path, "org.foo:bar:1.0=\n"))
    assert "org.foo:bar:1.0" in str(excinfo.value)
