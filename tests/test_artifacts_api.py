import os
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from depresolve.bootstrap import ServiceContainer
from depresolve.factory import create_app
from depresolve.modules.dependency.domain import DEPS_PROPERTIES_RESOURCE
from depresolve.modules.dependency.resolver import ResolverRegistry
from depresolve.settings import Settings


@pytest.fixture
def client(tmp_path):
    jar = tmp_path / "libs" / "bar-1.0.jar"
    jar.parent.mkdir()
    jar.write_bytes(b"jar-bytes")
    sources = tmp_path / "libs" / "bar-1.0-sources.jar"
    props = tmp_path / "deps.properties"
    props.write_text(
        f"org.foo:bar:1.0 = {jar}{os.pathsep}{sources}\norg.foo:gone:1.0 = {tmp_path / 'gone.jar'}\n",
        encoding="utf-8",
    )
    settings = Settings(_env_file=None, offline=True, deps_properties=str(props))
    app = create_app(settings, container=ServiceContainer(settings, search_path=[]))
    return TestClient(app)


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "UP"}


def test_resolve_one(client, tmp_path):
    resp = client.get("/artifacts/resolve", params={"coordinate": "org.foo:bar:1.0"})
    assert resp.status_code == 200
    assert resp.json() == {"coordinate": "org.foo:bar:1.0", "paths": [str(tmp_path / "libs" / "bar-1.0.jar")]}


def test_resolve_all_variants(client, tmp_path):
    resp = client.get("/artifacts/resolve", params={"coordinate": "org.foo:bar:1.0", "all": "true"})
    assert resp.status_code == 200
    assert resp.json()["paths"] == [
        str(tmp_path / "libs" / "bar-1.0.jar"),
        str(tmp_path / "libs" / "bar-1.0-sources.jar"),
    ]


def test_unknown_coordinate_is_404(client):
    resp = client.get("/artifacts/resolve", params={"coordinate": "org.foo:nope:1.0"})
    assert resp.status_code == 404
    assert "org.foo:nope:1.0" in resp.json()["detail"]


def test_bad_coordinate_is_422(client):
    resp = client.get("/artifacts/resolve", params={"coordinate": "org.foo"})
    assert resp.status_code == 422


def test_file_download(client):
    resp = client.get("/artifacts/file", params={"coordinate": "org.foo:bar:1.0"})
    assert resp.status_code == 200
    assert resp.content == b"jar-bytes"


def test_file_download_of_missing_file_is_404(client):
    resp = client.get("/artifacts/file", params={"coordinate": "org.foo:gone:1.0"})
    assert resp.status_code == 404


def test_chain_description(client):
    resp = client.get("/artifacts/chain")
    assert resp.status_code == 200
    assert "PropertiesDependencyResolver" in resp.json()["resolver"]


@pytest.mark.parametrize("coordinate", ["org.foo:../secret:1@txt", ".etc:passwd:1", "org.foo:bar:1.0@jar/../../x"])
def test_path_traversal_coordinate_is_422(client, tmp_path, coordinate):
    (tmp_path / "secret-1.txt").write_bytes(b"TOP-SECRET")
    resp = client.get("/artifacts/file", params={"coordinate": coordinate})
    assert resp.status_code == 422
    assert b"TOP-SECRET" not in resp.content


class ClosableResolver:
    def __init__(self):
        self.closed = False

    def resolve_one(self, coordinates):
        return Path("/remote") / coordinates.file_name

    def resolve_all(self, coordinates):
        return [self.resolve_one(coordinates)]

    def close(self):
        self.closed = True


def test_shutdown_closes_resolver_chain(tmp_path):
    remote = ClosableResolver()
    registry = ResolverRegistry()
    registry.register("closable", lambda settings: remote)
    override_dir = tmp_path / "classpath"
    override_dir.mkdir()
    (override_dir / DEPS_PROPERTIES_RESOURCE).write_text("org.foo:bar:1.0=/override/bar.jar\n", encoding="utf-8")
    settings = Settings(_env_file=None, remote_resolver="closable")
    container = ServiceContainer(settings, registry=registry, search_path=[str(override_dir)])

    with TestClient(create_app(settings, container=container)) as client:
        resp = client.get("/artifacts/resolve", params={"coordinate": "org.foo:qux:2.0"})
        assert resp.json()["paths"] == [str(Path("/remote/qux-2.0.jar"))]
        assert not remote.closed

    assert remote.closed
