"""HTTP endpoints exposing the resolver chain."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import FileResponse

from depresolve.modules.dependency import (
    ArtifactCoordinates,
    ArtifactNotFoundError,
    ChainedDependencyResolver,
)

router = APIRouter(prefix="/artifacts", tags=["artifacts"])


def get_resolver(request: Request) -> ChainedDependencyResolver:
    container = getattr(request.app.state, "container", None)
    if not container or not getattr(container, "resolver", None):
        raise HTTPException(status_code=500, detail="Resolver chain not initialized.")
    return container.resolver


def parse_coordinate(
    coordinate: str = Query(..., description="group:artifact:version[:classifier][@extension]"),
) -> ArtifactCoordinates:
    try:
        return ArtifactCoordinates.parse(coordinate)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


# Plain ``def`` endpoints: resolution may block on a remote download, so they
# run in the threadpool.
@router.get("/resolve")
def resolve(
    all_variants: bool = Query(False, alias="all"),
    coords: ArtifactCoordinates = Depends(parse_coordinate),
    resolver: ChainedDependencyResolver = Depends(get_resolver),
) -> Dict[str, Any]:
    try:
        paths = resolver.resolve_all(coords) if all_variants else [resolver.resolve_one(coords)]
    except ArtifactNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return {"coordinate": coords.short_name, "paths": [str(path) for path in paths]}


@router.get("/file")
def download(
    coords: ArtifactCoordinates = Depends(parse_coordinate),
    resolver: ChainedDependencyResolver = Depends(get_resolver),
):
    try:
        path = resolver.resolve_one(coords)
    except ArtifactNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    if not path.is_file():
        raise HTTPException(status_code=404, detail=f"{coords.short_name} resolved to missing file {path}")
    return FileResponse(path, media_type="application/octet-stream", filename=path.name)


@router.get("/chain")
def describe_chain(resolver: ChainedDependencyResolver = Depends(get_resolver)) -> Dict[str, str]:
    return {"resolver": repr(resolver)}
