"""Path helpers used while assembling resolvers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional, Union
from urllib.parse import unquote, urlparse
from urllib.request import url2pathname

PathLike = Union[str, "os.PathLike[str]"]


def is_within(base: PathLike, target: PathLike) -> bool:
    """True when ``target`` names ``base`` or a path below it, lexically."""

    base_norm = os.path.normpath(os.fspath(base))
    target_norm = os.path.normpath(os.fspath(target))
    if os.path.isabs(base_norm) != os.path.isabs(target_norm):
        return False
    if base_norm == os.curdir:
        return target_norm != os.pardir and not target_norm.startswith(os.pardir + os.sep)
    try:
        return os.path.commonpath([base_norm, target_norm]) == base_norm
    except ValueError:
        # different drives
        return False


def join_path(base: PathLike, *parts: str) -> Path:
    """Join ``parts`` under ``base``, dropping a leading ``./`` from the result.

    Raises ``ValueError`` when the result would escape ``base``.
    """

    base_str = os.fspath(base)
    joined = os.path.join(base_str, *parts)
    if not is_within(base_str, joined):
        raise ValueError(f"{joined!r} escapes {base_str!r}")
    dot_slash = "." + os.sep
    if joined.startswith(dot_slash):
        joined = joined[len(dot_slash) :]
    return Path(joined)


def path_from_url(url: str) -> Path:
    """Convert a ``file:`` URL to a local path."""

    parsed = urlparse(url)
    if parsed.scheme != "file":
        raise ValueError(f"not a file URL: {url}")
    location = parsed.path
    if parsed.netloc and parsed.netloc != "localhost":
        location = f"//{parsed.netloc}{location}"
    return Path(url2pathname(unquote(location)))


def find_on_search_path(name: str, search_path: Iterable[str]) -> Optional[Path]:
    """Return the first regular file called ``name`` under ``search_path``.

    An empty entry stands for the current working directory, as in ``sys.path``.
    Entries that are not directories (zip archives, missing paths) are skipped.
    """

    for entry in search_path:
        directory = Path(entry or os.getcwd())
        if not directory.is_dir():
            continue
        candidate = directory / name
        if candidate.is_file():
            return candidate.resolve()
    return None
