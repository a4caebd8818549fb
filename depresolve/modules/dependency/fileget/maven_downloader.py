"""HTTP client that fetches artifacts from a Maven-layout repository."""

from __future__ import annotations

import logging
import os
import tempfile
import time
from pathlib import Path
from typing import TYPE_CHECKING, Optional

import httpx

from depresolve.modules.dependency.domain import ArtifactCoordinates

if TYPE_CHECKING:
    from depresolve.settings import Settings

_CHUNK_SIZE = 65536
_UNKNOWN_SIZE_LOG_STEP = 5 * 1024 * 1024


def _content_length(headers: httpx.Headers) -> int:
    """Declared body size, 0 when absent or unparsable."""

    try:
        return max(int(headers.get("content-length") or 0), 0)
    except ValueError:
        return 0


class MavenDownloader:
    """Download artifacts from a remote Maven repository into a local directory."""

    def __init__(self, settings: Settings, client: Optional[httpx.Client] = None) -> None:
        self.settings = settings
        self.base_url = settings.repo_url.rstrip("/")
        self.log = logging.getLogger(self.__class__.__name__)
        auth = None
        if settings.repo_username and settings.repo_password:
            auth = (settings.repo_username, settings.repo_password)
        self._auth = auth
        self._client = client or httpx.Client(
            timeout=settings.download_timeout, follow_redirects=True
        )

    def build_artifact_url(self, coords: ArtifactCoordinates) -> str:
        path = "/".join(coords.path_segments)
        return f"{self.base_url}/{path}"

    def download(self, coords: ArtifactCoordinates, target: Path, *, force: bool = False) -> Path:
        """Fetch ``coords`` into ``target`` unless it is already there.

        The body is streamed into a temporary sibling file and renamed into
        place, so a partial download never appears at ``target``.
        """

        if target.exists() and not force:
            self.log.info("Reusing cached artifact %s -> %s", coords, target)
            return target

        url = self.build_artifact_url(coords)
        target.parent.mkdir(parents=True, exist_ok=True)
        self.log.info("Downloading artifact %s url=%s", coords, url)
        start_time = time.time()
        downloaded = 0
        fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".part", dir=target.parent)
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as fh, self._client.stream("GET", url, auth=self._auth) as response:
                response.raise_for_status()
                total = _content_length(response.headers)
                next_percent = 10
                next_bytes_logged = _UNKNOWN_SIZE_LOG_STEP
                for chunk in response.iter_bytes(_CHUNK_SIZE):
                    if not chunk:
                        continue
                    fh.write(chunk)
                    downloaded += len(chunk)
                    if total:
                        percent = int(downloaded * 100 / total)
                        if percent >= next_percent:
                            self.log.debug(
                                "Download progress %s %s%% (%d/%d bytes)", coords, percent, downloaded, total
                            )
                            next_percent = (percent // 10 + 1) * 10
                    elif downloaded >= next_bytes_logged:
                        self.log.debug("Download progress %s %d bytes", coords, downloaded)
                        next_bytes_logged += _UNKNOWN_SIZE_LOG_STEP
            tmp_path.replace(target)
        finally:
            tmp_path.unlink(missing_ok=True)

        elapsed = max(time.time() - start_time, 1e-3)
        speed_mb_s = (downloaded / 1024 / 1024) / elapsed
        self.log.info(
            "Downloaded artifact %s -> %s (%d bytes, %.2f MB/s, %.2fs)",
            coords,
            target,
            downloaded,
            speed_mb_s,
            elapsed,
        )
        return target

    def close(self) -> None:
        self._client.close()
