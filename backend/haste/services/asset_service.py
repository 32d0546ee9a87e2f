"""
Haste Store — Static Asset Service
====================================

What:  Serves the pre-built single-page application from a directory.
Why:   The paste API and the static site share one entry point; every request
       the router does not claim ends up here.
How:   Maps the request path to a file under the static root, reads it with
       async file I/O, and returns the body plus response metadata.
Who:   Called by the static fallback handler (routes/static.py).

Path Mapping:
    /                 → /index.html
    /about/           → /about/index.html
    /about            → /about/index.html   (no extension in last segment)
    /assets/app.js    → /assets/app.js

Options:
    AssetOptions.path_rewrite rewrites the request before mapping. The static
    handler uses it to retry a miss with /index.html (SPA fallback).

Security:
    - Only GET and HEAD are served
    - The resolved file must stay inside the static root (no ../ escapes)
"""

import hashlib
import logging
import mimetypes
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional
from urllib.parse import unquote

import aiofiles
from starlette.requests import Request

from haste.exceptions import (
    AssetMethodNotAllowedError,
    AssetNotFoundError,
    AssetStorageError,
)

logger = logging.getLogger(__name__)

SERVABLE_METHODS = {"GET", "HEAD"}


@dataclass(frozen=True)
class AssetRequest:
    """The parts of an HTTP request that asset lookup depends on."""
    method: str
    path: str
    headers: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_request(cls, request: Request) -> "AssetRequest":
        return cls(
            method=request.method.upper(),
            path=request.url.path,
            headers={k.lower(): v for k, v in request.headers.items()},
        )


@dataclass(frozen=True)
class AssetOptions:
    """Lookup options. `path_rewrite` is applied to the request before mapping."""
    path_rewrite: Optional[Callable[[AssetRequest], AssetRequest]] = None


@dataclass
class Asset:
    """A resolved asset: body bytes plus the response metadata to send with it."""
    body: bytes
    status_code: int = 200
    headers: Dict[str, str] = field(default_factory=dict)


def rewrite_to_index(index: str = "index.html") -> Callable[[AssetRequest], AssetRequest]:
    """Build a path_rewrite that points any request at the SPA entry point."""
    target = "/" + index.lstrip("/")

    def _rewrite(request: AssetRequest) -> AssetRequest:
        return replace(request, path=target)

    return _rewrite


def map_path_to_asset(path: str) -> str:
    """Map a URL path to the asset path looked up under the static root."""
    path = unquote(path) or "/"
    if not path.startswith("/"):
        path = "/" + path
    if path.endswith("/"):
        return path + "index.html"
    last_segment = path.rsplit("/", 1)[-1]
    if "." not in last_segment:
        return path + "/index.html"
    return path


class AssetService:
    """
    Directory-backed static asset lookup.

    The static root does not need to exist at construction time; a missing
    root simply makes every lookup an AssetNotFoundError.
    """

    def __init__(self, root: str, cache_control: Optional[str] = None):
        self.root = Path(root).resolve()
        self.cache_control = cache_control
        logger.info("AssetService initialized with root=%s", self.root)

    def _resolve(self, asset_path: str) -> Path:
        candidate = (self.root / asset_path.lstrip("/")).resolve()
        # Security: the file must live under the static root
        if candidate != self.root and self.root not in candidate.parents:
            raise AssetNotFoundError(asset_path, context={"reason": "outside static root"})
        if not candidate.is_file():
            raise AssetNotFoundError(asset_path)
        return candidate

    async def get_asset(
        self,
        request: AssetRequest,
        options: Optional[AssetOptions] = None,
    ) -> Asset:
        """
        Look up the asset for `request`.

        Args:
            request: Method, path and headers of the incoming request.
            options: Optional path_rewrite applied before lookup.

        Returns:
            Asset with body, status (200 or 304) and headers.

        Raises:
            AssetMethodNotAllowedError: Method other than GET/HEAD.
            AssetNotFoundError: No file for the mapped path.
            AssetStorageError: The file could not be read.
        """
        if options is not None and options.path_rewrite is not None:
            request = options.path_rewrite(request)

        if request.method not in SERVABLE_METHODS:
            raise AssetMethodNotAllowedError(request.method)

        asset_path = map_path_to_asset(request.path)
        file_path = self._resolve(asset_path)

        try:
            async with aiofiles.open(file_path, "rb") as f:
                body = await f.read()
        except OSError as e:
            logger.error("Failed to read asset %s: %s", file_path, str(e))
            raise AssetStorageError(
                message=f"could not read {asset_path}",
                context={"path": str(file_path), "error": str(e)},
            ) from e

        media_type, _ = mimetypes.guess_type(file_path.name)
        etag = f'"{hashlib.sha1(body).hexdigest()}"'
        headers = {
            "content-type": media_type or "application/octet-stream",
            "etag": etag,
        }
        if self.cache_control:
            headers["cache-control"] = self.cache_control

        if request.headers.get("if-none-match") == etag:
            return Asset(body=b"", status_code=304, headers=headers)
        if request.method == "HEAD":
            # Same length a GET would send
            headers["content-length"] = str(len(body))
            return Asset(body=b"", status_code=200, headers=headers)
        return Asset(body=body, status_code=200, headers=headers)
