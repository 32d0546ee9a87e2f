"""
Haste Store — Static Fallback Handler
=======================================

What:  Serves every request the paste API does not claim from the static site.
How:   Two-stage lookup against the AssetService:

    1. Asset for the requested path
       → success: copy body/status/headers, then force the security headers
    2. On AssetError: same request rewritten to /index.html (SPA fallback)
       → success: returned as-is, security headers are NOT re-applied
    3. Both failed: HTTP 500, body = message of the FIRST failure

This is the only path with a local recovery strategy; every other error
propagates to the global exception handlers.
"""

import logging

from fastapi import Request
from fastapi.responses import PlainTextResponse, Response

from haste.exceptions import AssetError
from haste.services.asset_service import (
    Asset,
    AssetOptions,
    AssetRequest,
    AssetService,
    rewrite_to_index,
)

logger = logging.getLogger(__name__)

# Overwritten on every directly matched asset
SECURITY_HEADERS = {
    "X-XSS-Protection": "1; mode=block",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "unsafe-url",
    "Feature-Policy": "none",
}


def asset_response(asset: Asset) -> Response:
    return Response(content=asset.body, status_code=asset.status_code, headers=asset.headers)


async def serve_static(request: Request, assets: AssetService, index: str = "index.html") -> Response:
    asset_request = AssetRequest.from_request(request)

    try:
        asset = await assets.get_asset(asset_request)
    except AssetError as exc:
        try:
            fallback = await assets.get_asset(
                asset_request,
                AssetOptions(path_rewrite=rewrite_to_index(index)),
            )
            return asset_response(fallback)
        except AssetError as retry_exc:
            logger.warning(
                "SPA fallback failed for %s %s: %s",
                asset_request.method,
                asset_request.path,
                retry_exc.message,
            )
        return PlainTextResponse(content=exc.message or str(exc), status_code=500)

    response = asset_response(asset)
    for name, value in SECURITY_HEADERS.items():
        response.headers[name] = value
    return response
