"""
Haste Store — Single Entry Point
==================================

What:  The catch-all endpoint every non-health request goes through.
Why:   Paths like POST /DOCUMENTS, /documents/abc.txt and arbitrary SPA paths
       do not map cleanly onto FastAPI path templates; one endpoint plus the
       pure classify() keeps the routing rules in one testable function.
How:   classify(method, raw path) → invoke exactly one handler.

Registered with register(app) as a plain Starlette route with no method
list, so TRACE, PROPFIND and any custom verb reach classify() too.

Collaborators (DocumentStore, AssetService) are read from app.state, where
create_app() places them.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import Response

from haste.routes import documents, static
from haste.routes.router import RouteKind, classify
from haste.services.asset_service import AssetService
from haste.services.document_store import DocumentStore

logger = logging.getLogger(__name__)

CATCH_ALL_PATH = "/{full_path:path}"


def get_document_store(request: Request) -> DocumentStore:
    return request.app.state.document_store


def get_asset_service(request: Request) -> AssetService:
    return request.app.state.asset_service


def routing_path(request: Request) -> str:
    """
    Path as sent by the client, still percent-encoded.

    url.path is decoded, which would turn /documents/a%2Fb into three
    segments. Asset lookup keeps using the decoded path.
    """
    raw_path = request.scope.get("raw_path")
    if not raw_path:
        return request.url.path
    # Some ASGI clients leave the query string on raw_path
    return raw_path.decode("latin-1").split("?", 1)[0]


async def dispatch(request: Request) -> Response:
    path = routing_path(request)
    route = classify(request.method, path)
    logger.debug("%s %s → %s", request.method, path, route.kind.value)

    if route.kind is RouteKind.CREATE_DOCUMENT:
        return await documents.create_document(request, get_document_store(request))
    if route.kind is RouteKind.GET_DOCUMENT:
        return await documents.get_document(route.document_id or "", get_document_store(request))
    if route.kind is RouteKind.GET_DOCUMENT_RAW:
        return await documents.get_document_raw(route.document_id or "", get_document_store(request))
    return await static.serve_static(
        request, get_asset_service(request), request.app.state.static_index
    )


def register(app: FastAPI) -> None:
    """Mount the catch-all. Call after every other router is included."""
    app.add_route(CATCH_ALL_PATH, dispatch, methods=None, include_in_schema=False)
