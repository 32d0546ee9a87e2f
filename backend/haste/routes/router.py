"""
Haste Store — Request Classification
======================================

What:  Decides which handler serves a request, from its method and path alone.
Why:   One catch-all endpoint receives every request (the paste API and the
       static site share it); this module is the pure, side-effect free
       decision that endpoint makes.
How:   classify(method, path) returns a Route naming the handler and, for
       document reads, the extracted document id.

Rules:
    POST /documents (any case)              → CREATE_DOCUMENT
    GET  /documents/<segment>               → GET_DOCUMENT, id from segment
    GET  /raw/<segment>                     → GET_DOCUMENT_RAW, id from segment
    anything else (incl. /documents/a/b)    → STATIC_ASSET

Id extraction:
    "abc123.txt" → "abc123", "ABC.TXT" → "abc", "" → ""
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class RouteKind(str, Enum):
    CREATE_DOCUMENT = "create_document"
    GET_DOCUMENT = "get_document"
    GET_DOCUMENT_RAW = "get_document_raw"
    STATIC_ASSET = "static_asset"


@dataclass(frozen=True)
class Route:
    kind: RouteKind
    document_id: Optional[str] = None


STATIC_ROUTE = Route(RouteKind.STATIC_ASSET)


def extract_id(segment: str) -> str:
    """Document id from a path segment: text before the first '.', lowercased."""
    return segment.split(".")[0].lower()


def classify(method: str, path: str) -> Route:
    """Select the route for a request. Never raises; unmatched → STATIC_ASSET."""
    lowered = path.lower()

    if method == "POST" and lowered == "/documents":
        return Route(RouteKind.CREATE_DOCUMENT)

    if method == "GET":
        segments = lowered[1:].split("/")
        if len(segments) == 2:
            if segments[0] == "documents":
                return Route(RouteKind.GET_DOCUMENT, extract_id(segments[1]))
            if segments[0] == "raw":
                return Route(RouteKind.GET_DOCUMENT_RAW, extract_id(segments[1]))

    return STATIC_ROUTE
