"""
Haste Store — Document Handlers
=================================

What:  Create a document, read it as JSON, read it as raw text.
Why:   These are the three paste API operations behind the dispatch endpoint.
How:   Each handler takes the request (or the extracted id) and the
       DocumentStore, and builds the response. No business rules live here.

Response shapes:
    create    → {"key": "<key>"}                       application/json
    get       → {"data": "<text>", "key": "<key>"}     application/json
    get raw   → <text>                                 text/plain
    miss      → {"message": "Document not found."}     application/json, 200

Why a miss is 200:
    Existing clients read the `message` field to detect a miss. StoreError
    from the DocumentStore is not caught here; the global handler turns it
    into a 500.
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from haste.schemas.document import CreateDocumentResponse, MessageResponse
from haste.services.document_store import DocumentStore

logger = logging.getLogger(__name__)


def not_found_response() -> JSONResponse:
    return JSONResponse(content=MessageResponse().model_dump())


async def create_document(request: Request, store: DocumentStore) -> Response:
    """
    Store the request body as a new document.

    The body is decoded as UTF-8; undecodable bytes are replaced rather than
    rejected. Empty bodies are stored as empty documents.
    """
    raw = await request.body()
    content = raw.decode("utf-8", errors="replace")

    key = await store.create(content)
    return JSONResponse(content=CreateDocumentResponse(key=key).model_dump())


async def get_document(document_id: str, store: DocumentStore) -> Response:
    document = await store.get(document_id)
    if document is None:
        return not_found_response()
    return JSONResponse(content=document.model_dump())


async def get_document_raw(document_id: str, store: DocumentStore) -> Response:
    document = await store.get(document_id)
    if document is None:
        return not_found_response()
    return PlainTextResponse(content=document.data)
