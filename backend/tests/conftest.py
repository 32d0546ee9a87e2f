"""
Haste Store — Test Configuration (conftest.py)
================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Every test builds its own DocumentStore and static root, so no test
       touches a real database or the ./static directory.

Fixture Hierarchy (all function-scoped):
    ├── memory_kv: empty MemoryKeyValueStore
    ├── seeded_rng: deterministic random.Random for predictable keys
    ├── document_store: DocumentStore over memory_kv
    ├── static_root: temp directory with index.html, app.js, about page
    ├── asset_service: AssetService over static_root
    └── test_client: HTTPX AsyncClient bound to a freshly created app
"""

import os
import random

# Override settings for testing BEFORE any haste imports
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from haste.services.asset_service import AssetService
from haste.services.document_store import DocumentStore
from haste.services.key_generator import KeyGenerator
from haste.services.kv_store import MemoryKeyValueStore

INDEX_HTML = b"<!doctype html><html><body><div id=\"app\">haste</div></body></html>"
APP_JS = b"console.log('haste');"
ABOUT_HTML = b"<html><body>about</body></html>"


@pytest.fixture
def memory_kv():
    return MemoryKeyValueStore()


@pytest.fixture
def seeded_rng():
    """Deterministic PRNG so generated keys are reproducible within a test."""
    return random.Random(1234)


@pytest.fixture
def document_store(memory_kv):
    return DocumentStore(memory_kv, KeyGenerator(length=10))


@pytest.fixture
def static_root(tmp_path):
    """
    Provides a small pre-built site:

        static/
        ├── index.html
        ├── app.js
        └── about/
            └── index.html
    """
    root = tmp_path / "static"
    root.mkdir()
    (root / "index.html").write_bytes(INDEX_HTML)
    (root / "app.js").write_bytes(APP_JS)
    (root / "about").mkdir()
    (root / "about" / "index.html").write_bytes(ABOUT_HTML)
    return root


@pytest.fixture
def asset_service(static_root):
    return AssetService(str(static_root))


@pytest_asyncio.fixture
async def test_client(document_store, asset_service):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_create(test_client):
            response = await test_client.post("/documents", content="hi")
    """
    from haste.main import create_app

    app = create_app(document_store=document_store, asset_service=asset_service)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
