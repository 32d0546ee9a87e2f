"""
Haste Store — Application Package Initializer
===============================================

What: Marks the `haste` directory as a Python package.
Why:  Enables module imports like `from haste.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The service is a small paste store sharing one entry point with a static site:

    ┌─────────────────────────────────────┐
    │   Dispatch (single catch-all route) │  ← classify(method, path) → one handler
    ├─────────────────────────────────────┤
    │      Handlers (documents, static)   │  ← HTTP response shapes
    ├─────────────────────────────────────┤
    │  Services (DocumentStore, Assets)   │  ← key generation, read/write contract
    ├─────────────────────────────────────┤
    │  KeyValueStore (memory | database)  │  ← swappable backing store
    └─────────────────────────────────────┘

    Each layer receives the one below it explicitly, so tests can swap the
    backing store or the static root without touching global state.
"""

__version__ = "1.0.0"
