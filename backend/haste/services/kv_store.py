"""
Haste Store — Key-Value Backing Stores
========================================

What:  The storage capability behind DocumentStore: put text under a key, get
       it back, or learn that the key is missing.
Why:   DocumentStore receives its store explicitly, so the process-local memory
       store, the SQL store, and test doubles are interchangeable.
How:   KeyValueStore is the abstract contract; build_kv_store() picks the
       implementation named by settings.storage_backend.

Implementations:
    - MemoryKeyValueStore: dict in process memory (default, lost on restart)
    - SQLKeyValueStore:    one row per key in the `documents` table

Contract shared by all implementations:
    - put() overwrites silently; there is no "already exists" error
    - get() returns None for a missing key, never raises for it
    - connectivity or write failures raise StoreError
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from haste.config import Settings
from haste.exceptions import StoreError
from haste.models.document import DocumentRecord

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """Abstract text key-value store."""

    @abstractmethod
    async def put(self, key: str, value: str) -> None:
        """
        Store `value` under `key`, replacing any previous value.

        Raises:
            StoreError: The write could not be completed.
        """
        ...

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """
        Return the text stored under `key`, or None when there is none.

        Raises:
            StoreError: The store could not be reached.
        """
        ...

    @abstractmethod
    async def ping(self) -> bool:
        """Lightweight connectivity check used by GET /health."""
        ...


class MemoryKeyValueStore(KeyValueStore):
    """
    Process-local dict store.

    Safe under asyncio without locks: put/get never await between reading and
    writing the dict. Not shared between worker processes.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    async def put(self, key: str, value: str) -> None:
        self._data[key] = value

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def ping(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self._data)


class SQLKeyValueStore(KeyValueStore):
    """
    Async SQLAlchemy store over the `documents` table.

    Each call opens its own short session; there is no transaction spanning
    requests. SQLAlchemy errors are wrapped in StoreError so that internals
    (SQL text, constraint names) never reach the client.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def put(self, key: str, value: str) -> None:
        try:
            async with self._session_factory() as session:
                # merge = insert or overwrite; key reuse is not an error
                await session.merge(DocumentRecord(key=key, data=value))
                await session.commit()
        except SQLAlchemyError as e:
            logger.error("Database error writing document %s: %s", key, str(e))
            raise StoreError(
                message="Could not save the document. Please try again.",
                context={"key": key, "error_type": type(e).__name__},
            ) from e

    async def get(self, key: str) -> Optional[str]:
        try:
            async with self._session_factory() as session:
                record = await session.get(DocumentRecord, key)
        except SQLAlchemyError as e:
            logger.error("Database error reading document %s: %s", key, str(e))
            raise StoreError(
                message="Could not retrieve the document. Please try again.",
                context={"key": key, "error_type": type(e).__name__},
            ) from e
        if record is None:
            return None
        return record.data

    async def ping(self) -> bool:
        try:
            async with self._session_factory() as session:
                await session.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.warning("Database ping failed: %s", str(e))
            return False


def build_kv_store(settings: Settings) -> KeyValueStore:
    """Create the backing store selected by settings.storage_backend."""
    if settings.storage_backend == "database":
        from haste.database import get_session_factory

        logger.info("Using database document store")
        return SQLKeyValueStore(get_session_factory())
    logger.info("Using in-memory document store (documents are lost on restart)")
    return MemoryKeyValueStore()
