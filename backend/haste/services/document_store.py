"""
Haste Store — Document Store (Create/Read Contract)
=====================================================

What:  Turns the raw key-value capability into the document contract:
       create(text) → key, get(key) → Document | None.
Why:   Keeps key generation and the "what counts as a document" rules in one
       place, independent of HTTP and of the storage backend.
How:   Receives its KeyValueStore and KeyGenerator explicitly.

Contract:
    create():
        1. Generate a key (no existence check — collisions overwrite)
        2. One put() to the backing store
        3. Return the key
    get():
        - Looks up the lowercase key
        - Missing entry (or empty key) → None
        - Present entry, even an empty string → Document(data, key)

Error Handling:
    StoreError from the backing store propagates unchanged. Anything else the
    backing store raises is wrapped in StoreError so the global handler can
    answer with a 500 without leaking internals.
"""

import logging
from typing import Optional

from haste.exceptions import StoreError
from haste.schemas.document import Document
from haste.services.key_generator import KeyGenerator
from haste.services.kv_store import KeyValueStore

logger = logging.getLogger(__name__)


class DocumentStore:
    """Create and read documents over an injected KeyValueStore."""

    def __init__(self, kv: KeyValueStore, key_generator: Optional[KeyGenerator] = None):
        self.kv = kv
        self.key_generator = key_generator or KeyGenerator()

    async def create(self, content: str) -> str:
        """
        Store `content` under a freshly generated key.

        Args:
            content: Document text; may be empty.

        Returns:
            The generated key.

        Raises:
            StoreError: The backing store rejected or failed the write.
        """
        key = self.key_generator.generate()
        try:
            await self.kv.put(key, content)
        except StoreError:
            raise
        except Exception as e:
            logger.error("Unexpected error storing document %s: %s", key, str(e), exc_info=True)
            raise StoreError(
                message="Could not save the document. Please try again.",
                context={"key": key, "error_type": type(e).__name__},
            ) from e

        logger.info("Document %s created (%d chars)", key, len(content))
        return key

    async def get(self, key: str) -> Optional[Document]:
        """
        Fetch a document by key.

        Args:
            key: Lookup key; compared in lowercase. An empty key is a miss.

        Returns:
            Document with the stored text and the lowercase key, or None.

        Raises:
            StoreError: The backing store could not be read.
        """
        lookup = key.lower()
        if not lookup:
            return None

        try:
            data = await self.kv.get(lookup)
        except StoreError:
            raise
        except Exception as e:
            logger.error("Unexpected error reading document %s: %s", lookup, str(e), exc_info=True)
            raise StoreError(
                message="Could not retrieve the document. Please try again.",
                context={"key": lookup, "error_type": type(e).__name__},
            ) from e

        if data is None:
            logger.debug("Document %s not found", lookup)
            return None
        return Document(data=data, key=lookup)
