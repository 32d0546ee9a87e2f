"""
Haste Store — Document Store Unit Tests
=========================================

What:  Tests for the create/read document contract.
How:   Uses MemoryKeyValueStore and AsyncMock doubles (no real database).

What we test:
    ✅ Round trip: get(create(c)) returns c under the generated key
    ✅ Repeated reads return identical documents
    ✅ Unknown and empty keys are misses (None)
    ✅ Lookups are case-insensitive and report the lowercase key
    ✅ Key reuse silently overwrites the earlier document
    ✅ Backing store failures surface as StoreError
"""

import random
from unittest.mock import AsyncMock, MagicMock

import pytest

from haste.exceptions import StoreError
from haste.schemas.document import Document
from haste.services.document_store import DocumentStore
from haste.services.key_generator import KeyGenerator
from haste.services.kv_store import KeyValueStore, MemoryKeyValueStore


class TestDocumentStoreCreate:
    """Tests for DocumentStore.create()."""

    @pytest.mark.asyncio
    async def test_create_returns_generated_key(self, document_store, memory_kv):
        key = await document_store.create("hello world")

        assert len(key) == 10
        assert key.isalpha() and key.islower()
        assert await memory_kv.get(key) == "hello world"

    @pytest.mark.asyncio
    async def test_create_accepts_empty_content(self, document_store):
        key = await document_store.create("")

        document = await document_store.get(key)
        assert document == Document(data="", key=key)

    @pytest.mark.asyncio
    async def test_create_writes_once(self):
        kv = MagicMock(spec=KeyValueStore)
        kv.put = AsyncMock()
        store = DocumentStore(kv, KeyGenerator(length=5, rng=random.Random(7)))

        key = await store.create("text")

        kv.put.assert_awaited_once_with(key, "text")

    @pytest.mark.asyncio
    async def test_key_collision_overwrites(self, memory_kv):
        """Two creates drawing the same key: the second silently wins."""
        store = DocumentStore(memory_kv, KeyGenerator(length=4, rng=random.Random(3)))
        first_key = await store.create("first")

        # Replay the same PRNG sequence to force the same key
        store.key_generator = KeyGenerator(length=4, rng=random.Random(3))
        second_key = await store.create("second")

        assert first_key == second_key
        assert len(memory_kv) == 1
        document = await store.get(first_key)
        assert document.data == "second"

    @pytest.mark.asyncio
    async def test_store_error_propagates(self):
        kv = MagicMock(spec=KeyValueStore)
        kv.put = AsyncMock(side_effect=StoreError(message="disk full"))
        store = DocumentStore(kv)

        with pytest.raises(StoreError, match="disk full"):
            await store.create("text")

    @pytest.mark.asyncio
    async def test_unexpected_error_wrapped_in_store_error(self):
        kv = MagicMock(spec=KeyValueStore)
        kv.put = AsyncMock(side_effect=ConnectionError("connection reset"))
        store = DocumentStore(kv)

        with pytest.raises(StoreError) as exc_info:
            await store.create("text")
        assert exc_info.value.context["error_type"] == "ConnectionError"
        assert isinstance(exc_info.value.__cause__, ConnectionError)


class TestDocumentStoreGet:
    """Tests for DocumentStore.get()."""

    @pytest.mark.asyncio
    async def test_round_trip(self, document_store):
        content = "line one\nline two\n\ttabbed ünïcødé"
        key = await document_store.create(content)

        document = await document_store.get(key)

        assert document == Document(data=content, key=key)

    @pytest.mark.asyncio
    async def test_repeated_reads_are_identical(self, document_store):
        key = await document_store.create("stable")

        first = await document_store.get(key)
        second = await document_store.get(key)

        assert first == second

    @pytest.mark.asyncio
    async def test_unknown_key_is_none(self, document_store):
        assert await document_store.get("doesnotexist") is None

    @pytest.mark.asyncio
    async def test_empty_key_is_none(self):
        kv = MagicMock(spec=KeyValueStore)
        kv.get = AsyncMock(return_value="should not be read")
        store = DocumentStore(kv)

        assert await store.get("") is None
        kv.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_lookup_is_case_insensitive(self):
        kv = MemoryKeyValueStore({"abcdef": "content"})
        store = DocumentStore(kv)

        document = await store.get("AbCdEf")

        assert document == Document(data="content", key="abcdef")

    @pytest.mark.asyncio
    async def test_read_failure_wrapped_in_store_error(self):
        kv = MagicMock(spec=KeyValueStore)
        kv.get = AsyncMock(side_effect=TimeoutError("timed out"))
        store = DocumentStore(kv)

        with pytest.raises(StoreError):
            await store.get("abc")

    def test_document_serializes_data_before_key(self):
        assert list(Document(data="x", key="k").model_dump()) == ["data", "key"]
