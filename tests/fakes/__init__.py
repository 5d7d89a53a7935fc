"""Shared test doubles — schema cache backends."""

from __future__ import annotations

from fixedwidth.cache.memory_backend import MemorySchemaCache, NullSchemaCache
from fixedwidth.core.types import CacheKey
from fixedwidth.models.column import ResolvedSchema


class RecordingSchemaCache(MemorySchemaCache):
    """MemorySchemaCache that counts lookups and stores."""

    def __init__(self) -> None:
        super().__init__()
        self.gets = 0
        self.puts = 0

    def get(self, key: CacheKey) -> ResolvedSchema | None:
        self.gets += 1
        return super().get(key)

    def put(self, key: CacheKey, schema: ResolvedSchema) -> ResolvedSchema:
        self.puts += 1
        return super().put(key, schema)


__all__ = ["MemorySchemaCache", "NullSchemaCache", "RecordingSchemaCache"]
