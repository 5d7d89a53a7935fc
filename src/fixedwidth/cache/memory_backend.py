"""In-memory schema cache backends."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fixedwidth.core.types import CacheKey

if TYPE_CHECKING:
    from fixedwidth.models.column import ResolvedSchema


class MemorySchemaCache:
    """Dict-backed ISchemaCache shared by every decoder in the process."""

    def __init__(self) -> None:
        self._store: dict[CacheKey, ResolvedSchema] = {}

    def get(self, key: CacheKey) -> ResolvedSchema | None:
        return self._store.get(key)

    def put(self, key: CacheKey, schema: ResolvedSchema) -> ResolvedSchema:
        # setdefault is atomic under the GIL: the first resolution wins.
        return self._store.setdefault(key, schema)

    def clear(self) -> None:
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)


class NullSchemaCache:
    """ISchemaCache that never stores; every decode re-resolves."""

    def get(self, key: CacheKey) -> ResolvedSchema | None:
        return None

    def put(self, key: CacheKey, schema: ResolvedSchema) -> ResolvedSchema:
        return schema

    def clear(self) -> None:
        pass
