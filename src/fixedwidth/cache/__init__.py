"""Pluggable schema cache backends behind the ISchemaCache Protocol."""

from __future__ import annotations

from fixedwidth.cache.memory_backend import MemorySchemaCache, NullSchemaCache
from fixedwidth.core.config import AppSettings
from fixedwidth.core.protocols import ISchemaCache


def create_schema_cache(settings: AppSettings | None = None) -> ISchemaCache:
    """Create the schema cache selected by application settings."""
    if settings is None:
        settings = AppSettings()

    if settings.cache.enabled:
        return MemorySchemaCache()
    return NullSchemaCache()


__all__ = ["MemorySchemaCache", "NullSchemaCache", "create_schema_cache"]
