"""Protocol interfaces for fixedwidth's pluggable pieces.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from fixedwidth.core.types import CacheKey

if TYPE_CHECKING:
    from fixedwidth.models.column import ResolvedSchema


# ---------------------------------------------------------------------------
# Schema Cache
# ---------------------------------------------------------------------------

@runtime_checkable
class ISchemaCache(Protocol):
    """Process-local store of resolved schemas keyed by (target, shape).

    ``put`` is first-write-wins and returns the schema actually stored, so
    two threads racing to resolve the same key end up sharing one value.
    """

    def get(self, key: CacheKey) -> ResolvedSchema | None: ...

    def put(self, key: CacheKey, schema: ResolvedSchema) -> ResolvedSchema: ...

    def clear(self) -> None: ...
