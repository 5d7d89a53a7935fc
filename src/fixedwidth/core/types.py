"""Type aliases used across fixedwidth."""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel

FieldName = str
Offset = int
CacheKey = tuple[type[BaseModel], type[BaseModel]]  # (target_type, shape_type)

RecordT = TypeVar("RecordT", bound=BaseModel)
