"""Value kinds a fixed-width column can be converted into."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class ValueKind(StrEnum):
    TEXT = "TEXT"
    INTEGER = "INTEGER"
    DECIMAL = "DECIMAL"
    FLOAT = "FLOAT"
    BOOLEAN = "BOOLEAN"
    DATE = "DATE"
    DATETIME = "DATETIME"
    ENUM = "ENUM"


class ValueSpec(BaseModel):
    """Conversion target derived from a field annotation."""

    model_config = {"frozen": True}

    python_type: type  # str, int, Decimal, ... or the Enum subclass
    kind: ValueKind
    optional: bool = False  # annotation was Optional[...]; blank non-text -> None
