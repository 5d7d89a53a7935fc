"""Column declarations and the resolved schema a decoder runs against.

A record declares its layout with ``Column`` markers inside ``Annotated``::

    class EmployeeRecord(BaseModel):
        ssn: Annotated[str, Column(0, 9)] = ""
        salary: Annotated[Decimal, Column(9, 18, decimal_places=2)] = Decimal("0")

The resolver turns those markers into ``ColumnDescriptor`` values and bundles
them, together with the target's ``FieldSlot`` accessor table, into a
``ResolvedSchema``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field

from fixedwidth.core.exceptions import TypeMismatchError
from fixedwidth.models.values import ValueSpec


@dataclass(frozen=True)
class Column:
    """Character range ``[start, end)`` of one field, with optional implied decimals.

    Used as ``Annotated`` metadata, so it is a plain dataclass: pydantic would
    apply a model instance found there as the field's schema.
    """

    start: int
    end: int
    decimal_places: int = 0


class ColumnDescriptor(BaseModel):
    """One resolved column: where to read it and what to convert it into."""

    model_config = {"frozen": True}

    field_name: str
    start: int
    end: int
    decimal_places: int = 0
    value: ValueSpec

    @property
    def width(self) -> int:
        return self.end - self.start

    def extract(self, line: str) -> str:
        """Slice the column out of ``line``, insert the implied decimal point, trim.

        The point is inserted whatever the content; conversion validates it.
        """
        raw = line[self.start:self.end]
        if self.decimal_places > 0:
            point = self.width - self.decimal_places
            raw = f"{raw[:point]}.{raw[point:]}"
        return raw.strip()


class FieldSlot(BaseModel):
    """Accessor-table entry for one field of a target record."""

    model_config = {"frozen": True}

    name: str
    annotation: Any = None
    value: Optional[ValueSpec] = None  # None when the annotation has no value kind

    def accept(self, value: Any) -> Any:
        """Return ``value`` ready to store in this field, or raise TypeMismatchError.

        ``int`` widens into ``float`` and ``Decimal`` fields; ``bool`` never
        counts as an ``int`` and ``datetime`` never counts as a ``date``.
        ``Any`` and ``object`` fields take every value.
        """
        if self.annotation is Any or self.annotation is object:
            return value
        if self.value is None:
            raise TypeMismatchError(self.name, value, self.annotation)
        expected = self.value.python_type
        if value is None:
            if self.value.optional:
                return None
            raise TypeMismatchError(self.name, value, expected)
        if isinstance(value, bool) and expected is not bool:
            raise TypeMismatchError(self.name, value, expected)
        if isinstance(value, datetime) and expected is not datetime:
            raise TypeMismatchError(self.name, value, expected)
        if isinstance(value, expected):
            return value
        if type(value) is int and expected in (float, Decimal):
            return expected(value)
        raise TypeMismatchError(self.name, value, expected)


class ResolvedSchema(BaseModel):
    """Columns read from ``shape_type``, written into ``target_type``."""

    model_config = {"frozen": True}

    target_type: type[BaseModel]
    shape_type: type[BaseModel]
    is_direct: bool = True
    columns: tuple[ColumnDescriptor, ...] = ()
    slots: dict[str, FieldSlot] = Field(default_factory=dict)

    @property
    def max_end(self) -> int:
        """Minimum acceptable line length; 0 for an empty schema."""
        return max((c.end for c in self.columns), default=0)
