"""Record layouts kept as data — column tables loaded from configuration.

A layout table is an alternative to ``Column`` markers in the record class.
Each column's value type comes from the same-named field of the target::

    layout = RecordLayout.model_validate_json(path.read_text())
    layout.bind(PayrollLine)
    decode(PayrollLine, line)
"""

from __future__ import annotations

from typing import Annotated, Any

import structlog
from pydantic import BaseModel, Field, PrivateAttr, create_model

from fixedwidth.core.exceptions import SchemaConfigurationError
from fixedwidth.decoder.registry import LayoutRegistry, default_registry
from fixedwidth.models.column import Column

log = structlog.get_logger(__name__)


class ColumnSpec(BaseModel):
    """One row of a layout table."""

    field: str
    start: int
    end: int
    decimal_places: int = 0


class RecordLayout(BaseModel):
    """Complete column table for one record format."""

    name: str
    columns: list[ColumnSpec] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)

    _built: set[type[BaseModel]] = PrivateAttr(default_factory=set)

    def build_shape(self, target_type: type[BaseModel]) -> type[BaseModel]:
        """Generate a shape model carrying this table's Column markers.

        Raises:
            SchemaConfigurationError: A column names a field ``target_type``
                does not declare, or names one field twice.
        """
        target_fields = target_type.model_fields
        definitions: dict[str, Any] = {}
        for spec in self.columns:
            if spec.field not in target_fields:
                raise SchemaConfigurationError(
                    target_type, f"layout {self.name!r} names an unknown field",
                    field_name=spec.field,
                )
            if spec.field in definitions:
                raise SchemaConfigurationError(
                    target_type, f"layout {self.name!r} lists the field twice",
                    field_name=spec.field,
                )
            annotation = target_fields[spec.field].annotation
            marker = Column(spec.start, spec.end, spec.decimal_places)
            definitions[spec.field] = (Annotated[annotation, marker], None)

        return create_model(f"{target_type.__name__}Layout", **definitions)

    def bind(
        self, target_type: type[BaseModel], registry: LayoutRegistry | None = None
    ) -> type[BaseModel]:
        """Build the shape and register it as ``target_type``'s layout.

        Binding the same layout to the same target again returns the shape
        already registered; a different layout for that target is a
        configuration error.
        """
        reg = registry if registry is not None else default_registry
        existing = reg.shape_for(target_type)
        if existing is not None and existing in self._built:
            return existing

        shape = self.build_shape(target_type)
        reg.associate(target_type, shape)
        self._built.add(shape)
        log.debug("layout_bound", layout=self.name, target=target_type.__name__,
                  columns=len(self.columns))
        return shape
