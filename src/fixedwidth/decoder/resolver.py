"""SchemaResolver — turns column declarations into a ResolvedSchema."""

from __future__ import annotations

import structlog
from pydantic import BaseModel

from fixedwidth.cache.memory_backend import NullSchemaCache
from fixedwidth.core.exceptions import SchemaConfigurationError
from fixedwidth.core.protocols import ISchemaCache
from fixedwidth.decoder.conversion import value_spec_for
from fixedwidth.decoder.registry import LayoutRegistry, default_registry
from fixedwidth.models.column import Column, ColumnDescriptor, FieldSlot, ResolvedSchema

log = structlog.get_logger(__name__)


class SchemaResolver:
    """Resolves which columns to decode for a target type, and where to store them.

    Resolution is pure for a given (target, shape) pair and is memoized in the
    injected cache.
    """

    def __init__(
        self,
        *,
        registry: LayoutRegistry | None = None,
        cache: ISchemaCache | None = None,
    ) -> None:
        self._registry = registry if registry is not None else default_registry
        self._cache = cache if cache is not None else NullSchemaCache()

    def resolve(
        self, target_type: type[BaseModel], shape: type[BaseModel] | None = None
    ) -> ResolvedSchema:
        """Return the schema for decoding lines into ``target_type``.

        Shape selection: explicit ``shape`` argument, else the registered
        layout association for ``target_type``, else ``target_type`` itself.

        Raises:
            SchemaConfigurationError: The declarations are invalid.
        """
        _require_model(target_type)
        shape_type = shape if shape is not None else self._registry.shape_for(target_type)
        if shape_type is None:
            shape_type = target_type
        _require_model(shape_type)

        key = (target_type, shape_type)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        schema = ResolvedSchema(
            target_type=target_type,
            shape_type=shape_type,
            is_direct=shape_type is target_type,
            columns=tuple(_describe_columns(shape_type)),
            slots=_build_slots(target_type),
        )
        log.debug(
            "schema_resolved",
            target=target_type.__name__,
            shape=shape_type.__name__,
            columns=len(schema.columns),
            max_end=schema.max_end,
        )
        return self._cache.put(key, schema)


def _require_model(tp: object) -> None:
    if not (isinstance(tp, type) and issubclass(tp, BaseModel)):
        raise SchemaConfigurationError(tp, "fixed-width records must be pydantic models")


def _describe_columns(shape_type: type[BaseModel]) -> list[ColumnDescriptor]:
    """Build a descriptor for every shape field carrying exactly one Column marker."""
    descriptors: list[ColumnDescriptor] = []
    for name, field in shape_type.model_fields.items():
        markers = [m for m in field.metadata if isinstance(m, Column)]
        if not markers:
            continue
        if len(markers) > 1:
            raise SchemaConfigurationError(
                shape_type, f"{len(markers)} Column markers, expected one", field_name=name
            )
        column = markers[0]
        _check_offsets(shape_type, name, column)

        spec = value_spec_for(field.annotation)
        if spec is None:
            raise SchemaConfigurationError(
                shape_type, f"unsupported column type {field.annotation!r}", field_name=name
            )
        descriptors.append(ColumnDescriptor(
            field_name=name,
            start=column.start,
            end=column.end,
            decimal_places=column.decimal_places,
            value=spec,
        ))
    return descriptors


def _check_offsets(shape_type: type[BaseModel], name: str, column: Column) -> None:
    if column.start < 0:
        raise SchemaConfigurationError(
            shape_type, f"start {column.start} is negative", field_name=name
        )
    if column.end <= column.start:
        raise SchemaConfigurationError(
            shape_type, f"end {column.end} must be greater than start {column.start}",
            field_name=name,
        )
    width = column.end - column.start
    if not 0 <= column.decimal_places <= width:
        raise SchemaConfigurationError(
            shape_type, f"decimal_places {column.decimal_places} outside 0..{width}",
            field_name=name,
        )


def _build_slots(target_type: type[BaseModel]) -> dict[str, FieldSlot]:
    """Accessor table for ``target_type``; every field must have a default."""
    slots: dict[str, FieldSlot] = {}
    for name, field in target_type.model_fields.items():
        if field.is_required():
            raise SchemaConfigurationError(
                target_type, "field has no default; records must be default-constructible",
                field_name=name,
            )
        slots[name] = FieldSlot(
            name=name,
            annotation=field.annotation,
            value=value_spec_for(field.annotation),
        )
    return slots
