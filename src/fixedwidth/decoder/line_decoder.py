"""FixedWidthDecoder — decodes one line of fixed-width text into a record."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import BaseModel

from fixedwidth.cache import create_schema_cache
from fixedwidth.core.config import AppSettings
from fixedwidth.core.exceptions import (
    FieldConversionError,
    LineTooShortError,
    MissingTargetFieldError,
    NullInputError,
)
from fixedwidth.core.protocols import ISchemaCache
from fixedwidth.core.types import RecordT
from fixedwidth.decoder.conversion import convert
from fixedwidth.decoder.registry import LayoutRegistry
from fixedwidth.decoder.resolver import SchemaResolver
from fixedwidth.models.column import ResolvedSchema


class FixedWidthDecoder:
    """Decodes lines into pydantic records using their declared column layout.

    Settings, layout registry and schema cache are injected at construction
    time; a decoder holds no per-line state and may be shared across threads.
    """

    def __init__(
        self,
        *,
        settings: AppSettings | None = None,
        registry: LayoutRegistry | None = None,
        cache: ISchemaCache | None = None,
    ) -> None:
        self._settings = settings if settings is not None else AppSettings()
        if cache is None:
            cache = create_schema_cache(self._settings)
        self._cache = cache
        self._resolver = SchemaResolver(registry=registry, cache=cache)

    def resolve(
        self, target_type: type[BaseModel], shape: type[BaseModel] | None = None
    ) -> ResolvedSchema:
        return self._resolver.resolve(target_type, shape)

    def decode(
        self,
        target_type: type[RecordT],
        line: str | None,
        *,
        shape: type[BaseModel] | None = None,
    ) -> RecordT:
        """Decode ``line`` into a new ``target_type`` instance.

        Decoding is all-or-nothing: the record is returned only once every
        column has been converted and accepted by its target field.

        Args:
            target_type: Record model to populate.
            line: One line of fixed-width text, without its terminator.
            shape: Model to read the column layout from, overriding any
                registered association.

        Raises:
            NullInputError: ``line`` is None.
            LineTooShortError: ``line`` ends before the furthest column.
            FieldConversionError: A column's text is not a valid literal.
            MissingTargetFieldError: The target lacks a field the layout names.
            TypeMismatchError: A converted value does not fit the target field.
            SchemaConfigurationError: The layout declarations are invalid.
        """
        if line is None:
            raise NullInputError()

        schema = self._resolver.resolve(target_type, shape)
        if len(line) < schema.max_end:
            raise LineTooShortError(schema.max_end, len(line), line)

        record = target_type()
        values: dict[str, Any] = {}
        for column in schema.columns:
            text = column.extract(line)
            try:
                value = convert(column.value, text)
            except ValueError as exc:
                raise FieldConversionError(
                    column.field_name, text, column.value.python_type
                ) from exc

            slot = schema.slots.get(column.field_name)
            if slot is None:
                raise MissingTargetFieldError(column.field_name, target_type)
            values[column.field_name] = slot.accept(value)

        if not values:
            return record
        return record.model_copy(update=values)


@lru_cache(maxsize=1)
def get_default_decoder() -> FixedWidthDecoder:
    """Process-wide decoder built from environment settings."""
    return FixedWidthDecoder()


def decode(
    target_type: type[RecordT],
    line: str | None,
    *,
    shape: type[BaseModel] | None = None,
) -> RecordT:
    """Decode ``line`` into ``target_type`` with the default decoder."""
    return get_default_decoder().decode(target_type, line, shape=shape)
