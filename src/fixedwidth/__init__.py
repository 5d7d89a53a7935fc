"""fixedwidth — decode fixed-width text lines into typed pydantic records."""

from __future__ import annotations

from fixedwidth.core.exceptions import (
    FieldConversionError,
    FixedWidthError,
    LineTooShortError,
    MissingTargetFieldError,
    NullInputError,
    SchemaConfigurationError,
    TypeMismatchError,
)
from fixedwidth.core.logging import configure_logging
from fixedwidth.decoder.line_decoder import FixedWidthDecoder, decode, get_default_decoder
from fixedwidth.decoder.registry import LayoutRegistry, default_registry, uses_layout
from fixedwidth.decoder.resolver import SchemaResolver
from fixedwidth.models.column import Column, ColumnDescriptor, ResolvedSchema
from fixedwidth.models.layout import ColumnSpec, RecordLayout

__version__ = "0.1.0"
__all__ = [
    "Column",
    "ColumnDescriptor",
    "ColumnSpec",
    "FieldConversionError",
    "FixedWidthDecoder",
    "FixedWidthError",
    "LayoutRegistry",
    "LineTooShortError",
    "MissingTargetFieldError",
    "NullInputError",
    "RecordLayout",
    "ResolvedSchema",
    "SchemaConfigurationError",
    "SchemaResolver",
    "TypeMismatchError",
    "configure_logging",
    "decode",
    "default_registry",
    "get_default_decoder",
    "uses_layout",
]
