"""fixedwidth exception hierarchy."""

from __future__ import annotations

from typing import Any


class FixedWidthError(Exception):
    """Base exception for all fixedwidth errors."""


class NullInputError(FixedWidthError):
    """The line to decode was None."""

    def __init__(self) -> None:
        super().__init__("Line can not be None")


class LineTooShortError(FixedWidthError):
    """Line is shorter than the schema's furthest column end."""

    def __init__(self, expected: int, actual: int, line: str) -> None:
        self.expected = expected
        self.actual = actual
        self.line = line
        super().__init__(
            f"Line length {actual} is shorter than the required {expected}: {line!r}"
        )


class FieldConversionError(FixedWidthError):
    """Extracted column text could not be converted to the field's type."""

    def __init__(self, field_name: str, raw_value: str, value_type: Any) -> None:
        self.field_name = field_name
        self.raw_value = raw_value
        self.value_type = value_type
        super().__init__(
            f"Field {field_name!r}: cannot convert {raw_value!r} to {_type_name(value_type)}"
        )


class MissingTargetFieldError(FixedWidthError):
    """Layout names a field the target record does not have."""

    def __init__(self, field_name: str, target_type: type) -> None:
        self.field_name = field_name
        self.target_type = target_type
        super().__init__(f"{target_type.__name__} has no field {field_name!r}")


class TypeMismatchError(FixedWidthError):
    """Converted value does not fit the target field's declared type."""

    def __init__(self, field_name: str, value: Any, expected_type: Any) -> None:
        self.field_name = field_name
        self.value = value
        self.expected_type = expected_type
        super().__init__(
            f"Field {field_name!r}: {type(value).__name__} value {value!r} "
            f"is not assignable to {_type_name(expected_type)}"
        )


class SchemaConfigurationError(FixedWidthError):
    """A layout declaration is invalid, independent of any particular line."""

    def __init__(self, shape_type: Any, message: str, field_name: str | None = None) -> None:
        self.shape_type = shape_type
        self.field_name = field_name
        where = _type_name(shape_type)
        if field_name is not None:
            where = f"{where}.{field_name}"
        super().__init__(f"{where}: {message}")


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", repr(tp))
