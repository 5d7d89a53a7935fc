"""Tests for the exception hierarchy."""

from __future__ import annotations

from decimal import Decimal

import pytest

from fixedwidth.core.exceptions import (
    FieldConversionError,
    FixedWidthError,
    LineTooShortError,
    MissingTargetFieldError,
    NullInputError,
    SchemaConfigurationError,
    TypeMismatchError,
)
from tests.fakes.records import TargetA


@pytest.mark.parametrize("error", [
    NullInputError(),
    LineTooShortError(31, 3, "123"),
    FieldConversionError("hours", "04X", int),
    MissingTargetFieldError("Y", TargetA),
    TypeMismatchError("X", 123, str),
    SchemaConfigurationError(TargetA, "bad"),
])
def test_all_errors_share_a_base(error):
    assert isinstance(error, FixedWidthError)


def test_line_too_short_message():
    err = LineTooShortError(31, 3, "123")
    assert str(err) == "Line length 3 is shorter than the required 31: '123'"


def test_field_conversion_message():
    err = FieldConversionError("salary", "12X.45", Decimal)
    assert str(err) == "Field 'salary': cannot convert '12X.45' to Decimal"


def test_schema_configuration_message_names_field():
    err = SchemaConfigurationError(TargetA, "2 Column markers, expected one", field_name="X")

    assert str(err) == "TargetA.X: 2 Column markers, expected one"
    assert err.shape_type is TargetA
    assert err.field_name == "X"
