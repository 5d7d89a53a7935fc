"""Conversion registry — text to typed values for a closed set of value kinds."""

from __future__ import annotations

import math
import re
import types
from collections.abc import Callable
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Annotated, Any, Union, get_args, get_origin

from fixedwidth.models.values import ValueKind, ValueSpec

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")

_BOOLEAN_TEXT = {
    "true": True, "t": True, "yes": True, "y": True, "1": True,
    "false": False, "f": False, "no": False, "n": False, "0": False,
}

_KIND_BY_TYPE: dict[type, ValueKind] = {
    str: ValueKind.TEXT,
    int: ValueKind.INTEGER,
    bool: ValueKind.BOOLEAN,
    float: ValueKind.FLOAT,
    Decimal: ValueKind.DECIMAL,
    date: ValueKind.DATE,
    datetime: ValueKind.DATETIME,
}


def value_spec_for(annotation: Any) -> ValueSpec | None:
    """Derive the ValueSpec for a field annotation, or None if it is unsupported.

    ``Optional[X]`` unwraps to ``X`` with ``optional=True``; any other union is
    unsupported.
    """
    optional = False
    if get_origin(annotation) is Annotated:
        annotation = get_args(annotation)[0]
    if get_origin(annotation) in (Union, types.UnionType):
        members = [a for a in get_args(annotation) if a is not type(None)]
        if len(members) != 1:
            return None
        optional = True
        annotation = members[0]
        if get_origin(annotation) is Annotated:
            annotation = get_args(annotation)[0]

    if not isinstance(annotation, type):
        return None
    if issubclass(annotation, Enum):
        return ValueSpec(python_type=annotation, kind=ValueKind.ENUM, optional=optional)
    kind = _KIND_BY_TYPE.get(annotation)
    if kind is None:
        return None
    return ValueSpec(python_type=annotation, kind=kind, optional=optional)


def convert(spec: ValueSpec, text: str) -> Any:
    """Convert already-trimmed column text according to ``spec``.

    Raises:
        ValueError: ``text`` is not a valid literal for the kind.
    """
    if spec.optional and spec.kind is not ValueKind.TEXT and text == "":
        return None
    return _PARSERS[spec.kind](text, spec.python_type)


# ---------------------------------------------------------------------------
# Parsers, one per ValueKind
# ---------------------------------------------------------------------------

def _parse_text(text: str, python_type: type) -> str:
    return text


def _parse_integer(text: str, python_type: type) -> int:
    if not _INTEGER_RE.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    return int(text)


def _parse_decimal(text: str, python_type: type) -> Decimal:
    if not _DECIMAL_RE.fullmatch(text):
        raise ValueError(f"not a decimal: {text!r}")
    try:
        return Decimal(text)
    except InvalidOperation as exc:
        raise ValueError(f"not a decimal: {text!r}") from exc


def _parse_float(text: str, python_type: type) -> float:
    if "_" in text:
        raise ValueError(f"not a float: {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"not a finite float: {text!r}")
    return value


def _parse_boolean(text: str, python_type: type) -> bool:
    try:
        return _BOOLEAN_TEXT[text.lower()]
    except KeyError:
        raise ValueError(f"not a boolean: {text!r}") from None


def _parse_date(text: str, python_type: type) -> date:
    return date.fromisoformat(text)


def _parse_datetime(text: str, python_type: type) -> datetime:
    return datetime.fromisoformat(text)


def _parse_enum(text: str, python_type: type) -> Enum:
    for member in python_type:
        if str(member.value) == text:
            return member
    try:
        return python_type[text]
    except KeyError:
        raise ValueError(f"not a {python_type.__name__} member: {text!r}") from None


_PARSERS: dict[ValueKind, Callable[[str, type], Any]] = {
    ValueKind.TEXT: _parse_text,
    ValueKind.INTEGER: _parse_integer,
    ValueKind.DECIMAL: _parse_decimal,
    ValueKind.FLOAT: _parse_float,
    ValueKind.BOOLEAN: _parse_boolean,
    ValueKind.DATE: _parse_date,
    ValueKind.DATETIME: _parse_datetime,
    ValueKind.ENUM: _parse_enum,
}
