"""Tests for RecordLayout tables."""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Optional

import pytest
from pydantic import BaseModel

from fixedwidth.core.exceptions import SchemaConfigurationError
from fixedwidth.decoder.line_decoder import FixedWidthDecoder
from fixedwidth.decoder.registry import LayoutRegistry
from fixedwidth.models.layout import ColumnSpec, RecordLayout
from fixedwidth.models.values import ValueKind
from tests.fakes import MemorySchemaCache

LAYOUT_JSON = json.dumps({
    "name": "ADP_BiWeekly",
    "columns": [
        {"field": "ssn", "start": 0, "end": 9},
        {"field": "deferral", "start": 9, "end": 16, "decimal_places": 2},
        {"field": "loan", "start": 16, "end": 21, "decimal_places": 2},
    ],
    "metadata": {"vendor_id": "ADP"},
})


class ContributionLine(BaseModel):
    ssn: str = ""
    deferral: Decimal = Decimal("0")
    loan: Optional[Decimal] = None
    batchid: str = ""


@pytest.fixture
def layout():
    return RecordLayout.model_validate_json(LAYOUT_JSON)


@pytest.fixture
def registry():
    return LayoutRegistry()


# ---------- parsing ----------

class TestRecordLayoutModel:
    def test_loads_from_json(self, layout):
        assert layout.name == "ADP_BiWeekly"
        assert len(layout.columns) == 3
        assert layout.columns[1] == ColumnSpec(field="deferral", start=9, end=16, decimal_places=2)
        assert layout.metadata["vendor_id"] == "ADP"

    def test_decimal_places_default(self):
        assert ColumnSpec(field="ssn", start=0, end=9).decimal_places == 0


# ---------- build_shape ----------

class TestBuildShape:
    def test_shape_carries_target_value_types(self, layout):
        shape = layout.build_shape(ContributionLine)
        schema = FixedWidthDecoder(registry=LayoutRegistry()).resolve(ContributionLine, shape)

        kinds = {c.field_name: (c.value.kind, c.value.optional) for c in schema.columns}
        assert kinds == {
            "ssn": (ValueKind.TEXT, False),
            "deferral": (ValueKind.DECIMAL, False),
            "loan": (ValueKind.DECIMAL, True),
        }
        assert schema.max_end == 21
        assert schema.is_direct is False

    def test_unknown_field(self):
        layout = RecordLayout(name="bad", columns=[ColumnSpec(field="salary", start=0, end=5)])

        with pytest.raises(SchemaConfigurationError) as exc_info:
            layout.build_shape(ContributionLine)
        assert exc_info.value.field_name == "salary"

    def test_duplicate_field(self):
        layout = RecordLayout(name="dup", columns=[
            ColumnSpec(field="ssn", start=0, end=9),
            ColumnSpec(field="ssn", start=9, end=18),
        ])

        with pytest.raises(SchemaConfigurationError):
            layout.build_shape(ContributionLine)

    def test_bad_offsets_surface_at_resolution(self, registry):
        layout = RecordLayout(name="neg", columns=[ColumnSpec(field="ssn", start=5, end=2)])
        layout.bind(ContributionLine, registry)

        with pytest.raises(SchemaConfigurationError):
            FixedWidthDecoder(registry=registry).decode(ContributionLine, "x" * 10)


# ---------- bind + decode ----------

class TestBindAndDecode:
    def test_decode_after_bind(self, layout, registry):
        layout.bind(ContributionLine, registry)
        decoder = FixedWidthDecoder(registry=registry, cache=MemorySchemaCache())

        record = decoder.decode(ContributionLine, "123456789" + "0010050" + "00250")

        assert record.ssn == "123456789"
        assert record.deferral == Decimal("100.50")
        assert record.loan == Decimal("2.50")
        assert record.batchid == ""

    def test_bind_returns_registered_shape(self, layout, registry):
        shape = layout.bind(ContributionLine, registry)
        assert registry.shape_for(ContributionLine) is shape

    def test_rebinding_same_layout_returns_existing_shape(self, layout, registry):
        first = layout.bind(ContributionLine, registry)
        second = layout.bind(ContributionLine, registry)

        assert second is first
        assert registry.shape_for(ContributionLine) is first

    def test_binding_another_layout_to_same_target(self, layout, registry):
        layout.bind(ContributionLine, registry)
        other = RecordLayout(name="other", columns=[ColumnSpec(field="ssn", start=0, end=9)])

        with pytest.raises(SchemaConfigurationError):
            other.bind(ContributionLine, registry)
