"""Tests for value coercion."""

import pytest

from ifc_qa.queries.psets import find_attribute
from ifc_qa.queries.values import Coercion, as_number, as_string, format_number, raw_value


def _prop(builder, value):
    return find_attribute(builder.pset("Pset_Test", {"K": value}), "K")


def _quantity(builder, value):
    return find_attribute(builder.qto("Qto_Test", {"Q": value}), "Q")


class TestAsString:
    def test_trimmed(self, builder):
        assert as_string(_prop(builder, "  EI60 ")) == "EI60"

    def test_absent_attribute(self):
        assert as_string(None) is None

    def test_absent_value(self, builder):
        """Property without NominalValue → None, not ''."""
        assert as_string(_prop(builder, None)) is None

    def test_empty_string_is_present(self, builder):
        assert as_string(_prop(builder, "")) == ""

    def test_non_string_values(self, builder):
        assert as_string(_prop(builder, True)) == "True"
        assert as_string(_prop(builder, 10)) == "10"
        assert as_string(_quantity(builder, 2.5)) == "2.5"


class TestAsNumber:
    def test_quantity_value(self, builder):
        assert as_number(_quantity(builder, 5)) == 5.0

    def test_zero_is_a_number(self, builder):
        assert as_number(_quantity(builder, 0)) == 0.0

    def test_absent(self, builder):
        assert as_number(None) is Coercion.ABSENT
        assert as_number(_quantity(builder, None)) is Coercion.ABSENT

    def test_numeric_label(self, builder):
        assert as_number(_prop(builder, " 12.5 ")) == 12.5

    @pytest.mark.parametrize("value", ["abc", "", "nan", True])
    def test_not_numeric(self, builder, value):
        """Present but unreadable values are kept apart from absence."""
        assert as_number(_prop(builder, value)) is Coercion.NOT_NUMERIC

    def test_integer_property(self, builder):
        assert as_number(_prop(builder, 3)) == 3.0


class TestRawValue:
    def test_unwraps_nominal_value(self, builder):
        assert raw_value(_prop(builder, " a ")) == " a "

    def test_unsupported_property_kind(self, builder):
        """Only single values carry a nominal value."""
        prop = builder.file.createIfcPropertyEnumeratedValue(Name="E")
        assert raw_value(prop) is None


def test_format_number():
    assert format_number(0.0) == "0"
    assert format_number(2.5) == "2.5"
    assert format_number(-1) == "-1"
