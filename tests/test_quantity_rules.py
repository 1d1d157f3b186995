"""Tests for RequireQtoQuantityValueNumber."""

from ifc_qa.models import Severity, ValueSource
from ifc_qa.queries.values import Coercion
from ifc_qa.validators import RequireQtoQuantityValueNumber, quantities


def _rule(min_exclusive=0.0):
    return RequireQtoQuantityValueNumber(
        "Q001", Severity.ERROR, "IfcWall", "Qto_WallBaseQuantities", "Length", min_exclusive
    )


def _wall_with_length(builder, value):
    wall = builder.wall("W1")
    builder.add_qto(wall, "Qto_WallBaseQuantities", {"Length": value})
    return wall


class TestBound:
    def test_zero_fails_strict_bound(self, builder):
        _wall_with_length(builder, 0)
        [issue] = _rule().evaluate(builder.store())
        assert issue.message == (
            "Quantity 'Length' in 'Qto_WallBaseQuantities' must be > 0 (found 0)."
        )
        assert issue.expected == "> 0"
        assert issue.actual == "0"
        assert issue.path == "Qto_WallBaseQuantities.Length"
        assert issue.source == ValueSource.QTO_INSTANCE

    def test_positive_passes(self, builder):
        _wall_with_length(builder, 5)
        assert list(_rule().evaluate(builder.store())) == []

    def test_custom_bound(self, builder):
        _wall_with_length(builder, 2.5)
        [issue] = _rule(min_exclusive=3).evaluate(builder.store())
        assert "must be > 3 (found 2.5)" in issue.message

    def test_negative(self, builder):
        _wall_with_length(builder, -1.0)
        assert len(list(_rule().evaluate(builder.store()))) == 1


class TestMissingOrNotNumeric:
    def test_quantity_absent(self, builder):
        """Missing quantity → 'missing or not numeric', not the bound message."""
        wall = builder.wall("W1")
        builder.add_qto(wall, "Qto_WallBaseQuantities", {"Width": 0.2})
        [issue] = _rule().evaluate(builder.store())
        assert "missing or not numeric" in issue.message
        assert "must be >" not in issue.message
        assert issue.actual == "Missing"

    def test_quantity_set_absent(self, builder):
        builder.wall("W1")
        [issue] = _rule().evaluate(builder.store())
        assert "missing or not numeric (missing)" in issue.message

    def test_quantity_without_value(self, builder):
        _wall_with_length(builder, None)
        [issue] = _rule().evaluate(builder.store())
        assert "missing or not numeric (missing)" in issue.message

    def test_property_set_with_qto_name_ignored(self, builder):
        """A property set named like the quantity set does not supply quantities."""
        wall = builder.wall("W1")
        builder.add_pset(wall, "Qto_WallBaseQuantities", {"Length": "12"})
        builder.add_type(wall, builder.qto("Qto_WallBaseQuantities", {"Width": 0.2}))
        [issue] = _rule().evaluate(builder.store())
        assert "(missing)" in issue.message

    def test_not_numeric(self, builder, monkeypatch):
        """Present but non-numeric value is worded differently from absence.

        IFC simple quantities always hold a number, so coercion is patched to
        reach this branch.
        """
        _wall_with_length(builder, 5)
        monkeypatch.setattr(quantities, "as_number", lambda q: Coercion.NOT_NUMERIC)
        [issue] = _rule().evaluate(builder.store())
        assert issue.message == (
            "Quantity 'Length' in 'Qto_WallBaseQuantities' "
            "is missing or not numeric (found '5.0')."
        )
        assert issue.actual == "5.0"

    def test_type_level_quantity(self, builder):
        wall = builder.wall("W1")
        builder.add_type(wall, builder.qto("Qto_WallBaseQuantities", {"Length": 0}))
        [issue] = _rule().evaluate(builder.store())
        assert issue.source == ValueSource.QTO_TYPE
        assert "must be > 0" in issue.message

    def test_other_classes_ignored(self, builder):
        builder.product("IfcSlab", "S1")
        assert list(_rule().evaluate(builder.store())) == []
