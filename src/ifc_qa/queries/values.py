"""Value coercion for properties and quantities.

Absence (no attribute, or an attribute without a value) is kept distinct
from a value that is present but cannot be read as the requested kind.
"""

from __future__ import annotations

import math
from enum import Enum

import ifcopenshell

# IfcPhysicalSimpleQuantity: Name, Description, Unit, <Measure>Value[, Formula]
QUANTITY_VALUE_INDEX = 3


class Coercion(str, Enum):
    """Non-numeric outcomes of ``as_number``."""

    ABSENT = "absent"
    NOT_NUMERIC = "not_numeric"


def raw_value(attribute):
    """Unwrapped Python value of a single-value property or simple quantity."""
    if attribute is None:
        return None
    if attribute.is_a("IfcPropertySingleValue"):
        value = attribute.NominalValue
    elif attribute.is_a("IfcPhysicalSimpleQuantity"):
        value = attribute[QUANTITY_VALUE_INDEX]
    else:
        return None
    if isinstance(value, ifcopenshell.entity_instance):
        value = value.wrappedValue
    return value


def as_string(attribute) -> str | None:
    """Trimmed string value, or None when the attribute or its value is absent."""
    value = raw_value(attribute)
    if value is None:
        return None
    return str(value).strip()


def as_number(attribute) -> float | Coercion:
    """Numeric value, or Coercion.ABSENT / Coercion.NOT_NUMERIC."""
    value = raw_value(attribute)
    if value is None:
        return Coercion.ABSENT
    if isinstance(value, bool):
        return Coercion.NOT_NUMERIC
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return Coercion.NOT_NUMERIC
    if not isinstance(value, (int, float)) or not math.isfinite(value):
        return Coercion.NOT_NUMERIC
    return float(value)


def format_number(value: float) -> str:
    """Compact number for messages: 0.0 → '0', 2.5 → '2.5'."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)
