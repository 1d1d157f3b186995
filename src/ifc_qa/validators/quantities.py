"""Quantity set value checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from ifc_qa.models.issues import Issue, Severity, ValueSource
from ifc_qa.queries.psets import find_attribute, locate_qto
from ifc_qa.queries.values import Coercion, as_number, as_string, format_number
from ifc_qa.store import IfcStore
from ifc_qa.validators.base import Rule, products_of


@dataclass(repr=False)
class RequireQtoQuantityValueNumber(Rule):
    """'qto_name.quantity_name' must be numeric and strictly above ``min_exclusive``.

    A missing quantity set counts as a missing quantity.
    """

    rule_id: str
    severity: Severity
    ifc_class: str
    qto_name: str
    quantity_name: str
    min_exclusive: float = 0.0

    def evaluate(self, store: IfcStore) -> Iterator[Issue]:
        path = f"{self.qto_name}.{self.quantity_name}"
        bound = format_number(self.min_exclusive)
        label = f"Quantity '{self.quantity_name}' in '{self.qto_name}'"

        for product in products_of(store, self.ifc_class):
            match = locate_qto(product, self.qto_name)
            quantity = find_attribute(match.group, self.quantity_name) if match else None
            source = match.source if match else ValueSource.QTO_INSTANCE
            value = as_number(quantity)

            if value is Coercion.ABSENT:
                yield self.issue(
                    product,
                    f"{label} is missing or not numeric (missing).",
                    path=path,
                    source=source,
                    expected=f"Number > {bound}",
                    actual="Missing",
                )
            elif value is Coercion.NOT_NUMERIC:
                found = as_string(quantity)
                yield self.issue(
                    product,
                    f"{label} is missing or not numeric (found '{found}').",
                    path=path,
                    source=source,
                    expected=f"Number > {bound}",
                    actual=found,
                )
            elif value <= self.min_exclusive:
                yield self.issue(
                    product,
                    f"{label} must be > {bound} (found {format_number(value)}).",
                    path=path,
                    source=source,
                    expected=f"> {bound}",
                    actual=format_number(value),
                )
