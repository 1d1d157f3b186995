"""Model-wide checks on product identity.

- G001 MissingName: product has no display name
- G002 DuplicateGlobalId: GlobalId reused by two or more products
"""

from __future__ import annotations

from collections import Counter
from typing import Iterator

from ifc_qa.models.issues import Issue, Severity, ValueSource
from ifc_qa.store import IfcStore
from ifc_qa.validators.base import Rule


class MissingName(Rule):
    """Every product should carry a non-blank Name."""

    rule_id = "G001"
    severity = Severity.ERROR

    def evaluate(self, store: IfcStore) -> Iterator[Issue]:
        for product in store.products():
            name = product.Name
            if name is None or not name.strip():
                yield self.issue(
                    product,
                    "Entity has no Name.",
                    path="Name",
                    source=ValueSource.ATTRIBUTE,
                    expected="Non-empty",
                    actual=name,
                )


class DuplicateGlobalId(Rule):
    """GlobalIds must be unique. Every product sharing an id is reported.

    Products without a GlobalId are not grouped together.
    """

    rule_id = "G002"
    severity = Severity.ERROR

    def evaluate(self, store: IfcStore) -> Iterator[Issue]:
        products = store.products()
        counts = Counter(p.GlobalId for p in products if p.GlobalId)
        for product in products:
            n = counts[product.GlobalId] if product.GlobalId else 0
            if n < 2:
                continue
            yield self.issue(
                product,
                f"GlobalId '{product.GlobalId}' is shared by {n} entities.",
                path="GlobalId",
                source=ValueSource.ATTRIBUTE,
                expected="Unique",
                actual=f"{n} occurrences",
            )
