"""Rule interface shared by all QA validators.

A rule has a stable id, a fixed severity and an ``evaluate`` generator
that reads the model and yields Issues. Rules never write to the model,
so any number of them can run against the same store.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Iterator

import ifcopenshell

from ifc_qa.models.issues import Issue, Severity, ValueSource
from ifc_qa.store import IfcStore


def matches_class(element: ifcopenshell.entity_instance, ifc_classes: Iterable[str]) -> bool:
    """Exact, case-insensitive type-name match. Subtypes are not matched."""
    type_name = element.is_a().lower()
    return any(type_name == c.lower() for c in ifc_classes)


def products_of(store: IfcStore, *ifc_classes: str) -> Iterator[ifcopenshell.entity_instance]:
    """Products whose type name is one of ``ifc_classes``, in file order."""
    for product in store.products():
        if matches_class(product, ifc_classes):
            yield product


class Rule(ABC):
    """Base class for all QA rules."""

    rule_id: str
    severity: Severity

    @abstractmethod
    def evaluate(self, store: IfcStore) -> Iterator[Issue]:
        """Yield the issues found in ``store``.

        The store must stay open until the returned iterator is exhausted.
        """

    def issue(
        self,
        element: ifcopenshell.entity_instance,
        message: str,
        *,
        path: str | None = None,
        source: ValueSource | None = None,
        expected: str | None = None,
        actual: str | None = None,
    ) -> Issue:
        """Build an Issue for ``element`` carrying this rule's id and severity."""
        return Issue(
            rule_id=self.rule_id,
            severity=self.severity,
            ifc_class=element.is_a(),
            global_id=element.GlobalId or "",
            name=element.Name,
            message=message,
            path=path,
            source=source,
            expected=expected,
            actual=actual,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rule_id}, {self.severity.value})"
