"""Configurable property set value checks.

Each rule targets one IFC class (exact, case-insensitive) and one
'Pset.Key' locator:

- AllowedValues: value must be one of a configured set
- RequireEqualStrings: two locators must hold the same string
- RequireInstanceEqualsType: instance value must agree with the type value
- SurveyValue: record the observed value, no pass/fail

Values are compared after trimming. A locator that cannot be resolved is
never a mismatch; only AllowedValues reports it, and only when asked to.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence

import ifcopenshell

from ifc_qa.models.issues import Issue, Severity, ValueSource
from ifc_qa.queries.psets import (
    find_attribute,
    find_set,
    instance_property_sets,
    locate_pset,
    type_property_sets,
)
from ifc_qa.queries.values import as_string, raw_value
from ifc_qa.store import IfcStore
from ifc_qa.validators.base import Rule, products_of


def _norm(value: str | None) -> str:
    return (value or "").strip()


def _lookup(element, pset: str, key: str) -> tuple[str | None, ValueSource | None]:
    """String value of 'pset.key', instance level first, with its source."""
    match = locate_pset(element, pset)
    if match is None:
        return None, None
    return as_string(find_attribute(match.group, key)), match.source


def _value_in(groups: list[ifcopenshell.entity_instance], pset: str, key: str) -> str | None:
    return as_string(find_attribute(find_set(groups, pset), key))


@dataclass(repr=False)
class AllowedValues(Rule):
    """Value of 'pset.key' must be one of ``allowed``.

    Reports, in order of the first failing stage: missing property set,
    missing property, empty value, invalid value. With ``skip_if_missing``
    only invalid values are reported.
    """

    rule_id: str
    severity: Severity
    ifc_class: str
    pset: str
    key: str
    allowed: Sequence[str] = field(default_factory=tuple)
    skip_if_missing: bool = False

    def __post_init__(self) -> None:
        # Same trim as observed values; configured order kept for messages
        self.allowed = tuple(dict.fromkeys(_norm(v) for v in self.allowed))

    def evaluate(self, store: IfcStore) -> Iterator[Issue]:
        path = f"{self.pset}.{self.key}"
        for product in products_of(store, self.ifc_class):
            match = locate_pset(product, self.pset)
            if match is None:
                if self.skip_if_missing:
                    continue
                yield self.issue(
                    product,
                    f"Missing property set '{self.pset}' (required for '{self.key}').",
                    path=self.pset,
                    source=ValueSource.PSET_INSTANCE,
                    expected="Present",
                    actual="Missing",
                )
                continue

            prop = find_attribute(match.group, self.key)
            if prop is None:
                if self.skip_if_missing:
                    continue
                yield self.issue(
                    product,
                    f"Missing property '{self.key}' in '{self.pset}'.",
                    path=path,
                    source=match.source,
                    expected="Present",
                    actual="Missing",
                )
                continue

            value = _norm(as_string(prop))
            if not value:
                if self.skip_if_missing:
                    continue
                yield self.issue(
                    product,
                    f"Property '{path}' must not be empty.",
                    path=path,
                    source=match.source,
                    expected="Non-empty",
                    actual=value,
                )
                continue

            if value not in self.allowed:
                yield self.issue(
                    product,
                    f"Property '{path}' has value '{value}', "
                    f"expected one of [{', '.join(self.allowed)}].",
                    path=path,
                    source=match.source,
                    expected=f"One of: {', '.join(self.allowed)}",
                    actual=value,
                )


@dataclass(repr=False)
class RequireEqualStrings(Rule):
    """'pset_a.key_a' and 'pset_b.key_b' must match exactly when both are set."""

    rule_id: str
    severity: Severity
    ifc_class: str
    pset_a: str
    key_a: str
    pset_b: str
    key_b: str

    def evaluate(self, store: IfcStore) -> Iterator[Issue]:
        path_a = f"{self.pset_a}.{self.key_a}"
        path_b = f"{self.pset_b}.{self.key_b}"
        for product in products_of(store, self.ifc_class):
            a, source = _lookup(product, self.pset_a, self.key_a)
            b, _ = _lookup(product, self.pset_b, self.key_b)
            if not a or not b:
                continue
            if a != b:
                yield self.issue(
                    product,
                    f"Mismatch: '{path_a}' = '{a}' but '{path_b}' = '{b}'.",
                    path=path_a,
                    source=source,
                    expected=b,
                    actual=a,
                )


@dataclass(repr=False)
class RequireInstanceEqualsType(Rule):
    """Instance value of 'pset.key' must equal the type value, ignoring case.

    Values are compared as strings only: '10' and '10.0' differ.
    """

    rule_id: str
    severity: Severity
    ifc_class: str
    pset: str
    key: str

    def evaluate(self, store: IfcStore) -> Iterator[Issue]:
        path = f"{self.pset}.{self.key}"
        for product in products_of(store, self.ifc_class):
            inst_val = _value_in(instance_property_sets(product), self.pset, self.key)
            type_val = _value_in(type_property_sets(product), self.pset, self.key)
            if not inst_val or not type_val:
                continue
            if inst_val.lower() != type_val.lower():
                yield self.issue(
                    product,
                    f"Instance '{path}' = '{inst_val}' differs from "
                    f"Type '{path}' = '{type_val}'.",
                    path=path,
                    source=ValueSource.PSET_INSTANCE,
                    expected=type_val,
                    actual=inst_val,
                )


@dataclass(repr=False)
class SurveyValue(Rule):
    """Record 'pset.key' for every product that has it."""

    rule_id: str
    severity: Severity
    ifc_class: str
    pset: str
    key: str

    def evaluate(self, store: IfcStore) -> Iterator[Issue]:
        path = f"{self.pset}.{self.key}"
        for product in products_of(store, self.ifc_class):
            match = locate_pset(product, self.pset)
            if match is None:
                continue
            prop = find_attribute(match.group, self.key)
            if prop is None:
                continue
            raw = raw_value(prop)
            observed = None if raw is None else str(raw)
            yield self.issue(
                product,
                f"Observed '{path}' = '{'<null>' if observed is None else observed}'",
                path=path,
                source=match.source,
                actual=observed,
            )
