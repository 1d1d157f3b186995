"""Property set and quantity set resolution.

IFC attaches attribute groups to an element only indirectly:

- instance level: element.IsDefinedBy → IfcRelDefinesByProperties
  → RelatingPropertyDefinition
- type level: element.IsTypedBy (IFC4) or IsDefinedBy (IFC2X3)
  → IfcRelDefinesByType → RelatingType.HasPropertySets

Groups are either property sets (IfcPropertySet) or quantity sets
(IfcElementQuantity). A missing relation, target or group anywhere in the
chain resolves to an empty list or None, never an exception.
"""

from __future__ import annotations

from typing import Iterable, Iterator, NamedTuple

import ifcopenshell

from ifc_qa.models.issues import ValueSource

PROPERTY_SET = "IfcPropertySet"
QUANTITY_SET = "IfcElementQuantity"


class SetMatch(NamedTuple):
    """An attribute group found by name, with the level it was found on."""

    group: ifcopenshell.entity_instance
    source: ValueSource


def _expand(definition) -> Iterator[ifcopenshell.entity_instance]:
    """Flatten an IFC4 IfcPropertySetDefinitionSet into its members."""
    if definition is None:
        return
    if isinstance(definition, (list, tuple)):
        members = definition
    elif definition.is_a("IfcPropertySetDefinition"):
        members = (definition,)
    else:
        members = getattr(definition, "wrappedValue", None) or ()
    for member in members:
        if member is not None:
            yield member


def _of_kind(
    definitions: Iterable[ifcopenshell.entity_instance], kind: str
) -> list[ifcopenshell.entity_instance]:
    return [d for d in definitions if d.is_a(kind)]


def _instance_definitions(element) -> Iterator[ifcopenshell.entity_instance]:
    for rel in getattr(element, "IsDefinedBy", None) or ():
        if not rel.is_a("IfcRelDefinesByProperties"):
            continue
        yield from _expand(rel.RelatingPropertyDefinition)


def get_type_definition(element) -> ifcopenshell.entity_instance | None:
    """The type object an element is typed by, or None."""
    for rel in getattr(element, "IsTypedBy", None) or ():
        if rel.RelatingType is not None:
            return rel.RelatingType
    # IFC2X3 keeps the typing relation in IsDefinedBy
    for rel in getattr(element, "IsDefinedBy", None) or ():
        if rel.is_a("IfcRelDefinesByType") and rel.RelatingType is not None:
            return rel.RelatingType
    return None


def _type_definitions(element) -> Iterator[ifcopenshell.entity_instance]:
    type_def = get_type_definition(element)
    if type_def is None:
        return
    for definition in getattr(type_def, "HasPropertySets", None) or ():
        yield from _expand(definition)


def instance_property_sets(element) -> list[ifcopenshell.entity_instance]:
    return _of_kind(_instance_definitions(element), PROPERTY_SET)


def instance_quantity_sets(element) -> list[ifcopenshell.entity_instance]:
    return _of_kind(_instance_definitions(element), QUANTITY_SET)


def type_property_sets(element) -> list[ifcopenshell.entity_instance]:
    return _of_kind(_type_definitions(element), PROPERTY_SET)


def type_quantity_sets(element) -> list[ifcopenshell.entity_instance]:
    return _of_kind(_type_definitions(element), QUANTITY_SET)


def all_property_sets(element) -> list[ifcopenshell.entity_instance]:
    """Instance-level property sets followed by type-level ones.

    Lookups by name take the first match, so an instance value shadows a
    type value for the same set name.
    """
    return instance_property_sets(element) + type_property_sets(element)


def all_quantity_sets(element) -> list[ifcopenshell.entity_instance]:
    """Instance-level quantity sets followed by type-level ones."""
    return instance_quantity_sets(element) + type_quantity_sets(element)


def find_set(
    groups: Iterable[ifcopenshell.entity_instance], name: str
) -> ifcopenshell.entity_instance | None:
    """First group whose Name equals ``name`` exactly (case-sensitive)."""
    for group in groups:
        if group.Name is not None and group.Name == name:
            return group
    return None


def attributes_of(group) -> tuple:
    """Properties of a property set, or quantities of a quantity set."""
    if group is None:
        return ()
    if group.is_a(PROPERTY_SET):
        return group.HasProperties or ()
    if group.is_a(QUANTITY_SET):
        return group.Quantities or ()
    return ()


def find_attribute(group, key: str) -> ifcopenshell.entity_instance | None:
    """First property/quantity in ``group`` whose Name equals ``key``."""
    for attribute in attributes_of(group):
        if attribute.Name is not None and attribute.Name == key:
            return attribute
    return None


def locate_pset(element, name: str) -> SetMatch | None:
    """Find a property set by name, instance level first."""
    group = find_set(instance_property_sets(element), name)
    if group is not None:
        return SetMatch(group, ValueSource.PSET_INSTANCE)
    group = find_set(type_property_sets(element), name)
    if group is not None:
        return SetMatch(group, ValueSource.PSET_TYPE)
    return None


def locate_qto(element, name: str) -> SetMatch | None:
    """Find a quantity set by name, instance level first."""
    group = find_set(instance_quantity_sets(element), name)
    if group is not None:
        return SetMatch(group, ValueSource.QTO_INSTANCE)
    group = find_set(type_quantity_sets(element), name)
    if group is not None:
        return SetMatch(group, ValueSource.QTO_TYPE)
    return None


def has_pset(element, name: str) -> bool:
    """True if the property set is attached to the element or inherited from its type."""
    return find_set(all_property_sets(element), name) is not None


def has_qto(element, name: str) -> bool:
    """True if the quantity set is attached to the element or inherited from its type."""
    return find_set(all_quantity_sets(element), name) is not None
