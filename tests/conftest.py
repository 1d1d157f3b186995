"""Shared fixtures: small IFC models built in memory with ifcopenshell."""

from __future__ import annotations

import uuid

import ifcopenshell
import ifcopenshell.guid
import pytest

from ifc_qa.store import IfcStore


def new_guid() -> str:
    return ifcopenshell.guid.compress(uuid.uuid4().hex)


class ModelBuilder:
    """Creates products and attaches property/quantity sets to them."""

    def __init__(self, schema: str = "IFC4"):
        self.file = ifcopenshell.file(schema=schema)

    # ── Products ──────────────────────────────────────────────────────

    def product(self, ifc_class: str = "IfcWall", name: str | None = "Wall", global_id: str | None = None):
        return self.file.create_entity(
            ifc_class, GlobalId=global_id or new_guid(), Name=name
        )

    def wall(self, name: str | None = "Wall", **kwargs):
        return self.product("IfcWall", name, **kwargs)

    # ── Attribute groups ──────────────────────────────────────────────

    def _value(self, value):
        if value is None:
            return None
        if isinstance(value, bool):
            return self.file.create_entity("IfcBoolean", value)
        if isinstance(value, int):
            return self.file.create_entity("IfcInteger", value)
        if isinstance(value, float):
            return self.file.create_entity("IfcReal", value)
        return self.file.create_entity("IfcLabel", value)

    def pset(self, name: str, props: dict):
        return self.file.createIfcPropertySet(
            GlobalId=new_guid(),
            Name=name,
            HasProperties=[
                self.file.createIfcPropertySingleValue(Name=k, NominalValue=self._value(v))
                for k, v in props.items()
            ],
        )

    def qto(self, name: str, quantities: dict):
        items = []
        for k, v in quantities.items():
            if v is None:
                items.append(self.file.createIfcQuantityLength(Name=k))
            else:
                items.append(self.file.createIfcQuantityLength(Name=k, LengthValue=float(v)))
        return self.file.createIfcElementQuantity(
            GlobalId=new_guid(), Name=name, Quantities=items
        )

    def attach(self, element, group):
        self.file.createIfcRelDefinesByProperties(
            GlobalId=new_guid(),
            RelatedObjects=[element],
            RelatingPropertyDefinition=group,
        )
        return group

    def add_pset(self, element, name: str, props: dict):
        return self.attach(element, self.pset(name, props))

    def add_qto(self, element, name: str, quantities: dict):
        return self.attach(element, self.qto(name, quantities))

    def add_type(self, element, *groups, ifc_class: str = "IfcWallType", name: str = "Wall Type"):
        """Type the element by a new type object carrying ``groups``."""
        attrs = {"GlobalId": new_guid(), "Name": name}
        if groups:
            attrs["HasPropertySets"] = list(groups)
        type_obj = self.file.create_entity(ifc_class, **attrs)
        self.file.createIfcRelDefinesByType(
            GlobalId=new_guid(), RelatedObjects=[element], RelatingType=type_obj
        )
        return type_obj

    def store(self, path: str = "test.ifc") -> IfcStore:
        return IfcStore(self.file, path=path)


@pytest.fixture
def builder() -> ModelBuilder:
    return ModelBuilder()


@pytest.fixture
def builder_2x3() -> ModelBuilder:
    return ModelBuilder(schema="IFC2X3")
