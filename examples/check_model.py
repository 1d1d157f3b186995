"""Example: build a tiny IFC model in memory and run a rule set on it.

Run: python examples/check_model.py
"""

from pathlib import Path

import ifcopenshell
import ifcopenshell.guid

from ifc_qa.analyzer import run_rules
from ifc_qa.store import IfcStore
from ifc_qa.validators import load_rules

RULES = Path(__file__).parent / "rules.json"


def build_model() -> ifcopenshell.file:
    f = ifcopenshell.file(schema="IFC4")
    wall = f.createIfcWall(GlobalId=ifcopenshell.guid.new(), Name="South Wall")
    pset = f.createIfcPropertySet(
        GlobalId=ifcopenshell.guid.new(),
        Name="Pset_WallCommon",
        HasProperties=[
            f.createIfcPropertySingleValue(
                Name="FireRating", NominalValue=f.create_entity("IfcLabel", "EI60")
            ),
        ],
    )
    f.createIfcRelDefinesByProperties(
        GlobalId=ifcopenshell.guid.new(), RelatedObjects=[wall], RelatingPropertyDefinition=pset
    )
    f.createIfcDoor(GlobalId=ifcopenshell.guid.new(), Name=None)
    return f


if __name__ == "__main__":
    with IfcStore(build_model(), path="<example>") as store:
        result = run_rules(store, load_rules(RULES))
    for issue in result.issues:
        print(f"[{issue.severity.value}] {issue.rule_id} {issue.ifc_class} "
              f"{issue.name or '<unnamed>'}: {issue.message}")
