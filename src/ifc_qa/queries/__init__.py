"""Graph queries over a loaded IFC model.

- psets: instance- and type-level property/quantity set resolution
- values: property and quantity value coercion
- summary: product counts and property set coverage
"""

from ifc_qa.queries.psets import (
    SetMatch,
    all_property_sets,
    all_quantity_sets,
    find_attribute,
    find_set,
    get_type_definition,
    has_pset,
    has_qto,
    instance_property_sets,
    instance_quantity_sets,
    locate_pset,
    locate_qto,
    type_property_sets,
    type_quantity_sets,
)
from ifc_qa.queries.values import Coercion, as_number, as_string, raw_value
from ifc_qa.queries.summary import ModelSummary, summarize

__all__ = [
    "SetMatch",
    "all_property_sets",
    "all_quantity_sets",
    "find_attribute",
    "find_set",
    "get_type_definition",
    "has_pset",
    "has_qto",
    "instance_property_sets",
    "instance_quantity_sets",
    "locate_pset",
    "locate_qto",
    "type_property_sets",
    "type_quantity_sets",
    "Coercion",
    "as_number",
    "as_string",
    "raw_value",
    "ModelSummary",
    "summarize",
]
