"""QA rules for IFC models.

Fixed rules:
- general: G001 missing name, G002 duplicate GlobalId
- walls: W001 Pset_WallCommon present, W002 Qto_WallBaseQuantities present

Configurable rules (id, severity and target set per instance):
- properties: allowed values, equal strings, instance equals type, survey
- quantities: quantity value is a number above a bound

Rule sets can be loaded from JSON, see config.
"""

from ifc_qa.validators.base import Rule, matches_class, products_of
from ifc_qa.validators.general import DuplicateGlobalId, MissingName
from ifc_qa.validators.walls import HasQtoWallBaseQuantities, WallHasPsetWallCommon
from ifc_qa.validators.properties import (
    AllowedValues,
    RequireEqualStrings,
    RequireInstanceEqualsType,
    SurveyValue,
)
from ifc_qa.validators.quantities import RequireQtoQuantityValueNumber
from ifc_qa.validators.config import RuleConfigError, RuleSetConfig, load_rules

__all__ = [
    "Rule",
    "matches_class",
    "products_of",
    "MissingName",
    "DuplicateGlobalId",
    "WallHasPsetWallCommon",
    "HasQtoWallBaseQuantities",
    "AllowedValues",
    "RequireEqualStrings",
    "RequireInstanceEqualsType",
    "SurveyValue",
    "RequireQtoQuantityValueNumber",
    "RuleConfigError",
    "RuleSetConfig",
    "load_rules",
]
