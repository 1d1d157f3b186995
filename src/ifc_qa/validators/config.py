"""Rule-set configuration files.

A rule set is a JSON document listing rules in evaluation order. Each entry
names its rule ``kind``; configurable rules also carry an ``id``, a
``severity`` label and their parameters::

    {
      "rules": [
        {"kind": "missing_name"},
        {"kind": "allowed_values", "id": "P001", "severity": "Warning",
         "ifc_class": "IfcDoor", "pset": "Pset_DoorCommon",
         "key": "FireRating", "allowed": ["EI30", "EI60"]}
      ]
    }
"""

from __future__ import annotations

from abc import abstractmethod
from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ifc_qa.models.issues import Severity
from ifc_qa.validators.base import Rule
from ifc_qa.validators.general import DuplicateGlobalId, MissingName
from ifc_qa.validators.properties import (
    AllowedValues,
    RequireEqualStrings,
    RequireInstanceEqualsType,
    SurveyValue,
)
from ifc_qa.validators.quantities import RequireQtoQuantityValueNumber
from ifc_qa.validators.walls import HasQtoWallBaseQuantities, WallHasPsetWallCommon


class RuleConfigError(ValueError):
    """A rule-set file is missing or invalid."""


class _RuleConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    @abstractmethod
    def build(self) -> Rule:
        """Instantiate the configured rule."""


# ── Fixed rules ───────────────────────────────────────────────────────


class MissingNameConfig(_RuleConfig):
    kind: Literal["missing_name"]

    def build(self) -> Rule:
        return MissingName()


class DuplicateGlobalIdConfig(_RuleConfig):
    kind: Literal["duplicate_global_id"]

    def build(self) -> Rule:
        return DuplicateGlobalId()


class WallHasPsetWallCommonConfig(_RuleConfig):
    kind: Literal["wall_has_pset_wall_common"]

    def build(self) -> Rule:
        return WallHasPsetWallCommon()


class HasQtoWallBaseQuantitiesConfig(_RuleConfig):
    kind: Literal["has_qto_wall_base_quantities"]

    def build(self) -> Rule:
        return HasQtoWallBaseQuantities()


# ── Configurable rules ────────────────────────────────────────────────


class _TargetedConfig(_RuleConfig):
    id: str = Field(min_length=1)
    severity: Severity = Severity.ERROR
    ifc_class: str = Field(min_length=1, description="Exact IFC class name, e.g. 'IfcDoor'")


class AllowedValuesConfig(_TargetedConfig):
    kind: Literal["allowed_values"]
    pset: str
    key: str
    allowed: list[str] = Field(min_length=1)
    skip_if_missing: bool = False

    def build(self) -> Rule:
        return AllowedValues(
            self.id, self.severity, self.ifc_class, self.pset, self.key,
            self.allowed, self.skip_if_missing,
        )


class RequireEqualStringsConfig(_TargetedConfig):
    kind: Literal["require_equal_strings"]
    pset_a: str
    key_a: str
    pset_b: str
    key_b: str

    def build(self) -> Rule:
        return RequireEqualStrings(
            self.id, self.severity, self.ifc_class,
            self.pset_a, self.key_a, self.pset_b, self.key_b,
        )


class RequireInstanceEqualsTypeConfig(_TargetedConfig):
    kind: Literal["require_instance_equals_type"]
    pset: str
    key: str

    def build(self) -> Rule:
        return RequireInstanceEqualsType(
            self.id, self.severity, self.ifc_class, self.pset, self.key
        )


class RequireQtoQuantityValueNumberConfig(_TargetedConfig):
    kind: Literal["require_qto_quantity_value_number"]
    qto_name: str
    quantity_name: str
    min_exclusive: float = 0.0

    def build(self) -> Rule:
        return RequireQtoQuantityValueNumber(
            self.id, self.severity, self.ifc_class,
            self.qto_name, self.quantity_name, self.min_exclusive,
        )


class SurveyValueConfig(_TargetedConfig):
    kind: Literal["survey_value"]
    severity: Severity = Severity.INFO
    pset: str
    key: str

    def build(self) -> Rule:
        return SurveyValue(self.id, self.severity, self.ifc_class, self.pset, self.key)


RuleConfig = Annotated[
    Union[
        MissingNameConfig,
        DuplicateGlobalIdConfig,
        WallHasPsetWallCommonConfig,
        HasQtoWallBaseQuantitiesConfig,
        AllowedValuesConfig,
        RequireEqualStringsConfig,
        RequireInstanceEqualsTypeConfig,
        RequireQtoQuantityValueNumberConfig,
        SurveyValueConfig,
    ],
    Field(discriminator="kind"),
]


class RuleSetConfig(BaseModel):
    """An ordered list of rule configurations."""

    rules: list[RuleConfig] = Field(default_factory=list)

    @model_validator(mode="after")
    def rule_ids_unique(self) -> RuleSetConfig:
        seen: set[str] = set()
        for rule in self.build():
            if rule.rule_id in seen:
                raise ValueError(f"Duplicate rule id '{rule.rule_id}'")
            seen.add(rule.rule_id)
        return self

    def build(self) -> list[Rule]:
        """Instantiate the configured rules, in file order."""
        return [cfg.build() for cfg in self.rules]

    @classmethod
    def load(cls, path: str | Path) -> RuleSetConfig:
        """Load a rule set from a JSON file.

        Raises:
            RuleConfigError: File missing or not a valid rule set.
        """
        path = Path(path)
        if not path.is_file():
            raise RuleConfigError(f"Rule set not found: {path}")
        try:
            return cls.model_validate_json(path.read_text(encoding="utf-8"))
        except ValidationError as exc:
            raise RuleConfigError(f"Invalid rule set {path}: {exc}") from exc


def load_rules(path: str | Path) -> list[Rule]:
    """Rules configured in the JSON file at ``path``."""
    return RuleSetConfig.load(path).build()
