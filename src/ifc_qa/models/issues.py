"""QA findings: Issue and RunResult.

Both serialize to JSON with camelCase keys (``ruleId``, ``ifcClass``,
``globalId``, ``ifcPath``) so report emitters can consume them directly.
Severity and ValueSource always serialize as their enum labels.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Severity(str, Enum):
    """Issue severity. INFO is observational, not a failure."""

    ERROR = "Error"
    WARNING = "Warning"
    INFO = "Info"


class ValueSource(str, Enum):
    """Where the checked value was looked up."""

    ATTRIBUTE = "Attribute"
    PSET_INSTANCE = "PsetInstance"
    PSET_TYPE = "PsetType"
    QTO_INSTANCE = "QtoInstance"
    QTO_TYPE = "QtoType"


class Issue(BaseModel):
    """One finding emitted by one rule for one entity."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    rule_id: str
    severity: Severity
    ifc_class: str = Field(description="Entity type name, e.g. 'IfcWall'")
    global_id: str = ""
    name: str | None = None
    message: str
    path: str | None = Field(
        default=None, description="'Pset.Key' locator, or the set name for existence checks"
    )
    source: ValueSource | None = None
    expected: str | None = None
    actual: str | None = None


class RunResult(BaseModel):
    """All issues of one run, in rule-then-entity order."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    ifc_path: str
    issues: list[Issue] = Field(default_factory=list)

    def count(self, severity: Severity) -> int:
        return sum(1 for i in self.issues if i.severity == severity)

    def counts(self) -> dict[str, int]:
        """Issue count per severity label, e.g. {'Error': 3, 'Warning': 1, 'Info': 0}."""
        return {s.value: self.count(s) for s in Severity}

    def by_rule(self, rule_id: str) -> list[Issue]:
        return [i for i in self.issues if i.rule_id == rule_id]

    def to_json(self, indent: int | None = 2) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)

    @classmethod
    def from_json(cls, text: str) -> RunResult:
        return cls.model_validate_json(text)
