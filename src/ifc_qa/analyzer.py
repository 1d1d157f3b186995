"""Run QA rules against an IFC model.

The model is opened once per run and held until every rule's issues have
been collected. Rules run in the configured order; each rule's issues keep
the rule's own entity order. Any exception raised while a rule walks the
model aborts the whole run and no RunResult is produced.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from ifc_qa.models.issues import Issue, RunResult
from ifc_qa.queries.summary import ModelSummary, summarize
from ifc_qa.store import IfcStore
from ifc_qa.validators.base import Rule
from ifc_qa.validators.general import DuplicateGlobalId, MissingName
from ifc_qa.validators.walls import HasQtoWallBaseQuantities, WallHasPsetWallCommon

logger = logging.getLogger(__name__)


def default_rules() -> list[Rule]:
    """The built-in rule set, in evaluation order."""
    return [
        MissingName(),
        DuplicateGlobalId(),
        WallHasPsetWallCommon(),
        HasQtoWallBaseQuantities(),
    ]


def run_rules(store: IfcStore, rules: Sequence[Rule]) -> RunResult:
    """Evaluate ``rules`` against an open store and collect their issues."""
    issues: list[Issue] = []
    for rule in rules:
        # Materialize while the store is still open
        found = list(rule.evaluate(store))
        logger.debug("Rule %s produced %d issue(s)", rule.rule_id, len(found))
        issues.extend(found)
    logger.info("%d rule(s), %d issue(s) for %s", len(rules), len(issues), store.path)
    return RunResult(ifc_path=store.path, issues=issues)


def analyze_with_rules(
    ifc_path: str | Path,
    rules: Sequence[Rule] | None = None,
) -> RunResult:
    """Open ``ifc_path``, run ``rules`` (default: built-in set) and close it.

    Raises:
        InputNotFoundError: The path does not resolve to a loadable model.
    """
    if rules is None:
        rules = default_rules()
    with IfcStore.open(ifc_path) as store:
        return run_rules(store, rules)


def analyze(ifc_path: str | Path) -> ModelSummary:
    """Product counts and property set coverage for ``ifc_path``."""
    with IfcStore.open(ifc_path) as store:
        return summarize(store)
