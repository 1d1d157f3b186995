"""Wall completeness checks.

- W001: wall has Pset_WallCommon
- W002: wall has Qto_WallBaseQuantities (recommended)

Class matching is literal, so both the base and the standard-case wall
class are listed.
"""

from __future__ import annotations

from typing import Iterator

from ifc_qa.models.issues import Issue, Severity, ValueSource
from ifc_qa.queries.psets import has_pset, has_qto
from ifc_qa.store import IfcStore
from ifc_qa.validators.base import Rule, products_of

WALL_CLASSES = ("IfcWall", "IfcWallStandardCase")
PSET_WALL_COMMON = "Pset_WallCommon"
QTO_WALL_BASE_QUANTITIES = "Qto_WallBaseQuantities"


class WallHasPsetWallCommon(Rule):
    rule_id = "W001"
    severity = Severity.ERROR

    def evaluate(self, store: IfcStore) -> Iterator[Issue]:
        for wall in products_of(store, *WALL_CLASSES):
            if not has_pset(wall, PSET_WALL_COMMON):
                yield self.issue(
                    wall,
                    f"Wall is missing required property set: {PSET_WALL_COMMON}",
                    path=PSET_WALL_COMMON,
                    source=ValueSource.PSET_INSTANCE,
                    expected="Present",
                    actual="Missing",
                )


class HasQtoWallBaseQuantities(Rule):
    """Advisory only, reported as a warning."""

    rule_id = "W002"
    severity = Severity.WARNING

    def evaluate(self, store: IfcStore) -> Iterator[Issue]:
        for wall in products_of(store, *WALL_CLASSES):
            if not has_qto(wall, QTO_WALL_BASE_QUANTITIES):
                yield self.issue(
                    wall,
                    f"Wall is missing quantity set (recommended): {QTO_WALL_BASE_QUANTITIES}",
                    path=QTO_WALL_BASE_QUANTITIES,
                    source=ValueSource.QTO_INSTANCE,
                    expected="Present",
                    actual="Missing",
                )
