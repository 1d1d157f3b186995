"""Model overview: product counts, property set coverage, wall quick stats.

Coverage counts only instance-level groups, i.e. what is attached to the
element itself rather than inherited from its type.
"""

from __future__ import annotations

from collections import Counter

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from ifc_qa.queries.psets import instance_property_sets, instance_quantity_sets
from ifc_qa.store import IfcStore

WALL_CLASSES = ("IfcWall", "IfcWallStandardCase")
WALL_PSET = "Pset_WallCommon"
WALL_QTO = "Qto_WallBaseQuantities"
TOP_N = 30


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ClassStats(_CamelModel):
    """Coverage figures for one IFC class."""

    ifc_class: str
    count: int = 0
    with_any_pset_count: int = 0
    with_any_qto_count: int = 0

    @computed_field(alias="withAnyPsetPct")
    @property
    def with_any_pset_pct(self) -> float:
        return self.with_any_pset_count / self.count if self.count else 0.0

    @computed_field(alias="withAnyQtoPct")
    @property
    def with_any_qto_pct(self) -> float:
        return self.with_any_qto_count / self.count if self.count else 0.0


class NameCount(_CamelModel):
    name: str
    count: int


class WallQuickStats(_CamelModel):
    wall_count: int = 0
    with_pset_wall_common: int = 0
    with_qto_wall_base_quantities: int = 0


class ModelSummary(_CamelModel):
    ifc_path: str
    schema_name: str = ""
    product_count: int = 0
    by_class: list[ClassStats] = Field(default_factory=list)
    top_psets: list[NameCount] = Field(default_factory=list)
    top_qtos: list[NameCount] = Field(default_factory=list)
    wall_quick_stats: WallQuickStats = Field(default_factory=WallQuickStats)


def _top_names(counter: Counter) -> list[NameCount]:
    return [NameCount(name=n, count=c) for n, c in counter.most_common(TOP_N)]


def summarize(store: IfcStore) -> ModelSummary:
    """Build a ModelSummary for every IfcProduct in the store."""
    by_class: dict[str, ClassStats] = {}
    pset_names: Counter = Counter()
    qto_names: Counter = Counter()
    walls = WallQuickStats()
    wall_classes = {c.lower() for c in WALL_CLASSES}
    products = store.products()

    for product in products:
        psets = instance_property_sets(product)
        qtos = instance_quantity_sets(product)

        ifc_class = product.is_a()
        stats = by_class.setdefault(ifc_class, ClassStats(ifc_class=ifc_class))
        stats.count += 1
        if psets:
            stats.with_any_pset_count += 1
        if qtos:
            stats.with_any_qto_count += 1

        pset_names.update(p.Name for p in psets if p.Name and p.Name.strip())
        qto_names.update(q.Name for q in qtos if q.Name and q.Name.strip())

        if ifc_class.lower() in wall_classes:
            walls.wall_count += 1
            if any(p.Name == WALL_PSET for p in psets):
                walls.with_pset_wall_common += 1
            if any(q.Name == WALL_QTO for q in qtos):
                walls.with_qto_wall_base_quantities += 1

    return ModelSummary(
        ifc_path=store.path,
        schema_name=store.schema,
        product_count=len(products),
        # sorted() is stable: ties keep first-seen order
        by_class=sorted(by_class.values(), key=lambda s: s.count, reverse=True),
        top_psets=_top_names(pset_names),
        top_qtos=_top_names(qto_names),
        wall_quick_stats=walls,
    )
