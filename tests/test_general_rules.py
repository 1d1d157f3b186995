"""Tests for G001 MissingName and G002 DuplicateGlobalId."""

from conftest import new_guid

from ifc_qa.models import Severity, ValueSource
from ifc_qa.validators import DuplicateGlobalId, MissingName


class TestMissingName:
    def test_blank_names(self, builder):
        """None, empty and whitespace-only names → one issue each."""
        builder.wall(name=None)
        builder.wall(name="")
        builder.product("IfcDoor", name="   ")
        builder.wall(name="W1")
        issues = list(MissingName().evaluate(builder.store()))
        assert len(issues) == 3
        assert [i.ifc_class for i in issues] == ["IfcWall", "IfcWall", "IfcDoor"]
        assert [i.actual for i in issues] == [None, "", "   "]

    def test_named_products_pass(self, builder):
        builder.wall(name="W1")
        builder.product("IfcSlab", name=" Floor ")
        assert list(MissingName().evaluate(builder.store())) == []

    def test_issue_fields(self, builder):
        wall = builder.wall(name=None)
        [issue] = MissingName().evaluate(builder.store())
        assert issue.rule_id == "G001"
        assert issue.severity == Severity.ERROR
        assert issue.global_id == wall.GlobalId
        assert issue.name is None
        assert issue.path == "Name"
        assert issue.source == ValueSource.ATTRIBUTE

    def test_non_products_ignored(self, builder):
        """Property sets without a name are not entities under validation."""
        builder.wall(name="W1")
        builder.file.createIfcPropertySet(GlobalId=new_guid())
        assert list(MissingName().evaluate(builder.store())) == []


class TestDuplicateGlobalId:
    def test_pair_reports_both(self, builder):
        """Two products sharing an id → two issues, not one."""
        shared = new_guid()
        a = builder.wall("A", global_id=shared)
        builder.wall("B")
        b = builder.product("IfcDoor", "C", global_id=shared)
        issues = list(DuplicateGlobalId().evaluate(builder.store()))
        assert len(issues) == 2
        assert [i.name for i in issues] == [a.Name, b.Name]
        assert all(i.global_id == shared for i in issues)
        assert "shared by 2 entities" in issues[0].message

    def test_group_size(self, builder):
        shared = new_guid()
        for n in range(3):
            builder.wall(f"W{n}", global_id=shared)
        issues = list(DuplicateGlobalId().evaluate(builder.store()))
        assert len(issues) == 3
        assert issues[0].actual == "3 occurrences"

    def test_unique_ids(self, builder):
        builder.wall("A")
        builder.wall("B")
        assert list(DuplicateGlobalId().evaluate(builder.store())) == []

    def test_missing_ids_are_not_duplicates(self, builder):
        """Products without a GlobalId are not grouped together."""
        builder.file.create_entity("IfcWall", Name="A")
        builder.file.create_entity("IfcWall", Name="B")
        assert list(DuplicateGlobalId().evaluate(builder.store())) == []
