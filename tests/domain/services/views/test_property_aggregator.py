"""Tests for grouping and counting views."""

import pytest

from listbetter_property.domain.errors import InvalidInputError
from listbetter_property.domain.models import (
    AccessorDescriptor,
    CountReport,
    DataDescriptor,
    StructuredObject,
)
from listbetter_property.domain.services.views import UNKNOWN_TYPE, count_properties, group_by_type
from tests.sample_types import Child, Point


@pytest.mark.unit
class TestGroupByType:
    """Test grouping member names by type."""

    def test_mixed_data(self, mixed_data):
        grouped = group_by_type(mixed_data)
        assert grouped == {
            "str": ["title"],
            "int": ["count"],
            "bool": ["enabled"],
            "list": ["items"],
            "dict": ["metadata"],
        }
        assert list(grouped) == ["str", "int", "bool", "list", "dict"]

    def test_accessors_are_unknown(self, sample_object):
        grouped = group_by_type(sample_object)
        assert grouped[UNKNOWN_TYPE] == ["computed"]
        assert "hidden" not in [name for group in grouped.values() for name in group]
        assert list(grouped)[-1] == "unknown"

    def test_names_keep_listing_order(self, person):
        assert group_by_type(person) == {"str": ["firstName", "lastName"], "int": ["age"]}

    def test_undefined_values_are_unknown(self):
        obj = StructuredObject({"a": 1}).define_property("pending", DataDescriptor())
        assert group_by_type(obj) == {"int": ["a"], "unknown": ["pending"]}

    def test_groups_partition_members(self, sample_object):
        grouped = group_by_type(sample_object)
        grouped_names = [name for group in grouped.values() for name in group]
        assert sorted(grouped_names) == sorted(set(grouped_names))
        assert sorted(grouped_names) == sorted(sample_object)

    def test_inherited_members_are_excluded(self, prototype_pair):
        child, _ = prototype_pair
        assert group_by_type(child) == {"str": ["shared"], "int": ["own"]}

    def test_empty_object(self):
        assert group_by_type({}) == {}


@pytest.mark.unit
class TestCountProperties:
    """Test member count statistics."""

    def test_sample_object(self, sample_object):
        assert count_properties(sample_object) == CountReport(
            total=7,
            enumerable=6,
            non_enumerable=1,
            writable=6,
            readonly=0,
            with_getters=1,
            with_setters=1,
        )

    def test_accessor_and_hidden_member_scenario(self):
        obj = StructuredObject()
        obj.define_property(
            "fullName",
            AccessorDescriptor(getter=lambda self: "Ada", setter=lambda self, value: None),
        )
        obj.define_property("_id", DataDescriptor(value=1, enumerable=False))
        report = count_properties(obj)
        assert report.with_getters == 1
        assert report.with_setters == 1
        assert report.non_enumerable == 1
        assert report.total == 2

    def test_readonly_excludes_accessors(self):
        obj = StructuredObject().define_property(
            "version", AccessorDescriptor(getter=lambda self: "1.0")
        )
        report = count_properties(obj)
        assert report.readonly == 0
        assert report.writable == 0
        assert report.with_getters == 1
        assert report.with_setters == 0

    def test_frozen_dataclass(self):
        report = count_properties(Point(1, 2))
        assert report.readonly == 2
        assert report.writable == 0

    def test_inherited_members_are_not_counted(self, prototype_pair):
        child, _ = prototype_pair
        assert count_properties(child).total == 2

    def test_keys_that_render_alike_are_counted_separately(self):
        report = count_properties({1: "int-key", "1": "str-key"})
        assert report.total == 2
        assert report.writable == 2

    @pytest.mark.parametrize(
        "subject",
        [{}, {"a": 1}, [1, 2], Child(), Child, Point(0, 0)],
    )
    def test_total_is_enumerable_plus_hidden(self, subject):
        report = count_properties(subject)
        assert report.total == report.enumerable + report.non_enumerable

    def test_invalid_input(self):
        with pytest.raises(InvalidInputError):
            count_properties(3)
