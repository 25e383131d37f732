"""Tests for text rendering of property listings."""

import pytest

from listbetter_property.domain.errors import InvalidInputError
from listbetter_property.domain.models import DataDescriptor, ListOptions, StructuredObject
from listbetter_property.domain.services.views import EMPTY_MESSAGE, display_properties
from listbetter_property.domain.services.views.property_formatter import (
    RULE,
    serialize_value,
    truncate_value,
)

WITH_VALUES = ListOptions(show_values=True)


def value_lines(text: str) -> list[str]:
    return [line for line in text.splitlines() if line.startswith("    Value: ")]


@pytest.mark.unit
class TestDisplayProperties:
    """Test display_properties output."""

    def test_empty_object(self):
        assert display_properties({}) == "No properties found."
        assert display_properties(StructuredObject()) == EMPTY_MESSAGE

    def test_person_layout(self, person):
        assert display_properties(person) == "\n".join(
            [
                "Properties:",
                "─" * 60,
                "  firstName (str)",
                "  lastName (str)",
                "  age (int)",
            ]
        )

    def test_rule_width(self):
        assert RULE == "─" * 60

    def test_values_hidden_without_explicit_options(self, person):
        assert "Value:" not in display_properties(person)

    def test_values_shown_when_requested(self, person):
        text = display_properties(person, WITH_VALUES)
        assert value_lines(text) == [
            '    Value: "John"',
            '    Value: "Doe"',
            "    Value: 30",
        ]

    def test_values_not_shown_when_disabled(self, person):
        text = display_properties(person, ListOptions(show_values=False))
        assert value_lines(text) == []

    def test_values_hidden_when_options_leave_them_unset(self, sample_object):
        text = display_properties(sample_object, ListOptions(include_non_enumerable=True))
        assert "  hidden (str) [non-enum]" in text
        assert "Value:" not in text

    def test_values_hidden_for_mapping_options(self, sample_object):
        options = ListOptions.from_mapping({"includeNonEnumerable": True})
        text = display_properties(sample_object, options)
        assert "  hidden (str) [non-enum]" in text
        assert "Value:" not in text

    def test_values_shown_for_mapping_options_that_ask(self, person):
        options = ListOptions.from_mapping({"showValues": True})
        assert value_lines(display_properties(person, options))[0] == '    Value: "John"'

    def test_attribute_labels(self, sample_object):
        text = display_properties(
            sample_object, ListOptions(show_values=True, include_non_enumerable=True)
        )
        lines = text.splitlines()
        assert "  computed [getter, setter]" in lines
        assert "  hidden (str) [non-enum]" in lines
        assert '    Value: "secret"' in lines
        assert '    Value: {"debug": false}' in lines

    def test_attribute_order(self):
        obj = StructuredObject().define_property(
            "locked",
            DataDescriptor(value=1, writable=False, enumerable=False, configurable=False),
        )
        text = display_properties(
            obj, ListOptions(include_non_enumerable=True, show_values=False)
        )
        assert text.splitlines()[-1] == "  locked (int) [non-enum, non-config, readonly]"

    def test_inherited_label(self, prototype_pair):
        child, _ = prototype_pair
        text = display_properties(child, ListOptions(include_inherited=True, show_values=False))
        assert text.splitlines()[-1] == "  greet (str) [inherited]"

    def test_long_value_is_truncated(self):
        # JSON text of this value is exactly 80 characters including quotes
        text = display_properties({"long": "x" * 78}, WITH_VALUES)
        (line,) = value_lines(text)
        payload = line[len("    Value: "):]
        assert payload == '"' + "x" * 49 + "..."
        assert len(payload) == 50 + len("...")

    def test_value_at_limit_is_kept(self):
        text = display_properties({"edge": "x" * 48}, WITH_VALUES)
        (line,) = value_lines(text)
        assert line == '    Value: "' + "x" * 48 + '"'

    def test_undefined_value_has_no_value_line(self):
        obj = StructuredObject().define_property("pending", DataDescriptor())
        text = display_properties(obj, WITH_VALUES)
        assert text.splitlines()[-1] == "  pending"

    def test_none_value_is_rendered(self):
        text = display_properties({"nothing": None}, WITH_VALUES)
        assert value_lines(text) == ["    Value: null"]

    def test_invalid_input(self):
        with pytest.raises(InvalidInputError):
            display_properties(None)


@pytest.mark.unit
class TestValueSerialization:
    """Test value serialization helpers."""

    def test_json_values(self):
        assert serialize_value([1, "a", True, None]) == '[1, "a", true, null]'
        assert serialize_value("é") == '"é"'

    def test_unsupported_objects_use_repr(self):
        assert serialize_value({1, 2}) == '"{1, 2}"'

    def test_non_string_keys_fall_back_to_repr(self):
        assert serialize_value({(1, 2): "a"}) == "{(1, 2): 'a'}"

    def test_self_referencing_container(self):
        loop: list = []
        loop.append(loop)
        assert serialize_value(loop) == "[[...]]"

    def test_truncate_value(self):
        assert truncate_value("abc", limit=2) == "ab..."
        assert truncate_value("ab", limit=2) == "ab"
