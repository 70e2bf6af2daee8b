"""Tests for the Python reference of the runtime helpers."""

import pytest

from jsx_stylesheet.runtime import get_style, merge_styles, resolve_class_names

SHEET = {
    "header1": {"color": "red", "fontSize": 12},
    "header2": {"color": "blue"},
    "header3": {"margin": 4},
    "active": {"fontWeight": "bold"},
}


# ---------------------------------------------------------------------------
# merge_styles
# ---------------------------------------------------------------------------


class TestMergeStyles:
    def test_later_sheet_wins(self):
        merged = merge_styles({"a": {"color": "red"}, "b": {}}, {"a": {"margin": 1}})
        assert merged == {"a": {"margin": 1}, "b": {}}

    def test_merge_is_shallow(self):
        first = {"a": {"color": "red"}}
        merged = merge_styles(first)
        assert merged["a"] is first["a"]

    def test_no_sheets(self):
        assert merge_styles() == {}


# ---------------------------------------------------------------------------
# get_style
# ---------------------------------------------------------------------------


class TestGetStyle:
    def test_class_string(self):
        assert get_style("header1 header3", SHEET) == {"color": "red", "fontSize": 12, "margin": 4}

    def test_later_class_wins(self):
        assert get_style("header1  header2", SHEET)["color"] == "blue"
        assert resolve_class_names("header2 header1", SHEET)["color"] == "red"

    def test_unknown_and_blank_classes(self):
        assert get_style("  missing ", SHEET) == {}
        assert get_style("", SHEET) == {}

    def test_nested_array_and_mapping(self):
        value = ["header1 header2", "header3", {"active": True, "header1": False}]
        assert get_style(value, SHEET) == {
            "color": "blue",
            "fontSize": 12,
            "margin": 4,
            "fontWeight": "bold",
        }

    def test_mapping_keys_resolved_in_order(self):
        assert get_style({"header2": 1, "header1": "yes"}, SHEET)["color"] == "red"

    def test_array_ignores_non_mapping_items(self):
        assert get_style(["header3", None, 0], SHEET) == {"margin": 4}

    @pytest.mark.parametrize("value", [None, 0, True, 3.5])
    def test_other_values_pass_through(self, value):
        assert get_style(value, SHEET) is value
