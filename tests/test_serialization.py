"""
Tests for serialization and deserialization of langyear views.

These tests ensure lossless JSON/YAML round-trip using the explicit
serialization functions in `langyear.serialization`.
"""

import pytest
from langyear.model import Record, TabularView, GroupedView
from langyear.serialization import (
    tabular_to_dict,
    tabular_to_json,
    tabular_from_json,
    tabular_to_yaml,
    tabular_from_yaml,
    grouped_to_dict,
    grouped_from_dict,
    grouped_to_json,
    grouped_from_json,
    grouped_to_yaml,
    grouped_from_yaml,
)


def build_sample_records():
    return [
        Record(2011, "Elixir"),
        Record(2011, "Red"),
        Record(2012, "Crystal"),
        Record(1991, "Python"),
    ]


def test_tabular_json_roundtrip():
    view = TabularView(build_sample_records())
    restored = tabular_from_json(tabular_to_json(view))
    assert list(restored) == list(view)


def test_tabular_yaml_roundtrip():
    view = TabularView(build_sample_records())
    restored = tabular_from_yaml(tabular_to_yaml(view))
    assert tabular_to_dict(restored) == tabular_to_dict(view)


def test_grouped_json_roundtrip_keeps_int_keys_and_order():
    view = GroupedView.from_records(build_sample_records())
    restored = grouped_from_json(grouped_to_json(view))
    assert restored.years() == [2011, 2012, 1991]
    assert restored.as_dict() == view.as_dict()


def test_grouped_yaml_roundtrip():
    view = GroupedView.from_records(build_sample_records())
    restored = grouped_from_yaml(grouped_to_yaml(view))
    assert grouped_to_dict(restored) == grouped_to_dict(view)


def test_grouped_dict_shape():
    view = GroupedView.from_records(build_sample_records())
    assert grouped_to_dict(view)["groups"][0] == {"year": 2011, "languages": ["Elixir", "Red"]}


def test_empty_views_roundtrip():
    assert len(tabular_from_json(tabular_to_json(TabularView([])))) == 0
    assert len(grouped_from_yaml(grouped_to_yaml(GroupedView()))) == 0


def test_grouped_from_dict_drops_empty_years():
    """Years are only created by adding a language."""
    view = grouped_from_dict({"groups": [{"year": 2000, "languages": []}]})
    assert 2000 not in view


def test_float_year_is_rejected_not_truncated():
    with pytest.raises(ValueError, match="Year must be an integer"):
        tabular_from_json('{"records": [{"year": 1991.7, "language": "Python"}]}')
    with pytest.raises(ValueError):
        grouped_from_yaml("groups:\n- year: 1991.7\n  languages: [Python]\n")


def test_string_year_is_rejected():
    with pytest.raises(ValueError):
        grouped_from_dict({"groups": [{"year": "1991", "languages": ["Python"]}]})
