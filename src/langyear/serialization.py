"""
Serialization helpers for langyear views (TabularView, GroupedView).

Provides lossless JSON/YAML round-trip via intermediate dict representation.
Grouped views are stored as a list of {year, languages} entries so that
key order survives formats that sort or stringify mapping keys.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from langyear.model import GroupedView, Record, TabularView


def _year_from(value: Any) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"Year must be an integer, got {type(value).__name__}: {value!r}")
    return value


def record_to_dict(r: Record) -> Dict[str, Any]:
    return {"year": r.year, "language": r.language}


def record_from_dict(d: Dict[str, Any]) -> Record:
    return Record(year=_year_from(d["year"]), language=d["language"])


def tabular_to_dict(view: TabularView) -> Dict[str, Any]:
    return {"records": [record_to_dict(r) for r in view]}


def tabular_from_dict(d: Dict[str, Any]) -> TabularView:
    return TabularView(record_from_dict(r) for r in d.get("records", []))


def grouped_to_dict(view: GroupedView) -> Dict[str, Any]:
    return {
        "groups": [
            {"year": year, "languages": languages}
            for year, languages in view.items()
        ]
    }


def grouped_from_dict(d: Dict[str, Any]) -> GroupedView:
    view = GroupedView()
    for group in d.get("groups", []):
        year = _year_from(group["year"])
        for language in group.get("languages", []):
            view.add(year, language)
    return view


def tabular_to_json(view: TabularView) -> str:
    return json.dumps(tabular_to_dict(view), sort_keys=True)


def tabular_from_json(s: str) -> TabularView:
    return tabular_from_dict(json.loads(s))


def grouped_to_json(view: GroupedView) -> str:
    return json.dumps(grouped_to_dict(view), sort_keys=True)


def grouped_from_json(s: str) -> GroupedView:
    return grouped_from_dict(json.loads(s))


def tabular_to_yaml(view: TabularView) -> str:
    return yaml.safe_dump(tabular_to_dict(view), sort_keys=False)


def tabular_from_yaml(s: str) -> TabularView:
    return tabular_from_dict(yaml.safe_load(s))


def grouped_to_yaml(view: GroupedView) -> str:
    return yaml.safe_dump(grouped_to_dict(view), sort_keys=False)


def grouped_from_yaml(s: str) -> GroupedView:
    return grouped_from_dict(yaml.safe_load(s))
