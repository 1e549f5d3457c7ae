"""
Table Summary: read-only description of a record table.

This module provides a lightweight overview of a TabularView or GroupedView:
    - Record and year counts
    - Year range
    - Busiest year
    - Languages listed under more than one record
    - Warning flags for data that makes lookups ambiguous

IMPORTANT: This is an analysis layer. It does NOT modify the view.
It only produces read-only reports.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from langyear.model import GroupedView, TabularView


@dataclass
class TableSummary:
    """Summary of a record table."""

    total_records: int = 0
    distinct_years: int = 0
    first_year: Optional[int] = None
    last_year: Optional[int] = None

    busiest_year: Optional[int] = None
    busiest_year_count: int = 0

    # Languages that appear in more than one record
    repeated_languages: List[str] = field(default_factory=list)

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the summary."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def _pairs(view: Union[TabularView, GroupedView]) -> List[Tuple[int, str]]:
    if isinstance(view, TabularView):
        return [(r.year, r.language) for r in view]
    if isinstance(view, GroupedView):
        return [(year, lang) for year, langs in view.items() for lang in langs]
    raise TypeError(f"Expected TabularView or GroupedView, got {type(view).__name__}")


def summarize(view: Union[TabularView, GroupedView]) -> TableSummary:
    """
    Describe a view.

    For a GroupedView, record order is the grouped order (year by year),
    so ties for busiest year go to the year inserted first.

    Returns a TableSummary with metrics and warnings.
    """
    pairs = _pairs(view)
    summary = TableSummary(total_records=len(pairs))

    if not pairs:
        summary.add_warning("Table is empty")
        return summary

    # Counter keeps first-seen order, so most_common breaks ties by source order
    per_year = Counter(year for year, _ in pairs)
    summary.distinct_years = len(per_year)
    summary.first_year = min(per_year)
    summary.last_year = max(per_year)
    summary.busiest_year, summary.busiest_year_count = per_year.most_common(1)[0]

    per_language = Counter(lang for _, lang in pairs)
    summary.repeated_languages = [lang for lang, n in per_language.items() if n > 1]

    if summary.repeated_languages:
        summary.add_warning(
            f"Languages listed more than once: {', '.join(summary.repeated_languages)}"
        )

    blank = sum(1 for _, lang in pairs if not lang.strip())
    if blank:
        summary.add_warning(f"Records with a blank language name: {blank}")

    return summary
