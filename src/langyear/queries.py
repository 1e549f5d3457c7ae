"""
Lookup queries over TabularView and GroupedView.

Two questions, each answerable from either view:
    - Which year was a given language created?
    - How many languages were created in a given year?

IMPORTANT: Queries are read-only. They never modify the view they are given.

Contracts per operation:
    year_created         -> year, or None when the language is absent
    year_created_strict  -> year, or LanguageNotFoundError
    how_many_per_year    -> TabularView: count, 0 when the year is absent
                            GroupedView: count, KeyNotFoundError when absent
"""

from typing import Dict, Optional, Union

from langyear.model import (
    GroupedView,
    KeyNotFoundError,
    LanguageNotFoundError,
    TabularView,
    YEAR_COLUMN,
    LANGUAGE_COLUMN,
)

View = Union[TabularView, GroupedView]


def _check_view(view: object) -> None:
    if not isinstance(view, (TabularView, GroupedView)):
        raise TypeError(f"Expected TabularView or GroupedView, got {type(view).__name__}")


def year_created(view: View, language: str) -> Optional[int]:
    """
    Return the year `language` was created, or None if no record has it.

    TabularView: first match in the language column, in source order.
    GroupedView: years are scanned in insertion order and the first year
    whose list contains the language wins. This is a linear scan over every
    group; use language_index() when many lookups are needed.
    """
    _check_view(view)

    if isinstance(view, TabularView):
        years = view.column(YEAR_COLUMN)
        for i, name in enumerate(view.column(LANGUAGE_COLUMN)):
            if name == language:
                return years[i]
        return None

    for year, langs in view.items():
        if language in langs:
            return year
    return None


def year_created_strict(view: View, language: str) -> int:
    """
    Same lookup as year_created, but a miss is an error.

    Raises:
        LanguageNotFoundError: If no record has the language
    """
    year = year_created(view, language)
    if year is None:
        raise LanguageNotFoundError(f"Language not found: {language}")
    return year


def how_many_per_year(view: View, year: int) -> int:
    """
    Count the languages created in `year`.

    An absent year gives 0 on a TabularView but raises on a GroupedView.
    The two views answer differently on purpose.

    Raises:
        KeyNotFoundError: GroupedView only, if year is not a key
    """
    _check_view(view)

    if isinstance(view, TabularView):
        return sum(1 for value in view.column(YEAR_COLUMN) if value == year)

    if year not in view:
        raise KeyNotFoundError(f"Year {year} not found")
    return len(view.languages(year))


def language_index(view: View) -> Dict[str, int]:
    """
    Build a language -> year reverse index for repeated lookups.

    When a language appears more than once, the first year found wins,
    using the same scan order as year_created.
    """
    _check_view(view)

    index: Dict[str, int] = {}
    if isinstance(view, TabularView):
        pairs = ((record.language, record.year) for record in view)
    else:
        pairs = ((lang, year) for year, langs in view.items() for lang in langs)

    for language, year in pairs:
        index.setdefault(language, year)
    return index
