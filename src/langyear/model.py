"""
Core Record Model Objects

Defines the data structures that every query and loader works against:
    - Record (one (year, language) pair)
    - TabularView (row/column access over an ordered record sequence)
    - GroupedView (year -> languages created that year)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about file formats
        - Are derived once from a record sequence
        - Are never mutated by queries
    The only mutations are GroupedView.add and GroupedView.remove,
    and both are explicit calls.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple, Union

logger = logging.getLogger(__name__)


YEAR_COLUMN = "year"
LANGUAGE_COLUMN = "language"
COLUMNS = (YEAR_COLUMN, LANGUAGE_COLUMN)


class IndexRangeError(IndexError):
    """Raised when a row index falls outside 0 <= i < len(view)."""
    pass


class _MessageKeyError(KeyError):
    # KeyError.__str__ quotes its argument; show the message as written
    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class UnknownColumnError(_MessageKeyError):
    """Raised when a column other than 'year' or 'language' is requested."""
    pass


class LanguageNotFoundError(LookupError):
    """Raised by strict lookups when no record carries the language."""
    pass


class KeyNotFoundError(_MessageKeyError):
    """Raised when a year is not a key of a GroupedView."""
    pass


@dataclass(frozen=True)
class Record:
    """
    A single (year, language) pair.

    This is the source of truth for both views. It is frozen:
    a record never changes after creation.

    Properties:
        year: Year the language was created (e.g., 1991)
        language: Language name (e.g., "Python")
    """

    year: int
    language: str


class TabularView:
    """
    Row-indexed and column-indexed access over an ordered record sequence.

    The records are held once. Columns are projected from them on demand,
    so a column always has exactly one entry per record, in source order.

    Example:
        view = TabularView([Record(1991, "Python"), Record(2012, "Julia")])
        view.row(0)              -> Record(year=1991, language='Python')
        view.column("language")  -> ('Python', 'Julia')
    """

    def __init__(self, records: Iterable[Record]):
        self._records: Tuple[Record, ...] = tuple(records)

    @classmethod
    def from_columns(cls, years: Sequence[int], languages: Sequence[str]) -> "TabularView":
        """
        Build a view from two parallel columns.

        Raises:
            ValueError: If the columns have different lengths
        """
        if len(years) != len(languages):
            raise ValueError(
                f"Column lengths differ: {len(years)} years, {len(languages)} languages"
            )
        return cls(Record(year, language) for year, language in zip(years, languages))

    @property
    def columns(self) -> Tuple[str, ...]:
        return COLUMNS

    @property
    def records(self) -> Tuple[Record, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"TabularView({len(self._records)} records)"

    def row(self, index: int) -> Record:
        """
        Return the record at position `index`.

        Negative indices are not wrapped around.

        Raises:
            IndexRangeError: If index is not in 0 <= index < len(self)
        """
        if not 0 <= index < len(self._records):
            raise IndexRangeError(
                f"Row {index} out of range for view with {len(self._records)} rows"
            )
        return self._records[index]

    def column(self, name: str) -> Tuple[Union[int, str], ...]:
        """
        Return every value of column `name`, in record order.

        Raises:
            UnknownColumnError: If name is not 'year' or 'language'
        """
        if name == YEAR_COLUMN:
            return tuple(record.year for record in self._records)
        if name == LANGUAGE_COLUMN:
            return tuple(record.language for record in self._records)
        raise UnknownColumnError(f"Unknown column '{name}', expected one of {list(COLUMNS)}")

    def head(self, n: int = 10) -> List[Record]:
        """Return the first n records."""
        return list(self._records[:max(n, 0)])


class GroupedView:
    """
    Mapping from year to the ordered list of languages created that year.

    Keys are ints and values are lists of str. Anything else is
    rejected on insertion, not at first failed use.

    Order:
        - Keys keep first-encountered order from the source scan
        - Languages within a year keep source order
        Grouping is a plain scan, not a sort.

    INVARIANTS (right after from_records):
        - Every distinct source year is a key exactly once
        - total_count() == number of source records
    """

    def __init__(self):
        self._groups: Dict[int, List[str]] = {}

    @classmethod
    def from_records(cls, records: Iterable[Record]) -> "GroupedView":
        """Build the mapping in one pass over the records."""
        view = cls()
        for record in records:
            view.add(record.year, record.language)
        logger.debug("Grouped %d records into %d years", view.total_count(), len(view))
        return view

    def add(self, year: int, language: str) -> None:
        """
        Append `language` to the list stored under `year`.

        Raises:
            TypeError: If year is not an int or language is not a str
        """
        if not isinstance(year, int) or isinstance(year, bool):
            raise TypeError(f"Year key must be int, got {type(year).__name__}: {year!r}")
        if not isinstance(language, str):
            raise TypeError(f"Language must be str, got {type(language).__name__}: {language!r}")

        group = self._groups.get(year)
        if group is None:
            self._groups[year] = [language]
        else:
            group.append(language)

    def remove(self, year: int) -> None:
        """
        Delete `year` and its languages.

        Raises:
            KeyNotFoundError: If year is not a key
        """
        if year not in self._groups:
            raise KeyNotFoundError(f"Year {year} not found")
        del self._groups[year]

    def languages(self, year: int) -> List[str]:
        """
        Return a copy of the languages stored under `year`.

        Raises:
            KeyNotFoundError: If year is not a key
        """
        if year not in self._groups:
            raise KeyNotFoundError(f"Year {year} not found")
        return list(self._groups[year])

    def years(self) -> List[int]:
        return list(self._groups)

    def items(self) -> List[Tuple[int, List[str]]]:
        return [(year, list(langs)) for year, langs in self._groups.items()]

    def total_count(self) -> int:
        return sum(len(langs) for langs in self._groups.values())

    def as_dict(self) -> Dict[int, List[str]]:
        return {year: list(langs) for year, langs in self._groups.items()}

    def __contains__(self, year: object) -> bool:
        return year in self._groups

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self) -> Iterator[int]:
        return iter(self._groups)

    def __repr__(self) -> str:
        return f"GroupedView({len(self._groups)} years, {self.total_count()} languages)"
