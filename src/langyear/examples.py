"""
Example records for demos and tests.

A slice of the classic programming-languages table (year, language),
sorted by year as the full dataset is.
"""
from typing import List

from langyear.model import Record


_EXAMPLE_ROWS = [
    (1951, "Regional Assembly Language"),
    (1952, "Autocode"),
    (1954, "IPL"),
    (1955, "FLOW-MATIC"),
    (1957, "FORTRAN"),
    (1958, "LISP"),
    (1959, "COBOL"),
    (1964, "BASIC"),
    (1970, "Pascal"),
    (1972, "C"),
    (1972, "Prolog"),
    (1983, "Ada"),
    (1985, "C++"),
    (1987, "Perl"),
    (1991, "Python"),
    (1995, "Java"),
    (1995, "JavaScript"),
    (1995, "Ruby"),
    (2003, "Scala"),
    (2009, "Go"),
    (2010, "Rust"),
    (2011, "Elixir"),
    (2011, "Kotlin"),
    (2011, "Red"),
    (2012, "Julia"),
    (2012, "Crystal"),
    (2014, "Swift"),
]


def build_example_records() -> List[Record]:
    return [Record(year=year, language=language) for year, language in _EXAMPLE_ROWS]
