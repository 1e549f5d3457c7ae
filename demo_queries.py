"""
Demo: Build both views over the programming-languages table, run the
lookup queries, and export the table.

Usage:
    python demo_queries.py [path/to/programming_languages.csv]
"""

import sys

from langyear.backends import write_records
from langyear.csv_loader import parse_records_file
from langyear.examples import build_example_records
from langyear.logging_setup import setup_logger
from langyear.model import GroupedView, KeyNotFoundError, LanguageNotFoundError, TabularView
from langyear.queries import how_many_per_year, year_created, year_created_strict
from langyear.report import summarize
from langyear.serialization import grouped_to_yaml


def print_summary(summary):
    """Pretty-print a TableSummary."""
    print()
    print("=" * 70)
    print("PROGRAMMING LANGUAGES TABLE")
    print("=" * 70)
    print(f"  Records:               {summary.total_records}")
    print(f"  Distinct Years:        {summary.distinct_years}")
    print(f"  Year Range:            {summary.first_year} - {summary.last_year}")
    print(f"  Busiest Year:          {summary.busiest_year} ({summary.busiest_year_count} languages)")
    if summary.warnings:
        print("  Warnings:")
        for i, warning in enumerate(summary.warnings, 1):
            print(f"    {i}. {warning}")
    print()


if __name__ == "__main__":
    setup_logger(console=True)

    if len(sys.argv) > 1:
        records = parse_records_file(sys.argv[1])
    else:
        records = build_example_records()

    table = TabularView(records)
    grouped = GroupedView.from_records(records)

    print_summary(summarize(table))

    for view in (table, grouped):
        name = type(view).__name__
        print(f"{name}: Julia created in {year_created(view, 'Julia')}")
        print(f"{name}: 'W' lenient lookup -> {year_created(view, 'W')}")
        try:
            year_created_strict(view, "W")
        except LanguageNotFoundError as e:
            print(f"{name}: 'W' strict lookup -> {e}")
        print(f"{name}: languages created in 2011 -> {how_many_per_year(view, 2011)}")

    grouped.remove(2011)
    try:
        how_many_per_year(grouped, 2011)
    except KeyNotFoundError as e:
        print(f"After remove(2011): {e}")

    write_records(table, "my_pl_dlm.txt", delimiter=";")
    with open("programming_languages_grouped.yaml", "w", encoding="utf-8") as f:
        f.write(grouped_to_yaml(grouped))
    print("✅ Table exported to my_pl_dlm.txt and programming_languages_grouped.yaml")
