"""
Tests for the delimited-text writer backend.

Tests cover:
    - Default ';'-separated, header-less output
    - Header and custom delimiter
    - Quoting of names containing the delimiter
    - Files readable back by the loader
"""

import pytest
from langyear.model import Record, TabularView
from langyear.backends import records_to_delimited, write_records
from langyear.config import LoaderConfig
from langyear.csv_loader import parse_records_file


RECORDS = [Record(1951, "Regional Assembly Language"), Record(1952, "Autocode")]


class TestRecordsToDelimited:
    """Test text rendering."""

    def test_default_layout(self):
        text = records_to_delimited(RECORDS)
        assert text == "1951;Regional Assembly Language\n1952;Autocode\n"

    def test_header_and_comma(self):
        text = records_to_delimited(RECORDS, delimiter=",", header=True)
        assert text.splitlines()[0] == "year,language"
        assert text.splitlines()[2] == "1952,Autocode"

    def test_delimiter_in_name_is_quoted(self):
        text = records_to_delimited([Record(1964, "BASIC; Dartmouth")])
        assert text == '1964;"BASIC; Dartmouth"\n'

    def test_empty(self):
        assert records_to_delimited([]) == ""
        assert records_to_delimited([], header=True) == "year;language\n"

    def test_accepts_tabular_view(self):
        text = records_to_delimited(TabularView(RECORDS))
        assert text.count("\n") == 2


class TestWriteRecords:
    """Test file output."""

    def test_write_and_read_back_semicolon(self, tmp_path):
        out = tmp_path / "my_pl_dlm.txt"
        write_records(RECORDS, str(out))
        config = LoaderConfig(delimiter=";", has_header=False)
        assert parse_records_file(str(out), config=config) == RECORDS

    def test_write_and_read_back_csv(self, tmp_path):
        out = tmp_path / "pl_CSV.csv"
        write_records(RECORDS, str(out), delimiter=",", header=True)
        assert parse_records_file(str(out)) == RECORDS
