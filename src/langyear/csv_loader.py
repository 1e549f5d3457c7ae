"""
Delimited-text loader (Layer 1: Raw Input → Record Source).

Converts delimited text to a list of Record objects.

File Format (with header, default):
    year,language
    1951,Regional Assembly Language
    1952,Autocode

Without a header, the first two fields of each row are year and language.

Notes:
    - Blank lines (empty or whitespace-only) are skipped, before the header too
    - Whitespace around fields is stripped
    - Empty or non-integer years are errors (no missing-value handling)
    - A language listed more than once is a warning, not an error
"""

import csv
import logging
import os
import warnings
from io import StringIO
from typing import List, Optional, Set

from langyear.config import LoaderConfig
from langyear.model import Record

logger = logging.getLogger(__name__)


class RecordParseError(Exception):
    """Raised when delimited-text parsing fails."""
    pass


def _parse_year(value: str, line_num: int) -> int:
    value = value.strip()
    if not value:
        raise RecordParseError(f"Missing year on line {line_num}")
    try:
        return int(value)
    except ValueError as e:
        raise RecordParseError(f"Invalid year {value!r} on line {line_num}") from e


def _is_blank(row: List[str]) -> bool:
    """Empty rows and rows holding only whitespace count as blank."""
    return not row or all(not field.strip() for field in row)


def _rows_with_header(reader, config: LoaderConfig) -> List[Record]:
    header = next((row for row in reader if not _is_blank(row)), None)
    if header is None:
        raise RecordParseError("Input is empty")

    header = [name.strip() for name in header]
    required_columns = [config.year_column, config.language_column]
    missing = [col for col in required_columns if col not in header]
    if missing:
        raise RecordParseError(f"Missing required columns: {missing}")

    year_idx = header.index(config.year_column)
    lang_idx = header.index(config.language_column)
    width = max(year_idx, lang_idx) + 1

    records = []
    for row in reader:
        if _is_blank(row):
            continue
        line_num = reader.line_num
        if len(row) < width:
            raise RecordParseError(f"Row on line {line_num} has {len(row)} field(s), expected at least {width}")
        records.append(Record(
            year=_parse_year(row[year_idx], line_num),
            language=row[lang_idx].strip(),
        ))
    return records


def _rows_without_header(reader) -> List[Record]:
    records = []
    for row in reader:
        if _is_blank(row):
            continue
        line_num = reader.line_num
        if len(row) < 2:
            raise RecordParseError(f"Row on line {line_num} has {len(row)} field(s), expected at least 2")
        records.append(Record(
            year=_parse_year(row[0], line_num),
            language=row[1].strip(),
        ))
    return records


def _warn_on_repeated_languages(records: List[Record]) -> None:
    seen: Set[str] = set()
    repeated = []
    for record in records:
        if record.language in seen:
            if record.language not in repeated:
                repeated.append(record.language)
        else:
            seen.add(record.language)
    if repeated:
        warnings.warn(f"Languages listed more than once: {', '.join(repeated)}", UserWarning)


def parse_records_string(content: str, config: Optional[LoaderConfig] = None) -> List[Record]:
    """
    Parse delimited text into records.

    Args:
        content: Delimited text
        config: Loader options (defaults to LoaderConfig())

    Returns:
        Records in source order

    Raises:
        RecordParseError: If parsing fails
    """
    config = config or LoaderConfig()
    reader = csv.reader(StringIO(content), delimiter=config.delimiter)

    if config.has_header:
        records = _rows_with_header(reader, config)
    else:
        records = _rows_without_header(reader)

    _warn_on_repeated_languages(records)
    logger.debug("Parsed %d records", len(records))
    return records


def parse_records_file(filepath: str, config: Optional[LoaderConfig] = None) -> List[Record]:
    """
    Parse a delimited file into records.

    Raises:
        FileNotFoundError: If file doesn't exist
        RecordParseError: If parsing fails
    """
    config = config or LoaderConfig()
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"Record file not found: {filepath}")

    with open(filepath, "r", encoding=config.encoding, newline="") as f:
        content = f.read()

    records = parse_records_string(content, config=config)
    logger.info("Loaded %d records from %s", len(records), filepath)
    return records


__all__ = [
    "parse_records_string",
    "parse_records_file",
    "RecordParseError",
]
