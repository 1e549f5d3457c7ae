"""
Delimited-text writer for record tables.

Writes records back to disk as delimited text, one record per row.
The default matches the classic ';'-separated, header-less layout:

    1951;Regional Assembly Language
    1952;Autocode

Pass delimiter="," and header=True for a CSV readable by csv_loader
with its default LoaderConfig.
"""

import csv
import logging
from io import StringIO
from typing import Iterable

from langyear.model import COLUMNS, Record

logger = logging.getLogger(__name__)


def records_to_delimited(records: Iterable[Record], delimiter: str = ";", header: bool = False) -> str:
    """
    Render records as delimited text.

    Args:
        records: Records to write, in order
        delimiter: Field separator
        header: Emit a 'year<delim>language' first line

    Returns:
        Delimited text ending with a newline (empty string for no rows and no header)
    """
    buf = StringIO()
    writer = csv.writer(buf, delimiter=delimiter, lineterminator="\n")
    if header:
        writer.writerow(COLUMNS)
    for record in records:
        writer.writerow([record.year, record.language])
    return buf.getvalue()


def write_records(records: Iterable[Record], filename: str, delimiter: str = ";",
                  header: bool = False, encoding: str = "utf-8") -> None:
    """
    Render records and save to file.

    Args:
        records: Records to write
        filename: Output file path
        delimiter: Field separator
        header: Emit a header line
        encoding: File encoding
    """
    text = records_to_delimited(records, delimiter=delimiter, header=header)
    with open(filename, "w", encoding=encoding, newline="") as f:
        f.write(text)
    logger.info("Wrote %d lines to %s", text.count("\n"), filename)


__all__ = ["records_to_delimited", "write_records"]
