# langyear/config.py
from __future__ import annotations

from dataclasses import dataclass


# Options for reading delimited record files
@dataclass(frozen=True)
class LoaderConfig:
    """Delimited-text loader configuration.

    Header handling:
        - has_header=True: columns are looked up by name (year_column, language_column)
        - has_header=False: the first two fields of each row are year and language
    """
    delimiter: str = ","
    has_header: bool = True
    year_column: str = "year"
    language_column: str = "language"
    encoding: str = "utf-8"
