"""Backends for writing record tables to disk (delimited text, etc.)."""

from .delimited import records_to_delimited, write_records

__all__ = ["records_to_delimited", "write_records"]
