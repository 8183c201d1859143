"""
Raw record ingestion.

All reading of export files happens here so the raw table schemas are
checked at the system boundary.
"""

from rideshare.ingestion.source import (
    CsvRecordSource,
    InMemoryRecordSource,
    RawRecordSource,
    Row,
    read_table,
    to_rows,
)

__all__ = [
    "CsvRecordSource",
    "InMemoryRecordSource",
    "RawRecordSource",
    "Row",
    "read_table",
    "to_rows",
]
