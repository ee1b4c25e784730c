"""Driver's Education VOL archive support."""

from .actions import CreateDirectory, ExtractFile, Ignore, classify
from .errors import (
    BadHeader,
    DecodeStop,
    ExtractionError,
    NameTooLong,
    TruncatedData,
    TruncatedEntry,
    UnsafePath,
    UnsupportedFormat,
    VOLError,
)
from .header import DIR_TAG, FILE_TAG, PVOL_TAG, VOLEntry, VOLHeader
from .reader import VOLReader, VOLTable, decode_entry, iter_entries, read_header, read_table

__all__ = [
    "VOLReader",
    "VOLTable",
    "VOLEntry",
    "VOLHeader",
    "decode_entry",
    "iter_entries",
    "read_header",
    "read_table",
    "classify",
    "CreateDirectory",
    "ExtractFile",
    "Ignore",
    "FILE_TAG",
    "DIR_TAG",
    "PVOL_TAG",
    "VOLError",
    "UnsupportedFormat",
    "BadHeader",
    "DecodeStop",
    "TruncatedEntry",
    "NameTooLong",
    "ExtractionError",
    "TruncatedData",
    "UnsafePath",
]
