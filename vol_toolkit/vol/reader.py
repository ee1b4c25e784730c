"""VOL archive reader and extractor."""

import logging
from dataclasses import dataclass, field
from io import BytesIO
from pathlib import Path
from typing import BinaryIO, Callable, Iterator, List, Optional, TextIO, Tuple

from ..utils.binary import BinaryReader
from .actions import Action, Ignore, classify
from .errors import BadHeader, DecodeStop, NameTooLong, TruncatedEntry, UnsupportedFormat
from .extract import apply_action, copy_range, extract_file
from .header import (
    DEFAULT_ENCODING,
    ENTRY_PREFIX_FORMAT,
    ENTRY_PREFIX_SIZE,
    MAX_NAME_LENGTH,
    PVOL_TAG,
    VOLEntry,
    VOLHeader,
)
from .report import write_entry, write_header

logger = logging.getLogger(__name__)


def decode_entry(reader: BinaryReader, encoding: str = DEFAULT_ENCODING) -> VOLEntry:
    """Decode one entry at the reader's current position.

    Raises a DecodeStop subclass when the entry is truncated or its name
    length is implausible; the name is never read in that case.
    """
    start = reader.tell()

    try:
        kind, flag_a, data_length, data_offset, marker_a, marker_b, name_length = reader.unpack(
            ENTRY_PREFIX_FORMAT
        )
    except EOFError as e:
        raise TruncatedEntry(f"Entry prefix at 0x{start:08X} is truncated: {e}", start) from e

    if name_length > MAX_NAME_LENGTH:
        raise NameTooLong(
            f"Entry at 0x{start:08X} has name length {name_length} (max {MAX_NAME_LENGTH})", start
        )

    if name_length > reader.remaining():
        raise TruncatedEntry(
            f"Entry name at 0x{start + ENTRY_PREFIX_SIZE:08X} needs {name_length} bytes, "
            f"{reader.remaining()} left",
            start,
        )

    try:
        raw_name = reader.read_bytes(name_length)
    except EOFError as e:
        raise TruncatedEntry(f"Entry name at 0x{start:08X} is truncated: {e}", start) from e

    return VOLEntry(
        kind=kind,
        flag_a=flag_a,
        data_length=data_length,
        data_offset=data_offset,
        marker_a=marker_a,
        marker_b=marker_b,
        name_length=name_length,
        raw_name=raw_name,
        encoding=encoding,
    )


def read_header(reader: BinaryReader) -> VOLHeader:
    """Read the table offset and entry count, leaving the reader at the first entry."""
    reader.seek(0)
    try:
        table_offset = reader.read_u32()
    except EOFError as e:
        raise BadHeader(f"Archive too small for a table offset: {e}") from e

    if table_offset == PVOL_TAG:
        raise UnsupportedFormat(
            "This looks like a PVOL file, try a program that supports other .vol files"
        )

    reader.seek(table_offset)
    try:
        entry_count = reader.read_u32()
    except EOFError as e:
        raise BadHeader(f"Cannot read entry count at 0x{table_offset:08X}: {e}") from e

    header = VOLHeader(table_offset=table_offset, entry_count=entry_count)

    # Every entry takes at least the fixed prefix
    if entry_count * ENTRY_PREFIX_SIZE > reader.remaining():
        logger.warning(
            "Entry count %d does not fit in the %d bytes after the table header",
            entry_count,
            reader.remaining(),
        )

    return header


def iter_entries(
    reader: BinaryReader,
    header: VOLHeader,
    encoding: str = DEFAULT_ENCODING,
    on_stop: Optional[Callable[[DecodeStop], None]] = None,
) -> Iterator[VOLEntry]:
    """Yield up to header.entry_count entries from the reader's position.

    Ends quietly at the first entry that cannot be decoded, passing the
    stop to on_stop when given.
    """
    for index in range(header.entry_count):
        try:
            entry = decode_entry(reader, encoding)
        except DecodeStop as stop:
            logger.warning("Stopped after %d of %d entries: %s", index, header.entry_count, stop)
            if on_stop is not None:
                on_stop(stop)
            return
        logger.debug("Entry %d: %s %r", index, entry.kind_label, entry.name)
        yield entry


@dataclass
class VOLTable:
    """The decoded directory table."""

    header: VOLHeader
    entries: List[VOLEntry] = field(default_factory=list)
    stop_reason: Optional[DecodeStop] = None

    @property
    def complete(self) -> bool:
        return self.stop_reason is None


def read_table(reader: BinaryReader, encoding: str = DEFAULT_ENCODING) -> VOLTable:
    """Read the whole directory table.

    A truncated or corrupt entry ends the table early; the entries before
    it are kept and the stop is recorded on the result.
    """
    table = VOLTable(header=read_header(reader))

    def record_stop(stop: DecodeStop) -> None:
        table.stop_reason = stop

    table.entries.extend(iter_entries(reader, table.header, encoding, on_stop=record_stop))
    return table


class VOLReader:
    """Reader for Driver's Education VOL archives."""

    def __init__(self, path: Path, encoding: str = DEFAULT_ENCODING):
        self.path = Path(path)
        self.encoding = encoding
        self._file: Optional[BinaryIO] = None
        self._reader: Optional[BinaryReader] = None
        self._table: Optional[VOLTable] = None

    def __enter__(self) -> "VOLReader":
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def open(self) -> None:
        """Open the archive and read the directory table."""
        self._file = open(self.path, "rb")
        self._reader = BinaryReader(self._file)
        try:
            self._table = read_table(self._reader, self.encoding)
        except Exception:
            self.close()
            raise

    def close(self) -> None:
        """Close the archive file."""
        if self._file:
            self._file.close()
            self._file = None
            self._reader = None

    @property
    def table(self) -> VOLTable:
        if not self._table:
            raise RuntimeError("Archive not opened")
        return self._table

    @property
    def header(self) -> VOLHeader:
        return self.table.header

    @property
    def entries(self) -> List[VOLEntry]:
        return self.table.entries

    @property
    def stop_reason(self) -> Optional[DecodeStop]:
        return self.table.stop_reason

    def _require_reader(self) -> BinaryReader:
        if not self._reader:
            raise RuntimeError("Archive not opened")
        return self._reader

    def extract_all(self, output_dir: Path) -> Iterator[Tuple[VOLEntry, Action, Path]]:
        """Create directories and extract files below output_dir.

        Works through the table in encounter order, interleaving extraction
        with decoding. Yields (entry, action, path) for every entry that
        produced a directory or file.
        """
        reader = self._require_reader()
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        header = read_header(reader)
        for entry in iter_entries(reader, header, self.encoding):
            action = classify(entry)
            if isinstance(action, Ignore):
                logger.debug("Skipping %r: %s", entry.name, action.reason)
                continue

            path = apply_action(reader, action, output_dir)
            if path is None:
                continue
            yield entry, action, path

    def extract_file(self, entry: VOLEntry, destination: Path) -> Path:
        """Extract a single file entry to destination."""
        if not entry.is_file:
            raise ValueError(f"Not a file entry: {entry.name!r}")
        return extract_file(self._require_reader(), classify(entry), Path(destination))

    def read_file(self, entry: VOLEntry) -> bytes:
        """Return a single file entry's contents."""
        if not entry.is_file:
            raise ValueError(f"Not a file entry: {entry.name!r}")
        buffer = BytesIO()
        copy_range(self._require_reader(), classify(entry), buffer)
        return buffer.getvalue()

    def report(self, out: TextIO) -> None:
        """Write the text report of the table to out."""
        write_header(out, self.header)
        for entry in self.entries:
            write_entry(out, entry)

    def list_files(self) -> List[str]:
        """List the names of all file entries."""
        return [e.path_name for e in self.entries if e.is_file]

    def get_entry_by_name(self, name: str) -> Optional[VOLEntry]:
        """Find an entry by name, ignoring separator style and case."""
        wanted = name.replace("/", "\\").strip("\\").lower()
        for entry in self.entries:
            if entry.path_name.replace("/", "\\").strip("\\").lower() == wanted:
                return entry
        return None
