"""VOL directory table structures."""

from dataclasses import dataclass

# Entry kinds
FILE_TAG = 0x80
DIR_TAG = 0x10

# "PVOL" read as a little-endian u32; a different .vol format (Tribes etc.)
PVOL_TAG = 0x4C4F5650

# kind, flag_a, data_length, data_offset, marker_a, marker_b, name_length
ENTRY_PREFIX_FORMAT = "<6IH"
ENTRY_PREFIX_SIZE = 26

MAX_NAME_LENGTH = 4096

# File data sits 4 bytes past the stored offset
DATA_OFFSET_BIAS = 4

# Names come from Windows games
DEFAULT_ENCODING = "cp1252"

SELF_REFERENCE = b"."


@dataclass(frozen=True)
class VOLHeader:
    """VOL archive header: table location and declared entry count."""

    table_offset: int  # 4 bytes at offset 0
    entry_count: int  # 4 bytes at table_offset


@dataclass(frozen=True)
class VOLEntry:
    """VOL directory table entry (26 bytes + name)."""

    kind: int  # 4 bytes: 0x80 file, 0x10 directory
    flag_a: int  # 4 bytes: usually 1 for files, 0 for directories
    data_length: int  # 4 bytes: 0 for directories
    data_offset: int  # 4 bytes: relative to DATA_OFFSET_BIAS
    marker_a: int  # 4 bytes: 0xFFFFFFFF or an item count
    marker_b: int  # 4 bytes: 0xFFFFFFFF or an item count
    name_length: int  # 2 bytes
    raw_name: bytes  # name_length bytes, not null-terminated
    encoding: str = DEFAULT_ENCODING

    @property
    def name(self) -> str:
        return self.raw_name.decode(self.encoding, errors="replace")

    @property
    def path_name(self) -> str:
        """The name up to the first null byte, as the games open it."""
        return self.raw_name.split(b"\x00", 1)[0].decode(self.encoding, errors="replace")

    @property
    def is_file(self) -> bool:
        return self.kind == FILE_TAG

    @property
    def is_directory(self) -> bool:
        return self.kind == DIR_TAG

    @property
    def is_self_reference(self) -> bool:
        """True for the "." entry that stands for the archive root."""
        return self.name_length == 1 and self.raw_name == SELF_REFERENCE

    @property
    def kind_label(self) -> str:
        if self.is_file:
            return "file"
        if self.is_directory:
            return "dir"
        return "???"

    @property
    def data_start(self) -> int:
        return self.data_offset + DATA_OFFSET_BIAS

    @property
    def data_end(self) -> int:
        return self.data_start + self.data_length

    @property
    def record_size(self) -> int:
        return ENTRY_PREFIX_SIZE + self.name_length
