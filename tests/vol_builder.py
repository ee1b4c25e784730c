"""Build synthetic VOL archives in memory for tests."""

from typing import List, Optional, Tuple

from vol_toolkit.utils.binary import write_u16_le, write_u32_le
from vol_toolkit.vol.header import DIR_TAG, FILE_TAG

# Directory (name, None) or file (name, content)
Item = Tuple[str, Optional[bytes]]


def make_entry(
    kind: int,
    name: bytes,
    data_length: int = 0,
    data_offset: int = 0,
    flag_a: int = 0,
    marker_a: int = 0xFFFFFFFF,
    marker_b: int = 0xFFFFFFFF,
    name_length: Optional[int] = None,
) -> bytes:
    """Pack one table entry. name_length overrides the real name length."""
    if name_length is None:
        name_length = len(name)
    return (
        write_u32_le(kind)
        + write_u32_le(flag_a)
        + write_u32_le(data_length)
        + write_u32_le(data_offset)
        + write_u32_le(marker_a)
        + write_u32_le(marker_b)
        + write_u16_le(name_length)
        + name
    )


def build_vol(items: List[Item], entry_count: Optional[int] = None, tail: bytes = b"") -> bytes:
    """Build an archive: table offset, file data, then the directory table.

    The table always starts with the "." root entry. entry_count overrides
    the declared count; tail is appended after the table.
    """
    data = bytearray()
    records = [make_entry(DIR_TAG, b".", marker_a=len(items))]

    for index, (name, content) in enumerate(items):
        raw_name = name.encode("cp1252")
        if content is None:
            records.append(make_entry(DIR_TAG, raw_name, marker_a=index + 1))
            continue

        # Data lives at data_offset + 4
        absolute = 4 + len(data)
        data.extend(content)
        records.append(
            make_entry(
                FILE_TAG,
                raw_name,
                data_length=len(content),
                data_offset=absolute - 4,
                flag_a=1,
                marker_b=index + 1,
            )
        )

    table_offset = 4 + len(data)
    if entry_count is None:
        entry_count = len(records)

    return (
        write_u32_le(table_offset)
        + bytes(data)
        + write_u32_le(entry_count)
        + b"".join(records)
        + tail
    )


SAMPLE_ITEMS: List[Item] = [
    ("DATA", None),
    ("DATA\\README.TXT", b"Buckle up.\r\n"),
    ("DATA\\SIGNS", None),
    ("DATA\\SIGNS\\STOP.BMP", b"BM" + bytes(range(64))),
    ("INTRO.AVI", b"RIFF\x00\x00\x00\x00AVI "),
]
