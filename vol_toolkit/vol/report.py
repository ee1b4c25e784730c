"""Text report of a VOL directory table.

One block for the table header, then one blank-line separated block per
entry with every raw field in hex.
"""

from typing import TextIO

from .header import VOLEntry, VOLHeader

LABEL_WIDTH = 12


def _line(label: str, value: str) -> str:
    return f"{label + ':':<{LABEL_WIDTH}}{value}\n"


def format_header(header: VOLHeader) -> str:
    return _line("offset", f"0x{header.table_offset:08X}") + _line(
        "count", f"0x{header.entry_count:08X}"
    )


def format_entry(entry: VOLEntry) -> str:
    return "".join(
        [
            "\n",
            _line("type", f"0x{entry.kind:08X} ({entry.kind_label})"),
            _line("w1", f"0x{entry.flag_a:08X}"),
            _line("length", f"0x{entry.data_length:08X}"),
            _line("offset", f"0x{entry.data_offset:08X}"),
            _line("ff1", f"0x{entry.marker_a:08X}"),
            _line("ff2", f"0x{entry.marker_b:08X}"),
            _line("nameLength", f"0x{entry.name_length:04X}"),
            _line("name", f'"{entry.path_name}"'),
        ]
    )


def write_header(out: TextIO, header: VOLHeader) -> None:
    out.write(format_header(header))


def write_entry(out: TextIO, entry: VOLEntry) -> None:
    out.write(format_entry(entry))
