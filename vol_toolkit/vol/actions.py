"""Mapping of decoded VOL entries to extraction actions."""

from dataclasses import dataclass
from typing import Union

from .header import VOLEntry


@dataclass(frozen=True)
class CreateDirectory:
    """Create the directory named by a directory entry."""

    name: str


@dataclass(frozen=True)
class ExtractFile:
    """Copy a byte range of the archive to the file named by a file entry."""

    name: str
    absolute_offset: int
    length: int

    @property
    def end(self) -> int:
        return self.absolute_offset + self.length


@dataclass(frozen=True)
class Ignore:
    """No filesystem action for this entry."""

    reason: str


Action = Union[CreateDirectory, ExtractFile, Ignore]


def classify(entry: VOLEntry, report_only: bool = False) -> Action:
    """Decide what to do with an entry.

    Depends only on the entry's own fields, so the "." root entry is
    ignored wherever it appears in the table.
    """
    if report_only:
        return Ignore("report only")

    if entry.is_file:
        return ExtractFile(
            name=entry.path_name,
            absolute_offset=entry.data_start,
            length=entry.data_length,
        )

    if entry.is_directory:
        if entry.is_self_reference:
            return Ignore("archive root")
        return CreateDirectory(name=entry.path_name)

    return Ignore(f"unknown kind 0x{entry.kind:08X}")
