"""Filesystem side of VOL extraction."""

import logging
import re
from pathlib import Path
from typing import BinaryIO, List, Optional

from ..utils.binary import BinaryReader
from .actions import Action, CreateDirectory, ExtractFile
from .errors import TruncatedData, UnsafePath

logger = logging.getLogger(__name__)

# Entry names are Windows relative paths, but accept either separator
_SEPARATORS = re.compile(r"[\\/]+")

COPY_CHUNK_SIZE = 1024 * 1024


def path_parts(name: str) -> List[str]:
    """Split an entry name into safe relative path components.

    "." and empty components are dropped, so a name that only refers to
    the archive root yields no components. Raises UnsafePath for absolute
    names, drive letters, null bytes and "..".
    """
    if "\x00" in name:
        raise UnsafePath(f"Entry name contains a null byte: {name!r}")
    if re.match(r"^[A-Za-z]:", name) or name.startswith(("\\", "/")):
        raise UnsafePath(f"Absolute entry name: {name!r}")

    parts = [p for p in _SEPARATORS.split(name) if p and p != "."]
    if ".." in parts:
        raise UnsafePath(f"Entry name escapes the output directory: {name!r}")
    return parts


def resolve_output_path(output_dir: Path, name: str) -> Path:
    """Map an entry name onto a path below output_dir.

    Raises UnsafePath for unsafe names and for names with no path
    components.
    """
    parts = path_parts(name)
    if not parts:
        raise UnsafePath(f"Entry name has no path components: {name!r}")
    return Path(output_dir).joinpath(*parts)


def create_directory(path: Path) -> None:
    """Create a directory; an existing one is fine."""
    path.mkdir(parents=True, exist_ok=True)


def create_output_file(path: Path) -> BinaryIO:
    """Open a new output file, creating missing parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    return open(path, "wb")


def check_range(reader: BinaryReader, action: ExtractFile) -> None:
    """Raise TruncatedData if the action's data is not inside the stream."""
    size = reader.size()
    if action.end > size:
        raise TruncatedData(
            f"{action.name}: data 0x{action.absolute_offset:08X}+0x{action.length:X} "
            f"runs past end of archive (0x{size:X} bytes)"
        )


def copy_range(reader: BinaryReader, action: ExtractFile, out: BinaryIO) -> int:
    """Copy the action's byte range to out, restoring the reader's position.

    Returns the number of bytes written.
    """
    check_range(reader, action)

    position = reader.tell()
    try:
        reader.seek(action.absolute_offset)
        left = action.length
        while left:
            chunk = reader.read_bytes(min(left, COPY_CHUNK_SIZE))
            written = out.write(chunk)
            if written is not None and written != len(chunk):
                raise OSError(f"{action.name}: short write ({written} of {len(chunk)} bytes)")
            left -= len(chunk)
    except EOFError as e:
        raise TruncatedData(f"{action.name}: {e}") from e
    finally:
        reader.seek(position)

    return action.length


def extract_file(reader: BinaryReader, action: ExtractFile, destination: Path) -> Path:
    """Write one file entry's contents verbatim to destination."""
    check_range(reader, action)
    with create_output_file(destination) as out:
        copy_range(reader, action, out)
    logger.debug("Extracted %s (%d bytes) to %s", action.name, action.length, destination)
    return destination


def apply_action(reader: BinaryReader, action: Action, output_dir: Path) -> Optional[Path]:
    """Execute an action below output_dir.

    Returns the path that was created, or None when nothing was done.
    """
    if isinstance(action, CreateDirectory):
        if not path_parts(action.name):
            logger.debug("Directory %r is the output root", action.name)
            return None
        path = resolve_output_path(output_dir, action.name)
        create_directory(path)
        logger.debug("Created directory %s", path)
        return path

    if isinstance(action, ExtractFile):
        return extract_file(reader, action, resolve_output_path(output_dir, action.name))

    return None
