"""Binary reading utilities for little-endian VOL data."""

import struct
from io import BytesIO
from typing import BinaryIO, Union


class BinaryReader:
    """Helper for reading little-endian binary data (x86 format)."""

    def __init__(self, data: Union[bytes, BinaryIO]):
        if isinstance(data, (bytes, bytearray)):
            self._stream = BytesIO(data)
        else:
            self._stream = data

    @property
    def stream(self) -> BinaryIO:
        return self._stream

    def tell(self) -> int:
        return self._stream.tell()

    def seek(self, offset: int, whence: int = 0) -> int:
        if whence == 0 and offset < 0:
            raise ValueError(f"Cannot seek to negative offset {offset}")
        return self._stream.seek(offset, whence)

    def read_bytes(self, size: int) -> bytes:
        data = self._stream.read(size)
        if len(data) < size:
            raise EOFError(f"Expected {size} bytes, got {len(data)}")
        return data

    def read_u8(self) -> int:
        return struct.unpack("<B", self.read_bytes(1))[0]

    def read_u16(self) -> int:
        return struct.unpack("<H", self.read_bytes(2))[0]

    def read_u32(self) -> int:
        return struct.unpack("<I", self.read_bytes(4))[0]

    def unpack(self, fmt: str) -> tuple:
        """Read and unpack a struct format, sized by the format itself."""
        return struct.unpack(fmt, self.read_bytes(struct.calcsize(fmt)))

    def skip(self, count: int) -> None:
        """Skip forward by count bytes."""
        self._stream.seek(count, 1)

    def size(self) -> int:
        """Return the total length of the stream."""
        current = self.tell()
        end = self._stream.seek(0, 2)
        self._stream.seek(current)
        return end

    def remaining(self) -> int:
        """Return number of bytes remaining in stream."""
        return max(self.size() - self.tell(), 0)

    def peek(self, size: int) -> bytes:
        """Read bytes without advancing position."""
        data = self._stream.read(size)
        self._stream.seek(-len(data), 1)
        return data


def write_u32_le(value: int) -> bytes:
    """Write a little-endian 32-bit unsigned integer."""
    return struct.pack("<I", value)


def write_u16_le(value: int) -> bytes:
    """Write a little-endian 16-bit unsigned integer."""
    return struct.pack("<H", value)
