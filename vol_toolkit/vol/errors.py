"""VOL archive errors."""


class VOLError(Exception):
    """Base class for VOL archive errors."""


class UnsupportedFormat(VOLError):
    """The archive is a PVOL container, not a Driver's Ed VOL."""


class BadHeader(VOLError):
    """The table offset or entry count could not be read."""


class DecodeStop(VOLError):
    """An entry could not be decoded; enumeration ends here.

    Not fatal: entries decoded before the stop are still valid.
    """

    def __init__(self, message: str, position: int):
        super().__init__(message)
        self.position = position


class TruncatedEntry(DecodeStop):
    """The entry prefix or name runs past the end of the stream."""


class NameTooLong(DecodeStop):
    """The entry's name length is above MAX_NAME_LENGTH."""


class ExtractionError(VOLError):
    """A single file or directory could not be extracted."""


class TruncatedData(ExtractionError):
    """A file entry's data range runs past the end of the stream."""


class UnsafePath(ExtractionError):
    """An entry name would resolve outside the output directory."""
