# errors.py
# Exceptions raised while decoding binary VDF data


class VdfError(Exception):
    """Base class for every binary VDF decoding failure."""


class FormatError(VdfError, ValueError):
    """The byte stream does not follow the binary VDF grammar."""


class ContainerFormatError(FormatError):
    """The header does not carry the expected signature."""


class UnknownEntryTypeError(FormatError):
    """An entry starts with a type byte the grammar does not define."""

    def __init__(self, type_byte: int, offset: int):
        self.type_byte = type_byte
        self.offset = offset
        super().__init__(f"unknown entry type byte 0x{type_byte:02X} at offset {offset}")


class EncodingError(FormatError):
    """A key or string value is not valid UTF-8."""


class NestingTooDeepError(FormatError):
    """Branches are nested deeper than the reader's configured limit."""


class SourceIOError(VdfError, OSError):
    """The byte source could not be opened or read to completion."""


class SourceNotFoundError(SourceIOError):
    """The file to decode does not exist."""
