# reader.py
# Decoder for Steam's binary VDF format (appinfo.vdf)

import io
import struct
from typing import BinaryIO, List, Optional

from .errors import (
    ContainerFormatError,
    EncodingError,
    NestingTooDeepError,
    SourceIOError,
    SourceNotFoundError,
    UnknownEntryTypeError,
)
from .node import Branch, Document, Leaf

# Header: 1 byte tag, 2 byte signature, 5 reserved bytes
SIGNATURE = b"\x44\x56"
HEADER_RESERVED_SIZE = 5

# Per-application metadata between the appid and its tree (size, state,
# last update, access token, sha1, change number). Not interpreted here.
ENTRY_RESERVED_SIZE = 44

# Entry type bytes
TYPE_BRANCH = 0x00
TYPE_STRING = 0x01
TYPE_INT32 = 0x02
TYPE_END = 0x08

_uint32 = struct.Struct("<I")


class BinaryVdfReader:
    """
    One-pass decoder for binary VDF streams.

    Format:
      Header (8 bytes):
        - byte (1): version/type tag, ignored
        - bytes (2): signature 0x44 0x56 ("DV")
        - bytes (5): reserved
      App entry (repeated until appid == 0):
        - uint32 (4): App ID
        - bytes (44): reserved metadata
        - tree: entries terminated by 0x08

    Each tree entry is a type byte, a NUL-terminated UTF-8 key and a
    payload: a nested tree (0x00), a NUL-terminated string (0x01) or a
    little-endian uint32 (0x02) which is exposed as its decimal string.
    """

    def __init__(self, max_depth: Optional[int] = None):
        self.max_depth = max_depth
        self.offset = 0
        self._stream: Optional[BinaryIO] = None

    def parse(self, stream: BinaryIO) -> Document:
        """
        Decode a whole document from ``stream``.

        Args:
            stream: Binary stream positioned at the start of the header

        Returns:
            Dictionary mapping appid -> root Branch. A later entry for an
            appid replaces an earlier one.

        Raises:
            FormatError: the data does not follow the grammar
            SourceIOError: the stream failed or ended early
        """
        self._stream = stream
        self.offset = 0
        try:
            self._read_header()
            document: Document = {}
            while True:
                appid = self._read_uint32()
                if appid == 0:
                    break
                self._skip(ENTRY_RESERVED_SIZE)
                document[appid] = self._read_tree()
            return document
        finally:
            self._stream = None

    def _read_header(self):
        self._skip(1)
        if self._read(2) != SIGNATURE:
            raise ContainerFormatError("invalid container signature")
        self._skip(HEADER_RESERVED_SIZE)

    def _read_tree(self) -> Branch:
        root = Branch()
        # Branches still waiting for their 0x08 terminator, innermost last
        pending: List[Branch] = [root]

        while pending:
            type_offset = self.offset
            entry_type = self._read_byte()

            if entry_type == TYPE_END:
                pending.pop()
                continue

            if entry_type not in (TYPE_BRANCH, TYPE_STRING, TYPE_INT32):
                raise UnknownEntryTypeError(entry_type, type_offset)

            current = pending[-1]
            key = self._read_string()

            if entry_type == TYPE_BRANCH:
                if self.max_depth is not None and len(pending) >= self.max_depth:
                    raise NestingTooDeepError(
                        f"branch '{key}' at offset {type_offset} exceeds "
                        f"maximum nesting depth of {self.max_depth}"
                    )
                child = Branch()
                current[key] = child
                pending.append(child)
            elif entry_type == TYPE_STRING:
                current[key] = Leaf(self._read_string())
            else:
                current[key] = Leaf(str(self._read_uint32()))

        return root

    def _read_string(self) -> str:
        start = self.offset
        data = bytearray()
        while True:
            byte = self._read_byte()
            if byte == 0x00:
                break
            data.append(byte)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise EncodingError(f"invalid UTF-8 string at offset {start}: {e.reason}") from e

    def _read_uint32(self) -> int:
        return _uint32.unpack(self._read(4))[0]

    def _read_byte(self) -> int:
        return self._read(1)[0]

    def _skip(self, size: int):
        self._read(size)

    def _read(self, size: int) -> bytes:
        data = b""
        # Raw streams may return fewer bytes than asked for before EOF
        while len(data) < size:
            try:
                chunk = self._stream.read(size - len(data))
            except OSError as e:
                raise SourceIOError(f"failed to read at offset {self.offset + len(data)}: {e}") from e
            if not chunk:
                raise SourceIOError(
                    f"unexpected end of stream at offset {self.offset + len(data)} "
                    f"(wanted {size} bytes, got {len(data)})"
                )
            data += chunk
        self.offset += size
        return data


def load(fp: BinaryIO, max_depth: Optional[int] = None) -> Document:
    """Decode a binary VDF document from an open binary stream."""
    return BinaryVdfReader(max_depth=max_depth).parse(fp)


def loads(data: bytes, max_depth: Optional[int] = None) -> Document:
    """Decode a binary VDF document held in memory."""
    return load(io.BytesIO(data), max_depth=max_depth)


def load_file(path, max_depth: Optional[int] = None) -> Document:
    """
    Decode the binary VDF file at ``path``.

    Raises:
        SourceNotFoundError: the file does not exist
        SourceIOError: the file is unreadable or ends early
        FormatError: the file content is malformed
    """
    try:
        f = open(path, "rb")
    except FileNotFoundError as e:
        raise SourceNotFoundError(f"cannot open {path}: {e.strerror or e}") from e
    except OSError as e:
        raise SourceIOError(f"cannot open {path}: {e.strerror or e}") from e
    with f:
        return load(f, max_depth=max_depth)
