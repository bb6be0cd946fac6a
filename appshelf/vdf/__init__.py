# vdf package
# Binary VDF (appinfo.vdf) decoding

from .errors import (
    ContainerFormatError,
    EncodingError,
    FormatError,
    NestingTooDeepError,
    SourceIOError,
    SourceNotFoundError,
    UnknownEntryTypeError,
    VdfError,
)
from .node import Branch, Document, Leaf, Node
from .reader import BinaryVdfReader, load, load_file, loads
