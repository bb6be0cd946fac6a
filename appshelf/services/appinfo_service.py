# appinfo_service.py
# Loads and caches the decoded appinfo.vdf document

import os
import time
from pathlib import Path
from threading import Lock
from typing import Optional

from .. import config
from ..vdf import Branch, Document, load_file

# Decoded document for the last file read, keyed by (path, mtime, size, max_depth)
_cache_lock = Lock()
_cache_key = None
_cache_document: Optional[Document] = None

# Default for max_depth meaning "use config.MAX_DEPTH"; None means no limit
USE_CONFIG = object()


def _cache_signature(path: Path, max_depth):
    stat = os.stat(path)
    return (str(path.resolve()), stat.st_mtime_ns, stat.st_size, max_depth)


def load_appinfo(path=None, max_depth=USE_CONFIG) -> Document:
    """
    Decode Steam's appinfo.vdf, reusing the previous result if the file
    hasn't changed since it was last read.

    Args:
        path: Path to appinfo.vdf (defaults to config.APPINFO_PATH)
        max_depth: Nesting limit for the decoder, None for unlimited
            (defaults to config.MAX_DEPTH)

    Returns:
        Dictionary mapping appid -> root Branch

    Raises:
        SourceNotFoundError: the file does not exist
        SourceIOError: the file is unreadable or truncated
        FormatError: the file is not valid binary VDF
    """
    global _cache_key, _cache_document

    path = Path(path) if path is not None else config.APPINFO_PATH
    if max_depth is USE_CONFIG:
        max_depth = config.MAX_DEPTH

    with _cache_lock:
        try:
            key = _cache_signature(path, max_depth)
        except OSError:
            # Let the decoder report the missing file
            key = None

        if key is not None and key == _cache_key and _cache_document is not None:
            return _cache_document

        print(f"📁 Parsing: {path}")
        started = time.time()
        document = load_file(path, max_depth=max_depth)
        elapsed = time.time() - started
        print(f"✅ Parsed {len(document)} apps from appinfo.vdf in {elapsed:.2f}s")

        _cache_key = key
        _cache_document = document
        return document


def get_app_details(appid: int, path=None) -> Optional[Branch]:
    """Get the decoded appinfo tree for one appid, or None if it isn't cached by Steam."""
    return load_appinfo(path).get(appid)


def clear_cache():
    """Forget the cached document so the next load re-reads the file."""
    global _cache_key, _cache_document

    with _cache_lock:
        _cache_key = None
        _cache_document = None
