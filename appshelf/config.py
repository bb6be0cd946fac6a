# config.py
# Configuration constants for appshelf

import os
import sys
from pathlib import Path


def get_default_steam_path():
    """Get the usual Steam installation directory for this platform."""
    if sys.platform == 'win32':
        # Windows: C:\Program Files (x86)\Steam
        return Path(os.environ.get('PROGRAMFILES(X86)', r'C:\Program Files (x86)')) / 'Steam'
    elif sys.platform == 'darwin':
        # macOS: ~/Library/Application Support/Steam
        return Path.home() / 'Library' / 'Application Support' / 'Steam'
    else:
        # Linux: ~/.local/share/Steam
        return Path.home() / '.local' / 'share' / 'Steam'


def get_extra_library_paths():
    """Get additional Steam library roots from STEAM_LIBRARY_PATHS."""
    raw = os.environ.get("STEAM_LIBRARY_PATHS", "")
    return [Path(p) for p in raw.split(os.pathsep) if p.strip()]


def get_max_depth():
    """Get the nesting limit for the appinfo decoder (None = unlimited)."""
    raw = os.environ.get("APPSHELF_MAX_DEPTH", "256").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        print(f"⚠️  Ignoring invalid APPSHELF_MAX_DEPTH={raw!r}, using 256")
        return 256
    return value if value > 0 else None


# Steam installation root - can be overridden by environment variable
STEAM_PATH = Path(os.environ.get("STEAM_PATH", get_default_steam_path()))

# Binary appinfo cache written by the Steam client
APPINFO_PATH = Path(os.environ.get("APPINFO_PATH", STEAM_PATH / "appcache" / "appinfo.vdf"))

STEAM_LIBRARY_PATHS = get_extra_library_paths()

MAX_DEPTH = get_max_depth()
