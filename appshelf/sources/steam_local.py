# steam_local.py
# Finds games installed in local Steam libraries

import re
from pathlib import Path
from typing import Iterator, List, Optional

from ..vdf import Branch, Document

# Manifest files written by Steam for each installed app
APP_MANIFEST_RE = re.compile(r"appmanifest_[^.]*\.acf", re.IGNORECASE)
APP_MANIFEST_ID_RE = re.compile(r"appmanifest_(\d+)\.acf", re.IGNORECASE)


class InstalledGame:
    """A game installed in a Steam library, with its appinfo details if known."""

    def __init__(self, appid: int, manifest_path: Path, steam_root: Path,
                 details: Optional[Branch] = None):
        self.appid = appid
        self.manifest_path = manifest_path
        self.steam_root = steam_root
        self.details = details

    def __repr__(self):
        return f"InstalledGame({self.appid}, {self.name!r})"

    @property
    def name(self) -> Optional[str]:
        """Display name from the appinfo "common" section."""
        if self.details is None:
            return None
        return self.details["common"].get_string("name")

    @property
    def icon(self) -> Optional[Path]:
        """Path to the icon Steam cached for this game, if present."""
        icon_path = self.steam_root / "appcache" / "librarycache" / f"{self.appid}_icon.jpg"
        if icon_path.is_file():
            return icon_path
        return None

    def to_dict(self):
        icon = self.icon
        return {
            "appid": self.appid,
            "name": self.name,
            "manifest": str(self.manifest_path),
            "icon": str(icon) if icon else None,
            "has_details": self.details is not None,
        }


class SteamLibrary:
    """One Steam library folder (the directory that contains steamapps/)."""

    def __init__(self, path, steam_root):
        self.path = Path(path)
        self.steam_root = Path(steam_root)

    def __repr__(self):
        return f"SteamLibrary({self.path})"

    def games(self, document: Optional[Document] = None) -> Iterator[InstalledGame]:
        """
        Iterate games installed in this library.

        Args:
            document: Decoded appinfo used to attach details by appid

        Yields:
            InstalledGame for every appmanifest_<appid>.acf file
        """
        steamapps = self.path / "steamapps"
        if not steamapps.is_dir():
            print(f"⚠️  No steamapps folder in {self.path}")
            return

        for manifest in sorted(steamapps.iterdir()):
            if not manifest.is_file() or not APP_MANIFEST_RE.fullmatch(manifest.name):
                continue

            match = APP_MANIFEST_ID_RE.fullmatch(manifest.name)
            if not match:
                print(f"⚠️  Skipping manifest without a numeric appid: {manifest.name}")
                continue

            appid = int(match.group(1))
            details = document.get(appid) if document is not None else None
            yield InstalledGame(appid, manifest, self.steam_root, details)


def get_libraries(steam_root, extra_paths=None) -> List[SteamLibrary]:
    """Get the Steam root library plus any extra library folders, without duplicates."""
    steam_root = Path(steam_root)
    libraries = []
    seen = set()

    for path in [steam_root, *(extra_paths or [])]:
        key = str(Path(path).resolve())
        if key in seen:
            continue
        seen.add(key)
        libraries.append(SteamLibrary(path, steam_root))

    return libraries


def get_installed_games(steam_root, extra_paths=None, document: Optional[Document] = None):
    """
    List games installed across all known Steam libraries.

    Args:
        steam_root: Steam installation directory
        extra_paths: Additional library folders
        document: Decoded appinfo.vdf used to fill in names

    Returns:
        List of InstalledGame, one per appid (first library wins)
    """
    games = []
    seen_appids = set()

    for library in get_libraries(steam_root, extra_paths):
        for game in library.games(document):
            if game.appid in seen_appids:
                continue
            seen_appids.add(game.appid)
            games.append(game)

    print(f"  Found {len(games)} installed Steam games")
    return games
