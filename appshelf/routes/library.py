# routes/library.py
# Installed Steam games endpoint

from fastapi import APIRouter

from .. import config
from ..services.appinfo_service import load_appinfo
from ..sources.steam_local import get_installed_games
from ..vdf import VdfError

router = APIRouter(tags=["Library"])


@router.get("/api/library/games")
def library_games():
    """Get games installed in the local Steam libraries, named from appinfo when available."""
    try:
        document = load_appinfo()
    except VdfError as e:
        # Manifests alone are enough to list games; they just won't have names
        print(f"⚠️  Listing games without appinfo details: {e}")
        document = None

    games = get_installed_games(config.STEAM_PATH, config.STEAM_LIBRARY_PATHS, document)
    return [game.to_dict() for game in sorted(games, key=lambda g: (g.name or "", g.appid))]
