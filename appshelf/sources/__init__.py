# sources package
# Local game library sources

from .steam_local import InstalledGame, SteamLibrary, get_installed_games, get_libraries
