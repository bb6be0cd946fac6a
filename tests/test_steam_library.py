"""Tests for local Steam library scanning and the appinfo service cache."""
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from appshelf.services import appinfo_service
from appshelf.sources.steam_local import SteamLibrary, get_installed_games, get_libraries
from appshelf.vdf import Branch, ContainerFormatError, Leaf, NestingTooDeepError, SourceIOError
from vdf_builders import app, branch_entry, document, string_entry


@pytest.fixture
def steam_root(tmp_path):
    """Create a fake Steam installation with two manifests and one icon."""
    root = tmp_path / "Steam"
    steamapps = root / "steamapps"
    steamapps.mkdir(parents=True)
    (steamapps / "appmanifest_440.acf").write_text('"AppState" { "appid" "440" }')
    (steamapps / "APPMANIFEST_730.ACF").write_text('"AppState" { "appid" "730" }')
    (steamapps / "appmanifest_broken.acf").write_text("")
    (steamapps / "libraryfolders.vdf").write_text("")
    (steamapps / "common").mkdir()

    cache = root / "appcache" / "librarycache"
    cache.mkdir(parents=True)
    (cache / "440_icon.jpg").write_bytes(b"\xff\xd8")
    return root


@pytest.fixture
def appinfo_document():
    return {
        440: Branch({"common": Branch({"name": Leaf("Team Fortress 2")})}),
        570: Branch({"common": Branch({"name": Leaf("Dota 2")})}),
    }


class TestSteamLibrary:

    def test_games_from_manifest_names(self, steam_root):
        games = list(SteamLibrary(steam_root, steam_root).games())
        assert sorted(g.appid for g in games) == [440, 730]

    def test_details_and_name_attached(self, steam_root, appinfo_document):
        games = {g.appid: g for g in SteamLibrary(steam_root, steam_root).games(appinfo_document)}
        assert games[440].name == "Team Fortress 2"
        assert games[730].details is None
        assert games[730].name is None

    def test_icon_from_library_cache(self, steam_root):
        games = {g.appid: g for g in SteamLibrary(steam_root, steam_root).games()}
        assert games[440].icon == steam_root / "appcache" / "librarycache" / "440_icon.jpg"
        assert games[730].icon is None

    def test_library_without_steamapps(self, tmp_path):
        assert list(SteamLibrary(tmp_path, tmp_path).games()) == []

    def test_to_dict(self, steam_root, appinfo_document):
        game = next(g for g in SteamLibrary(steam_root, steam_root).games(appinfo_document) if g.appid == 440)
        data = game.to_dict()
        assert data["name"] == "Team Fortress 2"
        assert data["has_details"] is True
        assert data["icon"].endswith("440_icon.jpg")


class TestInstalledGames:

    def test_extra_libraries(self, steam_root, tmp_path):
        extra = tmp_path / "Games"
        (extra / "steamapps").mkdir(parents=True)
        (extra / "steamapps" / "appmanifest_570.acf").write_text("")
        (extra / "steamapps" / "appmanifest_440.acf").write_text("")

        games = get_installed_games(steam_root, [extra])
        # 440 is in both libraries; the Steam root copy wins
        assert sorted(g.appid for g in games) == [440, 570, 730]
        assert len(games) == 3
        assert next(g for g in games if g.appid == 440).manifest_path.parent == steam_root / "steamapps"

    def test_duplicate_library_paths(self, steam_root):
        libraries = get_libraries(steam_root, [steam_root, str(steam_root)])
        assert len(libraries) == 1


class TestAppinfoService:

    @pytest.fixture(autouse=True)
    def fresh_cache(self):
        appinfo_service.clear_cache()
        yield
        appinfo_service.clear_cache()

    def test_load_and_lookup(self, tmp_path):
        path = tmp_path / "appinfo.vdf"
        path.write_bytes(document(app(440, branch_entry("common", string_entry("name", "TF2")))))

        assert appinfo_service.get_app_details(440, path).find("common/name") == Leaf("TF2")
        assert appinfo_service.get_app_details(1, path) is None

    def test_cache_reused_until_file_changes(self, tmp_path):
        path = tmp_path / "appinfo.vdf"
        path.write_bytes(document(app(1, string_entry("name", "One"))))

        first = appinfo_service.load_appinfo(path)
        assert appinfo_service.load_appinfo(path) is first

        path.write_bytes(document(app(2, string_entry("name", "Two, longer"))))
        stat = path.stat()
        os.utime(path, ns=(stat.st_atime_ns, stat.st_mtime_ns + 1_000_000_000))

        second = appinfo_service.load_appinfo(path)
        assert second is not first
        assert list(second) == [2]

    def test_missing_file(self, tmp_path):
        with pytest.raises(SourceIOError):
            appinfo_service.load_appinfo(tmp_path / "missing.vdf")

    def test_invalid_file(self, tmp_path):
        path = tmp_path / "appinfo.vdf"
        path.write_bytes(b"\x29\x00\x00" + bytes(9))
        with pytest.raises(ContainerFormatError):
            appinfo_service.load_appinfo(path)

    def test_uses_configured_path(self, tmp_path, monkeypatch):
        path = tmp_path / "appinfo.vdf"
        path.write_bytes(document(app(99, string_entry("name", "Configured"))))
        monkeypatch.setattr(appinfo_service.config, "APPINFO_PATH", path)

        assert appinfo_service.get_app_details(99).get_string("name") == "Configured"

    def test_none_disables_configured_depth_limit(self, tmp_path, monkeypatch):
        path = tmp_path / "appinfo.vdf"
        path.write_bytes(document(app(1, branch_entry("a", branch_entry("b", string_entry("c", "deep"))))))
        monkeypatch.setattr(appinfo_service.config, "MAX_DEPTH", 2)

        with pytest.raises(NestingTooDeepError):
            appinfo_service.load_appinfo(path)

        result = appinfo_service.load_appinfo(path, max_depth=None)
        assert result[1].find("a/b/c") == Leaf("deep")

    def test_cache_separates_depth_limits(self, tmp_path):
        path = tmp_path / "appinfo.vdf"
        path.write_bytes(document(app(1, branch_entry("a", branch_entry("b", string_entry("c", "deep"))))))

        assert appinfo_service.load_appinfo(path, max_depth=None)[1].find("a/b/c") == Leaf("deep")
        with pytest.raises(NestingTooDeepError):
            appinfo_service.load_appinfo(path, max_depth=2)
