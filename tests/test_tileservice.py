import pytest

from meshview.geopoint import GeoPoint
from meshview.tileservice import (
    IMG_PATH_LEN,
    FallbackTileService,
    FileSystemTileService,
    TileLoader,
    TileService,
)
from meshview.tilesettings import TileSettings


class _Fixed(TileService):
    def __init__(self, data):
        self.data = data
        self.names = []

    def load(self, name):
        self.names.append(name)
        return self.data


def test_tile_service_is_abstract():
    with pytest.raises(TypeError):
        TileService()


def test_file_system_service_reads_file(tmp_path):
    tile = tmp_path / "maps" / "13" / "1" / "2.png"
    tile.parent.mkdir(parents=True)
    tile.write_bytes(b"\x89PNG data")
    service = FileSystemTileService(tmp_path)
    assert service.load("/maps/13/1/2.png") == b"\x89PNG data"


def test_file_system_service_absolute_path(tmp_path):
    tile = tmp_path / "t.png"
    tile.write_bytes(b"abc")
    service = FileSystemTileService()
    assert service.load(str(tile)) == b"abc"


def test_file_system_service_missing_file(tmp_path):
    service = FileSystemTileService(tmp_path)
    assert service.load("/maps/1/1/1.png") is None


def test_file_system_service_drive_letter():
    assert FileSystemTileService(letter="A").drive == "A:"


def test_fallback_uses_primary_service():
    primary = _Fixed(b"primary")
    backup = _Fixed(b"backup")
    service = FallbackTileService(primary, backup)
    assert service.load("x") == b"primary"
    assert backup.names == []


def test_fallback_does_not_retry_backup_when_primary_fails():
    backup = _Fixed(b"backup")
    service = FallbackTileService(_Fixed(None), backup)
    assert service.load("x") is None
    assert backup.names == []


def test_fallback_uses_backup_without_primary():
    service = FallbackTileService()
    service.set_backup_service(_Fixed(b"backup"))
    assert service.load("x") == b"backup"


def test_fallback_without_services():
    assert FallbackTileService().load("x") is None


def test_set_service_replaces_primary():
    service = FallbackTileService(_Fixed(b"old"))
    service.set_service(_Fixed(b"new"))
    assert service.load("x") == b"new"


def test_loader_filename_uses_settings():
    settings = TileSettings()
    settings.set_tile_style("osm")
    loader = TileLoader(settings, lambda name: None)
    tile = GeoPoint.from_tile(3, 4, 5)
    assert loader.filename(tile) == "/maps/osm/5/3/4.png"


def test_loader_filename_truncated():
    settings = TileSettings(prefix="/" + "p" * 80)
    loader = TileLoader(settings, lambda name: None)
    name = loader.filename(GeoPoint.from_tile(1, 1, 1))
    assert len(name) == IMG_PATH_LEN - 1
    assert name == ("/" + "p" * 80)[: IMG_PATH_LEN - 1]


def test_loader_passes_name_to_fetch():
    requested = []

    def fetch(name):
        requested.append(name)
        return b"img"

    loader = TileLoader(TileSettings(), fetch)
    tile = GeoPoint.from_tile(7, 8, 9)
    assert loader.load(tile) == b"img"
    assert requested == [loader.filename(tile)]


def test_loader_caches_filename_on_tile():
    settings = TileSettings()
    loader = TileLoader(settings, lambda name: name.encode())
    tile = GeoPoint.from_tile(1, 2, 3)
    tile.filename = ""
    first = loader.load(tile)
    settings.tile_format = "jpg"
    assert loader.load(tile) == first
    assert tile.filename == first.decode()