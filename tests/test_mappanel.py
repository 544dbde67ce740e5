from typing import Optional

import pytest

from meshview.geopoint import GeoPoint
from meshview.mappanel import MapPanel, MapTile
from meshview.tileservice import TileLoader, TileService
from meshview.tilesettings import TileSettings

WIDTH = 320
HEIGHT = 240


class _Recorder(TileService):
    def __init__(self, data: Optional[bytes] = b"tile"):
        self.data = data
        self.names: list[str] = []

    def load(self, name: str) -> Optional[bytes]:
        self.names.append(name)
        return self.data


def _draw(panel: MapPanel) -> None:
    for _ in range(100):
        if panel.is_drawn:
            break
        panel.task_handler()


def _panel(service=None, **kwargs) -> MapPanel:
    panel = MapPanel(WIDTH, HEIGHT, service or _Recorder(), TileSettings(), **kwargs)
    _draw(panel)
    return panel


def _assert_centered(panel: MapPanel) -> None:
    tile = panel.tiles[(panel.scrolled.x_tile, panel.scrolled.y_tile)]
    assert tile.x + panel.scrolled.x_pos == WIDTH // 2
    assert tile.y + panel.scrolled.y_pos == HEIGHT // 2


def test_tile_load_success_uses_settings_path():
    settings = TileSettings()
    service = _Recorder()
    loader = TileLoader(settings, service.load)
    tile = MapTile(5, 7, 13)
    assert tile.load(loader, 10, 20) is True
    assert tile.image == b"tile"
    assert (tile.x, tile.y) == (10, 20)
    assert service.names == [settings.tile_path(13, 5, 7)]
    assert tile.filename == settings.tile_path(13, 5, 7)


def test_tile_load_failure_uses_placeholder():
    loader = TileLoader(TileSettings(), _Recorder(None).load)
    tile = MapTile(1, 2, 13, no_tile=b"none")
    assert tile.load(loader, 0, 0) is False
    assert tile.image == b"none"
    assert tile.opacity == 100
    assert tile.label == "(13/1/2)"


def test_tile_move_adds_delta():
    tile = MapTile(1, 2, 13)
    tile.load(TileLoader(TileSettings(), _Recorder().load), 3, 4)
    assert tile.move(10, -5) is True
    assert (tile.x, tile.y) == (13, -1)


def test_invalid_panel_size():
    with pytest.raises(ValueError):
        MapPanel(0, 10)


def test_draw_fills_grid():
    panel = _panel()
    assert panel.is_drawn
    assert len(panel.tiles) == panel.tiles_x * panel.tiles_y
    size = panel.settings.tile_size
    for (kx, ky), tile in panel.tiles.items():
        assert tile.x == (kx - panel.x_start) * size + panel.x_offset
        assert tile.y == (ky - panel.y_start) * size + panel.y_offset
    _assert_centered(panel)


def test_markers_and_label_at_center():
    panel = _panel()
    assert panel.gps_marker == (WIDTH // 2 - 4, HEIGHT // 2 - 10)
    assert panel.home_marker == panel.gps_marker
    assert panel.location_label == "51.5004 -0.1214"


def test_every_tile_requested_from_service():
    service = _Recorder()
    panel = _panel(service)
    expected = {panel.settings.tile_path(13, x, y) for (x, y) in panel.tiles}
    assert set(service.names) == expected


def test_missing_tiles_get_placeholder():
    panel = _panel(_Recorder(None), no_tile_image=b"none")
    assert all(tile.image == b"none" for tile in panel.tiles.values())


@pytest.mark.parametrize("direction", [(1, 0), (-1, 0), (0, 1), (0, -1)])
def test_scroll_keeps_layout_consistent(direction):
    panel = _panel()
    for _ in range(3):
        before = (panel.scrolled.latitude, panel.scrolled.longitude)
        panel.scroll(*direction)
        assert len(panel.tiles) == panel.tiles_x * panel.tiles_y
        _assert_centered(panel)
        after = (panel.scrolled.latitude, panel.scrolled.longitude)
        assert after != before


def test_scroll_right_moves_west():
    panel = _panel()
    lon = panel.scrolled.longitude
    panel.scroll(1, 0)
    assert panel.scrolled.longitude < lon


def test_set_zoom_range():
    panel = _panel()
    panel.set_zoom(1)
    assert panel.settings.zoom_level == 13
    panel.set_zoom(14)
    assert panel.settings.zoom_level == 14
    assert panel.home.zoom_level == 14
    assert not panel.is_drawn
    _draw(panel)
    assert all(tile.zoom_level == 14 for tile in panel.tiles.values())
    _assert_centered(panel)


def test_home_position_follows_scroll():
    panel = _panel()
    panel.scroll(1, 0)
    panel.set_home_position()
    assert panel.home == panel.scrolled
    assert panel.home_location() == (panel.scrolled.latitude, panel.scrolled.longitude)
    assert panel.settings.default_zoom == panel.settings.zoom_level


def test_move_home_returns_to_home():
    panel = _panel()
    home = (panel.home.latitude, panel.home.longitude)
    panel.scroll(1, 1)
    panel.move_home()
    assert panel.scrolled == panel.home
    assert (panel.scrolled.latitude, panel.scrolled.longitude) == home


def test_gps_position_unlocked_and_locked():
    panel = _panel()
    scrolled = (panel.scrolled.latitude, panel.scrolled.longitude)
    panel.set_gps_position(48.0, 11.0)
    assert (panel.scrolled.latitude, panel.scrolled.longitude) == scrolled
    assert panel.gps_marker is None
    panel.set_locked(True)
    assert panel.scrolled == panel.current
    panel.set_gps_position(48.5, 11.5)
    assert panel.scrolled == panel.current
    _draw(panel)
    assert panel.gps_marker == (WIDTH // 2 - 4, HEIGHT // 2 - 10)


def test_set_home_location_centers():
    panel = _panel()
    panel.set_home_location(48.0, 11.0)
    _draw(panel)
    assert panel.home == panel.scrolled == panel.current
    _assert_centered(panel)


def test_objects_drawn_after_layout():
    calls = []
    panel = MapPanel(WIDTH, HEIGHT, _Recorder(), TileSettings())
    lat, lon = panel.settings.default_lat, panel.settings.default_lon
    panel.add(7, lat, lon, lambda *args: calls.append(args))
    assert calls[-1] == (7, 0, 0, 0)
    _draw(panel)
    assert calls[-1] == (7, WIDTH // 2, HEIGHT // 2, panel.settings.zoom_level)
    assert panel.objects_on_map == 1


def test_object_outside_view_is_hidden():
    calls = []
    panel = _panel()
    panel.add(3, 0.0, 0.0, lambda *args: calls.append(args))
    assert calls == [(3, 0, 0, 0)]
    panel.update(3, panel.settings.default_lat, panel.settings.default_lon)
    assert calls[-1] == (3, WIDTH // 2, HEIGHT // 2, panel.settings.zoom_level)


def test_update_unknown_object_raises():
    panel = _panel()
    with pytest.raises(KeyError):
        panel.update(99, 0.0, 0.0)


def test_remove_object():
    panel = _panel()
    panel.add(1, panel.settings.default_lat, panel.settings.default_lon, lambda *args: None)
    assert panel.objects_on_map == 1
    panel.remove(1)
    assert 1 not in panel.objects
    assert panel.objects_on_map == 0


def test_tile_service_replacement():
    panel = _panel()
    other = _Recorder(b"other")
    panel.set_tile_service(other)
    panel.force_redraw()
    _draw(panel)
    assert all(tile.image == b"other" for tile in panel.tiles.values())
    panel.set_tile_service(None)
    panel.set_backup_service(_Recorder(b"backup"))
    panel.force_redraw()
    _draw(panel)
    assert all(tile.image == b"backup" for tile in panel.tiles.values())


def test_geopoint_copies_are_independent():
    panel = _panel()
    panel.scroll(1, 0)
    assert isinstance(panel.home, GeoPoint)
    assert panel.home != panel.scrolled