import copy

import pytest

from meshview.geopoint import GeoPoint


def test_origin_at_zoom_one_is_tile_corner():
    point = GeoPoint(0.0, 0.0, 1)
    assert (point.x_tile, point.y_tile) == (1, 1)
    assert (point.x_pos, point.y_pos) == (0, 0)
    assert point.zoom_level == 1


def test_zoom_zero_is_single_tile():
    point = GeoPoint(51.5, -0.12, 0)
    assert (point.x_tile, point.y_tile) == (0, 0)


@pytest.mark.parametrize("zoom", [1, 5, 13, 18])
def test_pixel_offset_within_tile(zoom):
    point = GeoPoint(51.5003646652, -0.1214328476, zoom)
    assert 0 <= point.x_pos < point.tile_size
    assert 0 <= point.y_pos < point.tile_size
    assert 0 <= point.x_tile < (1 << zoom)
    assert 0 <= point.y_tile < (1 << zoom)


def test_tile_corner_round_trip():
    point = GeoPoint(48.8584, 2.2945, 12)
    corner = GeoPoint.from_tile(point.x_tile, point.y_tile, 12)
    assert corner.longitude <= point.longitude
    assert corner.latitude >= point.latitude
    assert (corner.x_tile, corner.y_tile) == (point.x_tile, point.y_tile)
    assert (corner.x_pos, corner.y_pos) == (0, 0)


def test_from_tile_world_corner():
    corner = GeoPoint.from_tile(0, 0, 0)
    assert corner.longitude == pytest.approx(-180.0)
    assert corner.latitude == pytest.approx(85.0511287798, abs=1e-6)


def test_set_same_zoom_keeps_state():
    point = GeoPoint(10.0, 20.0, 8)
    before = copy.copy(point)
    point.set_zoom(8)
    assert point == before


def test_zoom_in_doubles_tile_index():
    point = GeoPoint(35.0, 139.0, 10)
    x_tile, y_tile = point.x_tile, point.y_tile
    point.set_zoom(11)
    assert point.x_tile // 2 == x_tile
    assert point.y_tile // 2 == y_tile


def test_move_by_zero_keeps_location_close():
    point = GeoPoint(40.0, -74.0, 14)
    lat, lon = point.latitude, point.longitude
    point.move(0, 0)
    assert point.latitude == pytest.approx(lat, abs=1e-3)
    assert point.longitude == pytest.approx(lon, abs=1e-3)


def test_move_wraps_to_previous_tile():
    point = GeoPoint.from_tile(10, 20, 6)
    point.move(1, 1)
    assert (point.x_tile, point.y_tile) == (9, 19)
    assert (point.x_pos, point.y_pos) == (point.tile_size - 1, point.tile_size - 1)


def test_move_wraps_to_next_tile():
    point = GeoPoint.from_tile(10, 20, 6)
    point.x_pos = point.tile_size - 1
    point.move(-1, 0)
    assert point.x_tile == 11
    assert point.x_pos == 0
    assert point.longitude == pytest.approx(GeoPoint.from_tile(11, 20, 6).longitude)


def test_move_left_increases_longitude():
    point = GeoPoint(0.0, 0.0, 5)
    lon = point.longitude
    point.move(-10, 0)
    assert point.longitude > lon