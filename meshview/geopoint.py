"""Geographic coordinates mapped onto Web Mercator (EPSG:3857) raster tiles."""

from __future__ import annotations

import math

DEFAULT_TILE_SIZE = 256


def _tile_longitude(x_tile: float, n: int) -> float:
    return x_tile / n * 360.0 - 180.0


def _tile_latitude(y_tile: float, n: int) -> float:
    return math.degrees(math.atan(math.sinh(math.pi * (1.0 - 2.0 * y_tile / n))))


class GeoPoint:
    """A latitude/longitude together with its tile index and pixel offset in that tile."""

    def __init__(self, latitude: float, longitude: float, zoom: int, tile_size: int = DEFAULT_TILE_SIZE):
        self.latitude = float(latitude)
        self.longitude = float(longitude)
        self.tile_size = tile_size
        self.x_pos = 0
        self.y_pos = 0
        self.x_tile = 0
        self.y_tile = 0
        self.zoom_level: int | None = None
        self.set_zoom(zoom)

    @classmethod
    def from_tile(cls, x_tile: int, y_tile: int, zoom: int, tile_size: int = DEFAULT_TILE_SIZE) -> GeoPoint:
        """Create the point at the upper left corner of a tile."""
        n = 1 << zoom
        point = cls(_tile_latitude(y_tile, n), _tile_longitude(x_tile, n), zoom, tile_size)
        point.x_tile = x_tile
        point.y_tile = y_tile
        point.x_pos = 0
        point.y_pos = 0
        return point

    def set_zoom(self, zoom: int) -> None:
        """Recalculate tile index and pixel offset for another zoom level."""
        if zoom == self.zoom_level:
            return
        n = 1 << zoom
        size = self.tile_size
        lat_rad = math.radians(self.latitude)
        x_raw = (self.longitude + 180.0) / 360.0 * n
        y_raw = (1.0 - math.log(math.tan(lat_rad) + 1.0 / math.cos(lat_rad)) / math.pi) / 2.0 * n
        self.x_pos = int(x_raw * size) % size
        self.y_pos = int(y_raw * size) % size
        self.x_tile = int(x_raw)
        self.y_tile = int(y_raw)
        self.zoom_level = zoom

    def move(self, scroll_x: int, scroll_y: int) -> None:
        """Shift the point by pixels and recalculate tile and latitude/longitude."""
        size = self.tile_size
        self.x_pos -= scroll_x
        self.y_pos -= scroll_y
        if self.x_pos < 0:
            self.x_tile -= 1
            self.x_pos += size
        elif self.x_pos >= size:
            self.x_tile += 1
            self.x_pos -= size
        if self.y_pos < 0:
            self.y_tile -= 1
            self.y_pos += size
        elif self.y_pos >= size:
            self.y_tile += 1
            self.y_pos -= size

        n = 1 << (self.zoom_level or 0)
        lon = _tile_longitude(self.x_tile, n)
        lat = _tile_latitude(self.y_tile, n)
        lon1 = _tile_longitude(self.x_tile + 1, n)
        lat1 = _tile_latitude(self.y_tile + 1, n)
        self.longitude = lon + (lon1 - lon) * (self.x_pos / size)
        self.latitude = lat + (lat1 - lat) * (self.y_pos / size)

    def _key(self) -> tuple:
        return (
            self.latitude,
            self.longitude,
            self.x_pos,
            self.y_pos,
            self.x_tile,
            self.y_tile,
            self.zoom_level,
            self.tile_size,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeoPoint):
            return NotImplemented
        return self._key() == other._key()

    def __repr__(self) -> str:
        return (
            f"GeoPoint(lat={self.latitude:.6f}, lon={self.longitude:.6f}, "
            f"tile={self.zoom_level}/{self.x_tile}/{self.y_tile}, pos={self.x_pos}/{self.y_pos})"
        )