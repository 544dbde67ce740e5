"""Size independent map panel laid out from x/y/z raster tiles."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from meshview.geopoint import GeoPoint
from meshview.tileservice import FallbackTileService, TileLoader, TileService
from meshview.tilesettings import TileSettings

logger = logging.getLogger(__name__)

DrawCallback = Callable[[int, int, int, int], None]

_MIN_ZOOM_EXCLUSIVE = 1
_MAX_ZOOM = 20
_MARKER_OFFSET_X = 4
_MARKER_OFFSET_Y = 10


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _cmod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    return a - _cdiv(a, b) * b


class MapTile:
    """One tile image placed at a pixel position inside the panel."""

    def __init__(self, x_tile: int, y_tile: int, zoom: int, no_tile: Optional[bytes] = None):
        self.x_tile = x_tile
        self.y_tile = y_tile
        self.zoom_level = zoom
        self.filename = ""
        self.no_tile = no_tile
        self.x = 0
        self.y = 0
        self.image: Optional[bytes] = None
        self.label: Optional[str] = None
        self.opacity = 255
        self._debug = False

    def _debug_label(self) -> str:
        return f"({self.zoom_level}/{self.x_tile}/{self.y_tile}) -> {self.x},{self.y}"

    def load(self, loader: TileLoader, pos_x: int, pos_y: int) -> bool:
        """Place the tile at a panel position and load its image; False if it is missing."""
        self.x = pos_x
        self.y = pos_y
        self._debug = loader.settings.debug
        self.opacity = 255
        self.label = self._debug_label() if self._debug else None
        data = loader.load(self)
        if data is not None:
            self.image = data
            return True
        self.image = self.no_tile
        if self.no_tile is not None:
            self.opacity = 100
            if not self._debug:
                self.label = f"({self.zoom_level}/{self.x_tile}/{self.y_tile})"
        return False

    def move(self, delta_x: int, delta_y: int) -> bool:
        """Shift the tile by pixels within the panel."""
        self.x += delta_x
        self.y += delta_y
        if self._debug:
            self.label = self._debug_label()
        return True

    def __repr__(self) -> str:
        return f"MapTile({self.zoom_level}/{self.x_tile}/{self.y_tile} at {self.x},{self.y})"


@dataclass
class _MapObject:
    id: int
    point: GeoPoint
    draw: Optional[DrawCallback]


class MapPanel:
    """Lays out tiles and objects on a panel; keeps a home, a GPS and a scrolled position."""

    def __init__(
        self,
        width: int,
        height: int,
        service: Optional[TileService] = None,
        settings: Optional[TileSettings] = None,
        no_tile_image: Optional[bytes] = None,
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid panel size {width}x{height}")
        self.width = width
        self.height = height
        self.settings = settings if settings is not None else TileSettings()
        self.service = FallbackTileService(service)
        self.loader = TileLoader(self.settings, self.service.load)
        self.no_tile_image = no_tile_image
        self.locked = False
        self.needs_redraw = False
        self.tiles: dict[tuple[int, int], MapTile] = {}
        self.objects: dict[int, _MapObject] = {}
        self.objects_on_map = 0
        self.home_marker: Optional[tuple[int, int]] = None
        self.gps_marker: Optional[tuple[int, int]] = None
        self.location_label = ""
        self.x_offset = 0
        self.y_offset = 0
        self.x_start = 0
        self.y_start = 0
        self.tiles_x = 0
        self.tiles_y = 0
        self._done = True
        self._x = 0
        self._y = 0
        self.home = self._point(self.settings.default_lat, self.settings.default_lon)
        self.current = copy.copy(self.home)
        self.scrolled = copy.copy(self.home)
        logger.debug("panel size: %dx%d", width, height)
        self._center()

    def _point(self, lat: float, lon: float) -> GeoPoint:
        return GeoPoint(lat, lon, self.settings.zoom_level, self.settings.tile_size)

    def _new_tile(self, x_tile: int, y_tile: int, pos_x: int, pos_y: int) -> None:
        tile = MapTile(x_tile, y_tile, self.settings.zoom_level, self.no_tile_image)
        self.tiles[(x_tile, y_tile)] = tile
        tile.load(self.loader, pos_x, pos_y)

    @property
    def is_drawn(self) -> bool:
        """True once every tile of the current layout has been loaded."""
        return self._done and not self.needs_redraw

    def _redraw(self) -> None:
        """Load one row's worth of tiles per call."""
        if self.needs_redraw:
            self.needs_redraw = False
            self._done = False
            self._x = 0
            self._y = 0
            self.tiles.clear()
        if self._done:
            return
        size = self.settings.tile_size
        for _ in range(self.tiles_y):
            if self._x < self.tiles_x and self._y < self.tiles_y:
                self._new_tile(
                    self.x_start + self._x,
                    self.y_start + self._y,
                    self._x * size + self.x_offset,
                    self._y * size + self.y_offset,
                )
                self._x += 1
            elif self._y < self.tiles_y:
                self._x = 0
                self._y += 1
                if self._y >= self.tiles_y:
                    self._done = True
                    self._draw_location()
                    self._draw_objects()

    def _marker(self, point: GeoPoint) -> Optional[tuple[int, int]]:
        tile = self.tiles.get((point.x_tile, point.y_tile))
        if tile is None:
            return None
        return (point.x_pos + tile.x - _MARKER_OFFSET_X, point.y_pos + tile.y - _MARKER_OFFSET_Y)

    def _draw_location(self) -> None:
        self.gps_marker = self._marker(self.current)
        self.home_marker = self._marker(self.home)
        self.location_label = f"{self.scrolled.latitude:.4f} {self.scrolled.longitude:.4f}"

    def _draw_objects(self) -> None:
        self.objects_on_map = 0
        for obj in self.objects.values():
            obj.point.set_zoom(self.settings.zoom_level)
            self._draw_object(obj)

    def _draw_object(self, obj: _MapObject) -> None:
        if not obj.draw:
            return
        tile = self.tiles.get((obj.point.x_tile, obj.point.y_tile))
        if tile is not None:
            self.objects_on_map += 1
            obj.draw(obj.id, tile.x + obj.point.x_pos, tile.y + obj.point.y_pos, self.settings.zoom_level)
        else:
            obj.draw(obj.id, 0, 0, 0)

    def _center(self) -> None:
        """Lay out tiles so that the scrolled location is in the middle of the panel."""
        size = self.settings.tile_size
        xpos = self.width // 2 - self.scrolled.x_pos
        ypos = self.height // 2 - self.scrolled.y_pos
        self.x_offset = _cmod(xpos, size) - size
        self.y_offset = _cmod(ypos, size) - size
        self.tiles_x = _cdiv(self.width - self.x_offset + size - 2, size)
        self.tiles_y = _cdiv(self.height - self.y_offset + size - 2, size)
        self.x_start = self.scrolled.x_tile - (_cdiv(xpos, size) + 1)
        self.y_start = self.scrolled.y_tile - (_cdiv(ypos, size) + 1)
        self.needs_redraw = True

    def set_tile_service(self, service: Optional[TileService]) -> None:
        self.service.set_service(service)

    def set_backup_service(self, service: Optional[TileService]) -> None:
        self.service.set_backup_service(service)

    def set_home_position(self) -> None:
        """Make the scrolled location the new home."""
        self.home = copy.copy(self.scrolled)
        self.settings.default_zoom = self.settings.zoom_level
        self._draw_location()

    def home_location(self) -> tuple[float, float]:
        """Return the home latitude and longitude."""
        return self.home.latitude, self.home.longitude

    def set_home_location(self, lat: float, lon: float) -> None:
        self.home = self._point(lat, lon)
        self.current = copy.copy(self.home)
        self.scrolled = copy.copy(self.home)
        self._center()

    def set_gps_position(self, lat: float, lon: float) -> None:
        self.current = self._point(lat, lon)
        if self.locked:
            self.scrolled = copy.copy(self.current)
            self._center()
        else:
            self._draw_location()

    def move_home(self) -> None:
        self.set_zoom(self.settings.default_zoom)
        self.scrolled = copy.copy(self.home)
        self._center()

    def move_current(self) -> None:
        logger.debug(
            "move_current: pos=%0.4f, %0.4f (%d/%d/%d)",
            self.current.latitude,
            self.current.longitude,
            self.current.zoom_level,
            self.current.x_tile,
            self.current.y_tile,
        )
        self.scrolled = copy.copy(self.current)
        self._center()

    def set_zoom(self, zoom: int) -> None:
        """Change the zoom level; levels outside 2..20 are ignored."""
        if _MIN_ZOOM_EXCLUSIVE < zoom <= _MAX_ZOOM:
            logger.debug("set_zoom: %d", zoom)
            self.settings.zoom_level = zoom
            self.home.set_zoom(zoom)
            self.current.set_zoom(zoom)
            self.scrolled.set_zoom(zoom)
            self._center()

    def set_locked(self, lock: bool) -> None:
        """Make the map follow the GPS position."""
        self.locked = lock
        if lock:
            self.move_current()

    def scroll(self, delta_x: int, delta_y: int, fraction: int = 3) -> None:
        """Move the map by -1/0/+1 of a fraction of the panel, at most one tile size."""
        size = self.settings.tile_size
        if self.width // fraction > size:
            scroll_x = delta_x * size
        else:
            scroll_x = _cdiv(delta_x * self.width, fraction)
        if self.height // fraction > size:
            scroll_y = delta_y * size
        else:
            scroll_y = _cdiv(delta_y * self.height, fraction)

        world = 1 << self.settings.zoom_level
        if (
            (self.x_start == 0 and scroll_x > 0)
            or (self.y_start == 0 and scroll_y > 0)
            or (self.x_start + self.tiles_x > world and scroll_x < 0)
            or (self.y_start + self.tiles_y > world and scroll_y < 0)
        ):
            return

        first = self.tiles.get((self.x_start, self.y_start))
        if first is None:
            logger.error("scroll: start tile %d/%d missing", self.x_start, self.y_start)
            return
        if first.x + scroll_x > 0:
            if self.x_start == 0:
                return
            self.x_start -= 1
            self.tiles_x += 1
        if first.y + scroll_y > 0:
            if self.y_start == 0:
                return
            self.y_start -= 1
            self.tiles_y += 1

        last_key = (self.x_start + self.tiles_x - 1, self.y_start + self.tiles_y - 1)
        last = self.tiles.get(last_key)
        if last is None:
            logger.error("scroll: end tile %d/%d missing", *last_key)
            return
        if last.x + scroll_x < self.width - size:
            self.tiles_x += 1
        if last.y + scroll_y < self.height - size:
            self.tiles_y += 1

        self.x_offset += scroll_x
        self.y_offset += scroll_y
        self._normalize_offsets(size)

        change_x_start = change_y_start = False
        change_x_tiles = change_y_tiles = False

        for x in range(self.tiles_x):
            for y in range(self.tiles_y):
                key = (self.x_start + x, self.y_start + y)
                tile = self.tiles.get(key)
                if tile is None:
                    xpos = x * size + self.x_offset
                    ypos = y * size + self.y_offset
                    if (x == 0 and xpos >= 0) or (x == self.tiles_x - 1 and xpos >= self.width):
                        xpos -= size
                        self.x_offset -= size
                    if (y == 0 and ypos >= 0) or (y == self.tiles_y - 1 and ypos >= self.height):
                        ypos -= size
                        self.y_offset -= size
                    self._new_tile(key[0], key[1], xpos, ypos)
                    continue
                new_x = tile.x + scroll_x
                new_y = tile.y + scroll_y
                if -size <= new_x < self.width:
                    if -size <= new_y < self.height:
                        tile.move(scroll_x, scroll_y)
                    else:
                        del self.tiles[key]
                        change_y_tiles = True
                        if new_y < -size:
                            change_y_start = True
                else:
                    del self.tiles[key]
                    change_x_tiles = True
                    if new_x < -size:
                        change_x_start = True

        self._normalize_offsets(size)
        if change_x_start:
            self.x_start += 1
        if change_y_start:
            self.y_start += 1
        if change_x_tiles:
            self.tiles_x -= 1
        if change_y_tiles:
            self.tiles_y -= 1

        if self.tiles_x * self.tiles_y != len(self.tiles):
            logger.error("tile size mismatch: %d*%d != %d", self.tiles_x, self.tiles_y, len(self.tiles))

        self.scrolled.move(scroll_x, scroll_y)
        self._draw_location()
        self._draw_objects()

    def _normalize_offsets(self, size: int) -> None:
        if self.x_offset <= -size:
            self.x_offset += size
        if self.y_offset <= -size:
            self.y_offset += size
        if self.x_offset >= size:
            self.x_offset -= size
        if self.y_offset >= size:
            self.y_offset -= size

    def add(self, object_id: int, lat: float, lon: float, draw: Optional[DrawCallback]) -> None:
        """Place an object on the map, or move it if it is already there."""
        obj = self.objects.get(object_id)
        if obj is not None:
            obj.point = self._point(lat, lon)
        else:
            obj = _MapObject(object_id, self._point(lat, lon), draw)
            self.objects[object_id] = obj
        self._draw_object(obj)

    def update(self, object_id: int, lat: float, lon: float) -> None:
        """Move a placed object; raise KeyError if it is unknown."""
        obj = self.objects[object_id]
        obj.point = self._point(lat, lon)
        self._draw_object(obj)

    def remove(self, object_id: int) -> None:
        """Remove an object from the map."""
        self.objects.pop(object_id, None)
        self.objects_on_map = max(0, self.objects_on_map - 1)

    def force_redraw(self) -> None:
        self.needs_redraw = True

    def task_handler(self) -> None:
        """Perform one step of incremental drawing."""
        self._redraw()