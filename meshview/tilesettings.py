"""Settings shared by everything that draws raster map tiles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TileSettings:
    """Zoom, tile geometry and file layout of an x/y/z raster tile set."""

    zoom_level: int = 13
    default_zoom: int = 13
    tile_size: int = 256
    cache_size: int = 50 * 1024
    default_lat: float = 51.5003646652
    default_lon: float = -0.1214328476
    prefix: str = "/maps"
    tile_style: str = ""
    tile_format: str = "png"
    debug: bool = False

    def set_tile_style(self, style: str) -> None:
        """Set the style directory, making sure it ends with a slash."""
        if style and not style.endswith("/"):
            style += "/"
        self.tile_style = style

    def tile_path(self, zoom: int, x_tile: int, y_tile: int) -> str:
        """Return the path of one tile image below the prefix directory."""
        return f"{self.prefix}/{self.tile_style}{zoom}/{x_tile}/{y_tile}.{self.tile_format}"