"""Sources of tile images and the loader that names tiles."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Optional

from meshview.geopoint import GeoPoint
from meshview.tilesettings import TileSettings

logger = logging.getLogger(__name__)

IMG_PATH_LEN = 64


class TileService(ABC):
    """A source from which tile images are loaded by name."""

    drive = ""

    @abstractmethod
    def load(self, name: str) -> Optional[bytes]:
        """Return the image data of a tile, or None if it cannot be loaded."""


class FallbackTileService(TileService):
    """Envelope that delegates to a configured service, else to a backup."""

    def __init__(self, service: Optional[TileService] = None, backup: Optional[TileService] = None):
        self.service = service
        self.backup = backup

    def set_service(self, service: Optional[TileService]) -> None:
        self.service = service

    def set_backup_service(self, service: Optional[TileService]) -> None:
        self.backup = service

    def load(self, name: str) -> Optional[bytes]:
        if self.service is not None:
            return self.service.load(name)
        if self.backup is not None:
            return self.backup.load(name)
        return None


class FileSystemTileService(TileService):
    """Loads tiles from a local file system, optionally below a root directory."""

    def __init__(self, root: Optional[str | Path] = None, letter: str = "F"):
        self.root = Path(root) if root is not None else None
        self.drive = f"{letter}:"

    def _path(self, name: str) -> Path:
        if self.root is None:
            return Path(name)
        return self.root / name.lstrip("/")

    def load(self, name: str) -> Optional[bytes]:
        path = self._path(name)
        try:
            data = path.read_bytes()
        except OSError:
            logger.warning("failed to load tile %s%s", self.drive, name)
            return None
        logger.debug("tile %s%s loaded", self.drive, name)
        return data


class TileLoader:
    """Builds tile file names from the settings and loads them through a callback."""

    def __init__(self, settings: TileSettings, fetch: Callable[[str], Optional[bytes]]):
        self.settings = settings
        self.fetch = fetch

    def filename(self, tile: GeoPoint) -> str:
        """Return the file name of a tile, limited like a fixed path buffer."""
        path = self.settings.tile_path(tile.zoom_level, tile.x_tile, tile.y_tile)
        return path[: IMG_PATH_LEN - 1]

    def load(self, tile: GeoPoint) -> Optional[bytes]:
        """Load a tile; a tile carrying a ``filename`` attribute caches its name."""
        name = getattr(tile, "filename", None)
        if not name:
            name = self.filename(tile)
            if hasattr(tile, "filename"):
                tile.filename = name
        return self.fetch(name)