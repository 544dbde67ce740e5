"""Discovery of map tile styles stored on a card or disk."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def load_map_styles(folder: str | Path, fallback: str | Path = "/map") -> list[str]:
    """Return the sorted style directory names in ``folder``.

    Hidden entries are skipped. If no style is found but ``fallback`` exists,
    the fallback path itself is the only style.
    """
    styles: set[str] = set()
    root = Path(folder)
    if root.is_dir():
        for entry in root.iterdir():
            if entry.is_dir() and not entry.name.startswith("."):
                logger.debug("found map style: %s", entry.name)
                styles.add(entry.name)
    if not styles:
        if Path(fallback).exists():
            logger.debug("found %s dir", fallback)
            styles.add(str(fallback))
        else:
            logger.info("no maps found")
    return sorted(styles)