"""Display configuration and the choice of view for a display size."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 320
DEFAULT_HEIGHT = 240


class Device(Enum):
    """Display hardware a configuration describes."""

    NONE = "none"
    X11 = "x11"
    CUSTOM_TFT = "custom_tft"
    CUSTOM_OLED = "custom_oled"
    CUSTOM_EINK = "custom_eink"
    THMI = "thmi"
    TDECK = "tdeck"
    INDICATOR = "indicator"
    ESP4848S040 = "esp4848s040"
    MAKERFABS480X480 = "makerfabs480x480"
    BPICOMPUTER_S3 = "bpicomputer_s3"
    TWATCH_S3 = "twatch_s3"
    UNPHONE_V9 = "unphone_v9"
    HELTEC_TRACKER = "heltec_tracker"
    WT32_SC01_PLUS = "wt32_sc01_plus"
    ESP2432S028RV1 = "esp2432s028rv1"
    ESP2432S028RV2 = "esp2432s028rv2"


@dataclass
class DisplayConfig:
    """Device and panel size of a display, built up by chained calls."""

    device: Device = Device.NONE
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT

    def with_device(self, device: Device) -> DisplayConfig:
        """Set the device and return this configuration."""
        self.device = Device(device)
        return self

    def with_panel(self, width: int, height: int) -> DisplayConfig:
        """Set the panel size and return this configuration."""
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid panel size {width}x{height}")
        self.width = width
        self.height = height
        return self


_VIEWS: dict[tuple[int, int], str] = {
    (128, 64): "OLEDView_128x64",
    (160, 80): "TFTView_160x80",
    (240, 240): "TFTView_240x240",
    (480, 320): "TFTView_480x320",
}
_DEFAULT_VIEW = "TFTView_320x240"


def select_view(config: Optional[DisplayConfig]) -> str:
    """Return the name of the view for a display; unknown sizes get the 320x240 view."""
    if config is None:
        logger.critical("VIEW is not defined and no config provided")
        raise ValueError("no display configuration provided")
    return _VIEWS.get((config.width, config.height), _DEFAULT_VIEW)