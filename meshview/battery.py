"""Classification of battery charge into display states."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

DEFAULT_CHARGING_VOLTAGE = 4.18


class BatteryStatus(IntEnum):
    """Display state of the battery, from external power down to warning."""

    PLUGGED = 0
    CHARGING = 1
    FULL = 2
    MID = 3
    LOW = 4
    EMPTY = 5
    WARN = 6


@dataclass(frozen=True)
class _Threshold:
    percentage: int
    voltage: float


class BatteryLevel:
    """Maps a charge percentage and voltage to a BatteryStatus."""

    def __init__(self, charging_voltage: float = DEFAULT_CHARGING_VOLTAGE):
        self.levels: dict[BatteryStatus, _Threshold] = {
            BatteryStatus.PLUGGED: _Threshold(100, 0.0),
            BatteryStatus.CHARGING: _Threshold(100, charging_voltage),
            BatteryStatus.FULL: _Threshold(80, 4.00),
            BatteryStatus.MID: _Threshold(35, 3.50),
            BatteryStatus.LOW: _Threshold(10, 3.30),
            BatteryStatus.EMPTY: _Threshold(0, 3.12),
            BatteryStatus.WARN: _Threshold(0, 3.10),
        }

    def calc_status(self, percentage: int, voltage: float) -> BatteryStatus:
        """Return the status for a charge percentage and battery voltage."""
        if voltage == self.levels[BatteryStatus.PLUGGED].voltage:
            return BatteryStatus.PLUGGED
        for status in (BatteryStatus.CHARGING, BatteryStatus.FULL, BatteryStatus.MID, BatteryStatus.LOW):
            level = self.levels[status]
            if percentage >= level.percentage and voltage > level.voltage:
                return status
        if percentage > self.levels[BatteryStatus.EMPTY].percentage:
            return BatteryStatus.EMPTY
        return BatteryStatus.WARN