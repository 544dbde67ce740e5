"""LoRa regions, modem presets and the channel arithmetic built on them."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum


class Region(IntEnum):
    """Regulatory regions, in the order the radio configuration numbers them."""

    UNSET = 0
    US = 1
    EU_433 = 2
    EU_868 = 3
    CN = 4
    JP = 5
    ANZ = 6
    KR = 7
    TW = 8
    RU = 9
    IN = 10
    NZ_865 = 11
    TH = 12
    LORA_24 = 13
    UA_433 = 14
    UA_868 = 15
    MY_433 = 16
    MY_919 = 17
    SG_923 = 18
    PH_433 = 19
    PH_868 = 20
    PH_915 = 21


class ModemPreset(IntEnum):
    """Modem presets, in the order the radio configuration numbers them."""

    LONG_FAST = 0
    LONG_SLOW = 1
    VERY_LONG_SLOW = 2
    MEDIUM_SLOW = 3
    MEDIUM_FAST = 4
    SHORT_SLOW = 5
    SHORT_FAST = 6
    LONG_MODERATE = 7
    SHORT_TURBO = 8


def _f32(value: float) -> float:
    """Round a value to single precision, as the radio firmware computes."""
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass(frozen=True)
class _RegionInfo:
    name: str
    freq_start: float
    freq_end: float


@dataclass(frozen=True)
class _PresetInfo:
    name: str
    bandwidth_khz: str
    bandwidth_mhz: float


_REGIONS: dict[Region, _RegionInfo] = {
    Region.UNSET: _RegionInfo("UNSET", 902.0, 928.0),
    Region.US: _RegionInfo("US", 902.0, 928.0),
    Region.EU_433: _RegionInfo("EU_433", 433.0, 434.0),
    Region.EU_868: _RegionInfo("EU_868", 869.4, 869.65),
    Region.CN: _RegionInfo("CN", 470.0, 510.0),
    Region.JP: _RegionInfo("JP", 920.8, 927.8),
    Region.ANZ: _RegionInfo("ANZ", 915.0, 928.0),
    Region.KR: _RegionInfo("KR", 920.0, 923.0),
    Region.TW: _RegionInfo("TW", 920.0, 925.0),
    Region.RU: _RegionInfo("RU", 868.7, 869.2),
    Region.IN: _RegionInfo("IN", 865.0, 867.0),
    Region.NZ_865: _RegionInfo("NZ_865", 864.0, 868.0),
    Region.TH: _RegionInfo("TH", 920.0, 925.0),
    Region.LORA_24: _RegionInfo("LORA_24", 2400.0, 2483.5),
    Region.UA_433: _RegionInfo("UA_433", 433.0, 434.7),
    Region.UA_868: _RegionInfo("UA_868", 868.0, 868.6),
    Region.MY_433: _RegionInfo("MY_433", 433.0, 435.0),
    Region.MY_919: _RegionInfo("MY_919", 919.0, 924.0),
    Region.SG_923: _RegionInfo("SG_923", 917.0, 925.0),
    Region.PH_433: _RegionInfo("PH_433", 433.0, 434.7),
    Region.PH_868: _RegionInfo("PH_868", 868.0, 869.4),
    Region.PH_915: _RegionInfo("PH_915", 915.0, 918.0),
}

_PRESETS: dict[ModemPreset, _PresetInfo] = {
    ModemPreset.LONG_FAST: _PresetInfo("LongFast", "250", 0.250),
    ModemPreset.LONG_SLOW: _PresetInfo("LongSlow", "125", 0.125),
    ModemPreset.VERY_LONG_SLOW: _PresetInfo("VLongSlow", "62.5", 0.0625),
    ModemPreset.MEDIUM_SLOW: _PresetInfo("MediumSlow", "250", 0.250),
    ModemPreset.MEDIUM_FAST: _PresetInfo("MediumFast", "250", 0.250),
    ModemPreset.SHORT_SLOW: _PresetInfo("ShortSlow", "250", 0.250),
    ModemPreset.SHORT_FAST: _PresetInfo("ShortFast", "250", 0.250),
    ModemPreset.LONG_MODERATE: _PresetInfo("LongMod", "125", 0.125),
    ModemPreset.SHORT_TURBO: _PresetInfo("ShortTurbo", "500", 0.500),
}


def _region(region: int) -> _RegionInfo:
    return _REGIONS[Region(region)]


def _preset(preset: int) -> _PresetInfo:
    return _PRESETS[ModemPreset(preset)]


def region_name(region: int) -> str:
    """Return the short name of a region."""
    return _region(region).name


def frequency_start(region: int) -> float:
    """Return the lower band edge of a region in MHz."""
    return _f32(_region(region).freq_start)


def frequency_end(region: int) -> float:
    """Return the upper band edge of a region in MHz."""
    return _f32(_region(region).freq_end)


def bandwidth(preset: int) -> float:
    """Return the bandwidth of a modem preset in MHz."""
    return _f32(_preset(preset).bandwidth_mhz)


def bandwidth_string(preset: int) -> str:
    """Return the bandwidth of a modem preset in kHz as text."""
    return _preset(preset).bandwidth_khz


def preset_name(preset: int) -> str:
    """Return the name of a modem preset."""
    return _preset(preset).name


def num_channels(region: int, preset: int) -> int:
    """Return how many channels of the preset's bandwidth fit into the region."""
    if Region(region) is Region.UNSET:
        return 0
    span = _f32(frequency_end(region) - frequency_start(region))
    return int(_f32(span / bandwidth(preset)))


def _djb2(text: str) -> int:
    value = 5381
    for byte in text.encode():
        value = (value + (value << 5) + byte) & 0xFFFFFFFF
    return value


def default_slot(region: int, preset: int) -> int:
    """Return the default channel slot, derived from a hash of the preset name."""
    channels = num_channels(region, preset)
    if channels == 0:
        return 1
    return _djb2(preset_name(preset)) % channels + 1


def radio_frequency(region: int, preset: int, channel: int) -> float:
    """Return the centre frequency in MHz of a 1-based channel."""
    bw = bandwidth(preset)
    base = _f32(frequency_start(region) + _f32(bw / 2))
    return _f32(base + _f32((channel - 1) * bw))