"""Map tile layout, LoRa presets, themes, request tracking and node bookkeeping for a mesh radio device UI."""

__version__ = "0.1.0"