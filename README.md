# meshview

Building blocks for the user interface of a mesh radio device, in plain Python
with no third-party dependencies.

## Modules

- `meshview.tilesettings`: `TileSettings` is a dataclass that holds the raster
  tile map settings. These are the current and default zoom (13), the tile size
  (256), the default latitude and longitude, the directory prefix (`/maps`), the
  style and the format (`png`). `set_tile_style` adds a trailing slash.
  `tile_path(zoom, x, y)` builds `prefix/style zoom/x/y.format`.
- `meshview.geopoint`: `GeoPoint(latitude, longitude, zoom, tile_size=256)`
  maps a coordinate onto a Web Mercator x/y/z tile. It also records the pixel
  offset inside that tile.
  - `GeoPoint.from_tile` creates the point at the corner of a tile.
  - `set_zoom` recalculates the tile and offset for another zoom level.
  - `move(scroll_x, scroll_y)` shifts the point by pixels and recomputes the
    latitude and longitude.
- `meshview.tileservice`: tile sources.
  - `TileService` is the abstract interface: `load(name)` returns bytes, or
    `None` when the tile cannot be loaded.
  - `FallbackTileService` asks its primary service. If there is no primary
    service, it asks the backup.
  - `FileSystemTileService(root=None, letter="F")` reads tile files from disk.
  - `TileLoader(settings, fetch)` builds tile file names, capped at 63
    characters, and loads tiles through `fetch`. Tiles that have a `filename`
    attribute keep their name once it is computed.
- `meshview.sdcard`: `load_map_styles(folder, fallback="/map")` returns the
  sorted names of the non-hidden directories in `folder`. If there are none, it
  returns the fallback path, provided that path exists.
- `meshview.battery`: `BatteryLevel.calc_status(percentage, voltage)`
  classifies a reading as a `BatteryStatus`: `PLUGGED`, `CHARGING`, `FULL`,
  `MID`, `LOW`, `EMPTY` or `WARN`.
- `meshview.lorapresets`: the `Region` and `ModemPreset` enums, with these
  functions:
  - `region_name`, `frequency_start` and `frequency_end`
  - `bandwidth`, `bandwidth_string` and `preset_name`
  - `num_channels`
  - `default_slot`, which uses a djb2 hash of the preset name
  - `radio_frequency`

  Frequencies are rounded to single precision.
- `meshview.ringtones`: `RINGTONES` is the tuple of built-in RTTTL `Ringtone`s.
  `find_ringtone(name)` looks one up by display name and raises `KeyError` for
  an unknown name.
- `meshview.responses`: `ResponseHandler(timeout, clock=..., rng=...)` tracks
  pending `Request`s by packet id.
  - `add_request`, `find_request` and `remove_request` manage the requests.
    Callbacks receive an `EventType` when a request is found or removed.
  - `generate_packet_id` combines a rolling 10-bit counter with random upper
    bits.
  - `task_handler` drops requests that are older than the timeout and reports
    `EventType.TIMEOUT` to their callbacks. The default clock counts in
    milliseconds.
- `meshview.themes`: `Themes(theme)` supports `Theme.DARK` and `Theme.LIGHT`.
  - `color(ThemeColor)` returns the ARGB colour or the opacity for a role.
  - `button_recolor`, `text_color`, `top_label_color` and `table_row_color`
    return RGB values.
  - `styles()` and `tab_button_styles()` return the style properties as
    dictionaries.
- `meshview.mappanel`: `MapPanel(width, height, service=None, settings=None,
  no_tile_image=None)` works out which `MapTile`s cover the panel and where
  each one sits.
  - `task_handler` loads the tiles incrementally.
  - `scroll`, `set_zoom`, `move_home`, `move_current` and `set_locked` move
    the view.
  - `set_home_location`, `set_home_position` and `set_gps_position` manage the
    home and GPS positions.
  - `add`, `update` and `remove` handle map objects. Each object is drawn
    through a callback that receives `(id, x, y, zoom)`.
  - The home and GPS marker positions are kept in `home_marker` and
    `gps_marker`. `location_label` holds the centre coordinates as text.
- `meshview.nodes`: `NodeDirectory` keeps the nodes that have been seen and
  creates default entries from received packets. The module also has these
  helpers:
  - `node_color`
  - `default_user_names`
  - `last_heard_to_string`
  - `device_role_to_string`, for the `Role` enum
  - `psk_to_base64`
  - `base64_to_psk`, which raises `ValueError` on invalid input
- `meshview.display`: `DisplayConfig` is a `Device` plus a panel size, set up
  with the chainable `with_device` and `with_panel`. `select_view(config)`
  returns the name of the view layout for the size; any unknown size gets
  `TFTView_320x240`.

## Example

```python
from meshview.lorapresets import Region, ModemPreset, num_channels, default_slot, radio_frequency

channels = num_channels(Region.EU_868, ModemPreset.LONG_FAST)
slot = default_slot(Region.US, ModemPreset.LONG_FAST)
frequency = radio_frequency(Region.US, ModemPreset.LONG_FAST, slot)
```

```python
from meshview.geopoint import GeoPoint

point = GeoPoint(51.5003646652, -0.1214328476, zoom=13)
print(point.x_tile, point.y_tile, point.x_pos, point.y_pos)
point.move(10, -5)
print(point.latitude, point.longitude)
```

## What it does not do

The package draws nothing on a screen. `MapPanel` and `Themes` compute tile
positions, marker positions and colours, and leave rendering to the caller.
The package does not talk to a radio: it neither sends nor receives packets.
It also has no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```