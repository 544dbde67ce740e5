"""Colour themes for the touch screen user interface."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Union

StyleValue = Union[int, str]
Style = dict[str, StyleValue]

_ALERT_COLOR = 0xF72B2B
_TAB_ACCENT_COLOR = 0x67EA94
_OPA_COVER = 255


class Theme(IntEnum):
    """Available colour themes; the value selects the column of the colour table."""

    DARK = 0
    LIGHT = 1


class ThemeColor(IntEnum):
    """Colour roles of the user interface."""

    MAIN_SCREEN_STYLE = 0
    TOP_PANEL_BG = 1
    TOP_PANEL_TEXT = 2
    TOP_IMAGE_BG = 3
    TOP_IMAGE_RECOLOR = 4
    TOP_IMAGE_RECOLOR_OPA = 5
    POSITIVE_IMAGE_RECOLOR = 6
    PANEL_BG = 7
    PANEL_PRESSED_BG = 8
    PANEL_TEXT = 9
    PANEL_BORDER = 10
    NODE_PANEL_BG = 11
    NODE_PANEL_BORDER = 12
    NODE_PANEL_TEXT = 13
    NODE_BUTTON_BG = 14
    NODE_BUTTON_BG_OPA = 15
    BUTTON_PANEL_BG = 16
    MAIN_BUTTON_BG = 17
    MAIN_BUTTON_TEXT = 18
    MAIN_BUTTON_BORDER = 19
    MAIN_BUTTON_SHADOW = 20
    MAIN_BUTTON_IMAGE_RECOLOR = 21
    MAIN_BUTTON_IMAGE_RECOLOR_OPA = 22
    HOME_CONTAINER_BG = 23
    HOME_CONTAINER_BORDER = 24
    HOME_CONTAINER_SHADOW = 25
    HOME_CONTAINER_TEXT = 26
    HOME_BUTTON_BG = 27
    HOME_BUTTON_TEXT = 28
    HOME_BUTTON_BORDER = 29
    HOME_BUTTON_IMAGE_RECOLOR = 30
    HOME_BUTTON_IMAGE_RECOLOR_OPA = 31
    CHANNEL_BUTTON_BG = 32
    CHANNEL_BUTTON_BORDER = 33
    CHANNEL_BUTTON_TEXT = 34
    SETTINGS_PANEL_BG = 35
    SETTINGS_PANEL_TEXT = 36
    SETTINGS_PANEL_BORDER = 37
    SETTINGS_PANEL_SHADOW = 38
    SETTINGS_PANEL_BG_OPA = 39
    SETTINGS_BUTTON_BG = 40
    SETTINGS_BUTTON_TEXT = 41
    SETTINGS_BUTTON_BORDER = 42
    SETTINGS_BUTTON_IMAGE_RECOLOR = 43
    SETTINGS_BUTTON_IMAGE_RECOLOR_OPA = 44
    SETTINGS_LABEL_BG = 45
    SETTINGS_LABEL_BORDER = 46
    TAB_VIEW_BG = 47
    TAB_VIEW_TEXT = 48
    TAB_BUTTON_DEFAULT_BG = 49
    TAB_BUTTON_ACTIVE_BG = 50
    TAB_BUTTON_PRESSED_BG = 51
    TAB_BUTTON_DEFAULT_TEXT = 52
    TAB_BUTTON_ACTIVE_TEXT = 53
    TAB_BUTTON_PRESSED_TEXT = 54
    TAB_BUTTON_DEFAULT_BORDER = 55
    CHAT_MESSAGE_BG = 56
    CHAT_MESSAGE_BG_OPA = 57
    CHAT_MESSAGE_TEXT = 58
    CHAT_MESSAGE_BORDER = 59
    NEW_MESSAGE_BG = 60
    NEW_MESSAGE_BG_OPA = 61
    NEW_MESSAGE_TEXT = 62
    NEW_MESSAGE_BORDER = 63
    ALERT_PANEL_BG = 64
    BTN_MATRIX_BORDER_MAIN = 65
    BTN_MATRIX_BORDER_ITEMS = 66
    BTN_MATRIX_BG_ITEMS = 67
    BTN_MATRIX_TEXT_ITEMS = 68
    BATTERY_PERCENTAGE_TEXT = 69
    COLOR_TEXT_LABEL = 70
    SPINNER_MAIN_ARC = 71
    SPINNER_INDICATOR_ARC = 72
    TABLE_HEADING_TEXT = 73
    TABLE_HEADING_BG = 74
    TABLE_ITEM_TEXT = 75
    TABLE_ITEM_BG = 76
    TABLE_ITEM_DARK_BG = 77
    TABLE_BORDER = 78
    TABLE_CELL_BORDER = 79


C = ThemeColor

# (dark, light); colours are ARGB, opacities are plain 0..255 values
_COLORS: dict[ThemeColor, tuple[int, int]] = {
    C.MAIN_SCREEN_STYLE: (0xFF303030, 0xFFF4F4F4),
    C.TOP_PANEL_BG: (0xFF436C70, 0xFF67EA94),
    C.TOP_PANEL_TEXT: (0xFFE0E0E0, 0xFF212121),
    C.TOP_IMAGE_BG: (0xFF436C70, 0xFF67EA94),
    C.TOP_IMAGE_RECOLOR: (0xFFFFFFFF, 0xFF212121),
    C.TOP_IMAGE_RECOLOR_OPA: (255, 255),
    C.POSITIVE_IMAGE_RECOLOR: (0xFFFFFFFF, 0xFF212121),
    C.PANEL_BG: (0xFF303030, 0xFFF4F4F0),
    C.PANEL_PRESSED_BG: (0xFF303030, 0xFFFAFAFA),
    C.PANEL_TEXT: (0xFFF0F0F0, 0xFF212121),
    C.PANEL_BORDER: (0xFF67EA94, 0xFF67EA94),
    C.NODE_PANEL_BG: (0xFF404040, 0xFFFFFFFF),
    C.NODE_PANEL_BORDER: (0xFF808080, 0xFF979797),
    C.NODE_PANEL_TEXT: (0xFFF0F0F0, 0xFF212121),
    C.NODE_BUTTON_BG: (0xFF404040, 0xFFFFFFFF),
    C.NODE_BUTTON_BG_OPA: (0, 0),
    C.BUTTON_PANEL_BG: (0xFF585858, 0xFFFFFFFF),
    C.MAIN_BUTTON_BG: (0xFF585858, 0xFFEAEAE0),
    C.MAIN_BUTTON_TEXT: (0xFFAAFBFF, 0xFF101010),
    C.MAIN_BUTTON_BORDER: (0xFF67EA94, 0xFF67EA94),
    C.MAIN_BUTTON_SHADOW: (0xFF9E9E9E, 0xFFC0C0C0),
    C.MAIN_BUTTON_IMAGE_RECOLOR: (0xFF67EA94, 0xFF757575),
    C.MAIN_BUTTON_IMAGE_RECOLOR_OPA: (0, 255),
    C.HOME_CONTAINER_BG: (0xFF303030, 0xFFFAFAF4),
    C.HOME_CONTAINER_BORDER: (0xFF67EA94, 0xFFAAAAAA),
    C.HOME_CONTAINER_SHADOW: (0xFF2B824A, 0xFF999999),
    C.HOME_CONTAINER_TEXT: (0xFFAAFBFF, 0xFF294337),
    C.HOME_BUTTON_BG: (0xFF303030, 0xFFFFFFFF),
    C.HOME_BUTTON_TEXT: (0xFFFFFFFF, 0xFF101010),
    C.HOME_BUTTON_BORDER: (0xFF303030, 0xFFD0D0D0),
    C.HOME_BUTTON_IMAGE_RECOLOR: (0xFF606060, 0xFF57A6B3),
    C.HOME_BUTTON_IMAGE_RECOLOR_OPA: (0, 255),
    C.CHANNEL_BUTTON_BG: (0xFF404040, 0xFFFAFAF4),
    C.CHANNEL_BUTTON_BORDER: (0xFFA0A0A0, 0xFFD0D0D0),
    C.CHANNEL_BUTTON_TEXT: (0xFFFFFFFF, 0xFF101010),
    C.SETTINGS_PANEL_BG: (0xFF303030, 0xFFF0F0F0),
    C.SETTINGS_PANEL_TEXT: (0xFFAAFBFF, 0xFF003C9F),
    C.SETTINGS_PANEL_BORDER: (0, 0xFF979797),
    C.SETTINGS_PANEL_SHADOW: (0, 0xFF7E7E7E),
    C.SETTINGS_PANEL_BG_OPA: (250, 250),
    C.SETTINGS_BUTTON_BG: (0xFF505050, 0xFFEAEAE0),
    C.SETTINGS_BUTTON_TEXT: (0xFFAAFBFF, 0xFF294337),
    C.SETTINGS_BUTTON_BORDER: (0xFF303030, 0xFFD0D0D0),
    C.SETTINGS_BUTTON_IMAGE_RECOLOR: (0, 0xFF67EA94),
    C.SETTINGS_BUTTON_IMAGE_RECOLOR_OPA: (0, 255),
    C.SETTINGS_LABEL_BG: (0xFF404040, 0xFFFFFFFF),
    C.SETTINGS_LABEL_BORDER: (0xFF404040, 0xFF808080),
    C.TAB_VIEW_BG: (0xFF303030, 0xFFF4F4F4),
    C.TAB_VIEW_TEXT: (0xFFAAFBFF, 0xFF003C9F),
    C.TAB_BUTTON_DEFAULT_BG: (0xFF303030, 0xFFE0E0E0),
    C.TAB_BUTTON_ACTIVE_BG: (0xFF303030, 0xFFFFFFFF),
    C.TAB_BUTTON_PRESSED_BG: (0xFF67EA94, 0xFFAAFBFF),
    C.TAB_BUTTON_DEFAULT_TEXT: (0xFFA0A0A0, 0xFF606060),
    C.TAB_BUTTON_ACTIVE_TEXT: (0xFFFFFFFF, 0xFF101010),
    C.TAB_BUTTON_PRESSED_TEXT: (0xFFFFFFFF, 0xFFFFFFFF),
    C.TAB_BUTTON_DEFAULT_BORDER: (0xFF505050, 0xFFB0B0B0),
    C.CHAT_MESSAGE_BG: (0xFF303030, 0xFFFBFCE9),
    C.CHAT_MESSAGE_BG_OPA: (255, 255),
    C.CHAT_MESSAGE_TEXT: (0xFFFFFFFF, 0xFF294337),
    C.CHAT_MESSAGE_BORDER: (0xFF707070, 0xFF888888),
    C.NEW_MESSAGE_BG: (0xFF404040, 0xFFFFFFFF),
    C.NEW_MESSAGE_BG_OPA: (255, 255),
    C.NEW_MESSAGE_TEXT: (0xFFD0D0D0, 0xFF294337),
    C.NEW_MESSAGE_BORDER: (0xFF808080, 0xFF888888),
    C.ALERT_PANEL_BG: (0xFF303030, 0xFFFBFBFB),
    C.BTN_MATRIX_BORDER_MAIN: (0xFF303030, 0xFFF4F4F4),
    C.BTN_MATRIX_BORDER_ITEMS: (0xFF67EA94, 0xFF67EA94),
    C.BTN_MATRIX_BG_ITEMS: (0xFF606060, 0xFFFFFFF8),
    C.BTN_MATRIX_TEXT_ITEMS: (0xFFAAFBFF, 0xFF212121),
    C.BATTERY_PERCENTAGE_TEXT: (0xFFAAFBFF, 0xFF212121),
    C.COLOR_TEXT_LABEL: (0xFFAAFBFF, 0xFF003C9F),
    C.SPINNER_MAIN_ARC: (0xFF404040, 0xFFE0E0E0),
    C.SPINNER_INDICATOR_ARC: (0xFF67EA94, 0xFF67EA94),
    C.TABLE_HEADING_TEXT: (0xFFAAFBFF, 0xFF212121),
    C.TABLE_HEADING_BG: (0xFF303030, 0xFFF4F4F0),
    C.TABLE_ITEM_TEXT: (0xFFAAFBFF, 0xFF212121),
    C.TABLE_ITEM_BG: (0xFF505050, 0xFFF4F4F0),
    C.TABLE_ITEM_DARK_BG: (0xFF303030, 0xFFD4D4D0),
    C.TABLE_BORDER: (0xFF404040, 0xFFE0E0E0),
    C.TABLE_CELL_BORDER: (0xFF404040, 0xFFE0E0E0),
}


class BorderSide(str, Enum):
    """Sides of a widget on which a border is drawn."""

    FULL = "full"
    BOTTOM = "bottom"


def _rgb(value: int) -> int:
    return value & 0xFFFFFF


class Themes:
    """The active theme and the colours and styles derived from it."""

    def __init__(self, theme: Theme = Theme.DARK):
        self.theme = Theme(theme)

    def color(self, role: ThemeColor) -> int:
        """Return the table entry of a role: ARGB for colours, 0..255 for opacities."""
        return _COLORS[ThemeColor(role)][self.theme]

    def _rgb(self, role: ThemeColor) -> int:
        return _rgb(self.color(role))

    def button_recolor(self, enabled: bool) -> int:
        """Return the RGB image recolour of a home button."""
        if self.theme is Theme.LIGHT:
            return self._rgb(C.HOME_BUTTON_IMAGE_RECOLOR) if enabled else 0xC0C0C0
        return 0xE0E0E0 if enabled else 0x606060

    def text_color(self, enabled: bool) -> int:
        """Return the RGB text colour of home container text."""
        if enabled:
            return self._rgb(C.HOME_CONTAINER_TEXT)
        return 0xC0C0C0 if self.theme is Theme.LIGHT else 0x606060

    def top_label_color(self, alert: bool) -> int:
        """Return the RGB colour of a top panel label, red when alerting."""
        return _ALERT_COLOR if alert else self._rgb(C.TOP_PANEL_TEXT)

    def table_row_color(self, odd: bool) -> int:
        """Return the RGB fill colour of a table row."""
        return self._rgb(C.TABLE_ITEM_BG if odd else C.TABLE_ITEM_DARK_BG)

    def styles(self) -> dict[str, Style]:
        """Return every themed style with its properties; colours are RGB."""
        c = self._rgb
        o = self.color
        return {
            "top_panel_style": {"bg_color": c(C.TOP_PANEL_BG), "text_color": c(C.TOP_PANEL_TEXT)},
            "panel_style_MAIN_DEFAULT": {
                "bg_color": c(C.PANEL_BG),
                "text_color": c(C.PANEL_TEXT),
                "border_color": c(C.PANEL_BORDER),
            },
            "panel_style_MAIN_PRESSED": {"bg_color": c(C.PANEL_PRESSED_BG)},
            "home_container_style": {
                "border_color": c(C.HOME_CONTAINER_BORDER),
                "border_width": 3,
                "border_side": BorderSide.FULL.value,
                "bg_color": c(C.HOME_CONTAINER_BG),
                "shadow_color": c(C.HOME_CONTAINER_SHADOW),
                "text_font": "montserrat_16",
                "radius": 10,
                "text_color": c(C.HOME_CONTAINER_TEXT),
            },
            "settings_panel_style": {
                "bg_color": c(C.SETTINGS_PANEL_BG),
                "text_color": c(C.SETTINGS_PANEL_TEXT),
                "shadow_color": c(C.SETTINGS_PANEL_SHADOW),
                "border_color": c(C.SETTINGS_PANEL_BORDER),
                "bg_opa": o(C.SETTINGS_PANEL_BG_OPA),
            },
            "node_panel_style": {
                "bg_color": c(C.NODE_PANEL_BG),
                "border_color": c(C.NODE_PANEL_BORDER),
                "text_font": "montserrat_12",
                "text_color": c(C.NODE_PANEL_TEXT),
            },
            "node_button_style": {"bg_color": c(C.NODE_BUTTON_BG), "bg_opa": o(C.NODE_BUTTON_BG_OPA)},
            "button_panel_style": {"bg_color": c(C.BUTTON_PANEL_BG)},
            "home_button_style": {
                "bg_color": c(C.HOME_BUTTON_BG),
                "bg_image_recolor_opa": o(C.HOME_BUTTON_IMAGE_RECOLOR_OPA),
                "bg_image_recolor": c(C.HOME_BUTTON_IMAGE_RECOLOR),
                "border_color": c(C.HOME_BUTTON_BORDER),
                "text_color": c(C.HOME_BUTTON_TEXT),
            },
            "settings_button_style": {
                "bg_color": c(C.SETTINGS_BUTTON_BG),
                "bg_image_recolor_opa": o(C.SETTINGS_BUTTON_IMAGE_RECOLOR_OPA),
                "bg_image_recolor": c(C.SETTINGS_BUTTON_IMAGE_RECOLOR),
                "border_color": c(C.SETTINGS_BUTTON_BORDER),
                "text_color": c(C.SETTINGS_BUTTON_TEXT),
            },
            "main_button_style": {
                "bg_image_recolor_opa": o(C.MAIN_BUTTON_IMAGE_RECOLOR_OPA),
                "bg_image_recolor": c(C.MAIN_BUTTON_IMAGE_RECOLOR),
                "border_color": c(C.MAIN_BUTTON_BORDER),
                "bg_color": c(C.MAIN_BUTTON_BG),
                "text_color": c(C.MAIN_BUTTON_TEXT),
                "shadow_color": c(C.MAIN_BUTTON_SHADOW),
            },
            "new_message_style": {
                "border_color": c(C.NEW_MESSAGE_BORDER),
                "bg_color": c(C.NEW_MESSAGE_BG),
                "text_color": c(C.NEW_MESSAGE_TEXT),
                "bg_opa": o(C.NEW_MESSAGE_BG_OPA),
            },
            "chat_message_style": {
                "border_color": c(C.CHAT_MESSAGE_BORDER),
                "bg_color": c(C.CHAT_MESSAGE_BG),
                "text_color": c(C.CHAT_MESSAGE_TEXT),
                "bg_opa": o(C.CHAT_MESSAGE_BG_OPA),
            },
            "tab_view_style": {"bg_color": c(C.TAB_VIEW_BG), "text_color": c(C.TAB_VIEW_TEXT)},
            "drop_down_style": {},
            "bw_label_style": {"text_color": c(C.BATTERY_PERCENTAGE_TEXT)},
            "color_label_style": {"text_color": c(C.COLOR_TEXT_LABEL)},
            "top_image_style": {
                "bg_image_recolor": c(C.TOP_IMAGE_RECOLOR),
                "bg_image_recolor_opa": o(C.TOP_IMAGE_RECOLOR_OPA),
                "image_recolor": c(C.TOP_IMAGE_RECOLOR),
                "image_recolor_opa": o(C.TOP_IMAGE_RECOLOR_OPA),
                "bg_color": c(C.TOP_IMAGE_BG),
            },
            "alert_panel_style": {"bg_color": c(C.ALERT_PANEL_BG), "text_color": c(C.PANEL_TEXT)},
            "main_screen_style": {"bg_color": c(C.MAIN_SCREEN_STYLE)},
            "channel_button_style": {
                "bg_color": c(C.CHANNEL_BUTTON_BG),
                "border_color": c(C.CHANNEL_BUTTON_BORDER),
                "text_color": c(C.CHANNEL_BUTTON_TEXT),
            },
            "button_matrix_style_ITEMS_DEFAULT": {
                "border_color": c(C.BTN_MATRIX_BORDER_ITEMS),
                "bg_color": c(C.BTN_MATRIX_BG_ITEMS),
                "text_color": c(C.BTN_MATRIX_TEXT_ITEMS),
            },
            "button_matrix_style_MAIN_DEFAULT": {"bg_color": c(C.BTN_MATRIX_BORDER_MAIN)},
            "spinner_style_MAIN_DEFAULT": {"arc_color": c(C.SPINNER_MAIN_ARC)},
            "spinner_style_INDICATOR_DEFAULT": {"arc_color": c(C.SPINNER_INDICATOR_ARC)},
            "settings_label_style": {
                "border_color": c(C.SETTINGS_LABEL_BORDER),
                "bg_color": c(C.SETTINGS_LABEL_BG),
            },
            "positive_image_style": {"image_recolor": c(C.POSITIVE_IMAGE_RECOLOR)},
            "statistics_table_style_MAIN_DEFAULT": {"border_color": c(C.TABLE_BORDER)},
            "statistics_table_style_ITEMS_DEFAULT": {
                "bg_color": c(C.TABLE_ITEM_BG),
                "text_color": c(C.TABLE_ITEM_TEXT),
                "border_color": c(C.TABLE_CELL_BORDER),
            },
        }

    def tab_button_styles(self) -> dict[str, Style]:
        """Return the default, active and pressed styles of tab view buttons."""
        c = self._rgb
        return {
            "default": {
                "text_color": c(C.TAB_BUTTON_DEFAULT_TEXT),
                "bg_color": c(C.TAB_BUTTON_DEFAULT_BG),
                "bg_opa": _OPA_COVER,
                "border_color": c(C.TAB_BUTTON_DEFAULT_BORDER),
                "border_opa": _OPA_COVER,
                "border_width": 1,
                "border_side": BorderSide.FULL.value,
            },
            "active": {
                "text_color": c(C.TAB_BUTTON_ACTIVE_TEXT),
                "bg_color": c(C.TAB_BUTTON_ACTIVE_BG),
                "bg_opa": _OPA_COVER,
                "border_color": _TAB_ACCENT_COLOR,
                "border_opa": _OPA_COVER,
                "border_width": 3,
                "border_side": BorderSide.BOTTOM.value,
            },
            "pressed": {
                "text_color": c(C.TAB_BUTTON_PRESSED_TEXT),
                "bg_color": c(C.TAB_BUTTON_PRESSED_BG),
                "bg_opa": _OPA_COVER,
                "border_color": _TAB_ACCENT_COLOR,
                "border_opa": _OPA_COVER,
                "border_width": 3,
                "border_side": BorderSide.BOTTOM.value,
            },
        }