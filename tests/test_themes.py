import pytest

from meshview.themes import Theme, ThemeColor, Themes


def test_default_theme_is_dark():
    assert Themes().theme is Theme.DARK


def test_color_table_values_from_source():
    dark = Themes(Theme.DARK)
    light = Themes(Theme.LIGHT)
    assert dark.color(ThemeColor.MAIN_SCREEN_STYLE) == 0xFF303030
    assert light.color(ThemeColor.MAIN_SCREEN_STYLE) == 0xFFF4F4F4
    assert dark.color(ThemeColor.SETTINGS_PANEL_BG_OPA) == 250


def test_every_role_has_a_color_in_both_themes():
    for theme in Theme:
        themes = Themes(theme)
        for role in ThemeColor:
            assert 0 <= themes.color(role) <= 0xFFFFFFFF


def test_unknown_role_raises():
    with pytest.raises(ValueError):
        Themes().color(999)


def test_button_recolor_dark():
    themes = Themes(Theme.DARK)
    assert themes.button_recolor(True) == 0xE0E0E0
    assert themes.button_recolor(False) == 0x606060


def test_button_recolor_light_uses_home_button_color():
    themes = Themes(Theme.LIGHT)
    assert themes.button_recolor(True) == themes.color(ThemeColor.HOME_BUTTON_IMAGE_RECOLOR) & 0xFFFFFF
    assert themes.button_recolor(False) == 0xC0C0C0


def test_text_color_enabled_matches_home_container_text():
    for theme in Theme:
        themes = Themes(theme)
        assert themes.text_color(True) == themes.color(ThemeColor.HOME_CONTAINER_TEXT) & 0xFFFFFF
    assert Themes(Theme.DARK).text_color(False) == 0x606060
    assert Themes(Theme.LIGHT).text_color(False) == 0xC0C0C0


def test_top_label_alert_is_red_in_both_themes():
    for theme in Theme:
        themes = Themes(theme)
        assert themes.top_label_color(True) == 0xF72B2B
        assert themes.top_label_color(False) == themes.color(ThemeColor.TOP_PANEL_TEXT) & 0xFFFFFF


def test_table_row_colors():
    for theme in Theme:
        themes = Themes(theme)
        assert themes.table_row_color(True) == themes.color(ThemeColor.TABLE_ITEM_BG) & 0xFFFFFF
        assert themes.table_row_color(False) == themes.color(ThemeColor.TABLE_ITEM_DARK_BG) & 0xFFFFFF


def test_switching_theme_changes_styles():
    themes = Themes(Theme.DARK)
    dark = themes.styles()
    themes.theme = Theme.LIGHT
    light = themes.styles()
    assert dark.keys() == light.keys()
    assert dark["main_screen_style"]["bg_color"] == 0x303030
    assert light["main_screen_style"]["bg_color"] == 0xF4F4F4


def test_styles_contents():
    styles = Themes(Theme.DARK).styles()
    assert len(styles) == 29
    assert styles["drop_down_style"] == {}
    home = styles["home_container_style"]
    assert home["border_width"] == 3
    assert home["radius"] == 10
    assert styles["settings_panel_style"]["bg_opa"] == 250
    assert styles["node_button_style"]["bg_opa"] == 0


def test_style_colors_are_rgb():
    for theme in Theme:
        for style in Themes(theme).styles().values():
            for key, value in style.items():
                if key.endswith("color") or key.endswith("recolor"):
                    assert 0 <= value <= 0xFFFFFF


def test_tab_button_styles():
    styles = Themes(Theme.LIGHT).tab_button_styles()
    assert set(styles) == {"default", "active", "pressed"}
    assert styles["default"]["border_width"] == 1
    assert styles["active"]["border_width"] == 3
    assert styles["active"]["border_color"] == 0x67EA94
    assert styles["pressed"]["bg_color"] == Themes(Theme.LIGHT).color(ThemeColor.TAB_BUTTON_PRESSED_BG) & 0xFFFFFF