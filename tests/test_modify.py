"""Tests for the perceptual remapper and its cache."""

import pytest

from shadelab.core.conversions import rgb_to_hsl
from shadelab.core.errors import ColorParseError
from shadelab.core.types import HSLA, RGBA, FilterConfig, Role, ThemeMode
from shadelab.logic.modify.cache import KEY_FIELDS, ColorCache, cache_key
from shadelab.logic.modify.engine import (
    modify_bg_hsl,
    modify_border_color,
    modify_color,
    modify_fg_hsl,
    modify_light_scheme_hsl,
    modify_shadow_color,
    theme_color,
)
from shadelab.shared.parser import parse_color

DARK_BG_POLE = HSLA(200, 0.06, 0.1)
DARK_TEXT_POLE = HSLA(36, 0.1, 0.9)


def lightness_of(color: str) -> float:
    return rgb_to_hsl(parse_color(color)).l


class TestBackgroundHsl:
    def test_dark_neutral_snaps_to_pole(self):
        out = modify_bg_hsl(HSLA(0, 0, 0.25), DARK_BG_POLE)
        assert (out.h, out.s) == (DARK_BG_POLE.h, DARK_BG_POLE.s)
        assert out.l == pytest.approx(0.2)

    def test_dark_saturated_keeps_hue(self):
        out = modify_bg_hsl(HSLA(10, 0.8, 0.25), DARK_BG_POLE)
        assert out.h == 10
        assert out.s == 0.8

    def test_light_blue_is_neutral(self):
        out = modify_bg_hsl(HSLA(220, 0.9, 0.9), DARK_BG_POLE)
        assert out.h == DARK_BG_POLE.h

    def test_yellow_band_moves_toward_orange(self):
        out = modify_bg_hsl(HSLA(90, 1, 0.75), DARK_BG_POLE)
        assert out.h == pytest.approx(82.5)
        assert out.l == pytest.approx(0.25)

    def test_green_band_is_compressed(self):
        out = modify_bg_hsl(HSLA(150, 1, 0.75), DARK_BG_POLE)
        assert out.h == pytest.approx(157.5)

    def test_white_reaches_pole_lightness(self):
        assert modify_bg_hsl(HSLA(0, 0, 1), DARK_BG_POLE).l == pytest.approx(DARK_BG_POLE.l)


class TestForegroundHsl:
    def test_black_reaches_pole_lightness(self):
        out = modify_fg_hsl(HSLA(0, 0, 0), DARK_TEXT_POLE)
        assert out.l == pytest.approx(DARK_TEXT_POLE.l)
        assert out.h == DARK_TEXT_POLE.h

    def test_dark_blue_gets_extra_lightness(self):
        out = modify_fg_hsl(HSLA(225, 1, 0.25), DARK_TEXT_POLE)
        assert out.h == pytest.approx(212.5)
        assert out.l == pytest.approx(0.75)

    def test_light_color_floor(self):
        out = modify_fg_hsl(HSLA(0, 1, 0.5 + 1e-9), DARK_TEXT_POLE)
        assert out.l == pytest.approx(0.55)


class TestLightSchemeHsl:
    def test_mid_gray_sits_between_poles(self):
        fg, bg = HSLA(200, 0.06, 0.1), HSLA(36, 0.1, 0.85)
        out = modify_light_scheme_hsl(HSLA(0, 0, 0.5), fg, bg)
        assert out.l == pytest.approx(0.475)
        assert (out.h, out.s) == (bg.h, bg.s)

    def test_saturated_color_keeps_saturation(self):
        fg, bg = HSLA(200, 0.06, 0.1), HSLA(36, 0.1, 0.85)
        out = modify_light_scheme_hsl(HSLA(0, 0.9, 0.3), fg, bg)
        assert out.s == 0.9


class TestThemeColor:
    def test_white_background(self, dark_config, cache):
        assert theme_color(Role.BACKGROUND, "#ffffff", dark_config, cache) == "#181a1b"

    def test_black_text(self, dark_config, cache):
        assert theme_color(Role.FOREGROUND, "black", dark_config, cache) == "#e8e6e3"

    def test_black_background_stays_black(self, dark_config):
        assert theme_color(Role.BACKGROUND, "#000", dark_config) == "#000000"

    def test_translucent_output_is_rgba(self, dark_config):
        assert theme_color(Role.BACKGROUND, "rgba(255, 255, 255, 0.5)", dark_config) == "rgba(24, 26, 27, 0.5)"

    def test_role_accepts_value(self, dark_config):
        assert theme_color("foreground", "black", dark_config) == "#e8e6e3"

    def test_border_lightness(self, dark_config):
        assert lightness_of(modify_border_color(RGBA(255, 255, 255), dark_config)) == pytest.approx(0.2, abs=0.01)
        assert lightness_of(modify_border_color(RGBA(0, 0, 0), dark_config)) == pytest.approx(0.5, abs=0.01)

    def test_light_mode_uses_light_poles(self, light_config):
        assert theme_color(Role.BACKGROUND, "black", light_config) == "#181a1b"
        assert theme_color(Role.FOREGROUND, "white", light_config) == "#dcdad7"

    def test_shadow_follows_background(self, dark_config):
        assert modify_shadow_color(RGBA(255, 255, 255), dark_config) == "#181a1b"

    def test_plain_filter_inverts_in_dark_mode(self, dark_config, light_config):
        assert modify_color(RGBA(255, 255, 255), dark_config) == "#000000"
        assert modify_color(RGBA(18, 52, 86), light_config) == "#123456"

    def test_brightness_applies_after_remap(self, dark_config):
        dimmed = dark_config._replace(brightness=50)
        assert lightness_of(theme_color(Role.FOREGROUND, "black", dimmed)) < lightness_of(
            theme_color(Role.FOREGROUND, "black", dark_config)
        )

    def test_bad_color_raises(self, dark_config):
        with pytest.raises(ColorParseError):
            theme_color(Role.BACKGROUND, "nope", dark_config)


class TestColorCache:
    def test_repeat_call_hits_cache(self, dark_config, cache):
        first = theme_color(Role.BACKGROUND, "#abcdef", dark_config, cache)
        second = theme_color(Role.BACKGROUND, "#abcdef", dark_config, cache)
        assert first == second
        assert cache.stats() == {"parsed": 1, "routines": 1, "modified": 1}

    def test_config_change_is_a_new_entry(self, dark_config, cache):
        theme_color(Role.BACKGROUND, "#abcdef", dark_config, cache)
        theme_color(Role.BACKGROUND, "#abcdef", dark_config._replace(sepia=20), cache)
        assert cache.stats()["modified"] == 2

    def test_roles_do_not_share_entries(self, dark_config, cache):
        bg = theme_color(Role.BACKGROUND, "white", dark_config, cache)
        fg = theme_color(Role.FOREGROUND, "white", dark_config, cache)
        assert bg != fg
        assert cache.stats()["routines"] == 2

    def test_clear(self, dark_config, cache):
        theme_color(Role.BORDER, "red", dark_config, cache)
        cache.clear()
        assert cache.stats() == {"parsed": 0, "routines": 0, "modified": 0}

    @pytest.mark.parametrize("field", KEY_FIELDS)
    def test_every_key_field_changes_key(self, field):
        base = FilterConfig()
        changed = {
            "mode": ThemeMode.LIGHT,
            "brightness": 90,
            "contrast": 110,
            "grayscale": 10,
            "sepia": 10,
        }.get(field, "#010203")
        rgb = RGBA(1, 2, 3)
        assert cache_key(rgb, base) != cache_key(rgb, base._replace(**{field: changed}))

    def test_key_includes_alpha(self):
        assert cache_key(RGBA(1, 2, 3, 0.5), FilterConfig()) != cache_key(RGBA(1, 2, 3), FilterConfig())

    def test_pole_parse_is_memoized(self):
        cache = ColorCache()
        assert cache.parse_to_hsl("#181a1b") is cache.parse_to_hsl("#181a1b")
