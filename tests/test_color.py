"""Tests for the colour compositor."""

import pytest
from rich.color import Color, ColorSystem, ColorType
from rich.color_triplet import ColorTriplet
from rich.style import Style

from tui_shimmer.color import (
    blend,
    brightness_level,
    compose_style,
    shimmer_color,
)
from tui_shimmer.config import ShimmerConfig

CYAN_RGB = Color.parse("#00ffff")


class TestBlend:
    def test_endpoints(self):
        base = ColorTriplet(0, 128, 255)
        white = ColorTriplet(255, 255, 255)
        assert blend(base, white, 0.0) == base
        assert blend(base, white, 1.0) == white

    def test_amount_is_clamped(self):
        base = ColorTriplet(10, 20, 30)
        white = ColorTriplet(255, 255, 255)
        assert blend(base, white, -2.0) == base
        assert blend(base, white, 5.0) == white

    def test_channels_stay_in_range(self):
        result = blend(ColorTriplet(0, 0, 0), ColorTriplet(255, 255, 255), 0.5)
        assert all(0 <= channel <= 255 for channel in result)


class TestBrightnessLevel:
    @pytest.mark.parametrize(
        "value, level",
        [(0.0, 0), (0.19, 0), (0.2, 1), (0.59, 1), (0.6, 2), (1.0, 2)],
    )
    def test_default_thresholds(self, value, level):
        assert brightness_level(value, (0.2, 0.6)) == level


class TestTrueColor:
    def test_zero_brightness_is_base(self, truecolor_config):
        assert shimmer_color(0.0, CYAN_RGB, truecolor_config) == Color.from_rgb(
            0, 255, 255
        )

    def test_peak_blends_toward_white(self, truecolor_config):
        color = shimmer_color(1.0, CYAN_RGB, truecolor_config)
        assert color.type == ColorType.TRUECOLOR
        red, green, blue = color.get_truecolor()
        assert 200 < red < 255
        assert (green, blue) == (255, 255)

    def test_monotonic_in_brightness(self, truecolor_config):
        reds = [
            shimmer_color(step / 10, CYAN_RGB, truecolor_config).get_truecolor().red
            for step in range(11)
        ]
        assert reds == sorted(reds)

    def test_custom_highlight(self):
        config = ShimmerConfig(
            color_system=ColorSystem.TRUECOLOR,
            highlight=(255, 0, 0),
            max_highlight=1.0,
        )
        base = Color.from_rgb(0, 0, 255)
        assert shimmer_color(1.0, base, config).get_truecolor() == (255, 0, 0)

    def test_truecolor_base_without_terminal_support_is_quantized(
        self, eight_bit_config
    ):
        for step in range(11):
            color = shimmer_color(step / 10, CYAN_RGB, eight_bit_config)
            assert color.type == ColorType.EIGHT_BIT

    def test_truecolor_base_on_standard_terminal(self, standard_config):
        for step in range(11):
            color = shimmer_color(step / 10, CYAN_RGB, standard_config)
            assert color.type == ColorType.STANDARD


class TestFallbackPalette:
    @pytest.mark.parametrize("base", [None, Color.default()])
    def test_unset_colour_uses_grey_ramp(self, base, truecolor_config):
        ramp = [
            shimmer_color(value, base, truecolor_config).name
            for value in (0.0, 0.4, 1.0)
        ]
        assert ramp == ["bright_black", "white", "bright_white"]

    def test_standard_colour_uses_family_ramp(self, truecolor_config):
        base = Color.parse("cyan")
        assert shimmer_color(0.0, base, truecolor_config) == base
        assert shimmer_color(0.4, base, truecolor_config).number == 14
        assert shimmer_color(1.0, base, truecolor_config).number == 15

    def test_bright_standard_colour_keeps_itself_as_middle(self, truecolor_config):
        base = Color.parse("bright_cyan")
        assert shimmer_color(0.4, base, truecolor_config).number == 14

    def test_eight_bit_colour_stays_eight_bit(self, truecolor_config):
        base = Color.parse("color(33)")
        assert shimmer_color(0.0, base, truecolor_config) == base
        for step in range(11):
            color = shimmer_color(step / 10, base, truecolor_config)
            assert color.type == ColorType.EIGHT_BIT

    def test_more_levels_give_more_steps(self):
        config = ShimmerConfig(
            color_system=ColorSystem.EIGHT_BIT, thresholds=(0.1, 0.3, 0.5, 0.7, 0.9)
        )
        base = Color.parse("color(17)")
        colors = {
            shimmer_color(value, base, config)
            for value in (0.0, 0.2, 0.4, 0.6, 0.8, 1.0)
        }
        assert len(colors) > 3

    @pytest.mark.parametrize(
        "base",
        [None, Color.default(), Color.parse("red"), Color.parse("color(200)")],
    )
    def test_never_returns_default(self, base, standard_config):
        for step in range(21):
            color = shimmer_color(step / 20, base, standard_config)
            assert color.type != ColorType.DEFAULT

    def test_deterministic(self, eight_bit_config):
        base = Color.parse("color(99)")
        assert shimmer_color(0.7, base, eight_bit_config) == shimmer_color(
            0.7, base, eight_bit_config
        )


class TestComposeStyle:
    def test_carries_other_attributes(self, truecolor_config):
        base = Style.parse("bold italic #00ffff on blue")
        style = compose_style(base, 0.5, truecolor_config)
        assert style.bold is True
        assert style.italic is True
        assert style.bgcolor == Color.parse("blue")
        assert style.color != base.color

    def test_no_emphasis_by_default(self, standard_config):
        style = compose_style(Style(), 1.0, standard_config)
        assert style.bold is None
        assert style.dim is None

    def test_emphasis_on_fallback(self):
        config = ShimmerConfig(color_system=ColorSystem.EIGHT_BIT, emphasis=True)
        assert compose_style(Style(), 0.0, config).dim is True
        assert compose_style(Style(), 0.4, config).dim is None
        assert compose_style(Style(), 0.4, config).bold is None
        assert compose_style(Style(), 1.0, config).bold is True

    def test_emphasis_on_truecolor(self):
        config = ShimmerConfig(color_system=ColorSystem.TRUECOLOR, emphasis=True)
        base = Style(color=CYAN_RGB)
        assert compose_style(base, 0.0, config).bold is None
        assert compose_style(base, 0.3, config).bold is True
