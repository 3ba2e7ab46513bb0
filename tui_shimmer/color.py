"""Colour compositing for the shimmer band.

True-colour foregrounds blend smoothly toward the highlight.  Everything
else (no colour, 16-colour, 256-colour, or a true-colour style on a terminal
that cannot show it) goes through a small stepped palette so the wave keeps
its shape at the resolution the terminal actually has:

    level:      0          1               2
    default:    bright_black  white        bright_white
    cyan:       cyan       bright_cyan     bright_white
    color(n):   base  →  blended toward highlight, re-quantized
"""

from bisect import bisect_right
from typing import Optional, Sequence

from rich.color import Color, ColorSystem, ColorType, blend_rgb
from rich.color_triplet import ColorTriplet
from rich.style import Style

from tui_shimmer.config import ShimmerConfig

# Ramp used when the base style carries no usable colour.
_GREY_RAMP = (
    Color.parse("bright_black"),
    Color.parse("white"),
    Color.parse("bright_white"),
)
_PEAK = Color.parse("bright_white")

_DIM = Style(dim=True)
_BOLD = Style(bold=True)


def _clamp_channel(value: float) -> int:
    return max(0, min(255, int(round(value))))


def blend(base: ColorTriplet, highlight: ColorTriplet, amount: float) -> ColorTriplet:
    """Linearly interpolate ``base`` toward ``highlight``, clamped per channel."""
    amount = max(0.0, min(1.0, amount))
    red, green, blue = blend_rgb(base, highlight, amount)
    return ColorTriplet(
        _clamp_channel(red), _clamp_channel(green), _clamp_channel(blue)
    )


def brightness_level(brightness: float, thresholds: Sequence[float]) -> int:
    """Quantize a brightness factor into a palette level ``0..len(thresholds)``."""
    return bisect_right(thresholds, brightness)


def _pick(ramp: Sequence[Color], level: int, levels: int) -> Color:
    if levels <= 1:
        return ramp[0]
    return ramp[round(level * (len(ramp) - 1) / (levels - 1))]


def _bright_counterpart(color: Color) -> Color:
    number = color.number if color.number is not None else 7
    if number < 8:
        return Color.from_ansi(number + 8)
    return Color.from_ansi(number)


def _downgrade_target(color_system: ColorSystem) -> ColorSystem:
    if color_system in (ColorSystem.STANDARD, ColorSystem.WINDOWS):
        return ColorSystem.STANDARD
    return ColorSystem.EIGHT_BIT


def _true_color(
    brightness: float, base: ColorTriplet, config: ShimmerConfig
) -> Color:
    highlight = ColorTriplet(*config.highlight)
    amount = max(0.0, min(1.0, brightness)) * config.max_highlight
    return Color.from_triplet(blend(base, highlight, amount))


def _fallback_color(
    level: int, base_color: Optional[Color], config: ShimmerConfig
) -> Color:
    levels = config.levels
    if base_color is None or base_color.type == ColorType.DEFAULT:
        return _pick(_GREY_RAMP, level, levels)

    if base_color.type in (ColorType.STANDARD, ColorType.WINDOWS):
        ramp = (base_color, _bright_counterpart(base_color), _PEAK)
        return _pick(ramp, level, levels)

    if base_color.type in (ColorType.EIGHT_BIT, ColorType.TRUECOLOR):
        target = _downgrade_target(config.color_system)
        if level == 0:
            return base_color.downgrade(target)
        amount = level / (levels - 1) * config.max_highlight
        blended = blend(
            base_color.get_truecolor(), ColorTriplet(*config.highlight), amount
        )
        return Color.from_triplet(blended).downgrade(target)

    return _pick(_GREY_RAMP, level, levels)


def shimmer_color(
    brightness: float, base_color: Optional[Color], config: ShimmerConfig
) -> Color:
    """Concrete colour for one character at the given brightness.

    Never returns a ``DEFAULT`` colour, whatever the base colour is.
    """
    if (
        base_color is not None
        and base_color.type == ColorType.TRUECOLOR
        and config.true_color
    ):
        return _true_color(brightness, base_color.get_truecolor(), config)
    level = brightness_level(brightness, config.thresholds)
    return _fallback_color(level, base_color, config)


def compose_style(
    base_style: Style, brightness: float, config: ShimmerConfig
) -> Style:
    """The base style with its foreground replaced by the shimmer colour.

    All other attributes of ``base_style`` are carried through unchanged.
    """
    style = base_style + Style(
        color=shimmer_color(brightness, base_style.color, config)
    )
    if not config.emphasis:
        return style

    smooth = (
        base_style.color is not None
        and base_style.color.type == ColorType.TRUECOLOR
        and config.true_color
    )
    if smooth:
        return style + _BOLD if brightness > 0.0 else style

    level = brightness_level(brightness, config.thresholds)
    if level == 0:
        return style + _DIM
    if level == config.levels - 1:
        return style + _BOLD
    return style
