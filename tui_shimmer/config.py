"""
Shimmer configuration.

Every knob has a sensible default.  The terminal's colour capability is
detected from the environment once per process, so repeated calls render
identically for the lifetime of the application.

Usage:
    from tui_shimmer.config import ShimmerConfig

    config = ShimmerConfig(band_half_width=3, emphasis=True)
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Tuple

from rich.color import ColorSystem

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
_DEFAULT_SWEEP_SECONDS = 2.0
_DEFAULT_PADDING = 10
_DEFAULT_BAND_HALF_WIDTH = 5
_DEFAULT_MAX_HIGHLIGHT = 0.9
_DEFAULT_HIGHLIGHT = (255, 255, 255)
_DEFAULT_THRESHOLDS = (0.2, 0.6)


# ---------------------------------------------------------------------------
# Terminal capability
# ---------------------------------------------------------------------------
@lru_cache(maxsize=None)
def supports_true_color() -> bool:
    """Best-effort check for 24-bit colour support from the environment.

    ``NO_COLOR`` and ``CLICOLOR=0`` switch true colour off, a non-zero
    ``CLICOLOR_FORCE`` switches it on, otherwise ``COLORTERM`` decides.
    The answer is read once per process; ``supports_true_color.cache_clear()``
    forces a re-read.
    """
    if os.environ.get("NO_COLOR") is not None:
        return False

    force = os.environ.get("CLICOLOR_FORCE")
    if force is not None and force != "0":
        return True

    if os.environ.get("CLICOLOR") == "0":
        return False

    colorterm = os.environ.get("COLORTERM", "").lower()
    return "truecolor" in colorterm or "24bit" in colorterm


def detect_color_system() -> ColorSystem:
    """Return the colour system the fallback palette should target."""
    if supports_true_color():
        return ColorSystem.TRUECOLOR
    return ColorSystem.EIGHT_BIT


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ShimmerConfig:
    """Parameters of the shimmer wave and its colour mapping.

    Attributes:
        sweep_seconds: Duration of one full cycle for the clock-driven
            entry point.
        padding: Off-screen distance (in characters) the band travels on
            each side of the text, which creates the pause between sweeps.
        band_half_width: Half width of the bright band in characters.
        max_highlight: How far toward ``highlight`` the peak of the band
            blends, in ``[0, 1]``.
        highlight: RGB colour the band blends toward.
        thresholds: Ascending brightness cut points for the fallback palette;
            ``len(thresholds) + 1`` discrete levels.
        emphasis: Add dim on the trough and bold on the peak.
        color_system: Colour capability of the target terminal.
    """

    sweep_seconds: float = _DEFAULT_SWEEP_SECONDS
    padding: int = _DEFAULT_PADDING
    band_half_width: int = _DEFAULT_BAND_HALF_WIDTH
    max_highlight: float = _DEFAULT_MAX_HIGHLIGHT
    highlight: Tuple[int, int, int] = _DEFAULT_HIGHLIGHT
    thresholds: Tuple[float, ...] = _DEFAULT_THRESHOLDS
    emphasis: bool = False
    color_system: ColorSystem = field(default_factory=detect_color_system)

    def __post_init__(self) -> None:
        if self.sweep_seconds <= 0:
            raise ValueError("sweep_seconds must be > 0")
        if self.padding < 0:
            raise ValueError("padding must be >= 0")
        if self.band_half_width <= 0:
            raise ValueError("band_half_width must be > 0")
        if not 0.0 <= self.max_highlight <= 1.0:
            raise ValueError("max_highlight must be between 0 and 1")
        if len(self.highlight) != 3 or any(
            not 0 <= channel <= 255 for channel in self.highlight
        ):
            raise ValueError("highlight must be three channels in 0..255")
        if not self.thresholds:
            raise ValueError("thresholds must not be empty")
        if any(not 0.0 < cut < 1.0 for cut in self.thresholds):
            raise ValueError("thresholds must lie strictly between 0 and 1")
        if list(self.thresholds) != sorted(set(self.thresholds)):
            raise ValueError("thresholds must be strictly ascending")

    @property
    def levels(self) -> int:
        """Number of discrete brightness levels in the fallback palette."""
        return len(self.thresholds) + 1

    @property
    def true_color(self) -> bool:
        return self.color_system == ColorSystem.TRUECOLOR
