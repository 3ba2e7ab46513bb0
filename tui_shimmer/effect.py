"""Shimmer / shine animation effect for Rich.

Produces a bright highlight wave that sweeps left-to-right across a
string, then pauses briefly off-screen before looping.  The band has a
soft raised-cosine profile:

    base → brighter → peak → brighter → base
         ────shimmer band────

Usage:
    segments = shimmer_at_phase("Loading...", "cyan", 0.25)
    console.print(shimmer_text("Rolling back prices...", "#00ffff"))
"""

from functools import partial
from typing import List, Optional, Union

from rich.segment import Segment
from rich.style import Style
from rich.text import Text

from tui_shimmer.config import ShimmerConfig
from tui_shimmer.errors import ShimmerDecodeError
from tui_shimmer.phase import PhaseSource, elapsed_phase, resolve_phase
from tui_shimmer.spans import build_segments

TextInput = Union[str, bytes]
StyleInput = Union[Style, str, None]


def _decode(text: TextInput) -> str:
    if isinstance(text, bytes):
        try:
            return text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ShimmerDecodeError(
                f"shimmer text is not valid UTF-8: {e}", e
            ) from e
    return text


def _coerce_style(base_style: StyleInput) -> Style:
    if base_style is None:
        return Style.null()
    if isinstance(base_style, str):
        return Style.parse(base_style)
    return base_style


def shimmer_at_phase(
    text: TextInput,
    base_style: StyleInput,
    phase: float,
    *,
    config: Optional[ShimmerConfig] = None,
) -> List[Segment]:
    """Shimmer ``text`` at an explicit animation phase.

    Parameters
    ----------
    text:
        The line to render.  ``bytes`` must be valid UTF-8.
    base_style:
        Rich ``Style`` (or style string) the shimmer blends from.  Only the
        foreground colour is replaced; every other attribute is kept.
    phase:
        Position in the animation cycle.  Any real number is accepted and
        wrapped into ``[0, 1)``.
    config:
        Wave and palette settings; defaults to ``ShimmerConfig()``.
    """
    if config is None:
        config = ShimmerConfig()
    return build_segments(_decode(text), _coerce_style(base_style), phase, config)


def shimmer(
    text: TextInput,
    base_style: StyleInput = None,
    *,
    phase_source: Optional[PhaseSource] = None,
    config: Optional[ShimmerConfig] = None,
) -> List[Segment]:
    """Shimmer ``text`` at the current phase of ``phase_source``.

    Without a source the phase follows the monotonic clock, completing one
    sweep every ``config.sweep_seconds``, so calling this from a redraw loop
    animates on its own.  A failing source falls back to phase 0.0.
    """
    if config is None:
        config = ShimmerConfig()
    if phase_source is None:
        phase_source = partial(elapsed_phase, config.sweep_seconds)

    phase = resolve_phase(phase_source)
    return shimmer_at_phase(text, base_style, phase, config=config)


def shimmer_text(
    text: TextInput,
    base_style: StyleInput = None,
    *,
    phase: Optional[float] = None,
    config: Optional[ShimmerConfig] = None,
) -> Text:
    """Return a Rich ``Text`` with a travelling shimmer highlight.

    Uses the clock-driven phase unless ``phase`` is given.
    """
    if phase is None:
        segments = shimmer(text, base_style, config=config)
    else:
        segments = shimmer_at_phase(text, base_style, phase, config=config)
    return Text.assemble(*((segment.text, segment.style) for segment in segments))
