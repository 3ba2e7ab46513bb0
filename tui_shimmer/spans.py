"""Group shimmered characters into the fewest styled segments."""

from typing import List

from rich.segment import Segment
from rich.style import Style

from tui_shimmer.color import compose_style
from tui_shimmer.config import ShimmerConfig
from tui_shimmer.graphemes import split_graphemes
from tui_shimmer.phase import brightness, normalize_phase


def build_segments(
    text: str, base_style: Style, phase: float, config: ShimmerConfig
) -> List[Segment]:
    """Shimmer ``text`` at ``phase`` and merge equal neighbours.

    Consecutive characters whose computed styles compare equal share one
    segment, so no two adjacent segments ever carry the same style.
    """
    clusters = split_graphemes(text)
    count = len(clusters)
    if count == 0:
        return []

    phase = normalize_phase(phase)
    segments: List[Segment] = []
    buffer: List[str] = []
    current_style = None

    for index, cluster in enumerate(clusters):
        style = compose_style(
            base_style, brightness(phase, index, count, config), config
        )
        if current_style is not None and style != current_style:
            segments.append(Segment("".join(buffer), current_style))
            buffer = []
        current_style = style
        buffer.append(cluster)

    segments.append(Segment("".join(buffer), current_style))
    return segments
