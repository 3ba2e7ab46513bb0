"""
Travelling shimmer highlight for a single line of terminal text.

Exposes the two entry points used by render loops plus the building blocks
they are made of.
"""

from .color import compose_style, shimmer_color
from .config import ShimmerConfig, detect_color_system, supports_true_color
from .effect import shimmer, shimmer_at_phase, shimmer_text
from .errors import ShimmerDecodeError
from .phase import FrameCounter, brightness, elapsed_phase, normalize_phase
from .spans import build_segments

__all__ = [
    "ShimmerConfig",
    "ShimmerDecodeError",
    "FrameCounter",
    "shimmer",
    "shimmer_at_phase",
    "shimmer_text",
    "build_segments",
    "brightness",
    "normalize_phase",
    "elapsed_phase",
    "shimmer_color",
    "compose_style",
    "detect_color_system",
    "supports_true_color",
]
