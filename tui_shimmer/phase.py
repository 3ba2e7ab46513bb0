"""Phase handling and the brightness wave.

A phase is a position within one animation cycle in ``[0, 1)``.  The bright
band travels across a virtual track that is longer than the text by
``padding`` characters on each side, so between sweeps it sits fully
off-screen for a moment:

    padding │ t e x t │ padding
    ◄──────── one cycle ────────►
"""

import logging
import math
import threading
import time
from typing import Callable, Optional

from tui_shimmer.config import ShimmerConfig

logger = logging.getLogger(__name__)

PhaseSource = Callable[[], float]

DEFAULT_PHASE = 0.0

# Reference point for clock-driven animation.
_PROCESS_START = time.monotonic()


def normalize_phase(phase: float) -> float:
    """Wrap any phase into ``[0.0, 1.0)``; non-finite values become 0.0."""
    try:
        phase = float(phase)
    except OverflowError:
        # Integers beyond float range are whole cycles.
        return DEFAULT_PHASE
    if not math.isfinite(phase):
        return DEFAULT_PHASE
    wrapped = phase % 1.0
    # Tiny negative inputs round up to exactly 1.0.
    if wrapped >= 1.0:
        return 0.0
    return wrapped


def brightness(
    phase: float, index: int, count: int, config: ShimmerConfig
) -> float:
    """Brightness factor in ``[0, 1]`` of character ``index`` at ``phase``.

    ``count`` is the number of characters in the line.  The band is a raised
    cosine of half width ``config.band_half_width`` centred at
    ``phase * track_length``, with distances measured around the track so the
    wave stays continuous across the wrap even without padding.
    """
    phase = normalize_phase(phase)
    track_length = count + config.padding * 2
    centre = phase * track_length
    distance = abs(index + config.padding - centre)
    # The track is a loop: a band leaving the right edge re-enters on the left.
    distance = min(distance, track_length - distance)
    half_width = config.band_half_width
    if distance > half_width:
        return 0.0
    return 0.5 * (1.0 + math.cos(math.pi * distance / half_width))


def elapsed_phase(
    sweep_seconds: float, clock: Callable[[], float] = time.monotonic
) -> float:
    """Phase derived from the time elapsed since the module was loaded."""
    if sweep_seconds <= 0:
        return DEFAULT_PHASE
    return normalize_phase((clock() - _PROCESS_START) / sweep_seconds)


def resolve_phase(source: Optional[PhaseSource]) -> float:
    """Read a phase from ``source``, falling back to ``DEFAULT_PHASE``."""
    if source is None:
        return DEFAULT_PHASE
    try:
        value = float(source())
    except Exception as e:
        logger.debug(f"Phase source failed, using default phase: {e}")
        return DEFAULT_PHASE
    if not math.isfinite(value):
        logger.debug("Phase source returned %r, using default phase", value)
        return DEFAULT_PHASE
    return normalize_phase(value)


class FrameCounter:
    """Thread-safe frame tick source.

    Drives the animation from the caller's own redraw loop instead of the
    wall clock, which avoids visible jumps when frames are delayed under
    load.  Calling the instance returns the current phase, so it can be
    handed to :func:`tui_shimmer.shimmer` as ``phase_source``.
    """

    def __init__(self, frames_per_cycle: int = 60):
        if frames_per_cycle <= 0:
            raise ValueError("frames_per_cycle must be > 0")
        self._frames_per_cycle = frames_per_cycle
        self._frame = 0
        self._lock = threading.Lock()

    @property
    def frames_per_cycle(self) -> int:
        return self._frames_per_cycle

    @property
    def frame(self) -> int:
        with self._lock:
            return self._frame

    def advance(self, frames: int = 1) -> float:
        """Move forward by ``frames`` and return the new phase."""
        with self._lock:
            self._frame = (self._frame + frames) % self._frames_per_cycle
            return self._frame / self._frames_per_cycle

    def reset(self) -> None:
        with self._lock:
            self._frame = 0

    def __call__(self) -> float:
        with self._lock:
            return self._frame / self._frames_per_cycle
