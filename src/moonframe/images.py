"""
moonframe.images — Phase → Reference Frame Selection
=====================================================

Maps a phase fraction onto one of 27 pre-rendered Moon frames, numbered
2 (just after new) through 28 (just before new), and resolves that index
to a resource through a pluggable loader.

Frame layout on disk, one directory per format::

    <root>/images/moon-<n>.jpg        (default)
    <root>/images-webp/moon-<n>.webp
    <root>/images-png/moon-<n>.png

Loaders are plain callables ``loader(index) -> resource``; swap one in to
return bytes, URLs, cached handles or anything else the caller displays.
"""

import logging
from dataclasses import dataclass
from functools import partial
from pathlib import Path

import numpy as np

from .moon import PhaseName, get_moon_phase, phase_from_fraction
from .utils import FIRST_FRAME, LAST_FRAME, FRAME_STEPS, wrap_cycle

logger = logging.getLogger(__name__)

FRAME_INDICES = range(FIRST_FRAME, LAST_FRAME + 1)
DEFAULT_FRAME = FIRST_FRAME

# format → (directory, suffix)
IMAGE_FORMATS = {
    "jpeg": ("images", ".jpg"),
    "webp": ("images-webp", ".webp"),
    "png": ("images-png", ".png"),
}
DEFAULT_FORMAT = "jpeg"

# Rotation loop: waxing frames new → full, then the same frames back toward
# new, mirrored, so the terminator keeps sweeping one way.
WAXING_FRAMES = tuple(range(FIRST_FRAME, 16))       # 2..15
MIRRORED_FRAMES = tuple(range(14, FIRST_FRAME, -1))  # 14..3


# ════════════════════════════════════════════════════════════════════════════
#  Phase → Index
# ════════════════════════════════════════════════════════════════════════════

def get_image_index(phase):
    """Index of the reference frame closest to *phase* [2..28].

    Rounds half-up (not to even) so that every frame owns an equal-width
    band of the cycle.  An index past the last frame wraps to the first,
    since phase 1 ≡ phase 0.

    Parameters
    ----------
    phase : float or array — any finite phase fraction

    Returns
    -------
    index : int, or int ndarray for array input
    """
    p = wrap_cycle(phase)
    idx = FIRST_FRAME + np.floor(np.asarray(p) * FRAME_STEPS + 0.5).astype(np.int64)
    idx = np.where(idx > LAST_FRAME, FIRST_FRAME, idx)
    return int(idx) if idx.ndim == 0 else idx


# ════════════════════════════════════════════════════════════════════════════
#  Loaders
# ════════════════════════════════════════════════════════════════════════════

def frame_path(index: int, fmt: str = DEFAULT_FORMAT, root=".") -> Path:
    """Filesystem path of frame *index* in format *fmt* under *root*.

    Unknown indices resolve to the default frame.
    """
    try:
        directory, suffix = IMAGE_FORMATS[fmt]
    except KeyError:
        raise ValueError(f"Unknown image format {fmt!r}; "
                         f"expected one of {sorted(IMAGE_FORMATS)}.") from None
    if index not in FRAME_INDICES:
        logger.debug("frame %r out of range, using %d", index, DEFAULT_FRAME)
        index = DEFAULT_FRAME
    return Path(root) / directory / f"moon-{index}{suffix}"


def build_loader_table(factory) -> dict:
    """Explicit ``{index: zero-argument loader}`` table for every frame.

    Parameters
    ----------
    factory : callable — ``factory(index) -> resource``
    """
    return {i: partial(factory, i) for i in FRAME_INDICES}


def load_frame(index: int, table: dict):
    """Run the loader registered for *index*.

    Missing or out-of-range keys fall back to the default frame rather than
    failing.
    """
    loader = table.get(index)
    if loader is None:
        logger.debug("no loader for frame %r, using %d", index, DEFAULT_FRAME)
        loader = table[DEFAULT_FRAME]
    return loader()


# ════════════════════════════════════════════════════════════════════════════
#  Render Data
# ════════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class MoonFrame:
    """Everything a caller needs to draw the Moon for one instant."""
    phase: float
    name: PhaseName
    illumination: float
    image_index: int
    image: object           # whatever the loader returned


def moon_frame(date=None, phase=None, loader=None) -> MoonFrame:
    """Phase state plus the selected frame for a date or a phase override.

    Parameters
    ----------
    date : datetime or date, optional — defaults to now
    phase : float, optional — phase fraction; when given it wins over *date*
    loader : callable, optional — ``loader(index) -> resource``;
        defaults to the JPEG ``frame_path`` under the current directory
    """
    if phase is not None:
        result = phase_from_fraction(phase)
    else:
        result = get_moon_phase(date)
    index = get_image_index(result.phase)
    image = (loader or frame_path)(index)
    return MoonFrame(
        phase=result.phase,
        name=result.name,
        illumination=result.illumination,
        image_index=index,
        image=image,
    )


def rotation_sequence() -> list[tuple[int, bool]]:
    """Frame order for a continuous rotation loop.

    Returns
    -------
    frames : list of (index, mirrored) — 2→15 plain, then 14→3 mirrored
    """
    return ([(i, False) for i in WAXING_FRAMES]
            + [(i, True) for i in MIRRORED_FRAMES])
