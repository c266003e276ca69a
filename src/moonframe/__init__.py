"""
moonframe — Mean Lunar Phase & Reference Frame Selection
=========================================================

A small pure-NumPy library that turns a calendar date into the Moon's
position in its synodic cycle and picks the pre-rendered photograph that
best represents it::

    date (UTC)  →  Julian Date  →  phase / name / illumination
                                       ↓
                                 frame index 2..28  →  loader(index)

Phase Conventions
-----------------

**Phase fraction**
  - 0 = new Moon, 0.5 = full Moon, wraps at 1.
  - Mean synodic month of 29.53059 days from the new Moon at JD 2451549.5.

**Illumination**
  - (1 − cos 2π·phase) / 2: 0 dark, 1 fully lit.

**Frame index**
  - 27 frames, 2 (just after new) … 15 (full) … 28 (just before new).
"""

from .utils import (
    julian_date,
    datetime_to_jd,
    wrap_cycle,
    SYNODIC_PERIOD,
    NEW_MOON_REF_JD,
    FIRST_FRAME,
    LAST_FRAME,
)

from .moon import (
    PhaseName,
    MoonPhaseResult,
    moon_phase_fraction,
    moon_age_days,
    moon_illumination_fraction,
    moon_phase_name,
    compute_phase,
    phase_from_fraction,
    get_moon_phase,
)

from .images import (
    get_image_index,
    frame_path,
    build_loader_table,
    load_frame,
    moon_frame,
    rotation_sequence,
    MoonFrame,
    FRAME_INDICES,
    DEFAULT_FRAME,
    IMAGE_FORMATS,
)

__version__ = "1.0.0"
__all__ = [
    # ── Constants ──
    "SYNODIC_PERIOD", "NEW_MOON_REF_JD", "FIRST_FRAME", "LAST_FRAME",
    "FRAME_INDICES", "DEFAULT_FRAME", "IMAGE_FORMATS",
    # ── Time ──
    "julian_date", "datetime_to_jd", "wrap_cycle",
    # ── Phase ──
    "PhaseName", "MoonPhaseResult",
    "moon_phase_fraction", "moon_age_days",
    "moon_illumination_fraction", "moon_phase_name",
    "compute_phase", "phase_from_fraction", "get_moon_phase",
    # ── Frames ──
    "get_image_index", "frame_path", "build_loader_table", "load_frame",
    "moon_frame", "rotation_sequence", "MoonFrame",
]
