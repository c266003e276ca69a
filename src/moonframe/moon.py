"""
moonframe.moon — Mean Lunar Phase
==================================

Position of the Moon within its synodic cycle from a calendar date, using
the mean synodic month counted from a reference new Moon.  No perturbation
terms: the true Moon can lead or lag the mean phase by up to ~0.5 days.

Capabilities
------------
- Phase fraction (0 = new, 0.5 = full, wraps at 1)
- Lunar age in days
- Illuminated fraction of the disk
- Eight-band phase name classification

Reference
---------
Meeus, J. (1998). *Astronomical Algorithms*, 2nd ed., Willmann-Bell, Ch. 7, 49.
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np

from .utils import (
    SYNODIC_PERIOD, NEW_MOON_REF_JD,
    require_finite, wrap_cycle, datetime_to_jd, utc_now,
)


# ════════════════════════════════════════════════════════════════════════════
#  Data Structures
# ════════════════════════════════════════════════════════════════════════════

class PhaseName(str, Enum):
    """The eight named phases, in cycle order starting at new Moon."""
    NEW_MOON = "New Moon"
    WAXING_CRESCENT = "Waxing Crescent"
    FIRST_QUARTER = "First Quarter"
    WAXING_GIBBOUS = "Waxing Gibbous"
    FULL_MOON = "Full Moon"
    WANING_GIBBOUS = "Waning Gibbous"
    LAST_QUARTER = "Last Quarter"
    WANING_CRESCENT = "Waning Crescent"

    def __str__(self) -> str:
        return self.value


# (upper bound on phase fraction, name) — first match wins
PHASE_BANDS = (
    (0.033, PhaseName.NEW_MOON),
    (0.243, PhaseName.WAXING_CRESCENT),
    (0.277, PhaseName.FIRST_QUARTER),
    (0.493, PhaseName.WAXING_GIBBOUS),
    (0.533, PhaseName.FULL_MOON),
    (0.743, PhaseName.WANING_GIBBOUS),
    (0.777, PhaseName.LAST_QUARTER),
)


@dataclass(frozen=True)
class MoonPhaseResult:
    """Phase state of the Moon at one instant."""
    phase: float            # fraction of the synodic cycle [0, 1)
    name: PhaseName
    illumination: float     # illuminated fraction of the disk [0, 1]


# ════════════════════════════════════════════════════════════════════════════
#  Phase Fraction & Age
# ════════════════════════════════════════════════════════════════════════════

def moon_phase_fraction(jd: float) -> float:
    """Fraction of the mean synodic month elapsed since the last new Moon.

    Parameters
    ----------
    jd : float — Julian Date (UTC)

    Returns
    -------
    phase : float — in [0, 1); dates before the reference epoch wrap too
    """
    require_finite(jd, "Julian Date")
    days_since_new = jd - NEW_MOON_REF_JD
    return wrap_cycle(days_since_new, SYNODIC_PERIOD) / SYNODIC_PERIOD


def moon_age_days(jd: float) -> float:
    """Lunar age (days since last mean new Moon) [0..29.53)."""
    return moon_phase_fraction(jd) * SYNODIC_PERIOD


# ════════════════════════════════════════════════════════════════════════════
#  Illumination & Name
# ════════════════════════════════════════════════════════════════════════════

def moon_illumination_fraction(phase):
    """Fraction of the Moon's disk that is illuminated [0..1].

    k = (1 − cos(2π·phase)) / 2, so 0 at new Moon and 1 at full Moon.
    Works on scalars or arrays.
    """
    require_finite(phase, "phase")
    k = (1.0 - np.cos(2.0 * np.pi * np.asarray(phase, dtype=np.float64))) / 2.0
    return float(k) if k.ndim == 0 else k


def moon_phase_name(phase: float) -> PhaseName:
    """Classify a phase fraction into one of the eight named phases.

    The fraction is wrapped into [0, 1) first, so any finite value has
    exactly one name.
    """
    p = wrap_cycle(phase)
    for upper, name in PHASE_BANDS:
        if p < upper:
            return name
    return PhaseName.WANING_CRESCENT


# ════════════════════════════════════════════════════════════════════════════
#  Combined Result
# ════════════════════════════════════════════════════════════════════════════

def compute_phase(jd: float) -> MoonPhaseResult:
    """Phase, name and illumination at a Julian Date."""
    phase = moon_phase_fraction(jd)
    return MoonPhaseResult(
        phase=phase,
        name=moon_phase_name(phase),
        illumination=moon_illumination_fraction(phase),
    )


def phase_from_fraction(phase: float) -> MoonPhaseResult:
    """Result for a caller-supplied phase fraction (no date involved).

    The fraction may lie outside [0, 1); it is wrapped before use.
    """
    p = wrap_cycle(phase)
    return MoonPhaseResult(
        phase=p,
        name=moon_phase_name(p),
        illumination=moon_illumination_fraction(p),
    )


def get_moon_phase(date=None) -> MoonPhaseResult:
    """Phase state for a ``datetime``/``date``, or for now when omitted."""
    if date is None:
        date = utc_now()
    return compute_phase(datetime_to_jd(date))
