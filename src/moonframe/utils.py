"""
moonframe.utils — Foundational Utilities
=========================================

Constants, calendar → Julian Day conversion and cycle wrapping.
All functions are pure NumPy.
"""

from datetime import date, datetime, timezone

import numpy as np
from numpy.typing import ArrayLike

# ── Lunar Constants ─────────────────────────────────────────────────────────
SYNODIC_PERIOD = 29.53059        # mean new Moon → new Moon          [days]
NEW_MOON_REF_JD = 2451549.5      # reference new Moon, 2000 Jan 6    [JD]

DAILY_SECONDS = 86400.0

# ── Frame Constants ─────────────────────────────────────────────────────────
FIRST_FRAME = 2                  # just after new Moon
LAST_FRAME = 28                  # just before new Moon
FRAME_STEPS = LAST_FRAME - FIRST_FRAME


def require_finite(x: ArrayLike, what: str = "value") -> None:
    """Raise ``ValueError`` if *x* (scalar or array) holds NaN or ±inf."""
    if not np.all(np.isfinite(x)):
        raise ValueError(f"{what} must be finite, got {x!r}.")


def wrap_cycle(x: ArrayLike, period: float = 1.0):
    """Wrap *x* into ``[0, period)``.

    The modulo is always non-negative, whatever the sign of *x*.  A tiny
    negative input can round up to exactly ``period``; that case folds to 0.
    Scalars in, float out; arrays in, ndarray out.
    """
    require_finite(x)
    r = np.mod(np.asarray(x, dtype=np.float64), period)
    r = np.where(r >= period, 0.0, r)
    return float(r) if r.ndim == 0 else r


# ── Time Utilities ──────────────────────────────────────────────────────────

def julian_date(year: int, month: int, day: int,
                hour: float = 0.0, minute: float = 0.0,
                second: float = 0.0) -> float:
    """Compute Julian Date from a proleptic Gregorian calendar date (UTC).

    Meeus (1998), Ch. 7.  Floors rather than truncates, so years ≤ 0
    convert correctly as well.

    Parameters
    ----------
    year : int — astronomical year (1 BC = 0)
    month : int — 1..12
    day : int — day of month
    hour, minute, second : float — time of day (UTC)

    Returns
    -------
    jd : float — Julian Date, fractional part encodes the time of day
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}.")
    require_finite([year, day, hour, minute, second], "date component")

    d = day + hour / 24.0 + minute / 1440.0 + second / DAILY_SECONDS
    if month < 3:
        year -= 1
        month += 12
    A = np.floor(year / 100)
    B = 2 - A + np.floor(A / 4)
    JD = (np.floor(365.25 * (year + 4716))
          + np.floor(30.6001 * (month + 1))
          + d + B - 1524.5)
    return float(JD)


def datetime_to_jd(dt) -> float:
    """Julian Date of a ``datetime`` or ``date``.

    Naive datetimes are taken to be UTC; aware ones are converted to UTC.
    A bare ``date`` means midnight UTC.
    """
    if not isinstance(dt, datetime):
        if isinstance(dt, date):
            return julian_date(dt.year, dt.month, dt.day)
        raise TypeError(f"Expected datetime or date, got {type(dt).__name__}.")
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    return julian_date(dt.year, dt.month, dt.day,
                       dt.hour, dt.minute,
                       dt.second + dt.microsecond / 1e6)


def utc_now() -> datetime:
    """Current wall-clock time, timezone-aware UTC."""
    return datetime.now(timezone.utc)
