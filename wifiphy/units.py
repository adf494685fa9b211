"""Power, ratio and frequency-band helpers used throughout the PHY model."""

from __future__ import annotations

import math

__all__ = [
    "dbm_to_w",
    "w_to_dbm",
    "db_to_ratio",
    "ratio_to_db",
    "is_2_4ghz",
    "is_5ghz",
]


def db_to_ratio(db: float) -> float:
    """Convert a value in decibels to a linear ratio."""
    return 10.0 ** (db / 10.0)


def ratio_to_db(ratio: float) -> float:
    """Convert a positive linear ratio to decibels."""
    if ratio <= 0:
        raise ValueError(f"ratio must be positive, got {ratio!r}")
    return 10.0 * math.log10(ratio)


def dbm_to_w(dbm: float) -> float:
    """Convert a power in dBm to watts."""
    return 10.0 ** (dbm / 10.0) / 1000.0


def w_to_dbm(w: float) -> float:
    """Convert a positive power in watts to dBm."""
    if w <= 0:
        raise ValueError(f"power must be positive, got {w!r}")
    return 10.0 * math.log10(w * 1000.0)


def is_2_4ghz(frequency: float) -> bool:
    """Return True if the centre frequency (MHz) lies in the 2.4 GHz band."""
    return 2400 <= frequency <= 2500


def is_5ghz(frequency: float) -> bool:
    """Return True if the centre frequency (MHz) lies in the 5 GHz band."""
    return 5000 <= frequency <= 6000