"""Low-precision lunar ephemeris."""

from __future__ import annotations

import math

import numpy as np

EARTH_RADIUS = 6378137.0
"""Earth equatorial radius in meters."""


def _sind(deg: float) -> float:
    return math.sin(math.radians(deg))


def _cosd(deg: float) -> float:
    return math.cos(math.radians(deg))


def pos_gcrf(jd_tdb: float) -> np.ndarray:
    """Approximate Moon position in the GCRF frame, in meters.

    ``jd_tdb`` is the Julian date in the TDB time scale. Accurate to about
    0.3 degree in ecliptic longitude, 0.2 degree in ecliptic latitude and
    1275 km in range.
    """
    t = (jd_tdb - 2451545.0) / 36525.0

    lambda_ecliptic = math.radians(
        218.32
        + 481267.8813 * t
        + 6.29 * _sind(134.9 + 477198.85 * t)
        - 1.27 * _sind(259.2 - 413335.38 * t)
        + 0.66 * _sind(235.7 + 890534.23 * t)
        + 0.21 * _sind(269.9 + 954397.70 * t)
        - 0.19 * _sind(357.5 + 35999.05 * t)
        - 0.11 * _sind(186.6 + 966404.05 * t)
    )

    phi_ecliptic = math.radians(
        5.13 * _sind(93.3 + 483202.03 * t)
        + 0.28 * _sind(228.2 + 960400.87 * t)
        - 0.28 * _sind(318.3 + 6003.18 * t)
        - 0.17 * _sind(217.6 - 407332.20 * t)
    )

    hparallax = math.radians(
        0.9508
        + 0.0518 * _cosd(134.9 + 477198.85 * t)
        + 0.0095 * _cosd(259.2 - 413335.38 * t)
        + 0.0078 * _cosd(235.7 + 890534.23 * t)
        + 0.0028 * _cosd(269.9 + 954397.70 * t)
    )

    epsilon = math.radians(23.439291 - 0.0130042 * t - 1.64e-7 * t * t + 5.04e-7 * t**3)

    rmag = EARTH_RADIUS / math.sin(hparallax)
    cphi, sphi = math.cos(phi_ecliptic), math.sin(phi_ecliptic)
    clam, slam = math.cos(lambda_ecliptic), math.sin(lambda_ecliptic)
    ceps, seps = math.cos(epsilon), math.sin(epsilon)

    return rmag * np.array(
        [
            cphi * clam,
            ceps * cphi * slam - seps * sphi,
            seps * cphi * slam + ceps * sphi,
        ]
    )