"""Low-precision solar ephemeris, Earth shadow and sunrise/sunset times."""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta, timezone
from typing import Optional

import numpy as np

from astrokit.lpephem.moon import EARTH_RADIUS

AU = 149597870700.0
"""Astronomical unit in meters."""

SUN_RADIUS = 695700.0e3
"""Nominal solar radius in meters."""

STANDARD_SIGMA = 90.0 + 50.0 / 60.0
"""Default angle in degrees between noon and sunrise/sunset."""

_J2000 = datetime(2000, 1, 1, 12, tzinfo=timezone.utc)
_J2000_JD = 2451545.0


def _sind(deg: float) -> float:
    return math.sin(math.radians(deg))


def _cosd(deg: float) -> float:
    return math.cos(math.radians(deg))


def _tand(deg: float) -> float:
    return math.tan(math.radians(deg))


def _as_utc(value: date) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)


def _to_jd(value: date) -> float:
    return _J2000_JD + (_as_utc(value) - _J2000) / timedelta(days=1)


def _from_jd(jd: float) -> datetime:
    return _J2000 + timedelta(days=jd - _J2000_JD)


def pos_mod(jd_tdb: float) -> np.ndarray:
    """Sun position in the Mean-of-Date frame, in meters.

    ``jd_tdb`` is the Julian date in the TDB time scale. Accurate to about
    0.01 degree between 1950 and 2050.
    """
    t = (jd_tdb - 2451545.0) / 36525.0

    mean_longitude = 280.46 + 36000.77 * t
    mean_anomaly = math.radians(357.5277233 + 35999.05034 * t)
    epsilon = math.radians(23.439291 - 0.0130042 * t)

    lambda_ecliptic = math.radians(
        mean_longitude
        + 1.914666471 * math.sin(mean_anomaly)
        + 0.019994643 * math.sin(2.0 * mean_anomaly)
    )
    r = AU * (
        1.000140612
        - 0.016708617 * math.cos(mean_anomaly)
        - 0.000139589 * math.cos(2.0 * mean_anomaly)
    )
    return np.array(
        [
            r * math.cos(lambda_ecliptic),
            r * math.sin(lambda_ecliptic) * math.cos(epsilon),
            r * math.sin(lambda_ecliptic) * math.sin(epsilon),
        ]
    )


def shadowfunc(psun, psat) -> float:
    """Fraction of sunlight reaching a satellite, from 0 (eclipsed) to 1 (full sun).

    ``psun`` and ``psat`` are geocentric positions in meters in the same frame.
    """
    psun = np.asarray(psun, dtype=float)
    psat = np.asarray(psat, dtype=float)
    to_sun = psun - psat
    dsun = float(np.linalg.norm(to_sun))
    snorm = float(np.linalg.norm(psat))
    a = math.asin(SUN_RADIUS / dsun)
    b = math.asin(EARTH_RADIUS / snorm)
    cosc = float(-psat @ to_sun) / snorm / dsun
    c = math.acos(max(-1.0, min(1.0, cosc)))
    if a + b <= c:
        return 1.0
    if c < b - a:
        return 0.0
    x = (c * c + a * a - b * b) / 2.0 / c
    y = math.sqrt(a * a - x * x)
    overlap = a * a * math.acos(x / a) + b * b * math.acos((c - x) / b) - c * y
    return 1.0 - overlap / math.pi / a / a


def riseset(
    date: date,
    latitude_deg: float,
    longitude_deg: float,
    sigma: Optional[float] = None,
) -> tuple[datetime, datetime]:
    """Sunrise and sunset on the given UTC day at a geodetic location.

    ``sigma`` is the angle in degrees between noon and rise/set; it defaults
    to the standard 90 deg 50 arcmin (civil twilight is 96, nautical 102,
    astronomical 108). Returns timezone-aware UTC datetimes.

    Raises ``ValueError`` when the sun does not rise or set on that day.
    """
    if sigma is None:
        sigma = STANDARD_SIGMA
    jd_utc = _to_jd(date)
    jd0h = math.floor(jd_utc * 2.0 + 0.5) / 2.0

    def crossing(jdoffset: float, sunrise: bool) -> datetime:
        jd = jd_utc + jdoffset - longitude_deg / 360.0
        t = (jd - 2451545.0) / 36525.0

        lambda_sun = 280.4606184 + 36000.77005361 * t
        msun = 357.5291092 + 35999.05034 * t
        lambda_ecliptic = (
            lambda_sun + 1.914666471 * _sind(msun) + 0.019994643 * _sind(2.0 * msun)
        )
        epsilon = 23.439291 - 0.0130042 * t

        tanalpha_sun = _cosd(epsilon) * _tand(lambda_ecliptic)
        sindelta_sun = _sind(epsilon) * _sind(lambda_ecliptic)
        delta_sun = math.degrees(math.asin(sindelta_sun))
        alpha_sun = math.degrees(math.atan(tanalpha_sun))

        coslha = (_cosd(sigma) - _sind(delta_sun) * _sind(latitude_deg)) / (
            _cosd(delta_sun) * _cosd(latitude_deg)
        )
        if abs(coslha) > 1.0:
            raise ValueError(
                "Invalid position.  Sun doesn't rise/set on this day at "
                "this location (e.g., Alaska in summer)"
            )
        lha = math.degrees(math.acos(coslha))
        if sunrise:
            lha = 360.0 - lha

        gmst0h = math.fmod(
            100.4606184 + 36000.77005361 * t + 0.00038793 * t * t - 2.6e-8 * t**3,
            360.0,
        )
        gmst = math.fmod(gmst0h, 360.0)
        ret = math.fmod(lha + alpha_sun - gmst, 360.0)
        if ret < 0.0:
            ret += 360.0
        return _from_jd(ret / 360.0 + jd0h - longitude_deg / 360.0)

    return crossing(0.25, True), crossing(0.75, False)