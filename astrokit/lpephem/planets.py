"""Low-precision planetary ephemerides from Keplerian elements.

Elements and rates are given per Julian century of TT. One set applies
between 1800 AD and 2050 AD; a second, less precise set with extra terms
for the outer planets applies from 3000 BC to 3000 AD.
"""

from __future__ import annotations

import math
from enum import Enum

import numpy as np

from astrokit.lpephem.sun import AU


class Planet(Enum):
    """Bodies with low-precision heliocentric ephemerides."""

    MERCURY = "mercury"
    VENUS = "venus"
    EMB = "emb"
    MARS = "mars"
    JUPITER = "jupiter"
    SATURN = "saturn"
    URANUS = "uranus"
    NEPTUNE = "neptune"


# Elements: a (AU), e, i (deg), L (deg), longitude of perihelion (deg),
# longitude of ascending node (deg).
_PRECISE = {
    Planet.MERCURY: [0.38709927, 0.20563593, 7.00497902, 252.25032350, 77.45779628, 48.33076593],
    Planet.VENUS: [0.72333566, 0.00677672, 3.39467605, 181.97909950, 131.60246718, 76.67984255],
    Planet.EMB: [1.00000261, 0.01671123, -0.00001531, 100.46457166, 102.93768193, 0.0],
    Planet.MARS: [1.52371034, 0.09339410, 1.84969142, -4.55343205, -23.94362959, 49.55953891],
    Planet.JUPITER: [5.20288700, 0.04838624, 1.30439695, 34.39644051, 14.72847983, 100.47390909],
    Planet.SATURN: [9.53667594, 0.05386179, 2.48599187, 49.95424423, 92.59887831, 113.66242448],
    Planet.URANUS: [19.18916464, 0.04725744, 0.77263783, 313.23810451, 170.95427630, 74.01692503],
    Planet.NEPTUNE: [30.06992276, 0.00859048, 1.77004347, -55.12002969, 44.96476227, 131.78422574],
}

_PRECISE_RATES = {
    Planet.MERCURY: [0.00000037, 0.00001906, -0.00594749, 149472.67411175, 0.16047689, -0.12534081],
    Planet.VENUS: [0.00000390, -0.00004107, -0.00078890, 58517.81538729, 0.00268329, -0.27769418],
    Planet.EMB: [0.00000562, -0.00004392, -0.01294668, 35999.37244981, 0.32327364, 0.0],
    Planet.MARS: [0.00001847, 0.00007882, -0.00813131, 19140.30268499, 0.44441088, -0.29257343],
    Planet.JUPITER: [-0.00011607, -0.00013253, -0.00183714, 3034.74612775, 0.21252668, 0.20469106],
    Planet.SATURN: [-0.00125060, -0.00050991, 0.00193609, 1222.49362201, -0.41897216, -0.28867794],
    Planet.URANUS: [-0.00196176, -0.00004397, -0.00242939, 428.48202785, 0.40805281, 0.04240589],
    Planet.NEPTUNE: [0.00026291, 0.00005105, 0.00035372, 218.45945325, -0.32241464, -0.00508664],
}

_LONG_RANGE = {
    Planet.MERCURY: [0.38709843, 0.20563661, 7.00559432, 252.25166724, 77.45771895, 48.33961819],
    Planet.VENUS: [0.72332982, 0.00677192, 3.39777545, 181.97970850, 131.76755713, 76.67261496],
    Planet.EMB: [1.000001018, 0.01670863, -0.00004180, 100.46457166, 102.93768193, 0.0],
    Planet.MARS: [1.52367934, 0.09340065, 1.85181869, -4.56813164, -23.91744784, 49.71320984],
    Planet.JUPITER: [5.202603191, 0.048464512, 1.298470324, 34.33479152, 14.27495244, 100.29282654],
    Planet.SATURN: [9.554909596, 0.05550825, 2.49424102, 50.07571329, 92.86136063, 113.63998702],
    Planet.URANUS: [19.218446062, 0.04629590, 0.77237271, 314.20276625, 172.43404441, 73.96250215],
    Planet.NEPTUNE: [30.110386869, 0.00898809, 1.77004347, -55.12002969, 44.96476227, 131.78422574],
}

_LONG_RANGE_RATES = {
    Planet.MERCURY: [0.00000000, 0.00002123, -0.00590158, 149472.67486623, 0.15940013, -0.12214182],
    Planet.VENUS: [-0.00000026, -0.00005107, 0.00043494, 58517.81560260, 0.00682069, -0.23431738],
    Planet.EMB: [-0.0000003, -0.00003661, -0.01337178, 35999.37306329, 0.31795260, -0.24123856],
    Planet.MARS: [0.00000097, 0.00009149, -0.00724757, 19140.29934243, 0.45223625, -0.26852431],
    Planet.JUPITER: [-0.00002864, 0.00018026, -0.00322699, 3034.90371757, 0.18199196, 0.13024619],
    Planet.SATURN: [-0.00003065, -0.00032044, 0.00451969, 1222.11494724, 0.54179478, -0.25015002],
    Planet.URANUS: [-0.00020455, -0.00001550, -0.00180155, 428.49512595, 0.09266985, 0.05739699],
    Planet.NEPTUNE: [0.00006447, 0.00000818, 0.00022400, 218.46515314, 0.01009938, -0.00606302],
}

# Extra mean-anomaly terms b, c, s, f for the outer planets (long-range set).
_LONG_RANGE_TERMS = {
    Planet.JUPITER: (-0.00012452, 0.06064060, -0.35635438, 38.35125000),
    Planet.SATURN: (0.00025899, -0.13434469, 0.87320147, 38.35125000),
    Planet.URANUS: (0.00058331, -0.97731848, 0.17689245, 7.67025000),
    Planet.NEPTUNE: (-0.00041348, 0.68346318, -0.10162547, 7.67025000),
}


def _jd_of_date(year: int, month: int, day: int) -> float:
    """Julian date at 0h of a proleptic Gregorian calendar date."""
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    jdn = day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045
    return jdn - 0.5


_JD_LONG_START = _jd_of_date(-3000, 1, 1)
_JD_LONG_END = _jd_of_date(3000, 1, 1)
_JD_PRECISE_START = _jd_of_date(1800, 1, 1)
_JD_PRECISE_END = _jd_of_date(2050, 12, 31)


def _rot_x(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])


def _rot_z(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def heliocentric_pos(body, jd_tt: float) -> np.ndarray:
    """Heliocentric equatorial position of a planet, in meters.

    ``body`` is a :class:`Planet` or its value; ``jd_tt`` is the Julian date
    in the TT time scale. Raises ``ValueError`` for an unknown body or a time
    outside 3000 BC to 3000 AD.
    """
    try:
        planet = Planet(body)
    except ValueError:
        raise ValueError("Invalid Body") from None

    jcen = (jd_tt - 2451545.0) / 36525.0

    if _JD_PRECISE_START < jd_tt < _JD_PRECISE_END:
        base, rates = _PRECISE[planet], _PRECISE_RATES[planet]
        terms = None
    elif _JD_LONG_START < jd_tt < _JD_LONG_END:
        base, rates = _LONG_RANGE[planet], _LONG_RANGE_RATES[planet]
        terms = _LONG_RANGE_TERMS.get(planet)
    else:
        raise ValueError("Time out of range")

    a, eccen, incl, mean_long, wbar, node = (
        b + jcen * r for b, r in zip(base, rates)
    )

    argp = wbar - node
    m = mean_long - wbar
    if terms is not None:
        bterm, cterm, sterm, fterm = terms
        m += (
            bterm * jcen * jcen
            + math.degrees(cterm * math.cos(fterm * jcen))
            + math.degrees(sterm * math.sin(fterm * jcen))
        )
    m = math.fmod(m, 360.0)
    if m > 180.0:
        m -= 360.0
    if m <= -180.0:
        m += 360.0
    mrad = math.radians(m)

    enrad = mrad + eccen * math.sin(mrad)
    while True:
        deltam = mrad - (enrad - eccen * math.sin(enrad))
        deltae = deltam / (1.0 - eccen * math.cos(enrad))
        enrad += deltae
        if abs(deltae) <= 1.0e-8 * abs(enrad):
            break

    rprime = np.array(
        [
            a * (math.cos(enrad) - eccen),
            a * math.sqrt(1.0 - eccen * eccen) * math.sin(enrad),
            0.0,
        ]
    )
    recl = (
        _rot_z(math.radians(node))
        @ _rot_x(math.radians(incl))
        @ _rot_z(math.radians(argp))
        @ rprime
    )

    obliquity = math.radians(
        23.439279
        - 0.0130102 * jcen
        - 5.086e-8 * jcen**2
        + 5.565e-7 * jcen**3
        + 1.6e-10 * jcen**4
        + 1.21e-11 * jcen**5
    )
    return _rot_x(obliquity) @ recl * AU