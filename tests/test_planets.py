import math

import numpy as np
import pytest

from astrokit.lpephem.planets import Planet, heliocentric_pos
from astrokit.lpephem.sun import AU

J2000 = 2451545.0

PRECISE_ELEMENTS = [
    (Planet.MERCURY, 0.38709927, 0.20563593),
    (Planet.VENUS, 0.72333566, 0.00677672),
    (Planet.EMB, 1.00000261, 0.01671123),
    (Planet.MARS, 1.52371034, 0.09339410),
    (Planet.JUPITER, 5.20288700, 0.04838624),
    (Planet.SATURN, 9.53667594, 0.05386179),
    (Planet.URANUS, 19.18916464, 0.04725744),
    (Planet.NEPTUNE, 30.06992276, 0.00859048),
]

LONG_RANGE_ELEMENTS = [
    (Planet.EMB, 1.000001018, 0.01670863),
    (Planet.JUPITER, 5.202603191, 0.048464512),
    (Planet.NEPTUNE, 30.110386869, 0.00898809),
]


@pytest.mark.parametrize("planet,a,e", PRECISE_ELEMENTS)
def test_distance_within_orbit_bounds(planet, a, e):
    pos = heliocentric_pos(planet, J2000)
    r = np.linalg.norm(pos) / AU
    assert a * (1.0 - e) * 0.999 <= r <= a * (1.0 + e) * 1.001


@pytest.mark.parametrize("planet,a,e", LONG_RANGE_ELEMENTS)
def test_distance_within_orbit_bounds_long_range(planet, a, e):
    jd = J2000 - 300.0 * 365.25
    r = np.linalg.norm(heliocentric_pos(planet, jd)) / AU
    assert a * (1.0 - e) * 0.99 <= r <= a * (1.0 + e) * 1.01


def test_emb_lies_in_ecliptic_plane():
    pos = heliocentric_pos(Planet.EMB, J2000)
    eps = math.radians(23.439279)
    normal = np.array([0.0, -math.sin(eps), math.cos(eps)])
    assert abs(pos @ normal) / np.linalg.norm(pos) < 1.0e-4


def test_emb_position_at_j2000():
    pos = heliocentric_pos(Planet.EMB, J2000) / AU
    assert np.allclose(pos, [-0.1771, 0.8873, 0.3847], atol=0.02)


def test_accepts_enum_value():
    by_value = heliocentric_pos("mars", J2000)
    by_member = heliocentric_pos(Planet.MARS, J2000)
    assert np.array_equal(by_value, by_member)


def test_invalid_body_raises():
    with pytest.raises(ValueError):
        heliocentric_pos("pluto", J2000)


@pytest.mark.parametrize("jd", [J2000 + 400000.0, J2000 - 2000000.0])
def test_time_out_of_range_raises(jd):
    with pytest.raises(ValueError):
        heliocentric_pos(Planet.MARS, jd)