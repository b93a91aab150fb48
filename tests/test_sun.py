import datetime as dt

import numpy as np
import pytest

from astrokit.lpephem import sun


def _seconds(t: dt.datetime) -> float:
    return t.second + t.microsecond / 1.0e6


def test_sunpos_mod_vallado_example():
    # 2006-04-02 00:00 UTC, treated as TDB
    pos = sun.pos_mod(2453827.5)
    ref_pos = [146186212.0e3, 28788976.0e3, 12481064.0e3]
    for value, ref in zip(pos, ref_pos):
        assert abs(value / ref - 1.0) < 1.0e-6


def test_sunpos_mod_distance_near_one_au():
    pos = sun.pos_mod(2451545.0)
    assert abs(np.linalg.norm(pos) / sun.AU - 1.0) < 0.02


def test_sunriseset_vallado_example():
    sunrise, sunset = sun.riseset(dt.datetime(1996, 3, 23), 40.0, 0.0)
    assert (sunrise.year, sunrise.month, sunrise.day) == (1996, 3, 23)
    assert (sunrise.hour, sunrise.minute) == (5, 58)
    assert abs(_seconds(sunrise) / 21.97 - 1.0) < 1.0e-3
    assert (sunset.year, sunset.month, sunset.day) == (1996, 3, 23)
    assert (sunset.hour, sunset.minute) == (18, 15)
    assert abs(_seconds(sunset) / 17.76 - 1.0) < 1.0e-3


def test_riseset_accepts_plain_date():
    from_date = sun.riseset(dt.date(1996, 3, 23), 40.0, 0.0)
    from_datetime = sun.riseset(dt.datetime(1996, 3, 23), 40.0, 0.0)
    assert from_date == from_datetime


def test_riseset_default_sigma_matches_standard():
    default = sun.riseset(dt.date(1996, 3, 23), 40.0, 0.0)
    explicit = sun.riseset(dt.date(1996, 3, 23), 40.0, 0.0, 90.0 + 50.0 / 60.0)
    assert default == explicit


def test_riseset_no_sunset_raises():
    with pytest.raises(ValueError):
        sun.riseset(dt.date(2020, 6, 20), 85.0, 30.0)


def test_shadow_full_sunlight():
    psun = np.array([sun.AU, 0.0, 0.0])
    psat = np.array([7000.0e3, 0.0, 0.0])
    assert sun.shadowfunc(psun, psat) == 1.0


def test_shadow_full_occlusion():
    psun = np.array([sun.AU, 0.0, 0.0])
    psat = np.array([-7000.0e3, 0.0, 0.0])
    assert sun.shadowfunc(psun, psat) == 0.0


def test_shadow_partial_at_earth_limb():
    psun = np.array([sun.AU, 0.0, 0.0])
    psat = np.array([-7000.0e3, sun.EARTH_RADIUS, 0.0])
    frac = sun.shadowfunc(psun, psat)
    assert 0.0 < frac < 1.0