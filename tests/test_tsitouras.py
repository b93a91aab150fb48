import math

import numpy as np
import pytest

from astrokit.ode.core import (
    InterpExceedsSolutionBounds,
    NoDenseOutputError,
    RKAdaptiveSettings,
)
from astrokit.ode.tsitouras import RKTS54


def oscillator(k=1.0):
    def ydot(_x, y):
        return np.array([y[1], -k * y[0]])

    return ydot


def test_nointerp():
    settings = RKAdaptiveSettings(abserror=1e-8, relerror=1e-8, dense_output=False)
    res = RKTS54().integrate(0.0, 2.0 * math.pi, np.array([1.0, 0.0]), oscillator(), settings)
    assert res.x == pytest.approx(2.0 * math.pi)
    assert abs(res.y[0] - 1.0) < 1e-5
    assert abs(res.y[1]) < 1e-5
    assert res.dense is None
    assert res.naccept > 0


def test_dense_interpolation():
    settings = RKAdaptiveSettings(abserror=1e-14, relerror=1e-14, dense_output=True)
    solver = RKTS54()
    sol = solver.integrate(0.0, math.pi, np.array([1.0, 0.0]), oscillator(), settings)
    for idx in range(100):
        x = idx * math.pi / 100
        interp = solver.interpolate(x, sol)
        assert abs(interp[0] - math.cos(x)) < 1e-11
        assert abs(interp[1] + math.sin(x)) < 1e-11


def test_backward_dense_interpolation():
    settings = RKAdaptiveSettings(abserror=1e-14, relerror=1e-14, dense_output=True)
    solver = RKTS54()
    sol = solver.integrate(0.0, -math.pi, np.array([1.0, 0.0]), oscillator(), settings)
    assert sol.x == pytest.approx(-math.pi)
    for x in np.linspace(0.0, -math.pi * 0.99, 25):
        interp = solver.interpolate(float(x), sol)
        assert abs(interp[0] - math.cos(x)) < 1e-9
        assert abs(interp[1] + math.sin(x)) < 1e-9


def test_interpolate_outside_bounds():
    settings = RKAdaptiveSettings(dense_output=True)
    solver = RKTS54()
    sol = solver.integrate(0.0, 1.0, np.array([1.0, 0.0]), oscillator(), settings)
    with pytest.raises(InterpExceedsSolutionBounds):
        solver.interpolate(1.5, sol)
    with pytest.raises(InterpExceedsSolutionBounds):
        solver.interpolate(-0.1, sol)


def test_interpolate_without_dense_output():
    solver = RKTS54()
    sol = solver.integrate(0.0, 1.0, np.array([1.0, 0.0]), oscillator(), RKAdaptiveSettings())
    with pytest.raises(NoDenseOutputError):
        solver.interpolate(0.5, sol)


def test_tableau_consistency():
    assert RKTS54.A.shape == (7, 7)
    assert RKTS54.BI.shape == (7, 4)
    np.testing.assert_allclose(RKTS54.A.sum(axis=1), RKTS54.C, atol=1e-12)
    assert RKTS54.B.sum() == pytest.approx(1.0, abs=1e-12)
    assert RKTS54.BERR[6] == pytest.approx(-1.0 / 66.0)