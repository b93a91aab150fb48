import math

import numpy as np
import pytest

from astrokit.ode.adaptive import RKAdaptive
from astrokit.ode.core import (
    InterpExceedsSolutionBounds,
    NoDenseOutputError,
    RKAdaptiveSettings,
    StepErrorNotFinite,
)

_DP_B = [35 / 384, 0.0, 500 / 1113, 125 / 192, -2187 / 6784, 11 / 84, 0.0]
_DP_BHAT = [5179 / 57600, 0.0, 7571 / 16695, 393 / 640, -92097 / 339200, 187 / 2100, 1 / 40]


def _hermite_rows(b):
    rows = [[0.0, 3.0 * bi, -2.0 * bi] for bi in b]
    rows[0] = [1.0, 3.0 * b[0] - 2.0, 1.0 - 2.0 * b[0]]
    rows[-1] = [0.0, -1.0, 1.0]
    return rows


class DormandPrince(RKAdaptive):
    C = [0.0, 1 / 5, 3 / 10, 4 / 5, 8 / 9, 1.0, 1.0]
    A = [
        [0.0] * 7,
        [1 / 5, 0, 0, 0, 0, 0, 0],
        [3 / 40, 9 / 40, 0, 0, 0, 0, 0],
        [44 / 45, -56 / 15, 32 / 9, 0, 0, 0, 0],
        [19372 / 6561, -25360 / 2187, 64448 / 6561, -212 / 729, 0, 0, 0],
        [9017 / 3168, -355 / 33, 46732 / 5247, 49 / 176, -5103 / 18656, 0, 0],
        _DP_B,
    ]
    B = _DP_B
    BERR = [b - bh for b, bh in zip(_DP_B, _DP_BHAT)]
    BI = _hermite_rows(_DP_B)
    ORDER = 5
    FSAL = True


def oscillator(k=1.0):
    return lambda x, y: np.array([y[1], -k * y[0]])


def dense_settings():
    return RKAdaptiveSettings(abserror=1e-10, relerror=1e-10, dense_output=True)


def test_full_period_returns_to_start():
    settings = RKAdaptiveSettings()
    sol = DormandPrince().integrate(0.0, 2 * math.pi, [1.0, 0.0], oscillator(), settings)
    assert sol.x == pytest.approx(2 * math.pi)
    assert sol.y[0] == pytest.approx(1.0, abs=1e-6)
    assert sol.y[1] == pytest.approx(0.0, abs=1e-6)
    assert sol.dense is None


def test_backward_integration():
    settings = RKAdaptiveSettings()
    sol = DormandPrince().integrate(0.0, -2 * math.pi, [1.0, 0.0], oscillator(), settings)
    assert sol.x == pytest.approx(-2 * math.pi)
    assert sol.y[0] == pytest.approx(1.0, abs=1e-6)
    assert sol.y[1] == pytest.approx(0.0, abs=1e-6)


def test_evaluation_bookkeeping():
    sol = DormandPrince().integrate(0.0, math.pi, [1.0, 0.0], oscillator(), dense_settings())
    assert sol.nevals == 2 + 7 * (sol.naccept + sol.nreject)
    assert len(sol.dense.x) == sol.naccept
    assert sol.dense.x[0] == 0.0
    assert all(b > a for a, b in zip(sol.dense.x, sol.dense.x[1:]))


def test_forward_interpolation_tracks_exact_solution():
    rk = DormandPrince()
    sol = rk.integrate(0.0, math.pi, [1.0, 0.0], oscillator(), dense_settings())
    for x in np.linspace(0.0, math.pi, 50):
        y = rk.interpolate(x, sol)
        assert y[0] == pytest.approx(math.cos(x), abs=1e-6)
        assert y[1] == pytest.approx(-math.sin(x), abs=1e-6)


def test_backward_interpolation_tracks_exact_solution():
    rk = DormandPrince()
    sol = rk.integrate(0.0, -math.pi, [1.0, 0.0], oscillator(), dense_settings())
    for x in np.linspace(-math.pi, 0.0, 50):
        y = rk.interpolate(x, sol)
        assert y[0] == pytest.approx(math.cos(x), abs=1e-6)
        assert y[1] == pytest.approx(-math.sin(x), abs=1e-6)


def test_interpolation_at_step_points_reproduces_states():
    rk = DormandPrince()
    sol = rk.integrate(0.0, 2.0, [1.0, 0.0], oscillator(), dense_settings())
    for x, y in zip(sol.dense.x, sol.dense.y):
        np.testing.assert_allclose(rk.interpolate(x, sol), y, atol=1e-12)
    np.testing.assert_allclose(rk.interpolate(sol.x, sol), sol.y, atol=1e-12)


def test_interpolation_without_dense_output_raises():
    rk = DormandPrince()
    settings = RKAdaptiveSettings(dense_output=False)
    sol = rk.integrate(0.0, 1.0, [1.0, 0.0], oscillator(), settings)
    with pytest.raises(NoDenseOutputError):
        rk.interpolate(0.5, sol)


@pytest.mark.parametrize("xend, xinterp", [(1.0, 1.5), (1.0, -0.1), (-1.0, 0.1), (-1.0, -1.5)])
def test_interpolation_outside_bounds_raises(xend, xinterp):
    rk = DormandPrince()
    sol = rk.integrate(0.0, xend, [1.0, 0.0], oscillator(), dense_settings())
    with pytest.raises(InterpExceedsSolutionBounds) as info:
        rk.interpolate(xinterp, sol)
    assert info.value.interp == xinterp
    assert info.value.start == 0.0


def test_non_finite_derivative_raises():
    def ydot(x, y):
        return np.full_like(y, np.nan if x > 0.5 else 1.0)

    settings = RKAdaptiveSettings()
    with pytest.raises(StepErrorNotFinite):
        DormandPrince().integrate(0.0, 1.0, [1.0], ydot, settings)


def test_matrix_state():
    def ydot(x, y):
        return np.vstack([y[1], -y[0]])

    y0 = np.array([[1.0, 0.0], [0.0, 1.0]])
    settings = RKAdaptiveSettings()
    sol = DormandPrince().integrate(0.0, 1.0, y0, ydot, settings)
    assert sol.y.shape == (2, 2)
    assert sol.y[0, 0] == pytest.approx(math.cos(1.0), abs=1e-6)
    assert sol.y[0, 1] == pytest.approx(math.sin(1.0), abs=1e-6)
    assert sol.y[1, 1] == pytest.approx(math.cos(1.0), abs=1e-6)