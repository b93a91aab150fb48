import math

import numpy as np
import pytest

from astrokit.ode.explicit import MIDPOINT, RK4, ExplicitRK


def oscillator(k):
    return lambda x, y: np.array([y[1], -k * y[0]])


def test_rk4_harmonic_oscillator_full_period():
    y0 = np.array([1.0, 0.0])
    out = RK4.integrate(0.0, 2.0 * math.pi, 0.0001 * 2.0 * math.pi, y0, oscillator(1.0))
    last = out[-1]
    assert abs(last[0] - 1.0) < 1.0e-6
    assert abs(last[1]) < 1.0e-10


def test_rk4_exact_for_cubic_integrand():
    y = RK4.step(0.0, np.array([0.0]), 1.0, lambda x, y: np.array([3.0 * x * x]))
    assert y[0] == pytest.approx(1.0)


def test_rk4_step_matches_taylor_series_for_exponential():
    h = 0.1
    y = RK4.step(0.0, np.array([1.0]), h, lambda x, y: y)
    assert y[0] == pytest.approx(1 + h + h**2 / 2 + h**3 / 6 + h**4 / 24, rel=1e-14)


def test_midpoint_step_matches_second_order_taylor():
    h = 0.1
    y = MIDPOINT.step(0.0, np.array([1.0]), h, lambda x, y: y)
    assert y[0] == pytest.approx(1 + h + h**2 / 2, rel=1e-14)


def test_integrate_returns_state_after_each_step():
    out = RK4.integrate(0.0, 1.0, 0.25, np.array([0.0]), lambda x, y: np.ones_like(y))
    assert len(out) == 4
    assert [s[0] for s in out] == pytest.approx([0.25, 0.5, 0.75, 1.0])


def test_integrate_empty_when_already_at_end():
    out = RK4.integrate(1.0, 1.0, 0.1, np.array([5.0]), lambda x, y: y)
    assert out == []


def test_custom_tableau_euler():
    euler = ExplicitRK(a=[[0.0]], b=[1.0], c=[0.0])
    y = euler.step(0.0, [2.0, 3.0], 0.5, lambda x, y: np.array([1.0, -1.0]))
    assert y.tolist() == [2.5, 2.5]


def test_matrix_state_shape_preserved():
    y0 = np.eye(2)
    y = RK4.step(0.0, y0, 0.1, lambda x, y: -y)
    assert y.shape == (2, 2)
    assert y[0, 1] == 0.0
    assert y[0, 0] == pytest.approx(math.exp(-0.1), rel=1e-6)