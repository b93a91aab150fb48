"""Fixed-step explicit Runge-Kutta integrators."""

from __future__ import annotations

import numpy as np

from astrokit.ode.core import Derivative, _stage_derivatives


class ExplicitRK:
    """Explicit Runge-Kutta method given by its Butcher tableau."""

    def __init__(self, a, b, c) -> None:
        self.a = np.asarray(a, dtype=float)
        self.b = np.asarray(b, dtype=float)
        self.c = np.asarray(c, dtype=float)

    def step(self, x0: float, y0, h: float, ydot: Derivative) -> np.ndarray:
        """Advance the state one step of size ``h``."""
        y0 = np.asarray(y0, dtype=float)
        k = _stage_derivatives(self.a, self.c, x0, y0, h, ydot)
        return y0 + np.tensordot(self.b, k, axes=1) * h

    def integrate(
        self, x0: float, xend: float, dx: float, y0, ydot: Derivative
    ) -> list[np.ndarray]:
        """Take steps of ``dx`` until ``xend`` and return the state after each."""
        x = x0
        y = np.asarray(y0, dtype=float)
        states: list[np.ndarray] = []
        while x < xend:
            y = self.step(x, y, dx, ydot)
            states.append(y)
            x += dx
            if x > xend:
                x = xend
        return states


RK4 = ExplicitRK(
    a=[
        [0.0, 0.0, 0.0, 0.0],
        [0.5, 0.0, 0.0, 0.0],
        [0.0, 0.5, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
    ],
    b=[1.0 / 6.0, 1.0 / 3.0, 1.0 / 3.0, 1.0 / 6.0],
    c=[0.0, 0.5, 0.5, 1.0],
)

MIDPOINT = ExplicitRK(
    a=[[0.0, 0.0], [0.5, 0.0]],
    b=[0.0, 1.0],
    c=[0.0, 0.5],
)