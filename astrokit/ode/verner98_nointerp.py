"""Verner order 9(8) "robust" Runge-Kutta pair without interpolant.

The first sixteen stages of the interpolating 9(8) pair are the complete
integration stages. Without the extra interpolation stages each step needs
fewer derivative evaluations.
"""

from __future__ import annotations

import numpy as np

from astrokit.ode.adaptive import RKAdaptive
from astrokit.ode.core import InterpNotImplementedError, ODESolution
from astrokit.ode.verner98 import RKV98

_N = 16

_BI = np.zeros((_N, 1))
_BI[0, 0] = 1.0


class RKV98NoInterp(RKAdaptive):
    """Verner 9(8) adaptive integrator without dense-output interpolation."""

    ORDER = 9
    FSAL = False
    A = RKV98.A[:_N, :_N]
    C = RKV98.C[:_N]
    B = RKV98.B[:_N]
    BERR = RKV98.BERR[:_N]
    BI = _BI

    def interpolate(self, xinterp: float, sol: ODESolution) -> np.ndarray:
        """Always raises: this integrator has no interpolation coefficients."""
        raise InterpNotImplementedError()