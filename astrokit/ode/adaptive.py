"""Adaptive-step Runge-Kutta integration with dense output."""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

from astrokit.ode.core import (
    DenseOutput,
    Derivative,
    InterpExceedsSolutionBounds,
    NoDenseOutputError,
    ODESolution,
    RKAdaptiveSettings,
    StepErrorNotFinite,
    _stage_derivatives,
    scaled_norm,
)


class RKAdaptive:
    """Embedded Runge-Kutta pair with a proportional-integral step controller.

    Subclasses supply the tableau as class attributes ``A``, ``C``, ``B``,
    ``BERR`` (error weights), ``BI`` (interpolation coefficients multiplying
    increasing powers of the step fraction, starting from the first power),
    ``ORDER`` and ``FSAL``.
    """

    A: np.ndarray
    C: np.ndarray
    B: np.ndarray
    BERR: np.ndarray
    BI: np.ndarray
    ORDER: int
    FSAL: bool = False

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        for name in ("A", "C", "B", "BERR", "BI"):
            if name in cls.__dict__:
                setattr(cls, name, np.asarray(cls.__dict__[name], dtype=float))

    def interpolate(self, xinterp: float, sol: ODESolution) -> np.ndarray:
        """Evaluate the dense solution at ``xinterp``."""
        dense = sol.dense
        if dense is None:
            raise NoDenseOutputError()
        start = dense.x[0]
        xs = np.asarray(dense.x)
        if sol.x > start:
            if sol.x < xinterp or xinterp < start:
                raise InterpExceedsSolutionBounds(xinterp, start, sol.x)
            hits = np.flatnonzero(xs >= xinterp)
        else:
            if sol.x > xinterp or xinterp > start:
                raise InterpExceedsSolutionBounds(xinterp, start, sol.x)
            hits = np.flatnonzero(xs <= xinterp)
        idx = int(hits[0]) if hits.size else len(xs)
        idx = max(idx - 1, 0)

        h = dense.h[idx]
        t = (xinterp - dense.x[idx]) / h
        powers = t ** np.arange(1, self.BI.shape[1] + 1)
        bi = self.BI @ powers
        return (dense.y[idx] / h + np.tensordot(bi, dense.yprime[idx], axes=1)) * h

    def integrate(
        self,
        xstart: float,
        xend: float,
        y0,
        ydot: Derivative,
        settings: Optional[RKAdaptiveSettings] = None,
    ) -> ODESolution:
        """Integrate ``y' = ydot(x, y)`` from ``xstart`` to ``xend``."""
        settings = settings or RKAdaptiveSettings()
        with np.errstate(all="ignore"):
            return self._integrate(xstart, xend, np.asarray(y0, dtype=float), ydot, settings)

    def _initial_step(self, xstart, y0, ydot, settings, tdir) -> float:
        sci = np.abs(y0) * settings.relerror + settings.abserror
        d0 = np.float64(scaled_norm(y0 / sci))
        ydot0 = np.asarray(ydot(xstart, y0), dtype=float)
        d1 = np.float64(scaled_norm(ydot0 / sci))
        h0 = 0.01 * d0 / d1 * tdir
        y1 = y0 + ydot0 * h0
        ydot1 = np.asarray(ydot(xstart + h0, y1), dtype=float)
        d2 = np.float64(scaled_norm((ydot1 - ydot0) / sci)) / h0
        dmax = np.fmax(d1, d2)
        if dmax < 1e-15:
            h1 = np.fmax(1e-6, abs(h0) * 1e-3)
        else:
            h1 = 10.0 ** (-(2.0 + np.log10(dmax)) / self.ORDER)
        return float(np.fmin(100.0 * abs(h0), abs(h1)) * tdir)

    def _integrate(self, xstart, xend, y0, ydot, settings) -> ODESolution:
        nstages = len(self.C)
        tdir = 1.0 if xend > xstart else -1.0
        h = self._initial_step(xstart, y0, ydot, settings, tdir)
        nevals = 2
        naccept = 0
        nreject = 0
        x = float(xstart)
        y = y0.copy()
        qold = 1.0e-4
        dense = DenseOutput() if settings.dense_output else None

        err_mask = np.abs(self.BERR) > 1.0e-9
        berr = self.BERR[err_mask]
        beta1 = 7.0 / (5.0 * self.ORDER)
        beta2 = 2.0 / (5.0 * self.ORDER)

        def reached(pos: float) -> bool:
            return (tdir > 0.0 and pos >= xend) or (tdir < 0.0 and pos <= xend)

        while True:
            if reached(x + h):
                h = xend - x
            k = _stage_derivatives(self.A, self.C, x, y, h, ydot)
            ynp1 = (y / h + np.tensordot(self.B, k, axes=1)) * h
            yerr = np.tensordot(berr, k[err_mask], axes=1) * h

            ymax = np.fmax(np.abs(y), np.abs(ynp1)) * settings.relerror + settings.abserror
            enorm = scaled_norm(yerr / ymax)
            nevals += nstages

            if not math.isfinite(enorm):
                raise StepErrorNotFinite()

            q11 = enorm**beta1
            q = q11 / qold**beta2
            q = float(
                np.fmax(
                    1.0 / settings.maxfac,
                    np.fmin(1.0 / settings.minfac, q / settings.gamma),
                )
            )

            if enorm < 1.0 or abs(h) <= settings.dtmin:
                if dense is not None:
                    dense.x.append(x)
                    dense.h.append(h)
                    dense.yprime.append(k)
                    dense.y.append(y.copy())
                qold = max(enorm, 1.0e-4)
                x += h
                y = ynp1
                h = h / q
                naccept += 1
                if reached(x):
                    break
            else:
                nreject += 1
                h = h / float(np.fmin(1.0 / settings.minfac, q11 / settings.gamma))

        return ODESolution(
            nevals=nevals,
            naccept=naccept,
            nreject=nreject,
            x=x,
            y=y,
            dense=dense,
        )