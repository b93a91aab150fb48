"""Shared types, errors and settings for the Runge-Kutta integrators."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Optional

import numpy as np

Derivative = Callable[[float, np.ndarray], np.ndarray]


class ODEError(Exception):
    """Base class for errors raised while integrating or interpolating."""


class StepErrorNotFinite(ODEError):
    """The estimated error of a step is NaN or infinite."""

    def __init__(self) -> None:
        super().__init__("Step error not finite")


class NoDenseOutputError(ODEError):
    """Interpolation was requested from a solution without dense output."""

    def __init__(self) -> None:
        super().__init__("No Dense Output in Solution")


class InterpExceedsSolutionBounds(ODEError):
    """The interpolation point lies outside the integrated interval."""

    def __init__(self, interp: float, start: float, stop: float) -> None:
        self.interp = interp
        self.start = start
        self.stop = stop
        super().__init__(
            f"Interpolation exceeds solution bounds: {interp} not in [{start}, {stop}]"
        )


class InterpNotImplementedError(ODEError):
    """The integrator has no interpolation coefficients."""

    def __init__(self) -> None:
        super().__init__("Interpolation not implemented for this integrator")


@dataclass
class DenseOutput:
    """Accepted steps recorded for later interpolation."""

    x: list[float] = field(default_factory=list)
    h: list[float] = field(default_factory=list)
    yprime: list[np.ndarray] = field(default_factory=list)
    y: list[np.ndarray] = field(default_factory=list)


@dataclass
class ODESolution:
    """Result of an adaptive integration."""

    nevals: int
    naccept: int
    nreject: int
    x: float
    y: np.ndarray
    dense: Optional[DenseOutput] = None


@dataclass
class RKAdaptiveSettings:
    """Tolerances and step-size controller parameters."""

    abserror: float = 1.0e-8
    relerror: float = 1.0e-8
    minfac: float = 0.2
    maxfac: float = 10.0
    safetyfac: float = 0.9
    gamma: float = 0.9
    dtmin: float = 1.0e-6
    dense_output: bool = False


def scaled_norm(v) -> float:
    """Euclidean norm of all elements divided by the square root of their count."""
    arr = np.asarray(v, dtype=float)
    return float(np.linalg.norm(arr) / math.sqrt(arr.size))


def _stage_derivatives(
    a: np.ndarray,
    c: np.ndarray,
    x: float,
    y: np.ndarray,
    h: float,
    ydot: Derivative,
) -> np.ndarray:
    """Evaluate the stage derivatives of one Runge-Kutta step."""
    nstages = len(c)
    k = np.empty((nstages,) + y.shape, dtype=float)
    k[0] = ydot(x, y)
    for stage in range(1, nstages):
        ystage = y + np.tensordot(a[stage, :stage], k[:stage], axes=1) * h
        k[stage] = ydot(x + h * c[stage], ystage)
    return k