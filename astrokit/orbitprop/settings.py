"""Orbit propagation settings."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal


def _lower_exp(value: float) -> str:
    """Shortest scientific notation, e.g. ``1e-8`` or ``1.5e-9``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-inf" if value < 0 else "inf"
    if value == 0.0:
        return "-0e0" if math.copysign(1.0, value) < 0 else "0e0"
    sign, digits, exponent = Decimal(repr(float(value))).as_tuple()
    adjusted = exponent + len(digits) - 1
    text = "".join(str(d) for d in digits).rstrip("0") or "0"
    mantissa = text[0] + ("." + text[1:] if len(text) > 1 else "")
    return f"{'-' if sign else ''}{mantissa}e{adjusted}"


@dataclass
class PropSettings:
    """Settings for the high-precision orbit propagator.

    ``gravity_interp_dt_secs`` is the interval of the table used to
    interpolate the rotation to the Earth-fixed frame; the error bounds
    apply to the adaptive Runge-Kutta integrator.
    """

    gravity_order: int = 4
    gravity_interp_dt_secs: float = 60.0
    abs_error: float = 1e-8
    rel_error: float = 1e-8
    use_spaceweather: bool = True
    use_jplephem: bool = True

    def __str__(self) -> str:
        indent = " " * 12
        return (
            "Orbit Propagation Settings\n"
            f"{indent}Gravity Order: {self.gravity_order},\n"
            f"{indent}Max Abs Error: {_lower_exp(self.abs_error)},\n"
            f"{indent}Max Rel Error: {_lower_exp(self.rel_error)},\n"
            f"{indent}Space Weather: {str(bool(self.use_spaceweather)).lower()},\n"
            f"{indent}JPL Ephemeris: {str(bool(self.use_jplephem)).lower()}"
        )