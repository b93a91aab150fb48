"""Runge-Kutta integrators, low-precision ephemerides and orbit propagation settings."""

__version__ = "0.1.0"

__all__ = ["lpephem", "ode", "orbitprop"]