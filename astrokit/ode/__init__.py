"""Explicit and adaptive Runge-Kutta integrators for ordinary differential equations."""

__all__ = [
    "adaptive",
    "core",
    "explicit",
    "tsitouras",
    "verner65",
    "verner87",
    "verner98",
    "verner98_nointerp",
]