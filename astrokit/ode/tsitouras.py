"""Tsitouras order 5(4) Runge-Kutta pair with continuous extension.

The sign of the last error weight is negative (-1/66), which differs from
the published paper. The error weights are stored directly rather than as
a second set of solution weights.
"""

from __future__ import annotations

from astrokit.ode.adaptive import RKAdaptive

_A32 = 0.3354806554923570
_A42 = -6.359448489975075
_A52 = -11.74888356406283
_A43 = 4.362295432869581
_A53 = 7.495539342889836
_A54 = -0.09249506636175525
_A62 = -12.92096931784711
_A63 = 8.159367898576159
_A64 = -0.07158497328140100
_A65 = -0.02826905039406838

_BI11 = -1.0530884977290216
_BI12 = -1.3299890189751412
_BI13 = -1.4364028541716351
_BI14 = 0.7139816917074209

_BI21 = 0.1017
_BI22 = -2.1966568338249754
_BI23 = 1.2949852507374631

_BI31 = 2.490627285651252793
_BI32 = -2.38535645472061657
_BI33 = 1.57803468208092486

_BI41 = -16.54810288924490272
_BI42 = -1.21712927295533244
_BI43 = -0.61620406037800089

_BI51 = 47.37952196281928122
_BI52 = -1.203071208372362603
_BI53 = -0.658047292653547382

_BI61 = -34.87065786149660974
_BI62 = -1.2
_BI63 = -2.0 / 3.0

_BI71 = 2.5
_BI72 = -1.0
_BI73 = -0.6

_C = [0.0, 0.161, 0.327, 0.9, 0.9800255409045097, 1.0, 1.0]

_B = [
    0.09646076681806523,
    0.01,
    0.4798896504144996,
    1.379008574103742,
    -3.290069515436081,
    2.324710524099774,
    0.0,
]


class RKTS54(RKAdaptive):
    """Tsitouras 5(4) adaptive integrator with dense output."""

    C = _C
    B = _B
    BERR = [
        0.001780011052226,
        0.000816434459657,
        -0.007880878010262,
        0.144711007173263,
        -0.582357165452555,
        0.458082105929187,
        -1.0 / 66.0,
    ]
    A = [
        [0.0] * 7,
        [_C[1], 0.0, 0.0, 0.0, 0.0, 0.0, 0.0],
        [_C[2] - _A32, _A32, 0.0, 0.0, 0.0, 0.0, 0.0],
        [_C[3] - _A42 - _A43, _A42, _A43, 0.0, 0.0, 0.0, 0.0],
        [_C[4] - _A52 - _A53 - _A54, _A52, _A53, _A54, 0.0, 0.0, 0.0],
        [_C[5] - _A62 - _A63 - _A64 - _A65, _A62, _A63, _A64, _A65, 0.0, 0.0],
        list(_B),
    ]
    ORDER = 5
    FSAL = False
    # Polynomial coefficients from expanding the factored continuous extension.
    BI = [
        [
            _BI11 * _BI12 * _BI14,
            _BI11 * (_BI14 + _BI12 * _BI13),
            _BI11 * (_BI13 + _BI12),
            _BI11,
        ],
        [0.0, _BI21 * _BI23, _BI21 * _BI22, _BI21],
        [0.0, _BI31 * _BI33, _BI31 * _BI32, _BI31],
        [0.0, _BI41 * _BI42 * _BI43, _BI41 * (_BI42 + _BI43), _BI41],
        [0.0, _BI51 * _BI52 * _BI53, _BI51 * (_BI52 + _BI53), _BI51],
        [0.0, _BI61 * _BI62 * _BI63, _BI61 * (_BI62 + _BI63), _BI61],
        [0.0, _BI71 * _BI72 * _BI73, _BI71 * (_BI72 + _BI73), _BI71],
    ]