"""Verner order 6(5) "efficient" Runge-Kutta pair with interpolant."""

from __future__ import annotations

import numpy as np

from astrokit.ode.adaptive import RKAdaptive


def _lower_triangular(rows, n: int) -> np.ndarray:
    """Square matrix whose rows start with the given values, zero-padded."""
    out = np.zeros((n, n))
    for i, row in enumerate(rows):
        out[i, : len(row)] = row
    return out


_N = 10

_BI = [
    [
        1.0,
        -5.308169607103577,
        10.18168044895868,
        -7.520036991611715,
        0.9340485368631161,
        0.746867191577065,
    ],
    [0.0, 0.0, 0.0, 0.0, 0.0, 0.0],
    [0.0, 0.0, 0.0, 0.0, 0.0, 0.0],
    [
        0.0,
        6.272050253212501,
        -16.02618147467746,
        12.844356324519618,
        -1.1487945044767591,
        -1.6831681430145498,
    ],
    [
        0.0,
        6.876491702846304,
        -24.635767260846333,
        33.21078648379717,
        -17.49461528263644,
        2.4640414758066496,
    ],
    [
        0.0,
        -35.5444517105996,
        165.7016170190242,
        -385.4635395491143,
        442.43241370157017,
        -182.7206429912112,
    ],
    [
        0.0,
        1918.6548566980114,
        -9268.121508966042,
        20858.33702877255,
        -22645.82767158481,
        8960.474176055992,
    ],
    [
        0.0,
        -1883.0698021327182,
        9101.025187200634,
        -20473.188551959534,
        22209.765551256532,
        -8782.1682509635,
    ],
    [
        0.0,
        0.11902479635123643,
        -0.12502696705039376,
        1.7799569193949991,
        -4.660932123043763,
        2.886977374347921,
    ],
    [0.0, -8.0, 32.0, -40.0, 16.0, 0.0],
]

_C = [
    0.0,
    0.06,
    0.09593333333333333,
    0.1439,
    0.4973,
    0.9725,
    0.9995,
    1.0,
    1.0,
    0.5,
]

_B = [
    0.03438957868357036,
    0.0,
    0.0,
    0.2582624555633503,
    0.4209371189673537,
    4.40539646966931,
    -176.48311902429865,
    172.36413340141507,
    0.0,
    0.0,
]

_BHAT = [
    0.0490996764838249,
    0.0,
    0.0,
    0.22511122295165242,
    0.4694682253029562,
    0.8065792249988868,
    0.0,
    -0.607119489177796,
    0.056861139440475696,
    0.0,
]

_A = _lower_triangular(
    [
        [],
        [0.06],
        [0.019239962962962962, 0.07669337037037037],
        [0.035975, 0.0, 0.107925],
        [1.3186834152331484, 0.0, -5.042058063628562, 4.220674648395414],
        [
            -41.872591664327516,
            0.0,
            159.4325621631375,
            -122.11921356501003,
            5.531743066200054,
        ],
        [
            -54.430156935316504,
            0.0,
            207.06725136501848,
            -158.61081378459,
            6.991816585950242,
            -0.018597231062203234,
        ],
        [
            -54.66374178728198,
            0.0,
            207.95280625538936,
            -159.2889574744995,
            7.018743740796944,
            -0.018338785905045722,
            -0.0005119484997882099,
        ],
        _B[:8],
        [
            0.016524159013572806,
            0.0,
            0.0,
            0.3053128187514179,
            0.2071200938201979,
            -1.293879140655123,
            57.11988411588149,
            -55.87979207510932,
            0.024830028297766014,
        ],
    ],
    _N,
)


class RKV65(RKAdaptive):
    """Verner 6(5) adaptive integrator with dense output."""

    ORDER = 6
    FSAL = False
    B = _B
    C = _C
    A = _A
    BI = _BI
    BERR = np.asarray(_B) - np.asarray(_BHAT)