# astrokit

Numerical tools for astrodynamics, built on NumPy:

- **Adaptive Runge-Kutta integrators** (orders 5 to 9) with error control,
  a proportional-integral step-size controller and optional dense output
  for interpolating the solution inside the integrated span.
- **Fixed-step explicit Runge-Kutta** integration (classic RK4 and midpoint).
- **Low-precision ephemerides** for the Sun, the Moon and the planets,
  an Earth-shadow function and sunrise/sunset times.
- **Orbit propagation settings** (`PropSettings`).

## Installation

```
pip install astrokit
```

To run the test suite:

```
pip install "astrokit[test]"
pytest
```

## Integrating an ODE

The state is a NumPy array. The right-hand side is a callable taking the
independent variable `x` and the state `y` and returning `dy/dx`.

```python
import math
import numpy as np

from astrokit.ode.core import RKAdaptiveSettings
from astrokit.ode.verner98 import RKV98


def oscillator(x, y):
    return np.array([y[1], -y[0]])


settings = RKAdaptiveSettings(abserror=1e-14, relerror=1e-14, dense_output=True)

solver = RKV98()
sol = solver.integrate(0.0, math.pi, np.array([1.0, 0.0]), oscillator, settings)

print(sol.x, sol.y)                       # final point and state
print(sol.naccept, sol.nreject, sol.nevals)

# Dense output allows interpolation inside [0, pi]
print(solver.interpolate(1.0, sol))       # close to [cos(1), -sin(1)]
```

`settings` may be omitted, in which case the defaults are used. Integration
runs backward when `xend < xstart`, and interpolation works in either
direction.

Adaptive integrators:

| Module                           | Class           | Order | Dense output |
| -------------------------------- | --------------- | ----- | ------------ |
| `astrokit.ode.tsitouras`         | `RKTS54`        | 5(4)  | yes          |
| `astrokit.ode.verner65`          | `RKV65`         | 6(5)  | yes          |
| `astrokit.ode.verner87`          | `RKV87`         | 8(7)  | yes          |
| `astrokit.ode.verner98`          | `RKV98`         | 9(8)  | yes          |
| `astrokit.ode.verner98_nointerp` | `RKV98NoInterp` | 9(8)  | no           |

All of them derive from `astrokit.ode.adaptive.RKAdaptive`, which takes its
Butcher tableau from the class attributes `A`, `C`, `B`, `BERR`, `BI` and
`ORDER`; a new pair is added by subclassing it.

`RKAdaptiveSettings` defaults: `abserror=1e-8`, `relerror=1e-8`,
`minfac=0.2`, `maxfac=10.0`, `safetyfac=0.9`, `gamma=0.9`, `dtmin=1e-6`,
`dense_output=False`.

The result is an `ODESolution` with `nevals`, `naccept`, `nreject`, the
final `x` and `y`, and `dense` (a `DenseOutput`, or `None` when dense
output was not requested).

Errors are subclasses of `astrokit.ode.core.ODEError`:

- `StepErrorNotFinite` — the estimated step error is NaN or infinite;
- `NoDenseOutputError` — interpolating a solution computed without dense output;
- `InterpExceedsSolutionBounds` — the point lies outside the solution
  (with `interp`, `start` and `stop` attributes);
- `InterpNotImplementedError` — `RKV98NoInterp.interpolate` always raises it.

`astrokit.ode.core.scaled_norm(v)` is the error norm used by the
controller: the Euclidean norm divided by the square root of the number of
elements.

### Fixed step

```python
from astrokit.ode.explicit import RK4

states = RK4.integrate(0.0, 2 * math.pi, 1e-3, np.array([1.0, 0.0]), oscillator)
print(states[-1])
```

`ExplicitRK(a, b, c)` builds a method from any explicit tableau;
`step(x0, y0, h, ydot)` takes one step, and `integrate(x0, xend, dx, y0, ydot)`
returns the list of states after each step. `RK4` and `MIDPOINT` are
ready-made instances.

## Sun, Moon and planets

Times are Julian dates as floats (TDB for the Sun and Moon, TT for planets).

```python
from datetime import date

from astrokit.lpephem import moon, planets, sun

jd = 2451545.0

sun.pos_mod(jd)          # Sun, mean-of-date frame, meters
moon.pos_gcrf(jd)        # Moon, GCRF frame, meters
planets.heliocentric_pos(planets.Planet.MARS, jd)   # meters

sunrise, sunset = sun.riseset(date(1996, 3, 23), 40.0, 0.0)
```

- `sun.shadowfunc(psun, psat)` returns the fraction of sunlight reaching a
  satellite: 0 in full shadow, 1 in full sunlight. Both positions are
  geocentric, in meters, in the same frame.
- `sun.riseset(date, latitude_deg, longitude_deg, sigma=None)` returns
  sunrise and sunset as timezone-aware UTC datetimes. `sigma` is the angle
  between noon and rise/set in degrees; the default is 90° 50′
  (`sun.STANDARD_SIGMA`), and 96, 102 and 108 give civil, nautical and
  astronomical twilight. It raises `ValueError` when the Sun does not rise
  or set that day.
- `planets.heliocentric_pos(body, jd_tt)` accepts a `Planet` member or its
  value (`"mercury"`, `"venus"`, `"emb"`, `"mars"`, `"jupiter"`, `"saturn"`,
  `"uranus"`, `"neptune"`). Precise elements are used between 1800 and 2050,
  long-range elements from 3000 BC to 3000 AD; other times, or unknown
  bodies, raise `ValueError`.

Constants: `sun.AU`, `sun.SUN_RADIUS` and `moon.EARTH_RADIUS`, in meters.

## Propagation settings

```python
from astrokit.orbitprop.settings import PropSettings

settings = PropSettings(gravity_order=8)
print(settings)
```

Fields and defaults: `gravity_order=4`, `gravity_interp_dt_secs=60.0`,
`abs_error=1e-8`, `rel_error=1e-8`, `use_spaceweather=True`,
`use_jplephem=True`.

## What the package does not do

There is no orbit propagator: no Earth gravity model, third-body or drag
force model, atmosphere density or radiation pressure, and no routine that
uses `PropSettings`. There are no high-precision (JPL) ephemerides, no
Earth-orientation or reference-frame transformations beyond what each
ephemeris function states, and no time-scale conversions — callers supply
Julian dates in the stated scale. There is no command-line tool.