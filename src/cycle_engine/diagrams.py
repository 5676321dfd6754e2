"""
Diagrams Module
Expands a cycle's four states into dense, render-ready polylines.

For each leg state[i] → state[(i+1) mod 4] the sampler emits the exact start
state (labelled with its name) followed by SEGMENTS − 1 interior points at
t = j/SEGMENTS.  After the last leg the first state is emitted again to close
the loop, giving 4·SEGMENTS + 1 points.

Interpolation
-------------
P–V, isentropic legs of Otto and Diesel cycles (legs 0 and 2):
    pressure is stepped linearly in t and the volume follows P·V^γ = const,
    with γ = ln(P_end/P_start) / ln(V_start/V_end) recovered from the leg's
    endpoints.  This draws the curved isentrope instead of a chord.
Everything else (isochoric/isobaric P–V legs, all T–s and P–h legs):
    straight linear interpolation.

The functions are pure; memoized wrappers live in ``cache``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from .cycles import CycleType, ThermodynamicCycle
from .thermodynamics import ThermodynamicState

SEGMENTS: int = 20

_CURVED_PV_CYCLES = (CycleType.OTTO, CycleType.DIESEL)
_ISENTROPIC_LEGS = (0, 2)


class DiagramKind(Enum):
    """Axis pair of a property diagram (x–y)."""

    PV = "pv"  # volume – pressure
    TS = "ts"  # entropy – temperature
    PH = "ph"  # enthalpy – pressure


@dataclass(frozen=True)
class ChartPoint:
    """One vertex of a diagram polyline; ``state`` labels exact state points."""

    x: float
    y: float
    state: Optional[str] = None


def _interior_t() -> np.ndarray:
    return np.arange(1, SEGMENTS) / SEGMENTS


def _linear(x0: float, y0: float, x1: float, y1: float) -> List[ChartPoint]:
    t = _interior_t()
    xs = x0 + t * (x1 - x0)
    ys = y0 + t * (y1 - y0)
    return [ChartPoint(float(x), float(y)) for x, y in zip(xs, ys)]


@np.errstate(all="ignore")
def _isentrope(start: ThermodynamicState, end: ThermodynamicState) -> List[ChartPoint]:
    gamma = np.log(end.pressure / start.pressure) / np.log(start.volume / end.volume)
    pressures = start.pressure + _interior_t() * (end.pressure - start.pressure)
    volumes = start.volume * (start.pressure / pressures) ** (1.0 / gamma)
    return [ChartPoint(float(v), float(p)) for v, p in zip(volumes, pressures)]


def _sample(
    cycle: ThermodynamicCycle,
    coordinates: Callable[[ThermodynamicState], Tuple[float, float]],
    curved_legs: Tuple[int, ...] = (),
) -> Tuple[ChartPoint, ...]:
    states = cycle.states
    if not states:
        return ()

    points: List[ChartPoint] = []
    for i, current in enumerate(states):
        following = states[(i + 1) % len(states)]
        x0, y0 = coordinates(current)
        points.append(ChartPoint(x0, y0, current.name))

        if i in curved_legs:
            points.extend(_isentrope(current, following))
        else:
            x1, y1 = coordinates(following)
            points.extend(_linear(x0, y0, x1, y1))

    first = states[0]
    x0, y0 = coordinates(first)
    points.append(ChartPoint(x0, y0, first.name))
    return tuple(points)


def pv_points(cycle: ThermodynamicCycle) -> Tuple[ChartPoint, ...]:
    """Pressure–volume polyline (x = v [m³/kg], y = P [kPa])."""
    curved = _ISENTROPIC_LEGS if cycle.type in _CURVED_PV_CYCLES else ()
    return _sample(cycle, lambda s: (s.volume, s.pressure), curved)


def ts_points(cycle: ThermodynamicCycle) -> Tuple[ChartPoint, ...]:
    """Temperature–entropy polyline (x = s [kJ/(kg·K)], y = T [K])."""
    return _sample(cycle, lambda s: (s.entropy, s.temperature))


def ph_points(cycle: ThermodynamicCycle) -> Tuple[ChartPoint, ...]:
    """Pressure–enthalpy polyline (x = h [kJ/kg], y = P [kPa])."""
    return _sample(cycle, lambda s: (s.enthalpy, s.pressure))


SAMPLERS: Dict[DiagramKind, Callable[[ThermodynamicCycle], Tuple[ChartPoint, ...]]] = {
    DiagramKind.PV: pv_points,
    DiagramKind.TS: ts_points,
    DiagramKind.PH: ph_points,
}


def sample_points(cycle: ThermodynamicCycle, kind: DiagramKind) -> Tuple[ChartPoint, ...]:
    """Polyline for ``kind``; see the module docstring for the sampling rules."""
    try:
        sampler = SAMPLERS[kind]
    except KeyError:
        raise ValueError(f"Unsupported diagram kind: {kind!r}") from None
    return sampler(cycle)
