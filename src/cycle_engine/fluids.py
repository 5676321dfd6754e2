"""
Fluids Module
Registry of working-fluid constants used by the cycle generators.

Units
-----
R, cp, cv : kJ/(kg·K)
gamma     : dimensionless, cp/cv

The constants are single-value (calorically perfect) approximations taken at
room temperature.  ``gamma ≈ cp/cv`` and ``cp − cv ≈ R`` hold to the printed
precision but are not enforced.
"""

from dataclasses import dataclass
from typing import Dict


class UnknownFluidError(ValueError):
    """Raised when a fluid key is not present in the registry."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(
            f"Unknown fluid '{key}'. Available fluids: {', '.join(sorted(FLUIDS))}"
        )


# ── Data classes ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class FluidProperties:
    """Immutable constants for one working fluid.

    Attributes
    ----------
    name  : display name
    R     : specific gas constant  [kJ/(kg·K)]
    gamma : ratio of specific heats  [-]
    cp    : specific heat at constant pressure  [kJ/(kg·K)]
    cv    : specific heat at constant volume    [kJ/(kg·K)]
    """

    name: str
    R: float
    gamma: float
    cp: float
    cv: float


@dataclass(frozen=True)
class CriticalPoint:
    """Critical constants used by the real-gas compressibility correction.

    temperature     : K
    pressure        : kPa
    acentric_factor : Pitzer ω  [-]
    """

    temperature: float
    pressure: float
    acentric_factor: float = 0.0


# ── Registry ─────────────────────────────────────────────────────────────────

FLUIDS: Dict[str, FluidProperties] = {
    "air": FluidProperties(name="Air", R=0.287, gamma=1.4, cp=1.005, cv=0.718),
    "nitrogen": FluidProperties(
        name="Nitrogen", R=0.2968, gamma=1.4, cp=1.039, cv=0.743
    ),
    "helium": FluidProperties(name="Helium", R=2.077, gamma=1.667, cp=5.193, cv=3.116),
    "argon": FluidProperties(
        name="Argon", R=0.2081, gamma=1.667, cp=0.5203, cv=0.3122
    ),
    "water": FluidProperties(name="Water", R=0.4615, gamma=1.33, cp=1.872, cv=1.41),
    "r134a": FluidProperties(name="R134a", R=0.08149, gamma=1.12, cp=0.852, cv=0.771),
}

CRITICAL_POINTS: Dict[str, CriticalPoint] = {
    "air": CriticalPoint(temperature=132.5, pressure=3770.0, acentric_factor=0.035),
    "nitrogen": CriticalPoint(temperature=126.2, pressure=3390.0, acentric_factor=0.037),
    "helium": CriticalPoint(temperature=5.19, pressure=227.0, acentric_factor=-0.390),
    "argon": CriticalPoint(temperature=150.7, pressure=4863.0, acentric_factor=0.0),
    "water": CriticalPoint(temperature=647.1, pressure=22064.0, acentric_factor=0.344),
    "r134a": CriticalPoint(temperature=374.2, pressure=4059.0, acentric_factor=0.327),
}

DEFAULT_FLUID = "air"


def _normalise(key: str) -> str:
    return key.strip().lower().replace("-", "").replace(" ", "")


def get_fluid(key: str) -> FluidProperties:
    """Look up a fluid by registry key or display name (case-insensitive).

    Raises
    ------
    UnknownFluidError
        If no registered fluid matches ``key``.
    """
    wanted = _normalise(key)
    for registry_key, fluid in FLUIDS.items():
        if wanted in (registry_key, _normalise(fluid.name)):
            return fluid
    raise UnknownFluidError(key)


def fluid_key(fluid: FluidProperties) -> str:
    """Registry key of ``fluid``, or its normalised name if unregistered."""
    for registry_key, registered in FLUIDS.items():
        if registered == fluid:
            return registry_key
    return _normalise(fluid.name)


def critical_point(fluid: FluidProperties) -> CriticalPoint:
    """Critical constants for ``fluid``.

    Names are matched loosely so that variants such as ``"Real Air"`` resolve
    to their base fluid.  Unregistered fluids fall back to air.
    """
    name = _normalise(fluid.name)
    for registry_key, point in CRITICAL_POINTS.items():
        if registry_key in name:
            return point
    return CRITICAL_POINTS[DEFAULT_FLUID]
