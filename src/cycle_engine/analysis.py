"""
Analysis Module
Second-law and free-energy quantities derived from computed states and cycles.

All functions are stateless and operate on values already produced by the
state calculator or a cycle generator.
"""

from typing import Optional, Sequence

import numpy as np
from scipy.integrate import trapezoid

from .cycles import ThermodynamicCycle
from .diagrams import ChartPoint
from .fluids import FluidProperties
from .thermodynamics import T_REF, ThermodynamicState, ideal_gas_state

DEFAULT_AMBIENT_TEMPERATURE: float = T_REF  # K


def entropy_generation(
    states: Sequence[ThermodynamicState],
    heat_transfers: Sequence[float],
    ambient_temperature: float,
) -> float:
    """Total entropy generated along a chain of states  [kJ/(kg·K)].

    For each consecutive pair the generation is ΔS − Q/T0; only the positive
    part is accumulated (second law).  Missing heat entries count as zero.

    Parameters
    ----------
    states              : ordered states; the chain is *not* closed
    heat_transfers      : heat added on leg i (states[i] → states[i+1])  [kJ/kg]
    ambient_temperature : T0  [K]
    """
    total = 0.0
    for i in range(len(states) - 1):
        delta_s = states[i + 1].entropy - states[i].entropy
        heat = heat_transfers[i] if i < len(heat_transfers) else 0.0
        total += max(0.0, delta_s - heat / ambient_temperature)
    return total


def cycle_entropy_generation(
    cycle: ThermodynamicCycle,
    ambient_temperature: float = DEFAULT_AMBIENT_TEMPERATURE,
) -> float:
    """Entropy generation over the closed loop, using each process's heat."""
    states = list(cycle.states) + [cycle.states[0]]
    heats = [process.heat for process in cycle.processes]
    return entropy_generation(states, heats, ambient_temperature)


def exergy(
    state: ThermodynamicState,
    environment_temperature: float,
    environment_pressure: float,
    fluid: Optional[FluidProperties] = None,
) -> float:
    """Physical flow exergy  ψ = (h − h0) − T0·(s − s0)  [kJ/kg], floored at 0.

    The dead state (T0, P0) is evaluated with the ideal-gas model.  When
    ``fluid`` is omitted its constants are inferred from the state itself:
    R = P·v/T, cp = h/T, cv = u/T.
    """
    if fluid is None:
        T = state.temperature
        fluid = FluidProperties(
            name="inferred",
            R=state.pressure * state.volume / T,
            gamma=1.4,
            cp=state.enthalpy / T,
            cv=state.internal_energy / T,
        )
    dead_state = ideal_gas_state(environment_temperature, environment_pressure, fluid)

    physical = (state.enthalpy - dead_state.enthalpy) - environment_temperature * (
        state.entropy - dead_state.entropy
    )
    return max(0.0, physical)


def gibbs_free_energy(state: ThermodynamicState) -> float:
    """G = H − T·S  [kJ/kg]."""
    return state.enthalpy - state.temperature * state.entropy


def helmholtz_free_energy(state: ThermodynamicState) -> float:
    """A = U − T·S  [kJ/kg]."""
    return state.internal_energy - state.temperature * state.entropy


def quality(
    state: ThermodynamicState,
    saturated_liquid: ThermodynamicState,
    saturated_vapor: ThermodynamicState,
) -> float:
    """Vapour quality from enthalpy interpolation, clamped to [0, 1]."""
    if state.enthalpy <= saturated_liquid.enthalpy:
        return 0.0
    if state.enthalpy >= saturated_vapor.enthalpy:
        return 1.0
    return (state.enthalpy - saturated_liquid.enthalpy) / (
        saturated_vapor.enthalpy - saturated_liquid.enthalpy
    )


def process_work(cycle: ThermodynamicCycle) -> float:
    """Sum of the work carried by the cycle's processes  [kJ/kg]."""
    return float(sum(process.work for process in cycle.processes))


def indicated_work(points: Sequence[ChartPoint]) -> float:
    """Net work  ∮ P dV  of a sampled P–V polyline  [kJ/kg].

    Trapezoidal rule over the ordered trace (x = volume, y = pressure).
    Positive for a clockwise power cycle.

    Raises
    ------
    ValueError
        If fewer than two points are supplied.
    """
    if len(points) < 2:
        raise ValueError("At least 2 points are needed for integration")
    volume = np.array([p.x for p in points], dtype=float)
    pressure = np.array([p.y for p in points], dtype=float)
    return float(trapezoid(pressure, volume))
