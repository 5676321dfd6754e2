"""
Cycles Module
Closed-form generators for ideal power and refrigeration cycles.

Every generator is a pure function that returns a brand-new, immutable
``ThermodynamicCycle`` of four states.  Air-standard relations used throughout:

    Isentropic (volume ratio r)     T_out/T_in = r^(γ−1),      P_out/P_in = r^γ
    Isentropic (pressure ratio rp)  T_out/T_in = rp^((γ−1)/γ)
    Constant volume                 q = cv·ΔT,   Δs = cv·ln(T_out/T_in)
    Constant pressure               q = cp·ΔT,   Δs = cp·ln(T_out/T_in)

Entropy on an isentropic leg is copied forward from the predecessor state
rather than recomputed, so the two values are identical floats.

Net work is always heat_in − heat_out.  The work carried by each process is
computed independently (piston legs: −Δu or P·ΔV; flow legs: −Δh; isothermal
legs: T·Δs) and sums to net work within floating tolerance.

Inputs are not validated.  Out-of-domain values (ratios ≤ 1, negative
temperatures) propagate as NaN, inf or negative results; numpy floating-point
warnings are silenced inside the generators.
"""

import logging
import uuid
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Tuple

import numpy as np

from .fluids import FLUIDS, FluidProperties
from .thermodynamics import (
    StateModel,
    ThermodynamicState,
    compute_state,
    saturated_liquid_enthalpy,
    saturated_liquid_entropy,
    saturated_vapor_enthalpy,
    saturated_vapor_entropy,
    saturation_pressure,
    saturation_temperature,
    steam_state,
)

logger = logging.getLogger(__name__)


# ── Enumerations ─────────────────────────────────────────────────────────────


class CycleType(Enum):
    """Supported cycle families."""

    OTTO = "otto"
    DIESEL = "diesel"
    BRAYTON = "brayton"
    CARNOT = "carnot"
    RANKINE = "rankine"
    REFRIGERATION = "refrigeration"


class ProcessType(Enum):
    """Idealised process connecting two consecutive states."""

    ISOTHERMAL = "isothermal"
    ISOBARIC = "isobaric"
    ISOCHORIC = "isochoric"
    ISENTROPIC = "isentropic"
    ISENTHALPIC = "isenthalpic"
    ADIABATIC = "adiabatic"  # irreversible, entropy not conserved
    POLYTROPIC = "polytropic"


# ── Data classes ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ThermodynamicProcess:
    """One leg of a cycle.

    work and heat are per unit mass [kJ/kg], positive when delivered by the
    working fluid (work) or added to it (heat).
    """

    name: str
    process_type: ProcessType
    start_state: ThermodynamicState
    end_state: ThermodynamicState
    work: float
    heat: float
    entropy_change: float


@dataclass(frozen=True)
class ThermodynamicCycle:
    """Immutable result of one generator call.

    ``states`` is cyclic: the leg after the last state returns to the first.
    ``efficiency`` is in percent, except for refrigeration where it holds the
    coefficient of performance.  ``id`` is unique per call and excluded from
    equality.
    """

    name: str
    type: CycleType
    states: Tuple[ThermodynamicState, ...]
    processes: Tuple[ThermodynamicProcess, ...]
    efficiency: float
    net_work: float
    heat_in: float
    heat_out: float
    id: str = field(default_factory=lambda: str(uuid.uuid4()), compare=False)


# ── Efficiency formulas ──────────────────────────────────────────────────────


def otto_efficiency(compression_ratio: float, gamma: float) -> float:
    """η = 1 − r^(1−γ)  [%]."""
    return float((1.0 - np.float64(compression_ratio) ** (1.0 - gamma)) * 100.0)


def diesel_efficiency(compression_ratio: float, cutoff_ratio: float, gamma: float) -> float:
    """η = 1 − (1/r^(γ−1))·(ρ^γ − 1)/(γ(ρ − 1))  [%]."""
    r = np.float64(compression_ratio)
    rho = np.float64(cutoff_ratio)
    return float(
        (1.0 - (1.0 / r ** (gamma - 1.0)) * (rho**gamma - 1.0) / (gamma * (rho - 1.0)))
        * 100.0
    )


def brayton_efficiency(pressure_ratio: float, gamma: float) -> float:
    """η = 1 − rp^(−(γ−1)/γ)  [%]."""
    return float(
        (1.0 - np.float64(pressure_ratio) ** (-(gamma - 1.0) / gamma)) * 100.0
    )


def carnot_efficiency(hot_temperature: float, cold_temperature: float) -> float:
    """η = 1 − TL/TH  [%]."""
    return float((1.0 - np.float64(cold_temperature) / hot_temperature) * 100.0)


def rankine_efficiency_estimate(
    turbine_inlet_temperature: float, condenser_temperature: float
) -> float:
    """Rough Rankine efficiency: 60 % of the Carnot value between the same temperatures."""
    return carnot_efficiency(turbine_inlet_temperature, condenser_temperature) * 0.6


def refrigeration_cop_estimate(
    evaporator_temperature: float, condenser_temperature: float
) -> float:
    """Rough vapour-compression COP: 70 % of the reversed-Carnot COP (temperatures in K)."""
    ideal = np.float64(evaporator_temperature) / (
        condenser_temperature - evaporator_temperature
    )
    return float(ideal * 0.7)


# ── Helpers ──────────────────────────────────────────────────────────────────


def _piston_state(
    index: int, T, P, v, s, fluid: FluidProperties, name: str = ""
) -> ThermodynamicState:
    """Ideal-gas state built inline from already-known T, P, v and s."""
    return ThermodynamicState(
        id=str(index),
        name=name or f"State {index}",
        temperature=float(T),
        pressure=float(P),
        volume=float(v),
        enthalpy=float(fluid.cp * T),
        entropy=float(s),
        internal_energy=float(fluid.cv * T),
    )


def _labelled(state: ThermodynamicState, index: int, name: str = "", **changes) -> ThermodynamicState:
    return replace(state, id=str(index), name=name or f"State {index}", **changes)


def _process(
    name: str,
    process_type: ProcessType,
    start: ThermodynamicState,
    end: ThermodynamicState,
    work,
    heat,
) -> ThermodynamicProcess:
    return ThermodynamicProcess(
        name=name,
        process_type=process_type,
        start_state=start,
        end_state=end,
        work=float(work),
        heat=float(heat),
        entropy_change=end.entropy - start.entropy,
    )


def _cycle(
    name: str,
    cycle_type: CycleType,
    states,
    processes,
    efficiency,
    heat_in,
    heat_out,
    net_work=None,
) -> ThermodynamicCycle:
    heat_in = float(heat_in)
    heat_out = float(heat_out)
    cycle = ThermodynamicCycle(
        name=name,
        type=cycle_type,
        states=tuple(states),
        processes=tuple(processes),
        efficiency=float(efficiency),
        net_work=heat_in - heat_out if net_work is None else float(net_work),
        heat_in=heat_in,
        heat_out=heat_out,
    )
    logger.debug(
        "Generated %s cycle: efficiency=%.4g net_work=%.4g kJ/kg",
        cycle_type.value,
        cycle.efficiency,
        cycle.net_work,
    )
    return cycle


# ── Gas power cycles ─────────────────────────────────────────────────────────


@np.errstate(all="ignore")
def generate_otto_cycle(
    T1: float,
    P1: float,
    compression_ratio: float,
    heat_addition: float,
    fluid: FluidProperties,
    model: StateModel = StateModel.IDEAL_GAS,
) -> ThermodynamicCycle:
    """Air-standard Otto cycle.

    1→2 isentropic compression, 2→3 constant-volume heat addition,
    3→4 isentropic expansion, 4→1 constant-volume heat rejection.

    Parameters
    ----------
    T1                : intake temperature  [K]
    P1                : intake pressure     [kPa]
    compression_ratio : V1/V2               [-]
    heat_addition     : heat added per unit mass at constant volume  [kJ/kg]
    fluid             : working fluid constants
    model             : property model for state 1 (its volume sets the
                        cycle geometry)
    """
    gamma = fluid.gamma
    r = np.float64(compression_ratio)

    state1 = compute_state(T1, P1, fluid, model, name="State 1", state_id="1")
    V1 = state1.volume

    V2 = V1 / r
    T2 = T1 * r ** (gamma - 1.0)
    P2 = P1 * r**gamma
    state2 = _piston_state(2, T2, P2, V2, state1.entropy, fluid)

    T3 = T2 + heat_addition / fluid.cv
    P3 = P2 * (T3 / T2)
    state3 = _piston_state(3, T3, P3, V2, state2.entropy + fluid.cv * np.log(T3 / T2), fluid)

    T4 = T3 / r ** (gamma - 1.0)
    P4 = P3 / r**gamma
    state4 = _piston_state(4, T4, P4, V1, state3.entropy, fluid)

    heat_in = fluid.cv * (T3 - T2)
    heat_out = fluid.cv * (T4 - T1)

    processes = [
        _process("Isentropic Compression", ProcessType.ISENTROPIC, state1, state2,
                 fluid.cv * (T1 - T2), 0.0),
        _process("Isochoric Heat Addition", ProcessType.ISOCHORIC, state2, state3,
                 0.0, heat_in),
        _process("Isentropic Expansion", ProcessType.ISENTROPIC, state3, state4,
                 fluid.cv * (T3 - T4), 0.0),
        _process("Isochoric Heat Rejection", ProcessType.ISOCHORIC, state4, state1,
                 0.0, -heat_out),
    ]

    return _cycle(
        "Otto Cycle",
        CycleType.OTTO,
        [state1, state2, state3, state4],
        processes,
        otto_efficiency(r, gamma),
        heat_in,
        heat_out,
    )


@np.errstate(all="ignore")
def generate_diesel_cycle(
    T1: float,
    P1: float,
    compression_ratio: float,
    cutoff_ratio: float,
    fluid: FluidProperties,
    model: StateModel = StateModel.IDEAL_GAS,
) -> ThermodynamicCycle:
    """Air-standard Diesel cycle.

    1→2 isentropic compression (r), 2→3 constant-pressure heat addition up to
    the cutoff ratio ρ = V3/V2, 3→4 isentropic expansion (r/ρ),
    4→1 constant-volume heat rejection.
    """
    gamma = fluid.gamma
    r = np.float64(compression_ratio)
    rho = np.float64(cutoff_ratio)

    state1 = compute_state(T1, P1, fluid, model, name="State 1", state_id="1")
    V1 = state1.volume

    V2 = V1 / r
    T2 = T1 * r ** (gamma - 1.0)
    P2 = P1 * r**gamma
    state2 = _piston_state(2, T2, P2, V2, state1.entropy, fluid)

    V3 = V2 * rho
    T3 = T2 * rho
    P3 = P2
    state3 = _piston_state(3, T3, P3, V3, state2.entropy + fluid.cp * np.log(rho), fluid)

    expansion_ratio = r / rho
    T4 = T3 / expansion_ratio ** (gamma - 1.0)
    P4 = P3 / expansion_ratio**gamma
    state4 = _piston_state(4, T4, P4, V1, state3.entropy, fluid)

    heat_in = fluid.cp * (T3 - T2)
    heat_out = fluid.cv * (T4 - T1)

    processes = [
        _process("Isentropic Compression", ProcessType.ISENTROPIC, state1, state2,
                 fluid.cv * (T1 - T2), 0.0),
        _process("Isobaric Heat Addition", ProcessType.ISOBARIC, state2, state3,
                 P2 * (V3 - V2), heat_in),
        _process("Isentropic Expansion", ProcessType.ISENTROPIC, state3, state4,
                 fluid.cv * (T3 - T4), 0.0),
        _process("Isochoric Heat Rejection", ProcessType.ISOCHORIC, state4, state1,
                 0.0, -heat_out),
    ]

    return _cycle(
        "Diesel Cycle",
        CycleType.DIESEL,
        [state1, state2, state3, state4],
        processes,
        diesel_efficiency(r, rho, gamma),
        heat_in,
        heat_out,
    )


@np.errstate(all="ignore")
def generate_brayton_cycle(
    T1: float,
    P1: float,
    pressure_ratio: float,
    T3: float,
    fluid: FluidProperties,
    model: StateModel = StateModel.IDEAL_GAS,
) -> ThermodynamicCycle:
    """Ideal Brayton (gas-turbine) cycle.

    1→2 isentropic compression (rp), 2→3 constant-pressure heat addition to
    the turbine inlet temperature T3, 3→4 isentropic expansion,
    4→1 constant-pressure heat rejection.  Process work is shaft work (−Δh).
    """
    gamma = fluid.gamma
    rp = np.float64(pressure_ratio)
    exponent = (gamma - 1.0) / gamma

    state1 = compute_state(T1, P1, fluid, model, name="State 1", state_id="1")

    P2 = P1 * rp
    T2 = T1 * rp**exponent
    state2 = _labelled(compute_state(T2, P2, fluid, model), 2, entropy=state1.entropy)

    P3 = P2
    state3 = _labelled(
        compute_state(T3, P3, fluid, model),
        3,
        entropy=float(state2.entropy + fluid.cp * np.log(T3 / T2)),
    )

    P4 = P1
    T4 = T3 / rp**exponent
    state4 = _labelled(compute_state(T4, P4, fluid, model), 4, entropy=state3.entropy)

    heat_in = fluid.cp * (T3 - T2)
    heat_out = fluid.cp * (T4 - T1)

    processes = [
        _process("Isentropic Compression", ProcessType.ISENTROPIC, state1, state2,
                 fluid.cp * (T1 - T2), 0.0),
        _process("Isobaric Heat Addition", ProcessType.ISOBARIC, state2, state3,
                 0.0, heat_in),
        _process("Isentropic Expansion", ProcessType.ISENTROPIC, state3, state4,
                 fluid.cp * (T3 - T4), 0.0),
        _process("Isobaric Heat Rejection", ProcessType.ISOBARIC, state4, state1,
                 0.0, -heat_out),
    ]

    return _cycle(
        "Brayton Cycle",
        CycleType.BRAYTON,
        [state1, state2, state3, state4],
        processes,
        brayton_efficiency(rp, gamma),
        heat_in,
        heat_out,
    )


@np.errstate(all="ignore")
def generate_carnot_cycle(
    TH: float,
    TL: float,
    P1: float,
    fluid: FluidProperties,
    model: StateModel = StateModel.IDEAL_GAS,
    isothermal_pressure_ratio: float = 2.0,
) -> ThermodynamicCycle:
    """Carnot cycle between the reservoir temperatures TL and TH.

    1→2 isentropic compression TL→TH, 2→3 isothermal expansion at TH,
    3→4 isentropic expansion TH→TL, 4→1 isothermal compression at TL.

    The isentropic pressures follow P_out/P_in = (T_out/T_in)^(γ/(γ−1)); the
    isothermal legs span ``isothermal_pressure_ratio`` = P2/P3 = P1/P4.  The
    reported efficiency is the textbook 1 − TL/TH, which the derived heats
    reproduce.
    """
    k = fluid.gamma / (fluid.gamma - 1.0)
    ratio = np.float64(isothermal_pressure_ratio)

    state1 = compute_state(TL, P1, fluid, model, name="State 1", state_id="1")

    P2 = P1 * (np.float64(TH) / TL) ** k
    state2 = _labelled(compute_state(TH, P2, fluid, model), 2, entropy=state1.entropy)

    P3 = P2 / ratio
    state3 = _labelled(
        compute_state(TH, P3, fluid, model),
        3,
        entropy=float(state2.entropy + fluid.R * np.log(ratio)),
    )

    P4 = P3 * (np.float64(TL) / TH) ** k
    state4 = _labelled(compute_state(TL, P4, fluid, model), 4, entropy=state3.entropy)

    heat_in = TH * (state3.entropy - state2.entropy)
    heat_out = TL * (state4.entropy - state1.entropy)

    processes = [
        _process("Isentropic Compression", ProcessType.ISENTROPIC, state1, state2,
                 fluid.cv * (TL - TH), 0.0),
        _process("Isothermal Expansion", ProcessType.ISOTHERMAL, state2, state3,
                 heat_in, heat_in),
        _process("Isentropic Expansion", ProcessType.ISENTROPIC, state3, state4,
                 fluid.cv * (TH - TL), 0.0),
        _process("Isothermal Compression", ProcessType.ISOTHERMAL, state4, state1,
                 -heat_out, -heat_out),
    ]

    return _cycle(
        "Carnot Cycle",
        CycleType.CARNOT,
        [state1, state2, state3, state4],
        processes,
        carnot_efficiency(TH, TL),
        heat_in,
        heat_out,
    )


# ── Vapour cycles ────────────────────────────────────────────────────────────


def _clamp_quality(x: float) -> float:
    return float(np.clip(x, 0.0, 1.0))


@np.errstate(all="ignore")
def generate_rankine_cycle(
    boiler_pressure: float,
    condenser_pressure: float,
    turbine_inlet_temperature: float,
    pump_efficiency: float = 0.8,
    turbine_efficiency: float = 0.85,
    fluid: FluidProperties = FLUIDS["water"],
) -> ThermodynamicCycle:
    """Simple Rankine steam cycle on the two-phase approximation.

    1 saturated liquid leaving the condenser, 2 compressed liquid after the
    pump, 3 superheated steam at the turbine inlet, 4 wet steam at the
    condenser inlet.  Pump and turbine losses enter through their isentropic
    efficiencies.

    Parameters
    ----------
    boiler_pressure           : kPa
    condenser_pressure        : kPa
    turbine_inlet_temperature : K
    pump_efficiency           : isentropic efficiency, (0, 1]
    turbine_efficiency        : isentropic efficiency, (0, 1]
    fluid                     : vapour-phase constants
    """
    T_cond = saturation_temperature(condenser_pressure)

    state1 = steam_state(T_cond, condenser_pressure, 0.0, fluid,
                         name="Condensate Exit", state_id="1")

    pump_work_ideal = (boiler_pressure - condenser_pressure) * state1.volume
    pump_work = pump_work_ideal / np.float64(pump_efficiency)
    h2 = state1.enthalpy + pump_work
    # Incompressible liquid: temperature and volume carried through the pump
    state2 = _labelled(
        state1,
        2,
        name="Boiler Inlet",
        pressure=float(boiler_pressure),
        enthalpy=float(h2),
        internal_energy=float(h2 - boiler_pressure * state1.volume),
    )

    state3 = steam_state(turbine_inlet_temperature, boiler_pressure, None, fluid,
                         name="Turbine Inlet", state_id="3")

    s_f = saturated_liquid_entropy(T_cond)
    s_g = saturated_vapor_entropy(T_cond)
    quality_isentropic = _clamp_quality((state3.entropy - s_f) / np.float64(s_g - s_f))
    h4_isentropic = steam_state(T_cond, condenser_pressure, quality_isentropic, fluid).enthalpy
    h4 = state3.enthalpy - turbine_efficiency * (state3.enthalpy - h4_isentropic)

    h_f = saturated_liquid_enthalpy(T_cond)
    h_g = saturated_vapor_enthalpy(T_cond)
    quality_actual = _clamp_quality((h4 - h_f) / np.float64(h_g - h_f))
    wet = steam_state(T_cond, condenser_pressure, quality_actual, fluid)
    state4 = _labelled(
        wet,
        4,
        name="Condenser Inlet",
        enthalpy=float(h4),
        internal_energy=float(h4 - condenser_pressure * wet.volume),
    )

    heat_in = state3.enthalpy - state2.enthalpy
    heat_out = state4.enthalpy - state1.enthalpy
    turbine_work = state3.enthalpy - state4.enthalpy
    pump_work = state2.enthalpy - state1.enthalpy
    net_work = turbine_work - pump_work

    processes = [
        _process("Pump Compression", ProcessType.ADIABATIC, state1, state2,
                 -pump_work, 0.0),
        _process("Boiler Heat Addition", ProcessType.ISOBARIC, state2, state3,
                 0.0, heat_in),
        _process("Turbine Expansion", ProcessType.ADIABATIC, state3, state4,
                 turbine_work, 0.0),
        _process("Condenser Heat Rejection", ProcessType.ISOBARIC, state4, state1,
                 0.0, -heat_out),
    ]

    return _cycle(
        "Rankine Cycle",
        CycleType.RANKINE,
        [state1, state2, state3, state4],
        processes,
        net_work / np.float64(heat_in) * 100.0,
        heat_in,
        heat_out,
        net_work=net_work,
    )


@np.errstate(all="ignore")
def generate_refrigeration_cycle(
    evaporator_temperature: float,
    condenser_temperature: float,
    superheat: float = 5.0,
    subcool: float = 5.0,
    compressor_efficiency: float = 0.8,
    fluid: FluidProperties = FLUIDS["r134a"],
) -> ThermodynamicCycle:
    """Vapour-compression refrigeration cycle on the two-phase approximation.

    1 compressor inlet (superheated vapour), 2 condenser inlet after
    compression, 3 expansion-valve inlet (subcooled liquid), 4 evaporator
    inlet after throttling (h4 = h3).

    Saturation pressures come from the water correlation; ``fluid`` supplies
    the vapour constants used for the compression step.

    The cycle consumes work, so ``net_work`` is negative (−w_in) and
    ``efficiency`` holds the coefficient of performance q_L / w_in.
    ``heat_in`` is the heat absorbed in the evaporator and ``heat_out`` the
    heat rejected in the condenser.
    """
    P_evap = saturation_pressure(evaporator_temperature)
    P_cond = saturation_pressure(condenser_temperature)

    T1 = evaporator_temperature + superheat
    if superheat > 0.0:
        state1 = steam_state(T1, P_evap, None, fluid, name="Compressor Inlet", state_id="1")
    else:
        state1 = steam_state(T1, P_evap, 1.0, fluid, name="Compressor Inlet", state_id="1")

    exponent = (fluid.gamma - 1.0) / fluid.gamma
    T2_isentropic = T1 * (np.float64(P_cond) / P_evap) ** exponent
    compressor_work = fluid.cp * (T2_isentropic - T1) / compressor_efficiency
    h2 = state1.enthalpy + compressor_work
    T2 = T1 + compressor_work / fluid.cp
    discharge = steam_state(T2, P_cond, None, fluid)
    state2 = _labelled(
        discharge,
        2,
        name="Condenser Inlet",
        enthalpy=float(h2),
        internal_energy=float(h2 - P_cond * discharge.volume),
    )

    T3 = condenser_temperature - subcool
    if subcool > 0.0:
        state3 = steam_state(T3, P_cond, None, fluid, name="Expansion Valve Inlet", state_id="3")
    else:
        state3 = steam_state(T3, P_cond, 0.0, fluid, name="Expansion Valve Inlet", state_id="3")

    h_f = saturated_liquid_enthalpy(evaporator_temperature)
    h_g = saturated_vapor_enthalpy(evaporator_temperature)
    quality4 = _clamp_quality((state3.enthalpy - h_f) / np.float64(h_g - h_f))
    flashed = steam_state(evaporator_temperature, P_evap, quality4, fluid)
    state4 = _labelled(
        flashed,
        4,
        name="Evaporator Inlet",
        enthalpy=state3.enthalpy,
        internal_energy=float(state3.enthalpy - P_evap * flashed.volume),
    )

    heat_absorbed = state1.enthalpy - state4.enthalpy
    heat_rejected = state2.enthalpy - state3.enthalpy
    work_input = state2.enthalpy - state1.enthalpy

    processes = [
        _process("Compression", ProcessType.ADIABATIC, state1, state2,
                 -work_input, 0.0),
        _process("Condensation", ProcessType.ISOBARIC, state2, state3,
                 0.0, -heat_rejected),
        _process("Throttling", ProcessType.ISENTHALPIC, state3, state4,
                 0.0, 0.0),
        _process("Evaporation", ProcessType.ISOBARIC, state4, state1,
                 0.0, heat_absorbed),
    ]

    return _cycle(
        "Vapor Compression Refrigeration Cycle",
        CycleType.REFRIGERATION,
        [state1, state2, state3, state4],
        processes,
        heat_absorbed / np.float64(work_input),
        heat_absorbed,
        heat_rejected,
    )


def theoretical_efficiency(cycle_type: CycleType, **params: float) -> float:
    """Closed-form efficiency [%] (COP for refrigeration) for ``cycle_type``.

    Keyword names follow the generator arguments: ``compression_ratio``,
    ``cutoff_ratio``, ``pressure_ratio``, ``gamma``, ``hot_temperature``,
    ``cold_temperature``, ``turbine_inlet_temperature``,
    ``condenser_temperature``, ``evaporator_temperature``.
    """
    if cycle_type is CycleType.OTTO:
        return otto_efficiency(params["compression_ratio"], params["gamma"])
    if cycle_type is CycleType.DIESEL:
        return diesel_efficiency(
            params["compression_ratio"], params["cutoff_ratio"], params["gamma"]
        )
    if cycle_type is CycleType.BRAYTON:
        return brayton_efficiency(params["pressure_ratio"], params["gamma"])
    if cycle_type is CycleType.CARNOT:
        return carnot_efficiency(params["hot_temperature"], params["cold_temperature"])
    if cycle_type is CycleType.RANKINE:
        return rankine_efficiency_estimate(
            params["turbine_inlet_temperature"], params["condenser_temperature"]
        )
    if cycle_type is CycleType.REFRIGERATION:
        return refrigeration_cop_estimate(
            params["evaporator_temperature"], params["condenser_temperature"]
        )
    raise ValueError(f"Unsupported cycle type: {cycle_type!r}")
