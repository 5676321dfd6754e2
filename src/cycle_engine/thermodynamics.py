"""
Thermodynamics Module
State calculator: turns (T, P, fluid) into a full thermodynamic state.

Units: T [K], P [kPa], v [m³/kg], h/u [kJ/kg], s [kJ/(kg·K)].

Models
------
Ideal gas
    v = R·T/P,  h = cp·T,  u = cv·T
    s = cp·ln(T/T_ref) − R·ln(P/P_ref),   T_ref = 298 K,  P_ref = 101.325 kPa

    The entropy is measured from a fixed reference point, so only differences
    between states computed against the same reference are meaningful.

Real gas
    Compressibility from the truncated virial equation in reduced properties
    (Abbott correlation for the second virial coefficient):

        Z = 1 + (B⁰ + ω·B¹)·Pr/Tr
        B⁰ = 0.083 − 0.422/Tr^1.6,   B¹ = 0.139 − 0.172/Tr^4.2

    Z is clamped to [0.5, 1.5].  v = Z·R·T/P and s gains + R·ln(Z).

Two-phase (steam approximation)
    Linear interpolation in quality x between saturated-liquid and
    saturated-vapour correlations; superheated-vapour or subcooled-liquid
    closed forms outside the dome.  This is a coarse correlation for
    illustration, not a steam table.

Inputs are not guarded: T = 0 or P = 0 give inf/NaN (numpy semantics,
with a RuntimeWarning) rather than an exception.
"""

import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

from .fluids import FLUIDS, FluidProperties, critical_point

# ── Reference constants ──────────────────────────────────────────────────────
T_REF: float = 298.0  # K
P_REF: float = 101.325  # kPa

Z_MIN: float = 0.5
Z_MAX: float = 1.5

_CP_LIQUID: float = 4.1868  # kJ/(kg·K)
_H_VAPOR_0C: float = 2501.3  # kJ/kg, saturated vapour enthalpy at 0 °C
_CP_VAPOR_SAT: float = 1.82  # kJ/(kg·K), slope of hg(t)
_V_LIQUID: float = 0.001003  # m³/kg

_KPA_PER_MMHG: float = 0.133322
# Antoine constants for water, log10(P[mmHg]) = A − B/(C + t[°C])
_ANTOINE_LOW = (8.07131, 1730.63, 233.426)  # 1–100 °C
_ANTOINE_HIGH = (8.14019, 1810.94, 244.485)  # 99–374 °C
_ANTOINE_SPLIT_MMHG: float = 760.0


class StateModel(Enum):
    """Property model used by the state calculator."""

    IDEAL_GAS = "ideal_gas"
    REAL_GAS = "real_gas"
    TWO_PHASE = "two_phase"


# ── Data classes ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ThermodynamicState:
    """Immutable snapshot of one point in a cycle.

    Attributes
    ----------
    id              : identifier ("1".."4" inside a cycle)
    name            : label used on diagrams
    temperature     : K
    pressure        : kPa
    volume          : m³/kg
    enthalpy        : kJ/kg
    entropy         : kJ/(kg·K), relative to (T_REF, P_REF)
    internal_energy : kJ/kg
    """

    id: str
    name: str
    temperature: float
    pressure: float
    volume: float
    enthalpy: float
    entropy: float
    internal_energy: float


def _new_id() -> str:
    return str(uuid.uuid4())


def _make_state(state_id, name, T, P, v, h, s, u) -> ThermodynamicState:
    return ThermodynamicState(
        id=state_id or _new_id(),
        name=name,
        temperature=float(T),
        pressure=float(P),
        volume=float(v),
        enthalpy=float(h),
        entropy=float(s),
        internal_energy=float(u),
    )


# ── Saturation line ──────────────────────────────────────────────────────────


def saturation_temperature(pressure: float) -> float:
    """Saturation temperature of water  [K]  at ``pressure`` [kPa].

    Inverse Antoine equation; the low-temperature constant set is used up to
    one standard atmosphere.
    """
    p_mmhg = np.float64(pressure) / _KPA_PER_MMHG
    A, B, C = _ANTOINE_LOW if p_mmhg <= _ANTOINE_SPLIT_MMHG else _ANTOINE_HIGH
    return float(B / (A - np.log10(p_mmhg)) - C + 273.15)


def saturation_pressure(temperature: float) -> float:
    """Saturation pressure of water  [kPa]  at ``temperature`` [K]."""
    t = np.float64(temperature) - 273.15
    A, B, C = _ANTOINE_LOW if t <= 100.0 else _ANTOINE_HIGH
    return float(10.0 ** (A - B / (C + t)) * _KPA_PER_MMHG)


# ── Property models ──────────────────────────────────────────────────────────


def ideal_gas_entropy(temperature: float, pressure: float, fluid: FluidProperties) -> float:
    """s = cp·ln(T/T_ref) − R·ln(P/P_ref)  [kJ/(kg·K)]."""
    T = np.float64(temperature)
    P = np.float64(pressure)
    return float(fluid.cp * np.log(T / T_REF) - fluid.R * np.log(P / P_REF))


def ideal_gas_state(
    temperature: float,
    pressure: float,
    fluid: FluidProperties,
    name: str = "",
    state_id: Optional[str] = None,
) -> ThermodynamicState:
    """State of an ideal gas with constant specific heats."""
    T = np.float64(temperature)
    P = np.float64(pressure)
    return _make_state(
        state_id,
        name,
        T,
        P,
        v=fluid.R * T / P,
        h=fluid.cp * T,
        s=ideal_gas_entropy(T, P, fluid),
        u=fluid.cv * T,
    )


@np.errstate(all="ignore")
def compressibility_factor(
    temperature: float,
    pressure: float,
    critical_temperature: float,
    critical_pressure: float,
    acentric_factor: float = 0.0,
) -> float:
    """Compressibility factor Z from the truncated virial equation.

    Parameters
    ----------
    temperature          : K
    pressure             : kPa
    critical_temperature : K
    critical_pressure    : kPa
    acentric_factor      : Pitzer ω  [-]

    Returns
    -------
    float  Z clamped to [Z_MIN, Z_MAX]; a non-finite Z (T → 0, where
           the virial terms overflow) maps onto the clamp as well
    """
    reduced_temperature = np.float64(temperature) / critical_temperature
    reduced_pressure = np.float64(pressure) / critical_pressure

    b0 = 0.083 - 0.422 / reduced_temperature**1.6
    b1 = 0.139 - 0.172 / reduced_temperature**4.2
    z = 1.0 + (b0 + acentric_factor * b1) * reduced_pressure / reduced_temperature

    z = np.nan_to_num(z, nan=Z_MAX, posinf=Z_MAX, neginf=Z_MIN)
    return float(np.clip(z, Z_MIN, Z_MAX))


def real_gas_state(
    temperature: float,
    pressure: float,
    fluid: FluidProperties,
    name: str = "",
    state_id: Optional[str] = None,
) -> ThermodynamicState:
    """Ideal-gas state corrected by the compressibility factor.

    Enthalpy and internal energy keep their ideal-gas values; only volume
    and entropy see Z.
    """
    T = np.float64(temperature)
    P = np.float64(pressure)
    crit = critical_point(fluid)
    z = compressibility_factor(
        T, P, crit.temperature, crit.pressure, crit.acentric_factor
    )
    return _make_state(
        state_id,
        name,
        T,
        P,
        v=z * fluid.R * T / P,
        h=fluid.cp * T,
        s=ideal_gas_entropy(T, P, fluid) + fluid.R * np.log(z),
        u=fluid.cv * T,
    )


def saturated_liquid_enthalpy(temperature: float) -> float:
    """h_f(T) ≈ c_liquid·t  [kJ/kg], t in °C."""
    return _CP_LIQUID * (temperature - 273.15)


def saturated_vapor_enthalpy(temperature: float) -> float:
    """h_g(T) ≈ 2501.3 + 1.82·t  [kJ/kg], t in °C."""
    return _H_VAPOR_0C + _CP_VAPOR_SAT * (temperature - 273.15)


def saturated_liquid_entropy(temperature: float) -> float:
    """s_f(T) ≈ c_liquid·ln(T/273.15)  [kJ/(kg·K)]."""
    return float(_CP_LIQUID * np.log(np.float64(temperature) / 273.15))


def saturated_vapor_entropy(temperature: float) -> float:
    """s_g(T) = s_f(T) + h_fg(T)/T  [kJ/(kg·K)]."""
    h_fg = saturated_vapor_enthalpy(temperature) - saturated_liquid_enthalpy(
        temperature
    )
    return float(saturated_liquid_entropy(temperature) + h_fg / np.float64(temperature))


def steam_state(
    temperature: float,
    pressure: float,
    quality: Optional[float] = None,
    vapor: FluidProperties = FLUIDS["water"],
    name: str = "",
    state_id: Optional[str] = None,
) -> ThermodynamicState:
    """Two-phase / steam approximation.

    Parameters
    ----------
    temperature : K  (the saturation temperature when ``quality`` is given)
    pressure    : kPa
    quality     : vapour mass fraction; ``None`` or a value outside [0, 1]
                  selects the single-phase closed forms
    vapor       : constants for the vapour phase (R and cp)
    """
    T = np.float64(temperature)
    P = np.float64(pressure)

    if quality is not None and 0.0 <= quality <= 1.0:
        h_f = saturated_liquid_enthalpy(T)
        h_g = saturated_vapor_enthalpy(T)
        s_f = saturated_liquid_entropy(T)
        s_g = saturated_vapor_entropy(T)
        v_g = vapor.R * T / P

        h = h_f + quality * (h_g - h_f)
        s = s_f + quality * (s_g - s_f)
        v = _V_LIQUID + quality * (v_g - _V_LIQUID)
    else:
        t_sat = saturation_temperature(P)
        if T > t_sat:
            # Superheated: ideal vapour above the saturated-vapour point
            h = saturated_vapor_enthalpy(t_sat) + vapor.cp * (T - t_sat)
            s = saturated_vapor_entropy(t_sat) + vapor.cp * np.log(T / t_sat)
            v = vapor.R * T / P
        else:
            # Subcooled: incompressible liquid
            h = saturated_liquid_enthalpy(T)
            s = saturated_liquid_entropy(T)
            v = _V_LIQUID

    return _make_state(state_id, name, T, P, v=v, h=h, s=s, u=h - P * v)


# ── Dispatch ─────────────────────────────────────────────────────────────────


def select_model(fluid: FluidProperties) -> StateModel:
    """Real-gas model when the fluid name contains "real", ideal gas otherwise."""
    if "real" in fluid.name.lower():
        return StateModel.REAL_GAS
    return StateModel.IDEAL_GAS


def compute_state(
    temperature: float,
    pressure: float,
    fluid: FluidProperties,
    model: StateModel = StateModel.IDEAL_GAS,
    quality: Optional[float] = None,
    name: str = "",
    state_id: Optional[str] = None,
) -> ThermodynamicState:
    """Full thermodynamic state at (T, P) under the requested model.

    ``quality`` is only read by the two-phase model, which uses ``fluid`` for
    its vapour-phase constants.
    """
    if model is StateModel.IDEAL_GAS:
        return ideal_gas_state(temperature, pressure, fluid, name, state_id)
    if model is StateModel.REAL_GAS:
        return real_gas_state(temperature, pressure, fluid, name, state_id)
    if model is StateModel.TWO_PHASE:
        return steam_state(temperature, pressure, quality, fluid, name, state_id)
    raise ValueError(f"Unsupported state model: {model!r}")
