"""
Cycle Configuration Module
Parameter sets, presets and the cycle-type dispatcher.

The engine itself never rejects physically implausible numbers; the checks
here only emit notices (``warnings.warn``) or return them as a list, leaving
the decision to the caller.
"""

import json
import warnings
from dataclasses import asdict, dataclass, field
from typing import Dict, List, Tuple

from .cycles import (
    CycleType,
    ThermodynamicCycle,
    generate_brayton_cycle,
    generate_carnot_cycle,
    generate_diesel_cycle,
    generate_otto_cycle,
    generate_rankine_cycle,
    generate_refrigeration_cycle,
)
from .fluids import DEFAULT_FLUID, FLUIDS, FluidProperties, get_fluid
from .thermodynamics import StateModel

# ── Parameters ────────────────────────────────────────────────────────────────


@dataclass
class CycleParameters:
    """Numeric inputs shared by the cycle generators.

    Gas cycles
    ----------
    T1                 : inlet / intake temperature  [K]
                         (Carnot: cold reservoir TL)
    P1                 : inlet / intake pressure     [kPa]
    compression_ratio  : V1/V2  (Otto, Diesel)
    heat_addition      : heat added at constant volume  [kJ/kg]  (Otto)
    pressure_ratio     : P2/P1  (Brayton)
    T3                 : turbine inlet temperature  [K]  (Brayton)
                         (Carnot: hot reservoir TH)
    cutoff_ratio       : V3/V2  (Diesel)

    Vapour cycles
    -------------
    boiler_pressure, condenser_pressure          : kPa  (Rankine)
    turbine_inlet_temperature                    : K    (Rankine)
    pump_efficiency, turbine_efficiency          : -    (Rankine)
    evaporator_temperature, condenser_temperature : K   (refrigeration)
    superheat, subcool                           : K    (refrigeration)
    compressor_efficiency                        : -    (refrigeration)
    """

    T1: float = 300.0
    P1: float = 100.0
    compression_ratio: float = 8.0
    heat_addition: float = 1000.0
    pressure_ratio: float = 10.0
    T3: float = 1200.0
    cutoff_ratio: float = 2.0

    boiler_pressure: float = 3000.0
    condenser_pressure: float = 10.0
    turbine_inlet_temperature: float = 800.0
    pump_efficiency: float = 0.8
    turbine_efficiency: float = 0.85

    evaporator_temperature: float = 273.15
    condenser_temperature: float = 313.15
    superheat: float = 5.0
    subcool: float = 5.0
    compressor_efficiency: float = 0.8


def generate_cycle(
    cycle_type: CycleType,
    parameters: CycleParameters,
    fluid: FluidProperties,
    model: StateModel = StateModel.IDEAL_GAS,
) -> ThermodynamicCycle:
    """Run the generator for ``cycle_type`` with the relevant parameters.

    Raises
    ------
    ValueError
        If ``cycle_type`` is not a ``CycleType`` member.
    """
    p = parameters
    if cycle_type is CycleType.OTTO:
        return generate_otto_cycle(p.T1, p.P1, p.compression_ratio, p.heat_addition, fluid, model)
    if cycle_type is CycleType.DIESEL:
        return generate_diesel_cycle(p.T1, p.P1, p.compression_ratio, p.cutoff_ratio, fluid, model)
    if cycle_type is CycleType.BRAYTON:
        return generate_brayton_cycle(p.T1, p.P1, p.pressure_ratio, p.T3, fluid, model)
    if cycle_type is CycleType.CARNOT:
        return generate_carnot_cycle(p.T3, p.T1, p.P1, fluid, model)
    if cycle_type is CycleType.RANKINE:
        return generate_rankine_cycle(
            p.boiler_pressure,
            p.condenser_pressure,
            p.turbine_inlet_temperature,
            p.pump_efficiency,
            p.turbine_efficiency,
        )
    if cycle_type is CycleType.REFRIGERATION:
        return generate_refrigeration_cycle(
            p.evaporator_temperature,
            p.condenser_temperature,
            p.superheat,
            p.subcool,
            p.compressor_efficiency,
            fluid,
        )
    raise ValueError(f"Unsupported cycle type: {cycle_type!r}")


# ── Validation ────────────────────────────────────────────────────────────────


class ParameterValidator:
    """Checks parameters against physically sensible ranges.

    Nothing here raises; the result is a list of notices for the caller.
    """

    VALID_RANGES = {
        "T1": (150.0, 1000.0),  # K
        "P1": (10.0, 10_000.0),  # kPa
        "compression_ratio": (1.0, 30.0),
        "heat_addition": (0.0, 5000.0),  # kJ/kg
        "pressure_ratio": (1.0, 50.0),
        "T3": (300.0, 2500.0),  # K
        "cutoff_ratio": (1.0, 5.0),
    }

    @staticmethod
    def validate(
        parameters: CycleParameters, cycle_type: CycleType
    ) -> Tuple[bool, List[str]]:
        """Return ``(is_valid, notices)`` for the fields ``cycle_type`` reads."""
        notices: List[str] = []

        def check(name: str, exclusive_low: bool = False) -> None:
            low, high = ParameterValidator.VALID_RANGES[name]
            value = getattr(parameters, name)
            below = value <= low if exclusive_low else value < low
            if below or value > high:
                notices.append(f"{name} = {value:g} outside typical range [{low:g}, {high:g}]")

        if cycle_type in (CycleType.OTTO, CycleType.DIESEL, CycleType.BRAYTON, CycleType.CARNOT):
            check("T1")
            check("P1")
        if cycle_type in (CycleType.OTTO, CycleType.DIESEL):
            check("compression_ratio", exclusive_low=True)
        if cycle_type is CycleType.OTTO:
            check("heat_addition")
        if cycle_type is CycleType.DIESEL:
            check("cutoff_ratio", exclusive_low=True)
            if parameters.cutoff_ratio >= parameters.compression_ratio:
                notices.append("cutoff_ratio must be below compression_ratio")
        if cycle_type is CycleType.BRAYTON:
            check("pressure_ratio", exclusive_low=True)
            check("T3")
            if parameters.T3 <= parameters.T1 * parameters.pressure_ratio ** (0.4 / 1.4):
                notices.append("T3 at or below compressor outlet temperature: no heat addition")
        if cycle_type is CycleType.CARNOT:
            check("T3")
            if parameters.T3 <= parameters.T1:
                notices.append("hot reservoir (T3) must be above cold reservoir (T1)")
        if cycle_type is CycleType.RANKINE:
            if parameters.boiler_pressure <= parameters.condenser_pressure:
                notices.append("boiler_pressure must exceed condenser_pressure")
            for name in ("pump_efficiency", "turbine_efficiency"):
                value = getattr(parameters, name)
                if not 0.0 < value <= 1.0:
                    notices.append(f"{name} = {value:g} outside (0, 1]")
        if cycle_type is CycleType.REFRIGERATION:
            if parameters.condenser_temperature <= parameters.evaporator_temperature:
                notices.append("condenser_temperature must exceed evaporator_temperature")
            if not 0.0 < parameters.compressor_efficiency <= 1.0:
                notices.append(
                    f"compressor_efficiency = {parameters.compressor_efficiency:g} outside (0, 1]"
                )

        return len(notices) == 0, notices


# ── Top-level configuration ───────────────────────────────────────────────────


@dataclass
class SimulationConfig:
    """Everything needed to build one cycle.

    The fluid key is resolved on construction; an unknown key raises
    ``UnknownFluidError``.  Out-of-range parameters only produce warnings.
    """

    cycle_type: CycleType = CycleType.OTTO
    fluid_key: str = DEFAULT_FLUID
    model: StateModel = StateModel.IDEAL_GAS
    parameters: CycleParameters = field(default_factory=CycleParameters)

    def __post_init__(self) -> None:
        self.fluid = get_fluid(self.fluid_key)
        _, notices = ParameterValidator.validate(self.parameters, self.cycle_type)
        for msg in notices:
            warnings.warn(msg, stacklevel=3)

    def build_cycle(self) -> ThermodynamicCycle:
        """Generate the configured cycle."""
        return generate_cycle(self.cycle_type, self.parameters, self.fluid, self.model)

    # ── Serialisation ─────────────────────────────────────────────────────

    def to_dict(self) -> Dict:
        """Serialise configuration to a plain dictionary."""
        return {
            "cycle_type": self.cycle_type.value,
            "fluid": self.fluid_key,
            "model": self.model.value,
            "parameters": asdict(self.parameters),
        }

    def to_json(self, filepath: str) -> None:
        """Persist configuration to a JSON file."""
        with open(filepath, "w", encoding="utf-8") as fh:
            json.dump(self.to_dict(), fh, indent=2)

    @classmethod
    def from_dict(cls, data: Dict) -> "SimulationConfig":
        """Build a configuration from ``to_dict`` output.

        Raises
        ------
        KeyError
            If the ``cycle_type`` entry is missing.
        ValueError
            If the cycle type or model string is unknown, or the fluid is
            not registered.
        """
        try:
            cycle_type_str = data["cycle_type"]
        except KeyError as exc:
            raise KeyError(f"Missing entry in configuration: {exc}") from exc

        return cls(
            cycle_type=CycleType(cycle_type_str),
            fluid_key=data.get("fluid", DEFAULT_FLUID),
            model=StateModel(data.get("model", StateModel.IDEAL_GAS.value)),
            parameters=CycleParameters(
                **{k: float(v) for k, v in data.get("parameters", {}).items()}
            ),
        )

    @classmethod
    def from_json(cls, filepath: str) -> "SimulationConfig":
        """Load configuration from a JSON file (see ``from_dict``)."""
        with open(filepath, "r", encoding="utf-8") as fh:
            return cls.from_dict(json.load(fh))


# ── Presets ───────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class CyclePreset:
    """A named, categorised starting point for a simulation."""

    id: str
    name: str
    description: str
    cycle_type: CycleType
    fluid_key: str
    parameters: Dict[str, float]
    category: str = "standard"

    def to_config(self) -> SimulationConfig:
        return SimulationConfig(
            cycle_type=self.cycle_type,
            fluid_key=self.fluid_key,
            parameters=CycleParameters(**self.parameters),
        )


def _gas_preset(
    preset_id: str,
    name: str,
    description: str,
    cycle_type: CycleType,
    category: str,
    **overrides: float,
) -> CyclePreset:
    params = {
        "T1": 300.0,
        "P1": 100.0,
        "compression_ratio": 8.0,
        "heat_addition": 1000.0,
        "pressure_ratio": 10.0,
        "T3": 1200.0,
        "cutoff_ratio": 2.0,
    }
    params.update(overrides)
    return CyclePreset(preset_id, name, description, cycle_type, "air", params, category)


DEFAULT_PRESETS: Tuple[CyclePreset, ...] = (
    _gas_preset("otto-standard", "Otto Cycle - Standard",
                "Typical spark-ignition engine parameters", CycleType.OTTO, "standard"),
    _gas_preset("otto-high-performance", "Otto Cycle - High Performance",
                "High compression ratio for maximum power", CycleType.OTTO,
                "high-performance", compression_ratio=12.0, heat_addition=1500.0, T3=1500.0),
    _gas_preset("otto-efficient", "Otto Cycle - Fuel Efficient",
                "Optimized for fuel economy", CycleType.OTTO, "efficient",
                compression_ratio=10.0, heat_addition=800.0, T3=1100.0),
    _gas_preset("diesel-standard", "Diesel Cycle - Standard",
                "Typical compression-ignition engine", CycleType.DIESEL, "standard",
                compression_ratio=16.0, cutoff_ratio=1.8),
    _gas_preset("diesel-heavy-duty", "Diesel Cycle - Heavy Duty",
                "High compression for truck/bus applications", CycleType.DIESEL,
                "high-performance", compression_ratio=18.0, heat_addition=1200.0,
                T3=1300.0, cutoff_ratio=2.2),
    _gas_preset("brayton-standard", "Brayton Cycle - Standard",
                "Gas turbine power plant", CycleType.BRAYTON, "standard",
                pressure_ratio=8.0),
    _gas_preset("brayton-jet-engine", "Brayton Cycle - Jet Engine",
                "Aircraft propulsion cycle", CycleType.BRAYTON, "high-performance",
                T1=250.0, P1=25.0, pressure_ratio=12.0, T3=1400.0),
)


def create_preset(preset_id: str) -> SimulationConfig:
    """Configuration for the preset ``preset_id``.

    Raises
    ------
    KeyError
        If no preset has that id.
    """
    for preset in DEFAULT_PRESETS:
        if preset.id == preset_id:
            return preset.to_config()
    raise KeyError(
        f"Unknown preset '{preset_id}'. Available: {', '.join(p.id for p in DEFAULT_PRESETS)}"
    )


def presets_by_category(category: str) -> List[CyclePreset]:
    return [p for p in DEFAULT_PRESETS if p.category == category]


def available_fluids() -> List[str]:
    return sorted(FLUIDS)


_CYCLE_FLUIDS = {
    CycleType.RANKINE: "water",
    CycleType.REFRIGERATION: "r134a",
}


def default_fluid_for(cycle_type: CycleType) -> str:
    """Working fluid a cycle type is normally run with (air for gas cycles)."""
    return _CYCLE_FLUIDS.get(cycle_type, DEFAULT_FLUID)
