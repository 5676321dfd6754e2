"""
CLI entry point for cycle_engine.
"""
import argparse
import logging
import sys

from .analysis import cycle_entropy_generation, indicated_work
from .cache import DiagramSampler
from .cycle_config import (
    DEFAULT_PRESETS,
    CycleParameters,
    SimulationConfig,
    create_preset,
    default_fluid_for,
)
from .cycles import CycleType
from .fluids import FLUIDS
from .thermodynamics import StateModel


def build_config(args):
    if args.config:
        return SimulationConfig.from_json(args.config)
    if args.preset:
        return create_preset(args.preset)

    cycle_type = CycleType(args.cycle)
    return SimulationConfig(
        cycle_type=cycle_type,
        fluid_key=args.fluid or default_fluid_for(cycle_type),
        model=StateModel(args.model),
        parameters=CycleParameters(),
    )


def print_cycle(config):
    cycle = config.build_cycle()
    sampler = DiagramSampler()

    print("\n" + "═" * 72)
    print(f"  {cycle.name.upper()}  ({config.fluid.name}, {config.model.value})")
    print("═" * 72)
    print(f"{'State':<24}{'T [K]':>10}{'P [kPa]':>12}{'v [m³/kg]':>12}{'h [kJ/kg]':>12}")
    print("─" * 72)
    for state in cycle.states:
        print(
            f"{state.id + ' ' + state.name:<24}{state.temperature:>10.2f}"
            f"{state.pressure:>12.2f}{state.volume:>12.5f}{state.enthalpy:>12.2f}"
        )
    print("─" * 72)

    label = "COP" if cycle.type is CycleType.REFRIGERATION else "Efficiency [%]"
    print(f"{label}: {cycle.efficiency:.3f}")
    print(f"Net Work: {cycle.net_work:.2f} kJ/kg")
    print(f"Heat In: {cycle.heat_in:.2f} kJ/kg")
    print(f"Heat Out: {cycle.heat_out:.2f} kJ/kg")
    print(f"Entropy Generation: {cycle_entropy_generation(cycle):.4f} kJ/(kg·K)")
    if cycle.type in (CycleType.OTTO, CycleType.DIESEL):
        print(f"Indicated Work (P–V trace): {indicated_work(sampler.pv_points(cycle)):.2f} kJ/kg")
    print("═" * 72 + "\n")


def main():
    parser = argparse.ArgumentParser(description="Thermodynamic Cycle Engine CLI")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--preset", choices=[p.id for p in DEFAULT_PRESETS],
                        help="Named preset to run")
    source.add_argument("--config", help="JSON configuration file")
    parser.add_argument("--cycle", choices=[c.value for c in CycleType], default="otto",
                        help="Cycle type when no preset/config is given (default: otto)")
    parser.add_argument("--fluid", choices=sorted(FLUIDS),
                        help="Working fluid (default depends on the cycle)")
    parser.add_argument("--model", choices=[m.value for m in StateModel],
                        default=StateModel.IDEAL_GAS.value,
                        help="State model (default: ideal_gas)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        config = build_config(args)
    except (KeyError, ValueError, OSError) as exc:
        print(f"Error: {exc}")
        sys.exit(1)
    print_cycle(config)


if __name__ == "__main__":
    main()
