"""
Basic Cycle Engine Example
Demonstrates simple usage of the cycle generators, analysis and sampling.
"""

import logging

from cycle_engine.analysis import cycle_entropy_generation, exergy, indicated_work
from cycle_engine.cache import DiagramSampler
from cycle_engine.cycle_config import DEFAULT_PRESETS, create_preset
from cycle_engine.cycles import (
    generate_otto_cycle,
    generate_rankine_cycle,
    generate_refrigeration_cycle,
)
from cycle_engine.diagrams import DiagramKind
from cycle_engine.fluids import FLUIDS, get_fluid
from cycle_engine.thermodynamics import StateModel


def example_1_otto_cycle():
    """Example 1: Air-standard Otto cycle, ideal vs real gas"""

    print("=" * 70)
    print("EXAMPLE 1: Otto Cycle")
    print("=" * 70)

    air = get_fluid("air")
    for model in (StateModel.IDEAL_GAS, StateModel.REAL_GAS):
        cycle = generate_otto_cycle(300.0, 100.0, 8.0, 1000.0, air, model)
        print(f"\n{model.value}:")
        for state in cycle.states:
            print(
                f"  {state.name:<10} T = {state.temperature:8.2f} K   "
                f"P = {state.pressure:9.2f} kPa   v = {state.volume:.5f} m³/kg"
            )
        print(f"  Efficiency: {cycle.efficiency:.2f} %")
        print(f"  Net work:   {cycle.net_work:.2f} kJ/kg")


def example_2_presets():
    """Example 2: Run every preset"""

    print("\n" + "=" * 70)
    print("EXAMPLE 2: Presets")
    print("=" * 70)

    for preset in DEFAULT_PRESETS:
        cycle = create_preset(preset.id).build_cycle()
        print(
            f"  {preset.name:<34} η = {cycle.efficiency:6.2f} %   "
            f"w_net = {cycle.net_work:8.2f} kJ/kg"
        )


def example_3_vapour_cycles():
    """Example 3: Rankine and refrigeration"""

    print("\n" + "=" * 70)
    print("EXAMPLE 3: Vapour Cycles")
    print("=" * 70)

    rankine = generate_rankine_cycle(3000.0, 10.0, 800.0, 0.8, 0.85)
    print(f"  Rankine efficiency:  {rankine.efficiency:.2f} %")
    print(f"  Rankine net work:    {rankine.net_work:.2f} kJ/kg")

    fridge = generate_refrigeration_cycle(273.15, 313.15, 5.0, 5.0, 0.8, FLUIDS["r134a"])
    print(f"  Refrigeration COP:   {fridge.efficiency:.2f}")


def example_4_analysis():
    """Example 4: Second-law analysis and memoized diagram sampling"""

    print("\n" + "=" * 70)
    print("EXAMPLE 4: Analysis")
    print("=" * 70)

    air = FLUIDS["air"]
    sampler = DiagramSampler()
    cycle = generate_otto_cycle(300.0, 100.0, 8.0, 1000.0, air)

    print(f"  Entropy generation:  {cycle_entropy_generation(cycle):.4f} kJ/(kg·K)")
    print(f"  Exergy at state 3:   {exergy(cycle.states[2], 298.0, 101.325, air):.2f} kJ/kg")

    for _ in range(3):
        points = sampler.pv_points(generate_otto_cycle(300.0, 100.0, 8.0, 1000.0, air))
    print(f"  ∮P dV over {len(points)} points: {indicated_work(points):.2f} kJ/kg")
    print(f"  P–V cache: {sampler.caches[DiagramKind.PV].stats()}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    example_1_otto_cycle()
    example_2_presets()
    example_3_vapour_cycles()
    example_4_analysis()
