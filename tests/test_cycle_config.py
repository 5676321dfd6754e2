"""
Cycle Configuration Test Suite

TestGenerateCycle     : dispatcher routing for every cycle type
TestParameterValidator: range notices, never exceptions
TestSimulationConfig  : fluid resolution, warnings, JSON persistence
TestPresets           : preset table and lookups
"""

import json
import warnings

import pytest

from cycle_engine.cycle_config import (
    DEFAULT_PRESETS,
    CycleParameters,
    ParameterValidator,
    SimulationConfig,
    available_fluids,
    create_preset,
    default_fluid_for,
    generate_cycle,
    presets_by_category,
)
from cycle_engine.cycles import CycleType, generate_otto_cycle
from cycle_engine.fluids import FLUIDS, UnknownFluidError
from cycle_engine.thermodynamics import StateModel

AIR = FLUIDS["air"]


class TestGenerateCycle:

    @pytest.mark.parametrize("cycle_type", list(CycleType))
    def test_every_type_dispatches(self, cycle_type):
        fluid = FLUIDS[default_fluid_for(cycle_type)]
        cycle = generate_cycle(cycle_type, CycleParameters(), fluid)
        assert cycle.type is cycle_type
        assert len(cycle.states) == 4

    def test_otto_uses_parameters(self):
        params = CycleParameters(compression_ratio=10.0, heat_addition=800.0)
        assert generate_cycle(CycleType.OTTO, params, AIR) == generate_otto_cycle(
            300.0, 100.0, 10.0, 800.0, AIR
        )

    def test_carnot_reservoirs(self):
        params = CycleParameters(T1=300.0, T3=1200.0)
        cycle = generate_cycle(CycleType.CARNOT, params, AIR)
        assert cycle.efficiency == 75.0

    def test_model_forwarded(self):
        params = CycleParameters(P1=5000.0)
        ideal = generate_cycle(CycleType.BRAYTON, params, AIR)
        real = generate_cycle(CycleType.BRAYTON, params, AIR, StateModel.REAL_GAS)
        assert real.states[0].volume != ideal.states[0].volume

    def test_unknown_type_raises(self):
        with pytest.raises(ValueError):
            generate_cycle("stirling", CycleParameters(), AIR)

    def test_default_fluids(self):
        assert default_fluid_for(CycleType.RANKINE) == "water"
        assert default_fluid_for(CycleType.REFRIGERATION) == "r134a"
        assert default_fluid_for(CycleType.OTTO) == "air"


class TestParameterValidator:

    @pytest.mark.parametrize("cycle_type", list(CycleType))
    def test_defaults_are_valid(self, cycle_type):
        is_valid, notices = ParameterValidator.validate(CycleParameters(), cycle_type)
        assert is_valid, notices

    def test_compression_ratio_of_one_flagged(self):
        is_valid, notices = ParameterValidator.validate(
            CycleParameters(compression_ratio=1.0), CycleType.OTTO
        )
        assert not is_valid
        assert any("compression_ratio" in n for n in notices)

    def test_cutoff_above_compression_flagged(self):
        is_valid, notices = ParameterValidator.validate(
            CycleParameters(compression_ratio=4.0, cutoff_ratio=4.5), CycleType.DIESEL
        )
        assert not is_valid
        assert any("cutoff_ratio" in n for n in notices)

    def test_inverted_reservoirs_flagged(self):
        is_valid, _ = ParameterValidator.validate(
            CycleParameters(T1=900.0, T3=600.0), CycleType.CARNOT
        )
        assert not is_valid

    def test_irrelevant_fields_ignored(self):
        params = CycleParameters(compression_ratio=-5.0)
        assert ParameterValidator.validate(params, CycleType.BRAYTON)[0]

    def test_bad_pump_efficiency_flagged(self):
        is_valid, _ = ParameterValidator.validate(
            CycleParameters(pump_efficiency=1.5), CycleType.RANKINE
        )
        assert not is_valid


class TestSimulationConfig:

    def test_fluid_resolved(self):
        config = SimulationConfig(fluid_key="Helium")
        assert config.fluid is FLUIDS["helium"]

    def test_unknown_fluid_raises(self):
        with pytest.raises(UnknownFluidError):
            SimulationConfig(fluid_key="plasma")

    def test_out_of_range_warns_but_builds(self):
        with pytest.warns(UserWarning, match="compression_ratio"):
            config = SimulationConfig(parameters=CycleParameters(compression_ratio=50.0))
        assert config.build_cycle().type is CycleType.OTTO

    def test_defaults_do_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            SimulationConfig()

    def test_to_dict(self):
        data = SimulationConfig(cycle_type=CycleType.DIESEL).to_dict()
        assert data["cycle_type"] == "diesel"
        assert data["fluid"] == "air"
        assert data["model"] == "ideal_gas"
        assert data["parameters"]["cutoff_ratio"] == 2.0

    def test_json_round_trip(self, tmp_path):
        path = tmp_path / "config.json"
        original = SimulationConfig(
            cycle_type=CycleType.BRAYTON,
            fluid_key="nitrogen",
            model=StateModel.REAL_GAS,
            parameters=CycleParameters(pressure_ratio=12.0, T3=1400.0),
        )
        original.to_json(str(path))
        loaded = SimulationConfig.from_json(str(path))
        assert loaded.to_dict() == original.to_dict()
        assert loaded.build_cycle() == original.build_cycle()

    def test_from_dict_missing_cycle_type(self):
        with pytest.raises(KeyError):
            SimulationConfig.from_dict({"fluid": "air"})

    def test_from_dict_bad_model(self):
        with pytest.raises(ValueError):
            SimulationConfig.from_dict({"cycle_type": "otto", "model": "quantum"})

    def test_from_json_partial_parameters(self, tmp_path):
        path = tmp_path / "partial.json"
        path.write_text(json.dumps({"cycle_type": "otto", "parameters": {"compression_ratio": 10}}))
        config = SimulationConfig.from_json(str(path))
        assert config.parameters.compression_ratio == 10.0
        assert config.parameters.T1 == 300.0


class TestPresets:

    def test_preset_ids(self):
        assert [p.id for p in DEFAULT_PRESETS] == [
            "otto-standard",
            "otto-high-performance",
            "otto-efficient",
            "diesel-standard",
            "diesel-heavy-duty",
            "brayton-standard",
            "brayton-jet-engine",
        ]

    @pytest.mark.parametrize("preset", DEFAULT_PRESETS, ids=lambda p: p.id)
    def test_presets_build(self, preset):
        cycle = create_preset(preset.id).build_cycle()
        assert cycle.type is preset.cycle_type
        assert 0.0 < cycle.efficiency < 100.0

    def test_diesel_standard_values(self):
        config = create_preset("diesel-standard")
        assert config.parameters.compression_ratio == 16.0
        assert config.parameters.cutoff_ratio == 1.8

    def test_unknown_preset(self):
        with pytest.raises(KeyError):
            create_preset("stirling-standard")

    def test_categories(self):
        ids = {p.id for p in presets_by_category("high-performance")}
        assert ids == {"otto-high-performance", "diesel-heavy-duty", "brayton-jet-engine"}
        assert presets_by_category("racing") == []

    def test_available_fluids(self):
        assert available_fluids() == sorted(FLUIDS)
