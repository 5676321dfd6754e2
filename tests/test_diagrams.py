"""
Diagram Sampler Test Suite

TestPolylineShape   : point counts, closure, state labels
TestInterpolation   : isentropic P–V curves and straight T–s legs
TestDispatch        : sample_points routing and degenerate cycles
"""

import dataclasses

import pytest

from cycle_engine.cycles import (
    generate_brayton_cycle,
    generate_carnot_cycle,
    generate_diesel_cycle,
    generate_otto_cycle,
    generate_rankine_cycle,
)
from cycle_engine.diagrams import (
    SEGMENTS,
    ChartPoint,
    DiagramKind,
    ph_points,
    pv_points,
    sample_points,
    ts_points,
)
from cycle_engine.fluids import FLUIDS

AIR = FLUIDS["air"]
EXPECTED_POINTS = 4 * SEGMENTS + 1


class TestPolylineShape:

    def setup_method(self):
        self.otto = generate_otto_cycle(300.0, 100.0, 8.0, 1000.0, AIR)

    @pytest.mark.parametrize("sampler", [pv_points, ts_points, ph_points])
    def test_point_count(self, sampler):
        assert len(sampler(self.otto)) == EXPECTED_POINTS == 81

    def test_loop_is_closed(self):
        points = pv_points(self.otto)
        assert points[0] == points[-1]
        assert (points[0].x, points[0].y) == (self.otto.states[0].volume, self.otto.states[0].pressure)

    def test_state_labels_at_leg_starts(self):
        points = ts_points(self.otto)
        labelled = [(i, p.state) for i, p in enumerate(points) if p.state is not None]
        assert labelled == [
            (0, "State 1"),
            (20, "State 2"),
            (40, "State 3"),
            (60, "State 4"),
            (80, "State 1"),
        ]

    def test_exact_states_emitted(self):
        points = ts_points(self.otto)
        for i, state in enumerate(self.otto.states):
            assert points[i * SEGMENTS].x == state.entropy
            assert points[i * SEGMENTS].y == state.temperature

    def test_points_are_immutable(self):
        point = pv_points(self.otto)[5]
        with pytest.raises(dataclasses.FrozenInstanceError):
            point.x = 0.0

    def test_returns_tuple(self):
        assert isinstance(pv_points(self.otto), tuple)
        assert all(isinstance(p, ChartPoint) for p in pv_points(self.otto))


class TestInterpolation:

    def test_otto_compression_follows_isentrope(self):
        cycle = generate_otto_cycle(300.0, 100.0, 8.0, 1000.0, AIR)
        points = pv_points(cycle)
        s1 = cycle.states[0]
        constant = s1.pressure * s1.volume**1.4
        for p in points[1:SEGMENTS]:
            assert p.y * p.x**1.4 == pytest.approx(constant, rel=1e-6)

    def test_diesel_expansion_follows_isentrope(self):
        cycle = generate_diesel_cycle(300.0, 100.0, 16.0, 1.8, AIR)
        points = pv_points(cycle)
        s3 = cycle.states[2]
        constant = s3.pressure * s3.volume**1.4
        for p in points[2 * SEGMENTS + 1:3 * SEGMENTS]:
            assert p.y * p.x**1.4 == pytest.approx(constant, rel=1e-6)

    def test_isentrope_pressure_stepped_linearly(self):
        cycle = generate_otto_cycle(300.0, 100.0, 8.0, 1000.0, AIR)
        points = pv_points(cycle)
        s1, s2 = cycle.states[:2]
        step = (s2.pressure - s1.pressure) / SEGMENTS
        assert points[1].y == pytest.approx(s1.pressure + step)
        assert points[10].y == pytest.approx(s1.pressure + 10 * step)

    def test_isochoric_leg_is_vertical(self):
        cycle = generate_otto_cycle(300.0, 100.0, 8.0, 1000.0, AIR)
        points = pv_points(cycle)
        v2 = cycle.states[1].volume
        for p in points[SEGMENTS:2 * SEGMENTS]:
            assert p.x == pytest.approx(v2)

    def test_brayton_pv_uses_straight_legs(self):
        cycle = generate_brayton_cycle(300.0, 100.0, 8.0, 1200.0, AIR)
        points = pv_points(cycle)
        s1, s2 = cycle.states[:2]
        midpoint = points[SEGMENTS // 2]
        assert midpoint.x == pytest.approx((s1.volume + s2.volume) / 2)
        assert midpoint.y == pytest.approx((s1.pressure + s2.pressure) / 2)

    def test_ts_legs_are_linear(self):
        cycle = generate_carnot_cycle(1200.0, 300.0, 100.0, AIR)
        points = ts_points(cycle)
        s2, s3 = cycle.states[1:3]
        for j in range(1, SEGMENTS):
            t = j / SEGMENTS
            p = points[SEGMENTS + j]
            assert p.x == pytest.approx(s2.entropy + t * (s3.entropy - s2.entropy))
            assert p.y == pytest.approx(1200.0)

    def test_ph_uses_enthalpy(self):
        cycle = generate_rankine_cycle(3000.0, 10.0, 800.0)
        points = ph_points(cycle)
        assert points[2 * SEGMENTS].x == cycle.states[2].enthalpy
        assert points[2 * SEGMENTS].y == 3000.0


class TestDispatch:

    def test_sample_points_routes_by_kind(self):
        cycle = generate_otto_cycle(300.0, 100.0, 8.0, 1000.0, AIR)
        assert sample_points(cycle, DiagramKind.PV) == pv_points(cycle)
        assert sample_points(cycle, DiagramKind.TS) == ts_points(cycle)
        assert sample_points(cycle, DiagramKind.PH) == ph_points(cycle)

    def test_unknown_kind_raises(self):
        cycle = generate_otto_cycle(300.0, 100.0, 8.0, 1000.0, AIR)
        with pytest.raises(ValueError):
            sample_points(cycle, "pv")

    def test_empty_cycle_gives_no_points(self):
        cycle = generate_otto_cycle(300.0, 100.0, 8.0, 1000.0, AIR)
        empty = dataclasses.replace(cycle, states=(), processes=())
        assert pv_points(empty) == ()
        assert ts_points(empty) == ()
