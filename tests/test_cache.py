"""
Calculation Cache Test Suite

TestCalculationCache : LRU ordering, eviction, statistics
TestKeys             : structural keys for cycles and arbitrary arguments
TestMemoize          : call counting through the wrapper
TestDiagramSampler   : memoized diagram sampling per kind
"""

import dataclasses

import pytest

from cycle_engine.cache import (
    CalculationCache,
    DiagramSampler,
    cycle_key,
    make_key,
    memoize,
)
from cycle_engine.cycles import CycleType, generate_otto_cycle
from cycle_engine.diagrams import DiagramKind, pv_points, ts_points
from cycle_engine.fluids import FLUIDS

AIR = FLUIDS["air"]


def otto(heat_addition=1000.0):
    return generate_otto_cycle(300.0, 100.0, 8.0, heat_addition, AIR)


# ── LRU cache ─────────────────────────────────────────────────────────────────


class TestCalculationCache:

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            CalculationCache(0)

    def test_get_missing_returns_default(self):
        cache = CalculationCache(2)
        assert cache.get("a") is None
        assert cache.get("a", 42) == 42
        assert cache.misses == 2

    def test_put_and_get(self):
        cache = CalculationCache(2)
        cache.put("a", 1)
        assert "a" in cache
        assert cache.get("a") == 1
        assert cache.hits == 1

    def test_evicts_least_recently_used(self):
        cache = CalculationCache(2)
        cache.put("a", 1)
        cache.put("b", 2)
        cache.get("a")  # a becomes most recent
        cache.put("c", 3)
        assert "a" in cache
        assert "b" not in cache
        assert "c" in cache
        assert cache.evictions == 1
        assert len(cache) == 2

    def test_put_existing_refreshes(self):
        cache = CalculationCache(2)
        cache.put("a", 1)
        cache.put("b", 2)
        cache.put("a", 10)
        cache.put("c", 3)
        assert cache.get("a") == 10
        assert "b" not in cache

    def test_clear_resets_stats(self):
        cache = CalculationCache(2)
        cache.put("a", 1)
        cache.get("a")
        cache.get("z")
        cache.clear()
        assert len(cache) == 0
        assert cache.stats() == {
            "size": 0,
            "max_size": 2,
            "hits": 0,
            "misses": 0,
            "evictions": 0,
            "hit_rate": 0.0,
        }

    def test_stats_reports_counters(self):
        cache = CalculationCache(3, name="stats")
        cache.put("a", 1)
        cache.get("a")
        cache.get("b")
        stats = cache.stats()
        assert (stats["size"], stats["max_size"]) == (1, 3)
        assert (stats["hits"], stats["misses"], stats["evictions"]) == (1, 1, 0)
        assert stats["hit_rate"] == pytest.approx(0.5)

    def test_hit_rate(self):
        cache = CalculationCache(4)
        cache.put("a", 1)
        cache.get("a")
        cache.get("a")
        cache.get("a")
        cache.get("b")
        assert cache.hit_rate == pytest.approx(0.75)


# ── Keys ──────────────────────────────────────────────────────────────────────


class TestKeys:

    def test_equal_cycles_share_key(self):
        a, b = otto(), otto()
        assert a.id != b.id
        assert cycle_key(a) == cycle_key(b)
        assert hash(cycle_key(a)) == hash(cycle_key(b))

    def test_single_field_change_changes_key(self):
        cycle = otto()
        s1 = cycle.states[0]
        changed = dataclasses.replace(
            cycle,
            states=(dataclasses.replace(s1, entropy=s1.entropy + 1e-9),) + cycle.states[1:],
        )
        assert cycle_key(changed) != cycle_key(cycle)

    def test_state_name_is_part_of_key(self):
        cycle = otto()
        renamed = dataclasses.replace(
            cycle,
            states=(dataclasses.replace(cycle.states[0], name="Intake"),) + cycle.states[1:],
        )
        assert cycle_key(renamed) != cycle_key(cycle)

    def test_cycle_type_is_part_of_key(self):
        cycle = otto()
        assert cycle_key(dataclasses.replace(cycle, type=CycleType.DIESEL)) != cycle_key(cycle)

    def test_make_key_ignores_ids(self):
        assert make_key(otto(), kind=DiagramKind.PV) == make_key(otto(), kind=DiagramKind.PV)

    def test_make_key_hashable_for_containers(self):
        key = make_key([1, 2], {"b": [3], "a": AIR})
        hash(key)
        assert key == make_key([1, 2], {"a": AIR, "b": [3]})


# ── Memoize ───────────────────────────────────────────────────────────────────


class TestMemoize:

    def setup_method(self):
        self.calls = 0

        def sampler(cycle):
            self.calls += 1
            return pv_points(cycle)

        self.cache = CalculationCache(2, name="test")
        self.sampler = memoize(sampler, self.cache, key=cycle_key)

    def test_value_equal_cycle_hits(self):
        first = self.sampler(otto())
        second = self.sampler(otto())
        assert self.calls == 1
        assert second is first
        assert self.cache.hits == 1

    def test_changed_cycle_misses(self):
        self.sampler(otto(1000.0))
        self.sampler(otto(1001.0))
        assert self.calls == 2

    def test_eviction_forces_recompute(self):
        self.sampler(otto(1000.0))
        self.sampler(otto(1100.0))
        self.sampler(otto(1200.0))  # evicts 1000
        self.sampler(otto(1000.0))
        assert self.calls == 4

    def test_cache_exposed_on_wrapper(self):
        assert self.sampler.cache is self.cache

    def test_none_result_is_cached(self):
        calls = []

        def nothing(x):
            calls.append(x)
            return None

        wrapped = memoize(nothing, CalculationCache(2))
        wrapped(1)
        wrapped(1)
        assert calls == [1]


# ── Diagram sampler ───────────────────────────────────────────────────────────


class TestDiagramSampler:

    def test_results_match_pure_samplers(self):
        sampler = DiagramSampler()
        cycle = otto()
        assert sampler.pv_points(cycle) == pv_points(cycle)
        assert sampler.ts_points(cycle) == ts_points(cycle)

    def test_repeated_calls_hit(self):
        sampler = DiagramSampler()
        sampler.pv_points(otto())
        sampler.pv_points(otto())
        assert sampler.caches[DiagramKind.PV].hits == 1
        assert sampler.caches[DiagramKind.PV].misses == 1

    def test_kinds_use_separate_caches(self):
        sampler = DiagramSampler()
        cycle = otto()
        sampler.pv_points(cycle)
        sampler.ts_points(cycle)
        assert len(sampler.caches[DiagramKind.PV]) == 1
        assert len(sampler.caches[DiagramKind.TS]) == 1
        assert sampler.caches[DiagramKind.TS].hits == 0

    def test_sample_by_kind(self):
        sampler = DiagramSampler()
        cycle = otto()
        assert sampler.sample(cycle, DiagramKind.PH) is sampler.ph_points(cycle)

    def test_unknown_kind_raises_value_error(self):
        sampler = DiagramSampler()
        with pytest.raises(ValueError, match="Unsupported diagram kind"):
            sampler.sample(otto(), "pv")

    def test_supplied_empty_cache_is_used(self):
        shared = CalculationCache(4, name="shared")
        sampler = DiagramSampler(pv_cache=shared)
        assert sampler.caches[DiagramKind.PV] is shared
        sampler.pv_points(otto())
        assert len(shared) == 1

    def test_max_size_applies_to_created_caches(self):
        sampler = DiagramSampler(max_size=1)
        sampler.pv_points(otto(1000.0))
        sampler.pv_points(otto(1100.0))
        assert len(sampler.caches[DiagramKind.PV]) == 1
        assert sampler.caches[DiagramKind.PV].evictions == 1

    def test_clear(self):
        sampler = DiagramSampler()
        sampler.pv_points(otto())
        sampler.clear()
        assert len(sampler.caches[DiagramKind.PV]) == 0
