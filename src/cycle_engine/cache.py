"""
Cache Module
Bounded LRU memoization for expensive pure functions of a cycle.

Diagram sampling runs on every chart render while a slider drag can produce
many structurally identical cycles per second.  Results are therefore keyed by
*value*: two cycles with the same type and the same state fields share a cache
entry even though they are distinct objects with distinct ids.

Keys cover every field that influences sampler output (cycle type plus each
state's name, temperature, pressure, volume, enthalpy and entropy).  Leaving a
field out would return stale points for a changed cycle.

Each memoized function gets its own ``CalculationCache`` so evictions in one
do not disturb another.  The caches are not thread-safe; the engine is
single-threaded.
"""

import functools
import logging
from collections import OrderedDict
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any, Callable, Dict, Hashable, Optional, Tuple

from .cycles import ThermodynamicCycle
from .diagrams import ChartPoint, DiagramKind, SAMPLERS

logger = logging.getLogger(__name__)

DEFAULT_CACHE_SIZE: int = 16


class CalculationCache:
    """Least-recently-used result cache with hit/miss statistics.

    Parameters
    ----------
    max_size : int
        Maximum number of entries (≥ 1).  The least recently used entry is
        evicted when a new key would exceed it.
    name : str
        Label used in log messages.

    Raises
    ------
    ValueError
        If max_size < 1.
    """

    def __init__(self, max_size: int = DEFAULT_CACHE_SIZE, name: str = "cache") -> None:
        if max_size < 1:
            raise ValueError(f"max_size must be ≥ 1, got {max_size}")
        self.max_size = max_size
        self.name = name
        self._entries: "OrderedDict[Hashable, Any]" = OrderedDict()
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the cached value for ``key`` and mark it most recently used."""
        if key not in self._entries:
            self.misses += 1
            return default
        self.hits += 1
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, evicting the oldest entry if full."""
        if key in self._entries:
            self._entries.move_to_end(key)
        self._entries[key] = value
        while len(self._entries) > self.max_size:
            self._entries.popitem(last=False)
            self.evictions += 1
            logger.debug("%s: evicted least recently used entry", self.name)

    def clear(self) -> None:
        """Drop every entry and reset statistics."""
        self._entries.clear()
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    @property
    def hit_rate(self) -> float:
        """Fraction of lookups served from the cache (0 when unused)."""
        lookups = self.hits + self.misses
        return self.hits / lookups if lookups else 0.0

    def stats(self) -> Dict[str, float]:
        """Size, bound and lookup counters as a plain dictionary."""
        return {
            "size": len(self),
            "max_size": self.max_size,
            "hits": self.hits,
            "misses": self.misses,
            "evictions": self.evictions,
            "hit_rate": self.hit_rate,
        }


# ── Keys ─────────────────────────────────────────────────────────────────────


def cycle_key(cycle: ThermodynamicCycle) -> Tuple:
    """Value fingerprint of everything the diagram samplers read."""
    return (
        cycle.type.value,
        tuple(
            (
                state.name,
                state.temperature,
                state.pressure,
                state.volume,
                state.enthalpy,
                state.entropy,
            )
            for state in cycle.states
        ),
    )


def _freeze(value: Any) -> Hashable:
    if isinstance(value, ThermodynamicCycle):
        return ("cycle",) + cycle_key(value)
    if isinstance(value, Enum):
        return (type(value).__name__, value.value)
    if is_dataclass(value) and not isinstance(value, type):
        return (type(value).__name__,) + tuple(
            _freeze(getattr(value, f.name)) for f in fields(value) if f.name != "id"
        )
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, dict):
        return tuple(sorted((k, _freeze(v)) for k, v in value.items()))
    return value


def make_key(*args: Any, **kwargs: Any) -> Hashable:
    """Structural cache key for arbitrary call arguments.

    Cycles are reduced with ``cycle_key``; other dataclasses by their fields
    (ids excluded); lists, tuples and dicts recursively.
    """
    return (_freeze(args), _freeze(kwargs))


def memoize(
    func: Callable,
    cache: CalculationCache,
    key: Callable[..., Hashable] = make_key,
) -> Callable:
    """Wrap ``func`` so that structurally equal calls reuse the cached result.

    The returned callable exposes the cache as ``.cache``.  Results are
    returned as-is, so memoized functions should return immutable values.
    """
    sentinel = object()

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        cache_key = key(*args, **kwargs)
        result = cache.get(cache_key, sentinel)
        if result is not sentinel:
            logger.debug("%s: cache hit", cache.name)
            return result
        logger.debug("%s: cache miss", cache.name)
        result = func(*args, **kwargs)
        cache.put(cache_key, result)
        return result

    wrapper.cache = cache
    return wrapper


# ── Diagram sampler ──────────────────────────────────────────────────────────


class DiagramSampler:
    """Memoized front end for the diagram samplers.

    One cache per diagram kind is owned by the instance; pass caches in to
    share or inspect them.

    Parameters
    ----------
    pv_cache, ts_cache, ph_cache : CalculationCache, optional
        Caches for the pressure–volume, temperature–entropy and
        pressure–enthalpy samplers.  Fresh caches of ``max_size`` are created
        for any not supplied.
    max_size : int
        Size of the caches created here.
    """

    def __init__(
        self,
        pv_cache: Optional[CalculationCache] = None,
        ts_cache: Optional[CalculationCache] = None,
        ph_cache: Optional[CalculationCache] = None,
        max_size: int = DEFAULT_CACHE_SIZE,
    ) -> None:
        supplied = {
            DiagramKind.PV: pv_cache,
            DiagramKind.TS: ts_cache,
            DiagramKind.PH: ph_cache,
        }
        # CalculationCache defines __len__, so an empty cache is falsy
        self.caches: Dict[DiagramKind, CalculationCache] = {
            kind: cache if cache is not None else CalculationCache(max_size, name=kind.value)
            for kind, cache in supplied.items()
        }
        self._samplers: Dict[DiagramKind, Callable] = {
            kind: memoize(SAMPLERS[kind], self.caches[kind], key=cycle_key)
            for kind in DiagramKind
        }

    def pv_points(self, cycle: ThermodynamicCycle) -> Tuple[ChartPoint, ...]:
        return self._samplers[DiagramKind.PV](cycle)

    def ts_points(self, cycle: ThermodynamicCycle) -> Tuple[ChartPoint, ...]:
        return self._samplers[DiagramKind.TS](cycle)

    def ph_points(self, cycle: ThermodynamicCycle) -> Tuple[ChartPoint, ...]:
        return self._samplers[DiagramKind.PH](cycle)

    def sample(self, cycle: ThermodynamicCycle, kind: DiagramKind) -> Tuple[ChartPoint, ...]:
        """Memoized ``diagrams.sample_points``.

        Raises
        ------
        ValueError
            If ``kind`` is not a ``DiagramKind`` member.
        """
        try:
            sampler = self._samplers[kind]
        except KeyError:
            raise ValueError(f"Unsupported diagram kind: {kind!r}") from None
        return sampler(cycle)

    def clear(self) -> None:
        for cache in self.caches.values():
            cache.clear()
