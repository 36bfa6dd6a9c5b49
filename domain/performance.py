from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple, Union

from .models import YoungsterPerformance
from .numeric import finite_number

COMPETITIONS: Tuple[str, ...] = (
    "domestic",
    "usc",
    "ucl_gs",
    "ucl_ko",
    "uel_gs",
    "uel_ko",
    "uecl_gs",
    "uecl_ko",
)

PerformanceLike = Optional[Union[YoungsterPerformance, Mapping[str, Any]]]


def _as_mapping(perf: PerformanceLike) -> Mapping[str, Any]:
    if perf is None:
        return {}
    if isinstance(perf, YoungsterPerformance):
        return perf.model_dump()
    return perf


def total_games(perf: PerformanceLike) -> float:
    """Games played across every competition (missing slots count as nothing)."""
    data = _as_mapping(perf)
    games = [finite_number(data.get(f"{c}_games")) for c in COMPETITIONS]
    return sum(g for g in games if g is not None)


def adjusted_average(perf: PerformanceLike) -> Optional[float]:
    """Mean of the per-competition averages that were recorded, or None."""
    data = _as_mapping(perf)
    avgs = [finite_number(data.get(f"{c}_avg")) for c in COMPETITIONS]
    avgs = [a for a in avgs if a is not None]
    if not avgs:
        return None
    return sum(avgs) / len(avgs)


def resolve_games_and_average(
    perf: PerformanceLike,
    stored_games: Optional[float] = None,
    stored_avg: Optional[float] = None,
) -> Tuple[float, float]:
    """Prefer the recorded performance; fall back to the stored season totals."""
    games = total_games(perf)
    if games <= 0:
        games = finite_number(stored_games) or 0
    avg = adjusted_average(perf)
    if avg is None:
        avg = finite_number(stored_avg) or 0.0
    return games, avg
