"""
Overall rating: position-weighted sum of the individual attributes plus an
international reputation boost.

    OVR = round(clamp(sum(weight_i * stat_i), 1, 99)) + boost, clamped to 1..99

International reputation (1-5 stars) boost:
- 1-2 stars: no boost
- 3 stars: +1 if base OVR >= 51
- 4 stars: +1 if base 36-66, +2 if base 67-99
- 5 stars: +1 if base 24-49, +2 if base 50-74, +3 if base 75-99
"""
from __future__ import annotations

import re
from typing import Mapping, Optional, Union

from .numeric import clamp, finite_number, round_half_up
from .position_weights import resolve_primary_position, weights_for

DEFAULT_STAT_VALUE = 50
MIN_RATING = 1
MAX_RATING = 99

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

Reputation = Optional[Union[str, int, float]]


def parse_international_reputation(ir: Reputation) -> int:
    """Parse a star rating into 1..5; anything unparseable counts as 1 star."""
    if ir is None or isinstance(ir, bool):
        return 1
    if isinstance(ir, str):
        m = _LEADING_INT.match(ir)
        if not m:
            return 1
        stars = int(m.group(1))
    else:
        value = finite_number(ir)
        if value is None:
            return 1
        stars = int(value)
    return clamp(stars, 1, 5)


def get_international_reputation_boost(base_ovr: float, ir: Reputation) -> int:
    stars = parse_international_reputation(ir)
    if stars <= 2:
        return 0
    if stars == 3:
        return 1 if base_ovr >= 51 else 0
    if stars == 4:
        if base_ovr >= 67:
            return 2
        return 1 if base_ovr >= 36 else 0
    if base_ovr >= 75:
        return 3
    if base_ovr >= 50:
        return 2
    return 1 if base_ovr >= 24 else 0


def compute_base_overall(positions: Optional[str], stats: Mapping[str, object]) -> int:
    """Weighted rating before any reputation boost.

    Attributes missing from ``stats`` (or not numeric) count as 50; attributes
    the primary position does not weight contribute nothing.
    """
    weights = weights_for(resolve_primary_position(positions))
    total = 0.0
    for attr, weight in weights.items():
        value = finite_number(stats.get(attr))
        total += weight * (value if value is not None else DEFAULT_STAT_VALUE)
    return round_half_up(clamp(total, MIN_RATING, MAX_RATING))


def compute_overall_from_stats(
    positions: Optional[str],
    stats: Mapping[str, object],
    international_reputation: Reputation = None,
) -> int:
    base_ovr = compute_base_overall(positions, stats or {})
    boost = get_international_reputation_boost(base_ovr, international_reputation)
    return clamp(base_ovr + boost, MIN_RATING, MAX_RATING)
