"""
Wages: rating/position → seasonal wage, and team wage bills.

Two tables are in use. ``BASE_WAGE_TABLE`` drives budgets and wage bills;
``CONTRACT_WAGE_TABLE`` drives the wage shown on contracts and player
profiles. They agree from 60 upwards. Each path also has its own idea of
which positions are "defensive": contracts treat wing-backs as defenders,
the budget table does not.
"""
from __future__ import annotations

import math
from typing import Dict, FrozenSet, Iterable, Optional

from .models import PlayerWage, RosterPlayer, WageBill, WageImpact, WageRow

# Budget path: first position only, exact (case-sensitive) match
WAGE_TABLE_DEFENSIVE: FrozenSet[str] = frozenset({"GK", "CDM", "CB", "RB", "LB"})

# Contract/profile path
VALUE_FALLBACK_DEFENSIVE: FrozenSet[str] = frozenset({"GK", "CB", "LB", "RB", "LWB", "RWB", "CDM"})

DEFAULT_WAGE_ROW = WageRow(defensive=800_000, attacking=1_000_000)

DEFAULT_RATING = 60
DEFAULT_POSITIONS = "ST"

BASE_WAGE_TABLE: Dict[int, WageRow] = {
    95: WageRow(48_000_000, 60_000_000),
    94: WageRow(48_000_000, 60_000_000),
    93: WageRow(44_800_000, 56_000_000),
    92: WageRow(41_600_000, 52_000_000),
    91: WageRow(38_400_000, 48_000_000),
    90: WageRow(35_200_000, 44_000_000),
    89: WageRow(32_000_000, 40_000_000),
    88: WageRow(28_800_000, 36_000_000),
    87: WageRow(25_600_000, 32_000_000),
    86: WageRow(22_400_000, 28_000_000),
    85: WageRow(19_200_000, 24_000_000),
    84: WageRow(16_000_000, 20_000_000),
    83: WageRow(14_400_000, 18_000_000),
    82: WageRow(12_800_000, 16_000_000),
    81: WageRow(11_200_000, 14_000_000),
    80: WageRow(10_400_000, 13_000_000),
    79: WageRow(9_600_000, 12_000_000),
    78: WageRow(8_800_000, 11_000_000),
    77: WageRow(8_000_000, 10_000_000),
    76: WageRow(7_200_000, 9_000_000),
    75: WageRow(6_400_000, 8_000_000),
    74: WageRow(5_800_000, 7_200_000),
    73: WageRow(5_100_000, 6_400_000),
    72: WageRow(4_500_000, 5_600_000),
    71: WageRow(3_800_000, 4_800_000),
    70: WageRow(3_200_000, 4_000_000),
    69: WageRow(2_900_000, 3_600_000),
    68: WageRow(2_600_000, 3_200_000),
    67: WageRow(2_200_000, 2_800_000),
    66: WageRow(1_900_000, 2_400_000),
    65: WageRow(1_600_000, 2_000_000),
    64: WageRow(1_440_000, 1_800_000),
    63: WageRow(1_280_000, 1_600_000),
    62: WageRow(1_120_000, 1_400_000),
    61: WageRow(960_000, 1_200_000),
    60: WageRow(800_000, 1_000_000),
    59: WageRow(720_000, 900_000),
    58: WageRow(640_000, 800_000),
    57: WageRow(560_000, 700_000),
    56: WageRow(480_000, 600_000),
    55: WageRow(400_000, 500_000),
    54: WageRow(320_000, 400_000),
    53: WageRow(240_000, 300_000),
}

# Contracts never pay less than the 60-rated wage
CONTRACT_WAGE_TABLE: Dict[int, WageRow] = {
    rating: (row if rating >= 60 else BASE_WAGE_TABLE[60])
    for rating, row in BASE_WAGE_TABLE.items()
}

POSITION_GROUPS: Dict[str, FrozenSet[str]] = {
    "GK": frozenset({"GK"}),
    "DEF": frozenset({"CB", "RB", "LB"}),
    "MID": frozenset({"CDM", "CM", "CAM", "LM", "RM"}),
    "FWD": frozenset({"LW", "RW", "ST", "CF"}),
}


def _rating_key(rating) -> Optional[int]:
    if isinstance(rating, bool):
        return None
    try:
        value = float(rating)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return int(value)


def _first_position(positions: Optional[str]) -> str:
    return (positions or "").split(",")[0].strip()


def is_defensive_for_wage_table(positions: Optional[str]) -> bool:
    return _first_position(positions) in WAGE_TABLE_DEFENSIVE


def is_defensive_for_contract(positions: Optional[str]) -> bool:
    return _first_position(positions).upper() in VALUE_FALLBACK_DEFENSIVE


def calculate_wage(rating, positions: Optional[str]) -> int:
    """Seasonal base wage used for budgets; unknown ratings get the default row."""
    row = BASE_WAGE_TABLE.get(_rating_key(rating), DEFAULT_WAGE_ROW)
    return row.defensive if is_defensive_for_wage_table(positions) else row.attacking


def annual_wage(rating, positions: Optional[str]) -> int:
    """Contract wage; ratings outside the table are paid like a 60."""
    row = CONTRACT_WAGE_TABLE.get(_rating_key(rating), CONTRACT_WAGE_TABLE[60])
    return row.defensive if is_defensive_for_contract(positions) else row.attacking


def position_group(positions: Optional[str]) -> Optional[str]:
    first = _first_position(positions)
    for group, members in POSITION_GROUPS.items():
        if first in members:
            return group
    return None


def player_base_wage(player: RosterPlayer) -> int:
    return calculate_wage(player.rating or DEFAULT_RATING, player.positions or DEFAULT_POSITIONS)


def team_wage_bill(players: Iterable[RosterPlayer], budget: Optional[int]) -> WageBill:
    """Sum base wages for a squad and work out what is left of the budget."""
    total_budget = budget or 0
    breakdown = []
    position_wages = {group: 0 for group in POSITION_GROUPS}
    for player in players:
        wage = player_base_wage(player)
        breakdown.append(PlayerWage(
            player_id=player.player_id,
            player_name=player.player_name,
            rating=player.rating,
            positions=player.positions,
            base_wage=wage,
        ))
        group = position_group(player.positions or DEFAULT_POSITIONS)
        if group is not None:
            position_wages[group] += wage
    total = sum(p.base_wage for p in breakdown)
    return WageBill(
        total_budget=total_budget,
        total_wage_bill=total,
        available_balance=max(0, total_budget - total),
        breakdown=breakdown,
        position_wages=position_wages,
    )


def wage_impact(budget: Optional[int], current_wage_bill: int, rating, positions: Optional[str]) -> WageImpact:
    """Would adding a player at this rating/position still fit within the budget?"""
    total_budget = budget or 0
    wage = calculate_wage(rating or DEFAULT_RATING, positions or DEFAULT_POSITIONS)
    new_total = current_wage_bill + wage
    return WageImpact(
        affordable=total_budget >= new_total,
        wage_impact=wage,
        current_wage_bill=current_wage_bill,
        new_total_wage_bill=new_total,
        total_budget=total_budget,
    )
