"""
Position weights: how much each attribute contributes to the overall rating
for every primary position. Each position's weights sum to 1.0.
"""
from __future__ import annotations

import re
from typing import Dict, List, Optional, Tuple

from .models import PositionKey


# Every attribute column stored for a league player
STAT_COLUMNS: Tuple[str, ...] = (
    "acceleration",
    "sprint_speed",
    "agility",
    "reactions",
    "balance",
    "shot_power",
    "jumping",
    "stamina",
    "strength",
    "long_shots",
    "aggression",
    "interceptions",
    "positioning",
    "vision",
    "penalties",
    "composure",
    "crossing",
    "finishing",
    "heading_accuracy",
    "short_passing",
    "volleys",
    "dribbling",
    "curve",
    "fk_accuracy",
    "long_passing",
    "ball_control",
    "defensive_awareness",
    "standing_tackle",
    "sliding_tackle",
    "gk_diving",
    "gk_handling",
    "gk_kicking",
    "gk_positioning",
    "gk_reflexes",
)

_FULLBACK = {
    "sliding_tackle": 0.14,
    "interceptions": 0.12,
    "standing_tackle": 0.11,
    "crossing": 0.09,
    "stamina": 0.08,
    "reactions": 0.08,
    "defensive_awareness": 0.08,
    "sprint_speed": 0.07,
    "ball_control": 0.07,
    "short_passing": 0.07,
    "acceleration": 0.05,
    "heading_accuracy": 0.04,
}

_WINGBACK = {
    "interceptions": 0.12,
    "crossing": 0.12,
    "sliding_tackle": 0.11,
    "stamina": 0.10,
    "short_passing": 0.10,
    "reactions": 0.08,
    "ball_control": 0.08,
    "standing_tackle": 0.08,
    "defensive_awareness": 0.07,
    "sprint_speed": 0.06,
    "acceleration": 0.04,
    "dribbling": 0.04,
}

_WIDE_MID = {
    "dribbling": 0.15,
    "ball_control": 0.13,
    "short_passing": 0.11,
    "crossing": 0.10,
    "positioning": 0.08,
    "acceleration": 0.07,
    "reactions": 0.07,
    "vision": 0.07,
    "sprint_speed": 0.06,
    "finishing": 0.06,
    "stamina": 0.05,
    "long_passing": 0.05,
}

_WINGER = {
    "dribbling": 0.16,
    "ball_control": 0.14,
    "finishing": 0.10,
    "positioning": 0.09,
    "crossing": 0.09,
    "short_passing": 0.09,
    "acceleration": 0.07,
    "reactions": 0.07,
    "sprint_speed": 0.06,
    "vision": 0.06,
    "long_shots": 0.04,
    "agility": 0.03,
}

# Iteration order matters: ratings are summed in this order so results match
# the calibration sheet to the last float bit.
POSITION_WEIGHTS: Dict[PositionKey, Dict[str, float]] = {
    PositionKey.GK: {
        "gk_diving": 0.21,
        "gk_handling": 0.21,
        "gk_reflexes": 0.21,
        "gk_positioning": 0.21,
        "reactions": 0.11,
        "gk_kicking": 0.05,
    },
    PositionKey.LB: dict(_FULLBACK),
    PositionKey.RB: dict(_FULLBACK),
    PositionKey.CB: {
        "standing_tackle": 0.17,
        "defensive_awareness": 0.14,
        "interceptions": 0.13,
        "strength": 0.10,
        "heading_accuracy": 0.10,
        "sliding_tackle": 0.10,
        "aggression": 0.07,
        "reactions": 0.05,
        "short_passing": 0.05,
        "ball_control": 0.04,
        "jumping": 0.03,
        "sprint_speed": 0.02,
    },
    PositionKey.LWB: dict(_WINGBACK),
    PositionKey.RWB: dict(_WINGBACK),
    PositionKey.CDM: {
        "interceptions": 0.14,
        "short_passing": 0.14,
        "standing_tackle": 0.12,
        "ball_control": 0.10,
        "long_passing": 0.10,
        "defensive_awareness": 0.09,
        "reactions": 0.07,
        "stamina": 0.06,
        "aggression": 0.05,
        "sliding_tackle": 0.05,
        "strength": 0.04,
        "vision": 0.04,
    },
    PositionKey.LM: dict(_WIDE_MID),
    PositionKey.RM: dict(_WIDE_MID),
    PositionKey.CM: {
        "short_passing": 0.17,
        "ball_control": 0.14,
        "vision": 0.13,
        "long_passing": 0.13,
        "reactions": 0.08,
        "dribbling": 0.07,
        "stamina": 0.06,
        "positioning": 0.06,
        "interceptions": 0.05,
        "standing_tackle": 0.05,
        "long_shots": 0.04,
        "finishing": 0.02,
    },
    PositionKey.CAM: {
        "short_passing": 0.16,
        "ball_control": 0.15,
        "vision": 0.14,
        "dribbling": 0.13,
        "positioning": 0.09,
        "reactions": 0.07,
        "finishing": 0.07,
        "long_shots": 0.05,
        "acceleration": 0.04,
        "long_passing": 0.04,
        "sprint_speed": 0.03,
        "agility": 0.03,
    },
    PositionKey.LW: dict(_WINGER),
    PositionKey.RW: dict(_WINGER),
    PositionKey.CF: {
        "ball_control": 0.15,
        "dribbling": 0.14,
        "positioning": 0.13,
        "finishing": 0.11,
        "reactions": 0.09,
        "short_passing": 0.09,
        "vision": 0.08,
        "acceleration": 0.05,
        "sprint_speed": 0.05,
        "shot_power": 0.05,
        "long_shots": 0.04,
        "heading_accuracy": 0.02,
    },
    PositionKey.ST: {
        "finishing": 0.18,
        "positioning": 0.13,
        "ball_control": 0.10,
        "heading_accuracy": 0.10,
        "shot_power": 0.10,
        "reactions": 0.08,
        "dribbling": 0.07,
        "sprint_speed": 0.05,
        "strength": 0.05,
        "short_passing": 0.05,
        "acceleration": 0.04,
        "long_shots": 0.03,
        "volleys": 0.02,
    },
}

_POSITION_SPLIT = re.compile(r"[,/]")


def resolve_primary_position(raw: Optional[str]) -> PositionKey:
    """Map a positions string such as "CB,CDM" or "LW/ST" to its primary PositionKey.

    The first non-empty token wins; anything unrecognised resolves to CM.
    """
    if raw is None:
        return PositionKey.CM
    for token in _POSITION_SPLIT.split(str(raw)):
        token = token.strip()
        if not token:
            continue
        try:
            return PositionKey(token.upper())
        except ValueError:
            return PositionKey.CM
    return PositionKey.CM


def weights_for(position) -> Dict[str, float]:
    """Return a copy of the attribute weights for a position (CM weights if unknown)."""
    try:
        key = PositionKey(position)
    except ValueError:
        key = PositionKey.CM
    return dict(POSITION_WEIGHTS.get(key, POSITION_WEIGHTS[PositionKey.CM]))


def weighted_attrs_for_position(position) -> List[str]:
    return list(weights_for(position).keys())
