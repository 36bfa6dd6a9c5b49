"""
Season review: preview the end-of-season upgrade for every youngster in a
league. Pure computation; storing the results is left to the caller.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .models import YoungsterAttributesInput, YoungsterPreview, YoungsterRecord
from .numeric import clamp, finite_number
from .performance import resolve_games_and_average
from .policies import ProgressionPolicies
from .position_weights import STAT_COLUMNS
from .progression import compute_youngster_attributes
from .youngster_logic import get_avg_upgrade, get_games_upgrade

logger = logging.getLogger(__name__)

DEFAULT_BASE_RATING = 60
DEFAULT_POSITIONS = "CM"


def base_rating_of(record: YoungsterRecord) -> int:
    if record.base_rating is not None:
        return record.base_rating
    if record.rating is not None:
        return record.rating
    return DEFAULT_BASE_RATING


def preview_youngster(record: YoungsterRecord, policies: Optional[ProgressionPolicies] = None) -> YoungsterPreview:
    pol = policies or ProgressionPolicies()
    games, avg = resolve_games_and_average(record.performance, record.games_played, record.adj_avg)
    rating = base_rating_of(record)

    games_up = get_games_upgrade(rating, games)
    avg_up = get_avg_upgrade(rating, avg, games, pol.minGamesForAvgUpgrade, pol.band75OwnAvgRanges)
    delta = max(games_up, avg_up)
    new_rating = clamp(rating + delta, pol.previewRatingFloor, pol.ratingCeiling)

    positions = record.positions or DEFAULT_POSITIONS
    current = {col: finite_number(record.attributes.get(col)) for col in STAT_COLUMNS}
    updates = compute_youngster_attributes(
        YoungsterAttributesInput(
            base_ovr=rating,
            new_ovr=new_rating,
            positions=positions,
            current_attributes=current,
            ind_training_attrs=list(record.ind_training_attrs),
            non_weighted_attrs=list(record.non_weighted_attrs),
            potential=record.potential,
        ),
        pol,
    )

    preview = YoungsterPreview(
        league_player_id=record.league_player_id,
        player_id=record.player_id,
        player_name=record.player_name,
        team_id=record.team_id,
        positions=positions,
        base_rating=rating,
        potential=record.potential,
        total_games=int(games),
        adjusted_average=float(avg),
        games_upgrade=games_up,
        avg_upgrade=avg_up,
        delta=delta,
        new_rating=new_rating,
        attribute_updates=updates,
    )
    logger.debug("youngster preview %s", preview)
    return preview


def preview_roster(
    records: Iterable[YoungsterRecord],
    policies: Optional[ProgressionPolicies] = None,
) -> List[YoungsterPreview]:
    return [preview_youngster(r, policies) for r in records]
