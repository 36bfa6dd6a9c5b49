"""
Youngster season upgrade: how many OVR points a youngster gains or loses at
the end of a season.

Two independent tables are consulted, both keyed by the OVR band at the start
of the season:
- games played (any number of games)
- adjusted average match rating (only counted from 8 games upwards)

The upgrade is the better of the two.
"""
from __future__ import annotations

from typing import Dict, List, Tuple

from .models import OVRBand

MIN_GAMES_FOR_AVG_UPGRADE = 8

GAMES_UPGRADE: Dict[OVRBand, Dict[str, int]] = {
    OVRBand.UP_TO_69: {"14+": 2, "12-13": 1, "8-11": 0, "6-7": -1, "≤5": -2},
    OVRBand.B70_74: {"14+": 1, "8-13": 0, "6-7": -1, "≤5": -2},
    OVRBand.B75_79: {"14+": 1, "8-13": 0, "6-7": -1, "≤5": -2},
    OVRBand.B80_84: {"15+": 1, "11-14": 0, "8-10": -1, "6-7": -2, "≤5": -3},
    OVRBand.B85_89: {"12+": 0, "9-11": -1, "6-8": -2, "≤5": -3},
    OVRBand.B90_PLUS: {"12+": 0, "9-11": -1, "6-8": -2, "≤5": -3},
}

AVG_UPGRADE: Dict[OVRBand, Dict[str, int]] = {
    OVRBand.UP_TO_69: {
        "7.0+": 4, "6.6-6.9": 3, "6.2-6.5": 2, "5.8-6.1": 1, "5.6-5.7": 0, "5.2-5.5": -1, "≤5.1": -2,
    },
    OVRBand.B70_74: {
        "7.1+": 4, "6.7-7.0": 3, "6.3-6.6": 2, "5.9-6.2": 1, "5.7-5.8": 0, "5.3-5.6": -1, "≤5.2": -2,
    },
    OVRBand.B75_79: {
        "7.2+": 4, "6.8-7.1": 3, "6.4-6.7": 2, "6.0-6.3": 1, "5.8-5.9": 0, "5.4-5.7": -1, "≤5.3": -2,
    },
    OVRBand.B80_84: {
        "7.2+": 3, "6.8-7.1": 2, "6.4-6.7": 1, "6.0-6.3": 0, "5.6-5.9": -1, "5.2-5.5": -2, "≤5.1": -3,
    },
    OVRBand.B85_89: {
        "7.4+": 3, "7.0-7.3": 2, "6.6-6.9": 1, "6.2-6.5": 0, "5.8-6.1": -1, "5.4-5.7": -2, "≤5.3": -3,
    },
    OVRBand.B90_PLUS: {
        "7.4+": 2, "7.0-7.3": 1, "6.6-6.9": 0, "6.2-6.5": -1, "5.8-6.1": -2, "5.4-5.7": -3, "≤5.3": -4,
    },
}

# (minimum average, bucket label), checked top-down
_AVG_RANGES_LOW: List[Tuple[float, str]] = [
    (7.0, "7.0+"), (6.6, "6.6-6.9"), (6.2, "6.2-6.5"), (5.8, "5.8-6.1"), (5.6, "5.6-5.7"), (5.2, "5.2-5.5"), (0, "≤5.1"),
]
_AVG_RANGES_MID: List[Tuple[float, str]] = [
    (7.1, "7.1+"), (6.7, "6.7-7.0"), (6.3, "6.3-6.6"), (5.9, "5.9-6.2"), (5.7, "5.7-5.8"), (5.3, "5.3-5.6"), (0, "≤5.2"),
]
# 75-79 labels as written in AVG_UPGRADE; only used with own_75_ranges
_AVG_RANGES_75: List[Tuple[float, str]] = [
    (7.2, "7.2+"), (6.8, "6.8-7.1"), (6.4, "6.4-6.7"), (6.0, "6.0-6.3"), (5.8, "5.8-5.9"), (5.4, "5.4-5.7"), (0, "≤5.3"),
]
_AVG_RANGES_80: List[Tuple[float, str]] = [
    (7.2, "7.2+"), (6.8, "6.8-7.1"), (6.4, "6.4-6.7"), (6.0, "6.0-6.3"), (5.6, "5.6-5.9"), (5.2, "5.2-5.5"), (0, "≤5.1"),
]
_AVG_RANGES_HIGH: List[Tuple[float, str]] = [
    (7.4, "7.4+"), (7.0, "7.0-7.3"), (6.6, "6.6-6.9"), (6.2, "6.2-6.5"), (5.8, "5.8-6.1"), (5.4, "5.4-5.7"), (0, "≤5.3"),
]
_AVG_FALLBACK_BUCKET = "≤5.1"


def get_ovr_band(rating: float) -> OVRBand:
    if rating <= 69:
        return OVRBand.UP_TO_69
    if rating <= 74:
        return OVRBand.B70_74
    if rating <= 79:
        return OVRBand.B75_79
    if rating <= 84:
        return OVRBand.B80_84
    if rating <= 89:
        return OVRBand.B85_89
    return OVRBand.B90_PLUS


def games_bucket(games: float, band: OVRBand) -> str:
    if band == OVRBand.B80_84:
        if games >= 15:
            return "15+"
        if games >= 11:
            return "11-14"
        if games >= 8:
            return "8-10"
        if games >= 6:
            return "6-7"
        return "≤5"
    if band in (OVRBand.B85_89, OVRBand.B90_PLUS):
        if games >= 12:
            return "12+"
        if games >= 9:
            return "9-11"
        if games >= 6:
            return "6-8"
        return "≤5"
    if games >= 14:
        return "14+"
    if games >= 12:
        return "12-13"
    if band == OVRBand.UP_TO_69 and games >= 8:
        return "8-11"
    if band in (OVRBand.B70_74, OVRBand.B75_79) and games >= 8:
        return "8-13"
    if games >= 6:
        return "6-7"
    return "≤5"


def avg_bucket(avg: float, band: OVRBand, own_75_ranges: bool = False) -> str:
    """Bucket label for an average.

    By default the 75-79 band is bucketed with the 70-74 breakpoints, whose
    labels are absent from its table, so its average upgrade is always 0.
    ``own_75_ranges`` buckets it with breakpoints matching its own labels.
    """
    if band == OVRBand.UP_TO_69:
        ranges = _AVG_RANGES_LOW
    elif band == OVRBand.B70_74:
        ranges = _AVG_RANGES_MID
    elif band == OVRBand.B75_79:
        ranges = _AVG_RANGES_75 if own_75_ranges else _AVG_RANGES_MID
    elif band == OVRBand.B80_84:
        ranges = _AVG_RANGES_80
    else:
        ranges = _AVG_RANGES_HIGH
    for minimum, label in ranges:
        if avg >= minimum:
            return label
    return _AVG_FALLBACK_BUCKET


def get_games_upgrade(rating: float, games_played: float) -> int:
    """Games-based upgrade, using the OVR at the start of the season."""
    band = get_ovr_band(rating)
    return GAMES_UPGRADE[band].get(games_bucket(games_played, band), 0)


def get_avg_upgrade(
    rating: float,
    adjusted_average: float,
    games_played: float,
    min_games: int = MIN_GAMES_FOR_AVG_UPGRADE,
    own_75_ranges: bool = False,
) -> int:
    """Average-based upgrade; zero below the minimum number of games."""
    if games_played < min_games:
        return 0
    band = get_ovr_band(rating)
    return AVG_UPGRADE[band].get(avg_bucket(adjusted_average, band, own_75_ranges), 0)


def get_youngster_upgrade(
    rating: float,
    games_played: float,
    adjusted_average: float,
    min_games: int = MIN_GAMES_FOR_AVG_UPGRADE,
    own_75_ranges: bool = False,
) -> int:
    games_up = get_games_upgrade(rating, games_played)
    avg_up = get_avg_upgrade(rating, adjusted_average, games_played, min_games, own_75_ranges)
    return max(games_up, avg_up)
