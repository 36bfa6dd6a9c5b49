"""
Progression policy model with defaults; kept pure (no file IO here).
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ProgressionPolicies:
    version: str = "1.0.0"
    progressionRate: float = 1.6        # weighted attrs, per OVR point
    indTrainingRate: float = 2.0        # weighted attrs under individual training
    nonWeightedRate: float = 1.0
    minGamesForAvgUpgrade: int = 8
    previewRatingFloor: int = 40
    ratingCeiling: int = 99
    defaultPotential: int = 99
    applyPotentialCap: bool = False
    band75OwnAvgRanges: bool = False   # bucket 75-79 averages with its own breakpoints
