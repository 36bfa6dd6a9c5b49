"""
Repository helpers for reading/writing JSON data files used by the app
(progression policies, league rosters).
"""
from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict

from domain.models import RosterData
from domain.policies import ProgressionPolicies
from domain.validators import validate_roster
from domain.wages import team_wage_bill

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class Repository:
    def __init__(self, data_dir: Path | None = None) -> None:
        self.data_dir = data_dir or DATA_DIR
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def load_roster(self, filename: str = "roster.json") -> RosterData:
        fp = self.data_dir / filename
        with fp.open("r", encoding="utf-8") as f:
            return validate_roster(json.load(f))

    def league_snapshot(self, filename: str = "roster.json") -> Dict[str, Any]:
        """Headline numbers for the landing page."""
        roster = self.load_roster(filename)
        bill = team_wage_bill(roster.players, roster.budget)
        return {
            "league_id": roster.league_id,
            "season": roster.season,
            "players": bill.player_count,
            "youngsters": len(roster.youngsters),
            "wage_bill": bill.total_wage_bill,
            "available_balance": bill.available_balance,
            "policies_version": self.load_policies().version,
        }

    def load_policies(self) -> ProgressionPolicies:
        fp = self.data_dir / "policies.json"
        if not fp.exists():
            return ProgressionPolicies()
        try:
            raw = json.loads(fp.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("policies.json unreadable, using defaults: %s", e)
            return ProgressionPolicies()
        pol = ProgressionPolicies()
        pol.version = raw.get("version", pol.version)
        try:
            pol.progressionRate = float(raw.get("progressionRate", pol.progressionRate))
            pol.indTrainingRate = float(raw.get("indTrainingRate", pol.indTrainingRate))
            pol.nonWeightedRate = float(raw.get("nonWeightedRate", pol.nonWeightedRate))
            pol.minGamesForAvgUpgrade = int(raw.get("minGamesForAvgUpgrade", pol.minGamesForAvgUpgrade))
            pol.previewRatingFloor = int(raw.get("previewRatingFloor", pol.previewRatingFloor))
            pol.ratingCeiling = int(raw.get("ratingCeiling", pol.ratingCeiling))
            pol.defaultPotential = int(raw.get("defaultPotential", pol.defaultPotential))
        except (TypeError, ValueError) as e:
            logger.warning("policies.json has a bad numeric value, using defaults: %s", e)
            return ProgressionPolicies()
        pol.applyPotentialCap = bool(raw.get("applyPotentialCap", pol.applyPotentialCap))
        pol.band75OwnAvgRanges = bool(raw.get("band75OwnAvgRanges", pol.band75OwnAvgRanges))
        return pol

    def save_policies(self, pol: ProgressionPolicies) -> None:
        fp = self.data_dir / "policies.json"
        data: Dict[str, Any] = asdict(pol)
        fp.write_text(json.dumps(data, indent=2), encoding="utf-8")
