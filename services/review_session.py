"""
Review session management for the end-of-season youngster review:
start → apply upgrades → complete.

Enforces a single active review. Stores the active snapshot in JSON and
archives completed reviews to JSONL for later analysis.
"""
from __future__ import annotations

import json
import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from domain.models import YoungsterPreview
from services import telemetry

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent / "data" / "reviews"
ACTIVE_FILE = DATA_DIR / "active.json"
ARCHIVE_FILE = DATA_DIR / "reviews.jsonl"


def _ensure_dirs() -> None:
    DATA_DIR.mkdir(parents=True, exist_ok=True)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class ReviewSessionManager:
    def __init__(self) -> None:
        _ensure_dirs()

    def get_active(self) -> Optional[Dict[str, Any]]:
        if ACTIVE_FILE.exists():
            return json.loads(ACTIVE_FILE.read_text(encoding="utf-8"))
        return None

    def start(self, league_id: Optional[str], season: int, name: str) -> Dict[str, Any]:
        if ACTIVE_FILE.exists():
            raise RuntimeError("A review is already active. Complete it before starting a new one.")
        if not name or not name.strip():
            raise ValueError("Review name is required.")
        review = {
            "id": str(uuid.uuid4())[:8],
            "started_at": _now(),
            "status": "active",
            "name": name.strip(),
            "league_id": league_id,
            "season": season,
            "applied": [],
        }
        ACTIVE_FILE.write_text(json.dumps(review, ensure_ascii=False, indent=2), encoding="utf-8")
        return review

    def apply(
        self,
        previews: Iterable[YoungsterPreview],
        policies_version: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Record upgrades against the active review and write them to the audit log.

        Upgrades already recorded in this review are skipped.
        """
        if not ACTIVE_FILE.exists():
            raise RuntimeError("No active review to apply upgrades to.")
        review = json.loads(ACTIVE_FILE.read_text(encoding="utf-8"))
        applied_ids = {a["upgrade_id"] for a in review["applied"]}
        records = []
        for preview in previews:
            upgrade_id = telemetry.make_upgrade_id(review.get("league_id"), review.get("season", 1), preview)
            if upgrade_id in applied_ids:
                logger.info("upgrade %s for %s already applied, skipping", upgrade_id, preview.player_id)
                continue
            rec = telemetry.log_upgrade(
                preview,
                league_id=review.get("league_id"),
                season=review.get("season", 1),
                policies_version=policies_version,
            )
            review["applied"].append({
                "upgrade_id": rec["upgrade_id"],
                "player_id": preview.player_id,
                "delta": preview.delta,
                "new_rating": preview.new_rating,
                "ts": rec["ts"],
            })
            applied_ids.add(upgrade_id)
            records.append(rec)
        ACTIVE_FILE.write_text(json.dumps(review, ensure_ascii=False, indent=2), encoding="utf-8")
        logger.info("applied %d youngster upgrades to review %s", len(records), review["id"])
        return records

    def complete(self, notes: Optional[str] = None) -> Dict[str, Any]:
        if not ACTIVE_FILE.exists():
            raise RuntimeError("No active review to complete.")
        review = json.loads(ACTIVE_FILE.read_text(encoding="utf-8"))
        review["completed_at"] = _now()
        review["status"] = "completed"
        review["notes"] = notes
        # Append to archive and remove active file
        with ARCHIVE_FILE.open("a", encoding="utf-8") as f:
            f.write(json.dumps(review, ensure_ascii=False) + "\n")
        ACTIVE_FILE.unlink(missing_ok=True)
        return review

    def cancel(self) -> None:
        ACTIVE_FILE.unlink(missing_ok=True)
