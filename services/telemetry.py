"""
Telemetry service: logs applied youngster upgrades to a JSONL audit file.
"""
from __future__ import annotations

import json
import hashlib
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from domain.models import YoungsterPreview


LOG_DIR = Path(__file__).resolve().parent.parent / "data" / "logs"
LOG_FILE = LOG_DIR / "youngster_upgrades.jsonl"


def _ensure_dirs() -> None:
    LOG_DIR.mkdir(parents=True, exist_ok=True)


def make_upgrade_id(league_id: Optional[str], season: int, preview: YoungsterPreview) -> str:
    """Deterministic fingerprint for one youngster's upgrade in a season."""
    payload = {
        "league_id": league_id,
        "season": season,
        "preview": asdict(preview),
    }
    raw = json.dumps(payload, sort_keys=True, ensure_ascii=False)
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()[:16]


def log_upgrade(
    preview: YoungsterPreview,
    league_id: Optional[str],
    season: int,
    policies_version: Optional[str] = None,
    note: Optional[str] = None,
) -> Dict[str, Any]:
    """Append a log entry to the JSONL file and return the record."""
    _ensure_dirs()
    rec: Dict[str, Any] = {
        "ts": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "upgrade_id": make_upgrade_id(league_id, season, preview),
        "league_id": league_id,
        "season": season,
        "preview": asdict(preview),
        "policies_version": policies_version,
        "note": note,
    }
    with LOG_FILE.open("a", encoding="utf-8") as f:
        f.write(json.dumps(rec, ensure_ascii=False) + "\n")
    return rec


def read_upgrades() -> List[Dict[str, Any]]:
    if not LOG_FILE.exists():
        return []
    rows = []
    with LOG_FILE.open("r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line:
                rows.append(json.loads(line))
    return rows
