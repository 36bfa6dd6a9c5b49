"""
Print the end-of-season youngster preview for a roster file.

    python -m scripts.youngster_review --roster data/roster.json
"""
from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path

from domain.season_review import preview_roster
from services.repository import Repository


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--roster", type=str, default="data/roster.json")
    parser.add_argument("--json", action="store_true", help="emit one JSON object per youngster")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    roster_path = Path(args.roster)
    repo = Repository(roster_path.parent)
    try:
        roster = repo.load_roster(roster_path.name)
    except (OSError, ValueError) as e:
        raise SystemExit(f"Could not load roster: {e}")
    policies = repo.load_policies()

    for preview in preview_roster(roster.youngsters, policies):
        if args.json:
            print(json.dumps(asdict(preview), ensure_ascii=False))
        else:
            print(preview)
            for attr, value in preview.attribute_updates.items():
                print(f"    {attr}: {value}")


if __name__ == "__main__":
    main()
