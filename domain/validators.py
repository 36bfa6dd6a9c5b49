"""
Validation helpers for roster and youngster JSON payloads.
"""
from pydantic import ValidationError
from .models import RosterData, YoungsterRecord


def validate_roster(data: dict) -> RosterData:
    """Validate dict against RosterData schema; raises helpful error if invalid."""
    try:
        return RosterData.model_validate(data)
    except ValidationError as e:
        # Re-raise with a cleaner message for UI consumption
        raise ValueError(f"Roster validation failed: {e}")


def validate_youngster(data: dict) -> YoungsterRecord:
    try:
        return YoungsterRecord.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Youngster validation failed: {e}")
