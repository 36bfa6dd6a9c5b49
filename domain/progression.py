"""
Youngster attribute progression: spread an OVR change over the individual
attributes.

- Weighted attributes of the primary position move 1.6 per OVR point
  (2.0 when the attribute is one of the player's individual training focuses).
- The player's non-weighted attributes move 1.0 per OVR point.
- Every value is clamped to 1..99; anything else is left untouched.
"""
from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional

from .models import YoungsterAttributesInput
from .numeric import clamp, finite_number, round_half_up
from .policies import ProgressionPolicies
from .position_weights import resolve_primary_position, weighted_attrs_for_position

logger = logging.getLogger(__name__)

DEFAULT_ATTRIBUTE_VALUE = 50
MIN_ATTRIBUTE = 1
MAX_ATTRIBUTE = 99


def potential_capped_ovr(new_ovr: int, potential: Optional[int], default_potential: int = 99) -> int:
    effective = default_potential if potential is None else potential
    return min(new_ovr, effective)


def _current_value(attributes: Mapping[str, object], attr: str) -> float:
    value = finite_number(attributes.get(attr))
    return DEFAULT_ATTRIBUTE_VALUE if value is None else value


def _progress(current: float, ovr_delta: int, rate: float) -> int:
    return clamp(round_half_up(current + ovr_delta * rate), MIN_ATTRIBUTE, MAX_ATTRIBUTE)


def compute_youngster_attributes(
    inp: YoungsterAttributesInput,
    policies: Optional[ProgressionPolicies] = None,
) -> Dict[str, int]:
    """Return new values for every weighted and non-weighted attribute.

    The potential cap is worked out for every call, but it only feeds back into
    the OVR delta when ``policies.applyPotentialCap`` is set.
    """
    pol = policies or ProgressionPolicies()
    capped_ovr = potential_capped_ovr(inp.new_ovr, inp.potential, pol.defaultPotential)
    target_ovr = capped_ovr if pol.applyPotentialCap else inp.new_ovr
    ovr_delta = target_ovr - inp.base_ovr
    logger.debug(
        "progression base=%s new=%s capped=%s delta=%s",
        inp.base_ovr, inp.new_ovr, capped_ovr, ovr_delta,
    )

    current = inp.current_attributes or {}
    ind_training = set(inp.ind_training_attrs or [])
    position = resolve_primary_position(inp.positions)

    updates: Dict[str, int] = {}
    for attr in weighted_attrs_for_position(position):
        rate = pol.indTrainingRate if attr in ind_training else pol.progressionRate
        updates[attr] = _progress(_current_value(current, attr), ovr_delta, rate)

    for attr in inp.non_weighted_attrs or []:
        if attr in updates:
            continue
        updates[attr] = _progress(_current_value(current, attr), ovr_delta, pol.nonWeightedRate)

    return updates
