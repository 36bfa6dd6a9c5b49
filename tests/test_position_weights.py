import pytest

from domain.models import PositionKey
from domain.position_weights import (
    POSITION_WEIGHTS, STAT_COLUMNS, resolve_primary_position, weights_for, weighted_attrs_for_position,
)


def test_resolve_primary_position_takes_first_token():
    assert resolve_primary_position("CB,CDM") == PositionKey.CB
    assert resolve_primary_position("lw/st") == PositionKey.LW
    assert resolve_primary_position("  rwb , rm") == PositionKey.RWB


def test_resolve_primary_position_defaults_to_cm():
    assert resolve_primary_position("") == PositionKey.CM
    assert resolve_primary_position(None) == PositionKey.CM
    assert resolve_primary_position("xyz") == PositionKey.CM
    assert resolve_primary_position("xyz,ST") == PositionKey.CM


def test_resolve_primary_position_skips_empty_tokens():
    assert resolve_primary_position(" ,ST") == PositionKey.ST
    assert resolve_primary_position("/GK") == PositionKey.GK


def test_every_position_has_weights_summing_to_one():
    assert set(POSITION_WEIGHTS) == set(PositionKey)
    for pos, weights in POSITION_WEIGHTS.items():
        assert sum(weights.values()) == pytest.approx(1.0, abs=1e-9), pos
        assert all(w > 0 for w in weights.values())
        assert set(weights) <= set(STAT_COLUMNS)


def test_mirrored_positions_share_weights():
    assert POSITION_WEIGHTS[PositionKey.LB] == POSITION_WEIGHTS[PositionKey.RB]
    assert POSITION_WEIGHTS[PositionKey.LWB] == POSITION_WEIGHTS[PositionKey.RWB]
    assert POSITION_WEIGHTS[PositionKey.LM] == POSITION_WEIGHTS[PositionKey.RM]
    assert POSITION_WEIGHTS[PositionKey.LW] == POSITION_WEIGHTS[PositionKey.RW]


def test_weights_for_returns_a_copy_and_falls_back_to_cm():
    w = weights_for(PositionKey.ST)
    w["finishing"] = 0.0
    assert POSITION_WEIGHTS[PositionKey.ST]["finishing"] == 0.18
    assert weights_for("nonsense") == POSITION_WEIGHTS[PositionKey.CM]


def test_weighted_attrs_for_position_keeps_table_order():
    assert weighted_attrs_for_position(PositionKey.GK) == [
        "gk_diving", "gk_handling", "gk_reflexes", "gk_positioning", "reactions", "gk_kicking",
    ]
    assert len(weighted_attrs_for_position(PositionKey.ST)) == 13
