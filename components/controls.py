"""
Sidebar controls component for entering a player's positions, reputation
and attributes. Stateless: reads/writes state through return values.
"""
from __future__ import annotations

import streamlit as st
from typing import Dict, Tuple

from domain.models import PositionKey
from domain.position_weights import STAT_COLUMNS, resolve_primary_position, weighted_attrs_for_position


def _label(attr: str) -> str:
    return attr.replace("gk_", "GK ").replace("_", " ").title()


def sidebar_player_inputs(default_positions: str = "ST") -> Tuple[str, int, Dict[str, int]]:
    """Render the player inputs and return (positions, international_reputation, stats)."""
    st.sidebar.header("Player")
    positions = st.sidebar.text_input(
        "Positions",
        value=default_positions,
        help="Comma or slash separated, primary first (e.g. 'CB,CDM').",
        key="positions",
    )
    primary = resolve_primary_position(positions)
    st.sidebar.caption(f"Primary position: {primary.value}")
    ir = st.sidebar.slider("International reputation", min_value=1, max_value=5, value=1, key="ir")

    weighted = weighted_attrs_for_position(primary)
    show_all = st.sidebar.checkbox("Show all attributes", value=False, key="show_all_attrs")
    attrs = list(STAT_COLUMNS) if show_all else weighted

    st.sidebar.subheader("Attributes")
    stats: Dict[str, int] = {}
    for attr in attrs:
        stats[attr] = st.sidebar.number_input(
            _label(attr) + (" •" if attr in weighted else ""),
            min_value=1,
            max_value=99,
            value=50,
            step=1,
            key=f"attr_{attr}",
        )
    return positions, ir, stats


def position_select(label: str = "Position", default: PositionKey = PositionKey.ST) -> PositionKey:
    options = list(PositionKey)
    return st.selectbox(label, options=options, index=options.index(default), format_func=lambda p: p.value)
