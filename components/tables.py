"""
Tables component for youngster previews and wage breakdowns.
"""
from __future__ import annotations

import streamlit as st
from typing import List

from domain.models import WageBill, YoungsterPreview


def youngster_table(previews: List[YoungsterPreview]) -> None:
    rows = [
        {
            "Player": p.player_name or p.player_id,
            "Pos": p.positions,
            "Base": p.base_rating,
            "Games": p.total_games,
            "Avg": round(p.adjusted_average, 2),
            "Games Δ": p.games_upgrade,
            "Avg Δ": p.avg_upgrade,
            "Δ": p.delta,
            "New": p.new_rating,
            "Potential": p.potential,
        }
        for p in previews
    ]
    st.dataframe(rows, use_container_width=True, hide_index=True)


def wage_breakdown_table(bill: WageBill) -> None:
    rows = [
        {
            "Player": w.player_name or w.player_id,
            "Rating": w.rating,
            "Positions": w.positions,
            "Base wage": w.base_wage,
        }
        for w in bill.breakdown
    ]
    st.dataframe(rows, use_container_width=True, hide_index=True)
