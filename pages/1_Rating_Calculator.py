import streamlit as st

from domain.overall import compute_base_overall, compute_overall_from_stats
from domain.position_weights import resolve_primary_position, weights_for
from components.controls import sidebar_player_inputs
from components.banners import context_banner
from components.cards import rating_card

st.set_page_config(page_title="Rating Calculator", page_icon="🧮")
st.title("🧮 Rating Calculator")

positions, ir, stats = sidebar_player_inputs(default_positions="ST")
primary = resolve_primary_position(positions)
context_banner(f"{primary.value} • {ir}★ reputation")

base = compute_base_overall(positions, stats)
overall = compute_overall_from_stats(positions, stats, ir)
rating_card(overall, base, positions)

with st.expander("Position weights"):
    weights = weights_for(primary)
    st.dataframe(
        [{"Attribute": a, "Weight": w, "Value": stats.get(a, 50), "Contribution": round(w * stats.get(a, 50), 2)}
         for a, w in weights.items()],
        use_container_width=True,
        hide_index=True,
    )
    st.caption(f"Weights sum to {sum(weights.values()):.2f}")
