"""
Rating card component.
"""
from __future__ import annotations

import streamlit as st
from domain.wages import annual_wage, calculate_wage


def rating_card(overall: int, base: int, positions: str) -> None:
    st.markdown("<div class='rating-card'>", unsafe_allow_html=True)
    c1, c2, c3 = st.columns([2, 2, 2])
    with c1:
        st.subheader("Overall")
        st.markdown(f"**{overall}**")
        if overall != base:
            st.caption(f"Base {base} + reputation {overall - base}")
    with c2:
        st.subheader("Base wage")
        st.markdown(f"{calculate_wage(overall, positions):,}")
    with c3:
        st.subheader("Contract wage")
        st.markdown(f"{annual_wage(overall, positions):,}")
    st.markdown("</div>", unsafe_allow_html=True)
