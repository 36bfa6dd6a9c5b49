"""
Banner component to summarise the current selection.
"""
from __future__ import annotations

import streamlit as st


def context_banner(text: str) -> None:
    st.markdown(
        f"<div class='context-banner'><strong>Context:</strong> {text}</div>",
        unsafe_allow_html=True,
    )
