"""
IL25 Player Engine - Main Application Entry Point

This is a thin bootstrapper that configures Streamlit and routes to pages.
All business logic is contained in the domain/ and services/ modules.
"""

import logging

import streamlit as st

from services.repository import Repository

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# Configure Streamlit page
st.set_page_config(
    page_title="⚽ IL25 Player Engine",
    page_icon="⚽",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Custom CSS for better styling
st.markdown("""
<style>
    .main > div {
        padding-top: 2rem;
    }
    .rating-card {
        border: 1px solid #e0e0e0;
        border-radius: 8px;
        padding: 1rem;
        margin: 1rem 0;
        background-color: #fafafa;
    }
    .context-banner {
        background-color: #e8f4f8;
        border-left: 4px solid #1f77b4;
        padding: 0.5rem 1rem;
        margin: 1rem 0;
        border-radius: 4px;
    }
</style>
""", unsafe_allow_html=True)

def main():
    """Main application entry point"""
    st.title("⚽ IL25 Player Engine")
    st.markdown("### Ratings, wages and youngster progression for your league.")
    st.info("""
    🧮 **Rating Calculator** - Overall rating and wages from individual attributes.

    🌱 **Youngster Review** - End-of-season upgrades and attribute progression.

    💰 **Wage Bill** - Team wage commitments against the budget.
    """)

    with st.expander("📋 League snapshot", expanded=True):
        try:
            snap = Repository().league_snapshot()
        except (OSError, ValueError) as e:
            st.warning(f"No roster loaded: {e}")
            return
        st.caption(f"League {snap['league_id'] or '?'} • Season {snap['season']} • policies v{snap['policies_version']}")
        c1, c2, c3, c4 = st.columns(4)
        c1.metric("Players", snap["players"])
        c2.metric("Youngsters", snap["youngsters"])
        c3.metric("Wage bill", f"{snap['wage_bill']:,}")
        c4.metric("Available", f"{snap['available_balance']:,}")

if __name__ == "__main__":
    main()
