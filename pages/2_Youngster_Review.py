import streamlit as st

from services.repository import Repository
from services.review_session import ReviewSessionManager
from domain.season_review import preview_roster
from components.banners import context_banner
from components.tables import youngster_table

st.set_page_config(page_title="Youngster Review", page_icon="🌱")
st.title("🌱 Youngster Season Review")

repo = Repository()
try:
    roster = repo.load_roster()
except Exception as e:
    st.error(f"Failed to load roster: {e}")
    st.stop()

policies = repo.load_policies()
context_banner(f"League {roster.league_id or '?'} • Season {roster.season} • {len(roster.youngsters)} youngsters")

previews = preview_roster(roster.youngsters, policies)
if not previews:
    st.info("No youngsters on this roster.")
    st.stop()

youngster_table(previews)

for p in previews:
    with st.expander(str(p)):
        st.json(p.attribute_updates)

sm = ReviewSessionManager()
active = sm.get_active()
st.markdown("---")
if active is None:
    name = st.text_input("Review name (e.g. 'Season 1 youngsters')")
    if st.button("Start review", type="primary"):
        try:
            sm.start(roster.league_id, roster.season, name=name)
            st.rerun()
        except Exception as e:
            st.error(f"Failed to start review: {e}")
else:
    st.success(f"Active review: {active['id']} (started {active['started_at']}, {len(active['applied'])} applied)")
    if st.button("Apply all upgrades"):
        sm.apply(previews, policies_version=policies.version)
        st.rerun()
    notes = st.text_area("Review notes (optional)")
    if st.button("Complete review", type="primary"):
        sm.complete(notes=notes)
        st.rerun()
