import streamlit as st

from services.repository import Repository
from domain.wages import team_wage_bill, wage_impact
from components.controls import position_select
from components.tables import wage_breakdown_table

st.set_page_config(page_title="Wage Bill", page_icon="💰")
st.title("💰 Wage Bill")

repo = Repository()
try:
    roster = repo.load_roster()
except Exception as e:
    st.error(f"Failed to load roster: {e}")
    st.stop()

bill = team_wage_bill(roster.players, roster.budget)
c1, c2, c3 = st.columns(3)
c1.metric("Budget", f"{bill.total_budget:,}")
c2.metric("Wage bill", f"{bill.total_wage_bill:,}")
c3.metric("Available", f"{bill.available_balance:,}")

wage_breakdown_table(bill)
st.bar_chart(bill.position_wages)

st.subheader("Can we afford a signing?")
rating = st.number_input("Rating", min_value=1, max_value=99, value=75)
position = position_select()
impact = wage_impact(bill.total_budget, bill.total_wage_bill, rating, position.value)
if impact.affordable:
    st.success(f"Yes: wage {impact.wage_impact:,}, new bill {impact.new_total_wage_bill:,}")
else:
    st.error(f"Insufficient budget: wage {impact.wage_impact:,} takes the bill to {impact.new_total_wage_bill:,}")
