import logging

import streamlit as st

from core.integrations import IntegrationError, estimate_home_value, fetch_property_detail
from core.state import is_busy, set_busy

logger = logging.getLogger(__name__)

DEBT_FIELDS = [
    ("auto", "Auto Loans"),
    ("student", "Student Loans"),
    ("credit_card", "Credit Cards"),
    ("other", "Other Debts"),
]


def _money_input(label: str, data: dict, field: str, help: str = None) -> float:
    data[field] = st.number_input(
        label, min_value=0.0, value=float(data.get(field, 0.0)), step=1000.0, help=help
    )
    return data[field]


def _rate_input(label: str, data: dict, field: str) -> float:
    data[field] = st.number_input(
        label, min_value=0.0, value=float(data.get(field, 0.0)), step=0.125, format="%.3f"
    )
    return data[field]


def render_current_situation():
    h = st.session_state["inputs"]
    st.subheader("Your Current Situation")
    _money_input("Estimated Home Value", h, "current_home_value")
    h["current_home_address"] = st.text_input(
        "Your Current Address (Optional)",
        value=h.get("current_home_address", ""),
        placeholder="e.g., 123 Main St, Anytown, USA",
    )
    if st.button(
        "Estimate Value",
        key="estimate_value",
        disabled=not h["current_home_address"].strip() or is_busy("home_value"),
    ):
        set_busy("home_value", True)
        st.session_state["error"] = ""
        try:
            with st.spinner("Estimating home value..."):
                h["current_home_value"] = float(estimate_home_value(h["current_home_address"]))
        except IntegrationError as e:
            st.session_state["error"] = str(e)
        finally:
            set_busy("home_value", False)
        st.rerun()
    _money_input("Current Mortgage Balance", h, "current_mortgage_balance")
    _rate_input("Current Interest Rate (%)", h, "current_interest_rate_pct")
    _money_input(
        "Current Monthly Payment",
        h,
        "current_monthly_payment",
        help="Principal, interest, taxes and insurance you pay today.",
    )


def render_next_move():
    h = st.session_state["inputs"]
    st.subheader("Your Next Move")
    _money_input("New Home Purchase Price", h, "new_home_price")
    _rate_input("Estimated New Interest Rate (%)", h, "new_interest_rate_pct")
    h["new_home_address"] = st.text_input(
        "New Home Address (Optional)",
        value=h.get("new_home_address", ""),
        placeholder="Get tax & insurance estimates",
    )
    if st.button(
        "Get Details",
        key="get_details",
        disabled=not h["new_home_address"].strip() or is_busy("home_detail"),
    ):
        set_busy("home_detail", True)
        st.session_state["error"] = ""
        try:
            with st.spinner("Looking up property details..."):
                st.session_state["property_detail"] = fetch_property_detail(
                    h["new_home_address"], h["new_home_price"]
                )
        except IntegrationError as e:
            st.session_state["error"] = str(e)
        finally:
            set_busy("home_detail", False)
    detail = st.session_state.get("property_detail")
    if detail is not None:
        st.caption(f"Est. Annual Property Tax: ${detail.annual_taxes:,.0f}")
        st.caption(f"Est. Annual Insurance: ${detail.annual_insurance:,.0f}")
        if detail.market_trends:
            st.caption(f"Market Trends: {detail.market_trends}")
        if st.button("Clear details", key="clear_details"):
            st.session_state["property_detail"] = None
            st.rerun()
    else:
        st.caption("Taxes and insurance use 1.25% and 0.5% of the price per year until details are loaded.")


def render_income_debts() -> float:
    h = st.session_state["inputs"]
    st.subheader("Income & Monthly Debts")
    _money_input("Gross Monthly Income", h, "monthly_gross_income")
    debts = h.setdefault("debts", {})
    cols = st.columns(len(DEBT_FIELDS))
    for col, (field, label) in zip(cols, DEBT_FIELDS):
        with col:
            debts[field] = st.number_input(
                label, min_value=0.0, value=float(debts.get(field, 0.0)), step=50.0
            )
    total = sum(float(v) for v in debts.values())
    st.markdown(f"**Total Monthly Debts:** ${total:,.2f}")
    return total
