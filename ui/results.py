import streamlit as st

from core.analysis import analysis_to_html
from core.rules import classify_dti, classify_payment_change
from export.csv_export import comparison_frame

TONE_COLORS = {"adverse": "#ef4444", "caution": "#d97706", "favorable": "#16a34a"}


def _metric_card(col, title: str, value: str, subtext: str, tone: str = None):
    color = TONE_COLORS.get(tone, "#1e293b")
    col.markdown(
        f"""
        <div class="dilemma-card">
          <div class="dilemma-card-title">{title}</div>
          <div class="dilemma-card-value" style="color:{color}">{value}</div>
          <div class="dilemma-card-sub">{subtext}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def render_results():
    """Snapshot cards, advisories and the narrative for the stored result."""
    result = st.session_state.get("result")
    if result is None:
        return
    profile = st.session_state["profile"]
    st.markdown(
        """
        <style>
        .dilemma-card {background:rgba(255,255,255,0.6); padding:12px; border-radius:8px; box-shadow:0 1px 3px #0002; text-align:center;}
        .dilemma-card-title {font-size:0.85rem; color:#64748b;}
        .dilemma-card-value {font-size:1.5rem; font-weight:700;}
        .dilemma-card-sub {font-size:0.75rem; color:#94a3b8;}
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.header("Financial Snapshot: Before vs. After")
    c1, c2, c3, c4 = st.columns(4)
    diff = result.monthly_payment_difference
    _metric_card(c1, "Current DTI", f"{result.current_dti:.1f}%", "Debt-to-Income")
    _metric_card(c2, "New DTI", f"{result.new_dti:.1f}%", "Debt-to-Income", classify_dti(result))
    _metric_card(c3, "New Mthly. Payment", f"${result.new_monthly_payment:,.0f}", "Est. PITI")
    sign = "+" if diff > 0 else "-" if diff < 0 else ""
    _metric_card(c4, "Payment Change", f"{sign}${abs(diff):,.0f}", "Per Month", classify_payment_change(result))

    for r in st.session_state.get("warnings", []):
        if r.severity == "warn":
            st.warning(r.message)
        else:
            st.info(r.message)

    with st.expander("Breakdown"):
        st.caption(f"Selling Costs (8%): ${result.selling_costs:,.2f}")
        st.caption(f"Proceeds from Sale: ${result.proceeds_from_sale:,.2f}")
        st.caption(f"Down Payment: ${result.down_payment:,.2f}")
        st.caption(f"New Loan Amount: ${result.new_loan_amount:,.2f}")
        st.caption(f"Monthly P&I: ${result.principal_and_interest:,.2f}")
        st.caption(f"Monthly Taxes: ${result.monthly_tax:,.2f}")
        st.caption(f"Monthly Insurance: ${result.monthly_insurance:,.2f}")
        st.dataframe(comparison_frame(profile, result))

    st.subheader("✨ AI-Powered Analysis")
    analysis = st.session_state.get("analysis", "")
    if analysis:
        st.markdown(analysis_to_html(analysis), unsafe_allow_html=True)
    else:
        st.caption("Analysis will appear here once it is ready.")
