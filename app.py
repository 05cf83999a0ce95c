import logging

import streamlit as st
from pydantic import ValidationError as SchemaError

from core.config import configure_logging, get_settings, log_missing_credentials
from core.integrations import generate_financial_analysis
from core.state import current_profile, init_state, is_busy, run_calculation, set_busy
from core.version import __version__
from ui.consultant import render_consultant_form, render_exports
from ui.inputs import render_current_situation, render_income_debts, render_next_move
from ui.results import render_results

logger = logging.getLogger(__name__)


@st.cache_resource
def _startup() -> bool:
    """Process-wide setup; runs once per server, not once per rerun."""
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    logger.info("Starting 3%% Dilemma Calculator v%s", __version__)
    return log_missing_credentials(settings)


def analyze():
    """Compute the results, then ask for the narrative analysis."""
    try:
        profile = current_profile()
    except SchemaError as e:
        logger.info("Rejected inputs: %s", e)
        st.session_state["error"] = "Please check your inputs: amounts must be valid, non-negative numbers."
        return
    result = run_calculation(profile)
    if result is None:
        return
    st.session_state["lead_submitted"] = False
    set_busy("analysis", True)
    try:
        with st.spinner("Analyzing your financial future..."):
            st.session_state["analysis"] = generate_financial_analysis(profile, result)
    finally:
        set_busy("analysis", False)


def main():
    st.set_page_config(page_title="The 3% Dilemma Calculator", page_icon="🏠", layout="centered")
    _startup()
    init_state()

    st.title("The 3% Dilemma Calculator")
    st.caption("Analyze the financial impact of leaving your low-interest rate behind.")

    left, right = st.columns(2)
    with left:
        render_current_situation()
    with right:
        render_next_move()
    render_income_debts()

    if st.button("Analyze My Move", type="primary", disabled=is_busy("analysis")):
        analyze()

    if st.session_state["error"]:
        st.error(st.session_state["error"])

    render_results()
    if st.session_state.get("result") is not None:
        st.divider()
        render_exports()
        render_consultant_form()
    st.caption(f"v{__version__}")


if __name__ == "__main__":
    main()
