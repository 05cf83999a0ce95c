import streamlit as st

from core import state
from dilemma.models import FinancialProfile, PropertyDetail


def _fresh():
    st.session_state.clear()
    state.init_state()


def test_init_state_seeds_defaults():
    _fresh()
    assert st.session_state["inputs"]["current_home_value"] == 500000.0
    assert st.session_state["inputs"]["debts"]["auto"] == 500.0
    assert st.session_state["result"] is None
    assert not state.is_busy("analysis")


def test_current_profile_carries_property_detail():
    _fresh()
    detail = PropertyDetail(annual_taxes=9000, annual_insurance=2400)
    st.session_state["property_detail"] = detail
    profile = state.current_profile()
    assert isinstance(profile, FinancialProfile)
    assert profile.property_detail == detail
    assert profile.total_monthly_debt == 1000.0


def test_successful_calculation_replaces_slot():
    _fresh()
    st.session_state["analysis"] = "old analysis"
    result = state.run_calculation(state.current_profile())
    assert result is not None
    assert st.session_state["result"] == result
    assert st.session_state["analysis"] == ""
    assert st.session_state["error"] == ""
    assert [w.code for w in st.session_state["warnings"]] == ["DTI_OVER_LIMIT"]


def test_failed_calculation_keeps_previous_result():
    _fresh()
    first = state.run_calculation(state.current_profile())
    bad = state.current_profile().model_copy(update={"monthly_gross_income": 0})
    assert state.run_calculation(bad) is None
    assert st.session_state["result"] == first
    assert st.session_state["error"] == "Gross Monthly Income must be greater than zero to calculate DTI."


def test_negative_equity_stored_with_warning():
    _fresh()
    st.session_state["inputs"].update(current_home_value=100000.0, current_mortgage_balance=200000.0)
    state.run_calculation(state.current_profile())
    codes = [w.code for w in st.session_state["warnings"]]
    assert "NEGATIVE_EQUITY" in codes


def test_busy_flags():
    _fresh()
    state.set_busy("lead", True)
    assert state.is_busy("lead")
    state.set_busy("lead", False)
    assert not state.is_busy("lead")
