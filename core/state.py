"""Per-session calculator state.

Everything lives in ``st.session_state`` for the life of the browser session;
nothing is written to disk.  The ``profile``/``result``/``warnings`` slot is
replaced as a whole on each successful calculation and left untouched when a
calculation fails.
"""
import copy
import logging
from typing import Optional

import streamlit as st

from core.rules import evaluate_rules
from dilemma.calculators import ValidationError, compute
from dilemma.models import CalculationResult, FinancialProfile
from dilemma.presets import DEFAULT_PROFILE

logger = logging.getLogger(__name__)

BUSY_KEYS = ("analysis", "home_value", "home_detail", "lead")

# Friendlier wording for the calculator's validation failures, keyed by field.
USER_MESSAGES = {
    "current_home_value": "Estimated Home Value must be greater than zero.",
    "new_home_price": "New Home Purchase Price must be greater than zero.",
    "new_interest_rate_pct": "Estimated New Interest Rate must be greater than zero.",
    "monthly_gross_income": "Gross Monthly Income must be greater than zero to calculate DTI.",
}


def init_state() -> None:
    ss = st.session_state
    ss.setdefault("inputs", copy.deepcopy(DEFAULT_PROFILE))
    ss.setdefault("property_detail", None)
    ss.setdefault("profile", None)
    ss.setdefault("result", None)
    ss.setdefault("warnings", [])
    ss.setdefault("analysis", "")
    ss.setdefault("error", "")
    ss.setdefault("lead_submitted", False)
    ss.setdefault("busy", {k: False for k in BUSY_KEYS})


def current_profile() -> FinancialProfile:
    """Build a fresh profile from the widget inputs and any property detail."""
    ss = st.session_state
    return FinancialProfile(**ss["inputs"], property_detail=ss.get("property_detail"))


def run_calculation(profile: FinancialProfile) -> Optional[CalculationResult]:
    """Compute and store a result; return ``None`` on validation failure."""
    ss = st.session_state
    ss["error"] = ""
    try:
        result = compute(profile)
    except ValidationError as exc:
        logger.info("Calculation rejected (%s): %s", exc.field, exc)
        ss["error"] = USER_MESSAGES.get(exc.field, str(exc))
        return None
    ss.update(
        {
            "profile": profile,
            "result": result,
            "warnings": evaluate_rules(result),
            "analysis": "",
        }
    )
    return result


def set_busy(key: str, value: bool) -> None:
    st.session_state["busy"][key] = value


def is_busy(key: str) -> bool:
    return bool(st.session_state.get("busy", {}).get(key, False))
