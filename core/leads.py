"""Consultant lead capture.

A lead is the user's contact details plus a plain-text rendering of their
inputs and results, posted form-encoded to a marketing webhook.
"""
from __future__ import annotations

import logging
import re
from typing import Dict, Optional

import requests
from pydantic import BaseModel

from core.config import Settings, get_settings
from dilemma.models import CalculationResult, FinancialProfile

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"\S+@\S+\.\S+")

NETWORK_ERROR = "A network error occurred. Please check your connection and try again."
SUBMIT_ERROR = "Failed to submit your request. Please try again later."


class LeadSubmissionError(RuntimeError):
    pass


class LeadContact(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""


def validate_contact(contact: LeadContact) -> Dict[str, str]:
    """Return field -> message for every invalid field (empty when valid)."""
    errors: Dict[str, str] = {}
    if not contact.name.strip():
        errors["name"] = "Name is required."
    if not contact.email.strip():
        errors["email"] = "Email is required."
    elif not EMAIL_RE.search(contact.email):
        errors["email"] = "Email is invalid."
    if not contact.phone.strip():
        errors["phone"] = "Phone number is required."
    elif len(re.sub(r"\D", "", contact.phone)) < 10:
        errors["phone"] = "Phone number must be at least 10 digits."
    return errors


def format_currency(value: float) -> str:
    """``$1,234.5`` style: thousands separators, at most two decimals."""
    text = f"{abs(value):,.2f}".rstrip("0").rstrip(".")
    return f"-${text}" if value < 0 else f"${text}"


def build_summary_text(profile: FinancialProfile, result: CalculationResult) -> str:
    debts = profile.debts
    lines = [
        "--- User Input ---",
        f"Current Home Value: {format_currency(profile.current_home_value)}",
        f"Current Mortgage Balance: {format_currency(profile.current_mortgage_balance)}",
        f"Current Interest Rate: {profile.current_interest_rate_pct:g}%",
        f"Current Monthly Payment: {format_currency(profile.current_monthly_payment)}",
        f"New Home Price: {format_currency(profile.new_home_price)}",
        f"New Interest Rate: {profile.new_interest_rate_pct:g}%",
        f"Gross Monthly Income: {format_currency(profile.monthly_gross_income)}",
        f"Auto Debt: {format_currency(debts.auto)}",
        f"Student Debt: {format_currency(debts.student)}",
        f"Credit Card Debt: {format_currency(debts.credit_card)}",
        f"Other Debt: {format_currency(debts.other)}",
        f"Current Address: {profile.current_home_address or 'N/A'}",
        f"New Address: {profile.new_home_address or 'N/A'}",
        "",
        "--- Calculated Results ---",
        f"Proceeds from Sale: {format_currency(result.proceeds_from_sale)}",
        f"New Loan Amount: {format_currency(result.new_loan_amount)}",
        f"New Monthly Payment: {format_currency(result.new_monthly_payment)}",
        f"Current DTI: {result.current_dti:.1f}%",
        f"New DTI: {result.new_dti:.1f}%",
        f"Monthly Payment Difference: {format_currency(result.monthly_payment_difference)}",
    ]
    return "\n".join(lines)


def submit_lead(
    contact: LeadContact,
    profile: FinancialProfile,
    result: CalculationResult,
    settings: Optional[Settings] = None,
    session: Optional[requests.Session] = None,
) -> None:
    """POST the lead to the configured webhook; raise on any failure."""
    settings = settings or get_settings()
    if not settings.LEAD_WEBHOOK_URL:
        logger.error("LEAD_WEBHOOK_URL is not configured; cannot submit lead")
        raise LeadSubmissionError(SUBMIT_ERROR)
    payload = {**contact.model_dump(), "summary": build_summary_text(profile, result)}
    http = session or requests
    try:
        response = http.post(
            settings.LEAD_WEBHOOK_URL,
            data=payload,
            timeout=settings.WEBHOOK_TIMEOUT_SECONDS,
        )
    except requests.ConnectionError as exc:
        logger.error("Lead submission network error: %s", exc)
        raise LeadSubmissionError(NETWORK_ERROR) from exc
    except requests.RequestException as exc:
        logger.error("Lead submission failed: %s", exc)
        raise LeadSubmissionError(SUBMIT_ERROR) from exc
    if not response.ok:
        logger.error("Lead submission failed. Server responded with status: %s", response.status_code)
        raise LeadSubmissionError(SUBMIT_ERROR)
    logger.info("Lead submitted (status %s)", response.status_code)
