from unittest.mock import MagicMock

import pytest
import requests

from core.config import Settings
from core.leads import (
    NETWORK_ERROR,
    SUBMIT_ERROR,
    LeadContact,
    LeadSubmissionError,
    build_summary_text,
    format_currency,
    submit_lead,
    validate_contact,
)
from dilemma.calculators import compute
from dilemma.models import FinancialProfile, RecurringDebts

WEBHOOK = "https://hooks.example.test/catch/1"


@pytest.fixture
def profile():
    return FinancialProfile(
        current_home_value=500000,
        current_mortgage_balance=250000,
        current_interest_rate_pct=3.0,
        current_monthly_payment=1800,
        new_home_price=750000,
        new_interest_rate_pct=6.5,
        new_home_address="9 New Ln",
        monthly_gross_income=10000,
        debts=RecurringDebts(auto=500, student=300, credit_card=200),
    )


@pytest.fixture
def contact():
    return LeadContact(name="Sam Doe", email="sam@example.com", phone="(555) 123-4567")


def _settings(url=WEBHOOK):
    return Settings(_env_file=None, LEAD_WEBHOOK_URL=url)


def test_validate_contact_ok(contact):
    assert validate_contact(contact) == {}


def test_validate_contact_errors():
    errors = validate_contact(LeadContact(name=" ", email="nope", phone="555-1234"))
    assert errors == {
        "name": "Name is required.",
        "email": "Email is invalid.",
        "phone": "Phone number must be at least 10 digits.",
    }
    errors = validate_contact(LeadContact())
    assert errors["email"] == "Email is required."
    assert errors["phone"] == "Phone number is required."


def test_format_currency():
    assert format_currency(500000) == "$500,000"
    assert format_currency(4506.917) == "$4,506.92"
    assert format_currency(312.5) == "$312.5"
    assert format_currency(-108000) == "-$108,000"
    assert format_currency(0) == "$0"


def test_summary_text(profile):
    text = build_summary_text(profile, compute(profile))
    lines = text.split("\n")
    assert lines[0] == "--- User Input ---"
    assert "Current Home Value: $500,000" in lines
    assert "Current Interest Rate: 3%" in lines
    assert "Current Address: N/A" in lines
    assert "New Address: 9 New Ln" in lines
    assert "--- Calculated Results ---" in lines
    assert "Proceeds from Sale: $210,000" in lines
    assert "Current DTI: 28.0%" in lines


def test_submit_lead_posts_form(profile, contact):
    session = MagicMock()
    session.post.return_value = MagicMock(ok=True, status_code=200)
    submit_lead(contact, profile, compute(profile), settings=_settings(), session=session)
    args, kwargs = session.post.call_args
    assert args[0] == WEBHOOK
    assert set(kwargs["data"]) == {"name", "email", "phone", "summary"}
    assert kwargs["data"]["summary"].startswith("--- User Input ---")
    assert kwargs["timeout"] == 15.0


def test_submit_lead_non_2xx(profile, contact):
    session = MagicMock()
    session.post.return_value = MagicMock(ok=False, status_code=500)
    with pytest.raises(LeadSubmissionError) as exc:
        submit_lead(contact, profile, compute(profile), settings=_settings(), session=session)
    assert str(exc.value) == SUBMIT_ERROR
    assert session.post.call_count == 1


def test_submit_lead_network_error(profile, contact):
    session = MagicMock()
    session.post.side_effect = requests.ConnectionError("down")
    with pytest.raises(LeadSubmissionError) as exc:
        submit_lead(contact, profile, compute(profile), settings=_settings(), session=session)
    assert str(exc.value) == NETWORK_ERROR


def test_submit_lead_requires_webhook(profile, contact):
    session = MagicMock()
    with pytest.raises(LeadSubmissionError):
        submit_lead(contact, profile, compute(profile), settings=_settings(url=None), session=session)
    session.post.assert_not_called()
