from streamlit.testing.v1 import AppTest

import app
from core.integrations import IntegrationError
from dilemma.models import PropertyDetail
from ui import inputs


def full_app():
    import app

    app.main()


def debts_app():
    from core.state import init_state
    from ui.inputs import render_income_debts

    init_state()
    render_income_debts()


def _button(at, label):
    return next(b for b in at.button if b.label == label)


def _number(at, label):
    return next(w for w in at.number_input if w.label == label)


def _fake_analysis(profile, result):
    return "**TL;DR: The Bottom Line**\nThe payment goes up.\nThis is an AI-generated analysis, not financial advice."


def test_total_debts_shown():
    at = AppTest.from_function(debts_app)
    at.run(timeout=15)
    md = next(m.value for m in at.markdown if "Total Monthly Debts" in m.value)
    assert "$1,000.00" in md


def test_analyze_renders_snapshot_and_analysis(monkeypatch):
    monkeypatch.setattr(app, "generate_financial_analysis", _fake_analysis)
    at = AppTest.from_function(full_app)
    at.run(timeout=15)
    _button(at, "Analyze My Move").click()
    at.run(timeout=15)
    assert not at.exception
    assert not at.error
    result = at.session_state["result"]
    assert round(result.new_loan_amount) == 540000
    html = "\n".join(m.value for m in at.markdown)
    assert "+$2,707" in html
    assert "#ef4444" in html
    assert "analysis-tldr" in html
    assert any("43%" in w.value for w in at.warning)


def test_zero_income_shows_error_and_no_result(monkeypatch):
    monkeypatch.setattr(app, "generate_financial_analysis", _fake_analysis)
    at = AppTest.from_function(full_app)
    at.run(timeout=15)
    _number(at, "Gross Monthly Income").set_value(0.0)
    at.run(timeout=15)
    _button(at, "Analyze My Move").click()
    at.run(timeout=15)
    assert at.error[0].value == "Gross Monthly Income must be greater than zero to calculate DTI."
    assert at.session_state["result"] is None


def test_estimate_value_updates_home_value(monkeypatch):
    monkeypatch.setattr(inputs, "estimate_home_value", lambda address: 612000)
    at = AppTest.from_function(full_app)
    at.run(timeout=15)
    next(t for t in at.text_input if t.label == "Your Current Address (Optional)").input("1 Old Rd")
    at.run(timeout=15)
    _button(at, "Estimate Value").click()
    at.run(timeout=15)
    assert at.session_state["inputs"]["current_home_value"] == 612000.0
    assert _number(at, "Estimated Home Value").value == 612000.0


def test_estimate_value_failure_leaves_value(monkeypatch):
    def boom(address):
        raise IntegrationError("Could not estimate a value for this address. Please enter a value manually.")

    monkeypatch.setattr(inputs, "estimate_home_value", boom)
    at = AppTest.from_function(full_app)
    at.run(timeout=15)
    next(t for t in at.text_input if t.label == "Your Current Address (Optional)").input("1 Old Rd")
    at.run(timeout=15)
    _button(at, "Estimate Value").click()
    at.run(timeout=15)
    assert at.session_state["inputs"]["current_home_value"] == 500000.0
    assert at.error[0].value.startswith("Could not estimate a value")


def test_property_detail_shown_and_used(monkeypatch):
    detail = PropertyDetail(annual_taxes=9000, annual_insurance=2400, market_trends="Inventory is tight.")
    monkeypatch.setattr(inputs, "fetch_property_detail", lambda address, price: detail)
    monkeypatch.setattr(app, "generate_financial_analysis", _fake_analysis)
    at = AppTest.from_function(full_app)
    at.run(timeout=15)
    next(t for t in at.text_input if t.label == "New Home Address (Optional)").input("9 New Ln")
    at.run(timeout=15)
    _button(at, "Get Details").click()
    at.run(timeout=15)
    assert any("Inventory is tight." in c.value for c in at.caption)
    _button(at, "Analyze My Move").click()
    at.run(timeout=15)
    result = at.session_state["result"]
    assert result.monthly_tax == 750.0
    assert result.monthly_insurance == 200.0
