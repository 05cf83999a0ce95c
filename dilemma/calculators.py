from __future__ import annotations
import math

from dilemma.models import CalculationResult, FinancialProfile, PropertyDetail
from dilemma.presets import (
    FALLBACK_INSURANCE_RATE,
    FALLBACK_TAX_RATE,
    SELLING_COST_RATE,
    TERM_YEARS,
)


class ValidationError(ValueError):
    """Raised when a profile cannot be used for a calculation.

    ``field`` names the profile attribute that failed so the UI can point the
    user at the right input.
    """

    def __init__(self, message: str, field: str = ""):
        super().__init__(message)
        self.field = field


# Evaluated in this order; the first failing rule wins so messages are stable.
VALIDATION_RULES = (
    ("current_home_value", "home value must be positive"),
    ("new_home_price", "new home price must be positive"),
    ("new_interest_rate_pct", "interest rate must be positive"),
    ("monthly_gross_income", "income must be positive to compute DTI"),
)


def nz(x, default=0.0):
    """Return a float for ``x`` or a fallback value.

    Widget values can arrive as ``None`` before the first rerun, and an empty
    number field is easier to treat as zero than to special-case everywhere.
    """

    try:
        if x is None or (isinstance(x, float) and math.isnan(x)):
            return default
        return float(x)
    except (TypeError, ValueError):
        return default


def monthly_payment(principal, annual_rate_pct, term_years=TERM_YEARS):
    """Calculate the fully amortizing monthly payment for a loan.

    ``principal`` is the starting loan amount, ``annual_rate_pct`` is the
    nominal yearly interest rate (e.g. ``6.5`` for 6.5%), and ``term_years`` is
    the amortization period in years.  A zero rate spreads the principal
    evenly.

    ``(1 + r) ** n - 1`` is evaluated as ``expm1(n * log1p(r))`` so rates
    very close to zero keep their precision instead of cancelling to zero.
    """

    L = nz(principal)
    r = nz(annual_rate_pct) / 100 / 12
    n = int(nz(term_years) * 12)
    if n <= 0:
        return 0.0
    if r == 0:
        return L / n
    growth_less_one = math.expm1(n * math.log1p(r))
    if growth_less_one == 0:
        return L / n
    return L * r * (growth_less_one + 1) / growth_less_one


def validate_profile(profile: FinancialProfile) -> None:
    """Raise ``ValidationError`` for the first rule the profile breaks."""

    for field, message in VALIDATION_RULES:
        if getattr(profile, field) <= 0:
            raise ValidationError(message, field=field)


def proceeds_from_sale(home_value, mortgage_balance):
    """Net cash from selling the current home.

    Returns ``(selling_costs, proceeds)``.  Proceeds are negative when the
    balance plus selling costs exceed the value; callers surface that as a
    warning rather than an error.
    """

    selling_costs = nz(home_value) * SELLING_COST_RATE
    return selling_costs, nz(home_value) - nz(mortgage_balance) - selling_costs


def monthly_tax_and_insurance(new_home_price, detail: PropertyDetail | None = None):
    """Monthly property tax and insurance for the new home.

    Known annual figures win over the price-based fallback rates.
    """

    if detail is not None:
        return detail.annual_taxes / 12, detail.annual_insurance / 12
    price = nz(new_home_price)
    return price * FALLBACK_TAX_RATE / 12, price * FALLBACK_INSURANCE_RATE / 12


def dti_pct(housing_payment, other_debts, gross_income):
    """Debt-to-income ratio in percent (``36.5`` means 36.5%)."""

    inc = nz(gross_income)
    if inc == 0:
        return 0.0
    return (nz(housing_payment) + nz(other_debts)) / inc * 100


def compute(profile: FinancialProfile) -> CalculationResult:
    """Derive the before/after affordability metrics for ``profile``.

    Raises ``ValidationError`` before any arithmetic when the profile is not
    usable.  Negative equity and negative loan amounts are passed through
    unchanged.
    """

    validate_profile(profile)

    selling_costs, proceeds = proceeds_from_sale(
        profile.current_home_value, profile.current_mortgage_balance
    )
    down_payment = max(0.0, proceeds)
    new_loan = profile.new_home_price - down_payment

    tax, insurance = monthly_tax_and_insurance(profile.new_home_price, profile.property_detail)
    pi = monthly_payment(new_loan, profile.new_interest_rate_pct, TERM_YEARS)
    new_payment = pi + tax + insurance

    debts = profile.total_monthly_debt
    income = profile.monthly_gross_income
    return CalculationResult(
        proceeds_from_sale=proceeds,
        new_loan_amount=new_loan,
        new_monthly_payment=new_payment,
        current_dti=dti_pct(profile.current_monthly_payment, debts, income),
        new_dti=dti_pct(new_payment, debts, income),
        monthly_payment_difference=new_payment - profile.current_monthly_payment,
        selling_costs=selling_costs,
        down_payment=down_payment,
        principal_and_interest=pi,
        monthly_tax=tax,
        monthly_insurance=insurance,
        total_monthly_debt=debts,
    )
