from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)


class RecurringDebts(_Frozen):
    auto: float = Field(default=0.0, ge=0)
    student: float = Field(default=0.0, ge=0)
    credit_card: float = Field(default=0.0, ge=0)
    other: float = Field(default=0.0, ge=0)

    @property
    def total(self) -> float:
        return self.auto + self.student + self.credit_card + self.other


class PropertyDetail(_Frozen):
    """Annual tax and insurance estimates for the new home."""

    annual_taxes: float
    annual_insurance: float
    market_trends: str = ""


class FinancialProfile(_Frozen):
    """Everything the user tells us about the current and the next home.

    Positivity of the home values, the new rate and the income is checked by
    ``dilemma.calculators.compute`` so that failures are reported in a fixed
    order; the remaining amounts are only required to be non-negative.
    """

    current_home_value: float
    current_mortgage_balance: float = Field(default=0.0, ge=0)
    current_interest_rate_pct: float = Field(default=0.0, ge=0)
    current_monthly_payment: float = Field(default=0.0, ge=0)
    current_home_address: str = ""
    new_home_price: float
    new_interest_rate_pct: float
    new_home_address: str = ""
    monthly_gross_income: float
    debts: RecurringDebts = Field(default_factory=RecurringDebts)
    property_detail: Optional[PropertyDetail] = None

    @property
    def total_monthly_debt(self) -> float:
        return self.debts.total


class CalculationResult(_Frozen):
    proceeds_from_sale: float
    new_loan_amount: float
    new_monthly_payment: float
    current_dti: float
    new_dti: float
    monthly_payment_difference: float
    # breakdown
    selling_costs: float
    down_payment: float
    principal_and_interest: float
    monthly_tax: float
    monthly_insurance: float
    total_monthly_debt: float

    @property
    def has_negative_equity(self) -> bool:
        return self.proceeds_from_sale < 0
