"""One-row CSV summary of a calculation."""
from __future__ import annotations
import io

import pandas as pd

from dilemma.models import CalculationResult, FinancialProfile


def summary_frame(profile: FinancialProfile, result: CalculationResult) -> pd.DataFrame:
    row = {
        "CurrentHomeValue": profile.current_home_value,
        "CurrentMortgageBalance": profile.current_mortgage_balance,
        "CurrentRatePct": profile.current_interest_rate_pct,
        "CurrentMonthlyPayment": profile.current_monthly_payment,
        "NewHomePrice": profile.new_home_price,
        "NewRatePct": profile.new_interest_rate_pct,
        "MonthlyGrossIncome": profile.monthly_gross_income,
        "MonthlyDebts": profile.total_monthly_debt,
        "DetailedEstimates": profile.property_detail is not None,
        "SellingCosts": result.selling_costs,
        "ProceedsFromSale": result.proceeds_from_sale,
        "DownPayment": result.down_payment,
        "NewLoanAmount": result.new_loan_amount,
        "P&I": result.principal_and_interest,
        "Taxes": result.monthly_tax,
        "Insurance": result.monthly_insurance,
        "NewMonthlyPayment": result.new_monthly_payment,
        "PaymentDifference": result.monthly_payment_difference,
        "CurrentDTI_pct": result.current_dti,
        "NewDTI_pct": result.new_dti,
    }
    return pd.DataFrame([row])


def comparison_frame(profile: FinancialProfile, result: CalculationResult) -> pd.DataFrame:
    """Before vs. after table for on-screen display."""
    return pd.DataFrame(
        {
            "Today": [profile.current_monthly_payment, result.current_dti],
            "After the move": [result.new_monthly_payment, result.new_dti],
        },
        index=["Monthly housing payment ($)", "Debt-to-income (%)"],
    ).round(2)


def summary_csv_bytes(profile: FinancialProfile, result: CalculationResult) -> bytes:
    buf = io.StringIO()
    summary_frame(profile, result).to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")
