DISCLAIMER = (
    "This calculator uses simplified estimates for selling costs, property taxes and homeowners insurance. "
    "It is not an underwriting decision and does not guarantee loan approval, rates or tax/insurance figures. "
    "Consult a qualified financial advisor and mortgage lender before making any decisions."
)

# Commission (~6%) plus seller closing costs (~2%) as a share of the sale price.
SELLING_COST_RATE = 0.08

# Fallback annual rates applied to the new home price when no property detail is known.
FALLBACK_TAX_RATE = 0.0125
FALLBACK_INSURANCE_RATE = 0.005

TERM_YEARS = 30

# Conventional lending back-end DTI ceiling, in percent.
DTI_LIMIT_PCT = 43.0

DEFAULT_PROFILE = {
    "current_home_value": 500000.0,
    "current_mortgage_balance": 250000.0,
    "current_interest_rate_pct": 3.0,
    "current_monthly_payment": 1800.0,
    "current_home_address": "",
    "new_home_price": 750000.0,
    "new_interest_rate_pct": 6.5,
    "new_home_address": "",
    "monthly_gross_income": 10000.0,
    "debts": {"auto": 500.0, "student": 300.0, "credit_card": 200.0, "other": 0.0},
}
