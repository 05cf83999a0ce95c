"""Prompt text sent to the text-generation service."""
from __future__ import annotations

from dilemma.models import CalculationResult, FinancialProfile

DISCLAIMER_SENTENCE = (
    "This is an AI-generated analysis, not financial advice. It's essential to consult with a "
    "qualified financial advisor and mortgage lender before making any decisions."
)


def _usd(value: float) -> str:
    return f"${value:,.0f}" if float(value).is_integer() else f"${value:,.2f}"


def home_value_prompt(address: str) -> str:
    return (
        "Based on the following US address, provide a realistic estimated home value.\n"
        f'Address: "{address}"\n'
        "Respond with ONLY a single integer number representing the value in USD, without any "
        "commas, currency symbols, or other text. For example: 550000"
    )


def property_detail_prompt(address: str, price: float) -> str:
    return (
        f'Act as a real estate data provider. For the property at the address "{address}" with an '
        f"estimated price of {_usd(price)}, provide the following details in a JSON object with "
        'the keys "estimatedTaxes", "estimatedInsurance" and "marketTrends":\n'
        "- estimatedTaxes: a realistic estimated annual property tax amount in USD (number).\n"
        "- estimatedInsurance: a realistic estimated annual homeowner's insurance cost in USD (number).\n"
        "- marketTrends: a brief, 1-2 sentence summary of the current local real estate market "
        "trends for that area (string).\n"
        "Respond with the JSON object only."
    )


def financial_summary_lines(profile: FinancialProfile) -> list[str]:
    lines = [
        f"- Current Home Value: {_usd(profile.current_home_value)}",
        f"- Current Home Address: {profile.current_home_address}" if profile.current_home_address else None,
        f"- Current Mortgage Balance: {_usd(profile.current_mortgage_balance)}",
        f"- Current Interest Rate: {profile.current_interest_rate_pct:g}%",
        f"- Current Total Monthly Home Payment: {_usd(profile.current_monthly_payment)}",
        f"- New Home Price: {_usd(profile.new_home_price)}",
        f"- New Home Address: {profile.new_home_address}" if profile.new_home_address else None,
        f"- New Interest Rate: {profile.new_interest_rate_pct:g}%",
        f"- Gross Monthly Income: {_usd(profile.monthly_gross_income)}",
        f"- Monthly Non-Housing Debts: {_usd(profile.total_monthly_debt)}",
    ]
    return [line for line in lines if line]


def analysis_prompt(profile: FinancialProfile, result: CalculationResult) -> str:
    """Build the narrative-analysis prompt.

    The response layout requested here (TL;DR heading, five emoji sections,
    closing disclaimer) is what ``core.analysis.analysis_to_html`` keys on.
    """

    summary = "\n".join(financial_summary_lines(profile))
    detail = profile.property_detail
    detail_block = ""
    if detail is not None:
        detail_block = (
            "Here are some AI-generated estimates for the new property:\n"
            f"- Estimated Annual Property Tax: {_usd(detail.annual_taxes)}\n"
            f"- Estimated Annual Homeowner's Insurance: {_usd(detail.annual_insurance)}\n"
            f"- Local Market Snapshot: {detail.market_trends}\n"
        )
    return f"""You are a helpful financial analyst assistant for homeowners. Your role is to provide a balanced, qualitative analysis based on the financial data provided. Do not give direct financial advice or tell the user what to do. Instead, highlight potential pros, cons, risks, and factors they should consider. Be empathetic and clear.

Here is the user's financial summary:
{summary}

{detail_block}
Here are the calculated results of the move:
- Estimated Proceeds from Sale (for down payment): {_usd(result.proceeds_from_sale)}
- New Estimated Monthly Home Payment (PITI): {_usd(result.new_monthly_payment)}
- Change in Monthly Home Payment: {_usd(result.monthly_payment_difference)}
- Current Debt-to-Income (DTI) Ratio: {result.current_dti:.1f}%
- New Debt-to-Income (DTI) Ratio: {result.new_dti:.1f}%

Based on this data, provide a comprehensive, in-depth analysis in Markdown format. Structure your response as follows:

First, a TL;DR section:
**TL;DR: The Bottom Line**
Provide a 2-3 sentence summary that captures the most critical tradeoff for the user. Be direct but neutral.

Then, provide the in-depth analysis using the following structure. Use emojis as markers for each section heading. Use bold text and bullet points for clarity within each section.

💰 **Cash Flow Impact**: Briefly explain what the change in monthly payment means for their budget.
📊 **Debt-to-Income (DTI) Analysis**: Explain the change in their DTI ratio. Mention that lenders generally prefer a DTI below 43%, and what their new DTI means for their financial health and future borrowing capacity.
✨ **Potential Benefits of Moving**: What are the potential financial upsides? (e.g., leveraging equity for a larger down payment, new home features, etc.).
⚠️ **Risks & Considerations**: What are the financial risks? (e.g., giving up a historically low interest rate, increased financial burden, market volatility, hidden costs of moving). If new home details were provided, incorporate the specific tax/insurance estimates and market trends into your analysis here, reminding the user that these are estimates.
🤔 **Key Questions for You**: Prompt the user with 3-4 important questions they should ask themselves before proceeding. If new home details were provided, add a question like: "Have you confirmed the property tax rates and obtained a formal insurance quote for the new address?"

Conclude with a strong disclaimer: "{DISCLAIMER_SENTENCE}"
"""
