from __future__ import annotations
from typing import Literal, List, Dict, Any
from pydantic import BaseModel, Field

from dilemma.models import CalculationResult
from dilemma.presets import DTI_LIMIT_PCT

Tone = Literal["adverse", "caution", "favorable"]


class RuleResult(BaseModel):
    code: str
    severity: Literal["info", "warn", "critical"]
    message: str
    context: Dict[str, Any] = Field(default_factory=dict)


def classify_payment_change(result: CalculationResult) -> Tone:
    """A higher payment is adverse; equal or lower is favorable."""
    return "adverse" if result.monthly_payment_difference > 0 else "favorable"


def classify_dti(result: CalculationResult, limit_pct: float = DTI_LIMIT_PCT) -> Tone:
    if result.new_dti > limit_pct:
        return "adverse"
    if result.new_dti > result.current_dti:
        return "caution"
    return "favorable"


def evaluate_rules(result: CalculationResult, limit_pct: float = DTI_LIMIT_PCT) -> List[RuleResult]:
    res: List[RuleResult] = []

    if result.has_negative_equity:
        res.append(
            RuleResult(
                code="NEGATIVE_EQUITY",
                severity="warn",
                message="Warning: Your estimated selling costs are more than your home equity.",
                context={"proceeds_from_sale": result.proceeds_from_sale},
            )
        )

    if result.new_loan_amount < 0:
        res.append(
            RuleResult(
                code="NEGATIVE_LOAN",
                severity="info",
                message="Your sale proceeds exceed the new home price; no new loan would be needed.",
                context={"new_loan_amount": result.new_loan_amount},
            )
        )

    if result.new_dti > limit_pct:
        res.append(
            RuleResult(
                code="DTI_OVER_LIMIT",
                severity="warn",
                message=f"New DTI exceeds the {limit_pct:g}% conventional lending guideline.",
                context={"actual": result.new_dti, "limit": limit_pct},
            )
        )
    elif result.new_dti > result.current_dti:
        res.append(
            RuleResult(
                code="DTI_INCREASE",
                severity="info",
                message="Your debt-to-income ratio would rise after the move.",
                context={"current": result.current_dti, "new": result.new_dti},
            )
        )

    return res
