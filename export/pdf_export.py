from __future__ import annotations
import html
import io
import os
from typing import List, Optional

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Image, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from core.analysis import analysis_paragraphs
from core.leads import format_currency
from core.rules import RuleResult, evaluate_rules
from dilemma.models import CalculationResult, FinancialProfile
from dilemma.presets import DISCLAIMER

PDF_FILE_NAME = "Vesta-Financial-Analysis.pdf"

GRID = TableStyle([
    ('BACKGROUND', (0, 0), (-1, 0), colors.lightgrey),
    ('BOX', (0, 0), (-1, -1), 1, colors.black),
    ('INNERGRID', (0, 0), (-1, -1), 0.5, colors.grey),
])


def snapshot_rows(result: CalculationResult) -> List[List[str]]:
    """Before/after metrics in the order shown on screen."""
    sign = "+" if result.monthly_payment_difference > 0 else ""
    return [
        ["Metric", "Value"],
        ["Current DTI", f"{result.current_dti:.1f}%"],
        ["New DTI", f"{result.new_dti:.1f}%"],
        ["New Monthly Payment (Est. PITI)", format_currency(round(result.new_monthly_payment))],
        ["Payment Change (per month)", f"{sign}{format_currency(round(result.monthly_payment_difference))}"],
        ["Proceeds from Sale", format_currency(round(result.proceeds_from_sale))],
        ["New Loan Amount", format_currency(round(result.new_loan_amount))],
    ]


def input_rows(profile: FinancialProfile) -> List[List[str]]:
    rows = [
        ["Input", "Value"],
        ["Current Home Value", f"${profile.current_home_value:,.0f}"],
        ["Current Mortgage Balance", f"${profile.current_mortgage_balance:,.0f}"],
        ["Current Interest Rate", f"{profile.current_interest_rate_pct:g}%"],
        ["Current Monthly Payment", f"${profile.current_monthly_payment:,.0f}"],
        ["New Home Price", f"${profile.new_home_price:,.0f}"],
        ["New Interest Rate", f"{profile.new_interest_rate_pct:g}%"],
        ["Gross Monthly Income", f"${profile.monthly_gross_income:,.0f}"],
        ["Monthly Non-Housing Debts", f"${profile.total_monthly_debt:,.0f}"],
    ]
    if profile.property_detail is not None:
        rows += [
            ["Est. Annual Property Tax", f"${profile.property_detail.annual_taxes:,.0f}"],
            ["Est. Annual Insurance", f"${profile.property_detail.annual_insurance:,.0f}"],
        ]
    return rows


def build_results_pdf(
    profile: FinancialProfile,
    result: CalculationResult,
    analysis: str = "",
    branding: Optional[dict] = None,
    warnings: Optional[List[RuleResult]] = None,
) -> bytes:
    """Render the results panel to a PDF and return its bytes.

    ``branding`` may carry ``title`` and ``logo_path``; a missing logo file is
    skipped.  Long analyses flow onto additional pages.
    """
    branding = branding or {}
    warnings = evaluate_rules(result) if warnings is None else warnings
    styles = getSampleStyleSheet()
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=A4, leftMargin=36, rightMargin=36, topMargin=36, bottomMargin=36)
    story = []
    logo = branding.get("logo_path")
    if logo and os.path.exists(logo):
        story += [Image(logo, width=72, height=72), Spacer(1, 6)]
    title = html.escape(branding.get("title") or "Vesta Consulting Group", quote=False)
    story += [Paragraph(f"<b>{title}</b>", styles['Title']), Spacer(1, 12)]

    t = Table(snapshot_rows(result), hAlign='LEFT', colWidths=[260, 260])
    t.setStyle(GRID)
    story += [Paragraph("<b>Financial Snapshot: Before vs. After</b>", styles['Heading3']), Spacer(1, 6), t, Spacer(1, 12)]

    t = Table(input_rows(profile), hAlign='LEFT', colWidths=[260, 260])
    t.setStyle(GRID)
    story += [Paragraph("<b>Your Inputs</b>", styles['Heading3']), Spacer(1, 6), t, Spacer(1, 12)]

    if profile.property_detail is not None and profile.property_detail.market_trends:
        trends = html.escape(profile.property_detail.market_trends, quote=False)
        story += [Paragraph(f"<i>Local market: {trends}</i>", styles['Normal']), Spacer(1, 12)]

    if warnings:
        w_rows = [["Severity", "Message"]] + [[w.severity, w.message] for w in warnings]
        t = Table(w_rows, hAlign='LEFT', colWidths=[80, 440])
        t.setStyle(GRID)
        story += [Paragraph("<b>Advisories</b>", styles['Heading3']), Spacer(1, 6), t, Spacer(1, 12)]

    if analysis:
        story += [Paragraph("<b>AI-Powered Analysis</b>", styles['Heading3']), Spacer(1, 6)]
        for para in analysis_paragraphs(analysis):
            story += [Paragraph(para, styles['Normal']), Spacer(1, 4)]
    story += [Spacer(1, 12), Paragraph(f"<font size=8>{DISCLAIMER}</font>", styles['Normal'])]
    doc.build(story)
    return buf.getvalue()
