"""Text-generation service integrations.

Each call is a single blocking request to an OpenAI-compatible endpoint; there
is no retry or caching.  Estimation failures raise ``IntegrationError`` with a
message that can be shown to the user as-is.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Optional

from openai import OpenAI, OpenAIError

from core.config import Settings, get_settings
from core.prompts import analysis_prompt, home_value_prompt, property_detail_prompt
from dilemma.models import CalculationResult, FinancialProfile, PropertyDetail

logger = logging.getLogger(__name__)

HOME_VALUE_ERROR = "Could not estimate a value for this address. Please enter a value manually."
HOME_DETAIL_ERROR = "Could not retrieve details for the new address. Please check the address and try again."
ANALYSIS_ERROR = "There was an error generating the analysis. Please check your API key and try again."

_FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$")


class IntegrationError(RuntimeError):
    """A text-generation request failed or returned something unusable."""


def make_client(settings: Optional[Settings] = None) -> OpenAI:
    settings = settings or get_settings()
    return OpenAI(base_url=settings.LLM_BASE_URL, api_key=settings.API_KEY or "missing")


def _complete(prompt: str, settings: Settings, client: Optional[OpenAI], **kwargs) -> str:
    client = client or make_client(settings)
    response = client.chat.completions.create(
        model=settings.LLM_MODEL,
        messages=[{"role": "user", "content": prompt}],
        **kwargs,
    )
    return (response.choices[0].message.content or "").strip()


def parse_home_value(text: str) -> int:
    """Keep only the digits of ``text``; zero or nothing means no estimate."""
    digits = re.sub(r"[^0-9]", "", text or "")
    value = int(digits) if digits else 0
    if value == 0:
        raise IntegrationError(HOME_VALUE_ERROR)
    return value


def parse_property_detail(text: str) -> PropertyDetail:
    """Parse the JSON object returned for a property detail request."""
    try:
        data = json.loads(_FENCE_RE.sub("", (text or "").strip()))
    except json.JSONDecodeError as exc:
        raise IntegrationError(HOME_DETAIL_ERROR) from exc
    if not isinstance(data, dict):
        raise IntegrationError(HOME_DETAIL_ERROR)
    taxes = data.get("estimatedTaxes")
    insurance = data.get("estimatedInsurance")
    trends = data.get("marketTrends")
    if not taxes or not insurance or not trends:
        raise IntegrationError(HOME_DETAIL_ERROR)
    try:
        return PropertyDetail(
            annual_taxes=float(taxes),
            annual_insurance=float(insurance),
            market_trends=str(trends),
        )
    except (TypeError, ValueError) as exc:
        raise IntegrationError(HOME_DETAIL_ERROR) from exc


def estimate_home_value(
    address: str,
    settings: Optional[Settings] = None,
    client: Optional[OpenAI] = None,
) -> int:
    """Ask for a whole-dollar market value estimate for ``address``."""
    if not address or not address.strip():
        raise IntegrationError("Address is required to estimate home value.")
    settings = settings or get_settings()
    try:
        text = _complete(home_value_prompt(address.strip()), settings, client)
    except (OpenAIError, IndexError, AttributeError) as exc:
        logger.error("Home value request failed for %r: %s", address, exc)
        raise IntegrationError(HOME_VALUE_ERROR) from exc
    try:
        return parse_home_value(text)
    except IntegrationError:
        logger.error("Failed to parse estimated value from response: %r", text)
        raise


def fetch_property_detail(
    address: str,
    price: float,
    settings: Optional[Settings] = None,
    client: Optional[OpenAI] = None,
) -> PropertyDetail:
    """Annual tax/insurance estimates and a market blurb for the new home."""
    if not address or not address.strip():
        raise IntegrationError("Address is required to get home details.")
    settings = settings or get_settings()
    try:
        text = _complete(
            property_detail_prompt(address.strip(), price),
            settings,
            client,
            response_format={"type": "json_object"},
        )
    except (OpenAIError, IndexError, AttributeError) as exc:
        logger.error("Property detail request failed for %r: %s", address, exc)
        raise IntegrationError(HOME_DETAIL_ERROR) from exc
    try:
        return parse_property_detail(text)
    except IntegrationError:
        logger.error("Property detail response was missing required fields: %r", text)
        raise


def generate_financial_analysis(
    profile: FinancialProfile,
    result: CalculationResult,
    settings: Optional[Settings] = None,
    client: Optional[OpenAI] = None,
) -> str:
    """Narrative commentary on ``result``.

    Transport failures and empty responses return ``ANALYSIS_ERROR`` instead
    of raising so the numeric results stay on screen.
    """
    settings = settings or get_settings()
    try:
        return _complete(analysis_prompt(profile, result), settings, client)
    except (OpenAIError, IndexError, AttributeError) as exc:
        logger.exception("Analysis request failed: %s", exc)
        return ANALYSIS_ERROR
