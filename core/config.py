"""Application configuration.

Settings come from environment variables (or a ``.env`` file next to
``app.py``) and are read once per process.  The calculator itself takes no
configuration; only the text-generation and lead-capture layers do.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

_ENV_FILE = Path(__file__).resolve().parents[1] / ".env"

GEMINI_OPENAI_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- Text generation --
    API_KEY: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("API_KEY", "GEMINI_API_KEY"),
        description="Credential for the text-generation service.",
    )
    LLM_BASE_URL: str = Field(
        default=GEMINI_OPENAI_URL,
        description="OpenAI-compatible endpoint used for estimates and analysis.",
    )
    LLM_MODEL: str = "gemini-2.5-flash"

    # -- Lead capture --
    LEAD_WEBHOOK_URL: Optional[str] = Field(
        default=None,
        description="Form-encoded webhook receiving consultant requests.",
    )
    WEBHOOK_TIMEOUT_SECONDS: float = 15.0

    # -- Branding / exports --
    BRAND_NAME: str = "Vesta Consulting Group"
    BRAND_LOGO_PATH: Optional[str] = None

    LOG_LEVEL: str = "INFO"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str = "INFO") -> None:
    """Install a root handler once; later calls only adjust the level."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    root.setLevel(level.upper())


def log_missing_credentials(settings: Settings) -> bool:
    """Log (but do not fail) when the text-generation key is absent."""
    if not settings.API_KEY:
        logger.error("API_KEY is not set. Please set the API_KEY environment variable.")
        return False
    return True
