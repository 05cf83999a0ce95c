import logging

from core.config import GEMINI_OPENAI_URL, Settings, log_missing_credentials


def test_defaults(monkeypatch):
    for var in ("API_KEY", "GEMINI_API_KEY", "LLM_BASE_URL", "LLM_MODEL", "LEAD_WEBHOOK_URL"):
        monkeypatch.delenv(var, raising=False)
    s = Settings(_env_file=None)
    assert s.API_KEY is None
    assert s.LLM_BASE_URL == GEMINI_OPENAI_URL
    assert s.LLM_MODEL == "gemini-2.5-flash"
    assert s.LEAD_WEBHOOK_URL is None


def test_api_key_from_either_variable(monkeypatch):
    monkeypatch.delenv("API_KEY", raising=False)
    monkeypatch.setenv("GEMINI_API_KEY", "g-key")
    assert Settings(_env_file=None).API_KEY == "g-key"
    monkeypatch.setenv("API_KEY", "a-key")
    assert Settings(_env_file=None).API_KEY == "a-key"


def test_missing_key_is_logged_not_raised(caplog):
    with caplog.at_level(logging.ERROR, logger="core.config"):
        assert log_missing_credentials(Settings(_env_file=None, API_KEY=None)) is False
    assert "API_KEY is not set" in caplog.text
    assert log_missing_credentials(Settings(_env_file=None, API_KEY="k")) is True
