"""Unit tests for application settings configuration."""

from pathlib import Path

from leadscore.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_scoring_defaults():
    settings = Settings()
    assert settings.lead_score_lookback_days == 90
    assert settings.lead_score_page_limit == 500


def test_lookback_overridable_from_environment(monkeypatch):
    monkeypatch.setenv("LEAD_SCORE_LOOKBACK_DAYS", "30")
    assert Settings().lead_score_lookback_days == 30
