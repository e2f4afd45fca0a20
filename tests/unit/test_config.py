"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from rosterimport.core.config import AppSettings, MappingServiceConfig, WizardConfig
from rosterimport.models.mapping import FieldSemantic


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.wizard.confidence_threshold == 0.7
    assert settings.drafts.ttl_seconds == 14400


def test_wizard_config_defaults():
    config = WizardConfig()
    assert config.sample_row_count == 5
    assert config.allowed_extension == ".csv"
    assert "auto" in config.source_values()
    assert config.field_semantics["guardian_email"] == FieldSemantic.RELATED_PERSON
    assert config.field_semantics["lesson_day"] == FieldSemantic.SCHEDULE_DAY


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("ROSTERIMPORT_WIZARD_SAMPLE_ROW_COUNT", "10")
    monkeypatch.setenv("ROSTERIMPORT_MAPPING_BASE_URL", "https://maps.example.test")
    assert WizardConfig().sample_row_count == 10
    assert MappingServiceConfig().base_url == "https://maps.example.test"


def test_mapping_service_has_no_timeout_by_default():
    assert MappingServiceConfig().timeout is None
