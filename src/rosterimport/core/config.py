"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

from rosterimport.models.mapping import FieldSemantic
from rosterimport.models.sources import DEFAULT_SOURCE_OPTIONS, SourceOption


def _default_field_semantics() -> dict[str, FieldSemantic]:
    return {
        "first_name": FieldSemantic.IDENTITY,
        "last_name": FieldSemantic.IDENTITY,
        "student_name": FieldSemantic.IDENTITY,
        "email": FieldSemantic.CONTACT,
        "phone": FieldSemantic.CONTACT,
        "guardian_name": FieldSemantic.RELATED_PERSON,
        "guardian_email": FieldSemantic.RELATED_PERSON,
        "guardian_phone": FieldSemantic.RELATED_PERSON,
        "lesson_day": FieldSemantic.SCHEDULE_DAY,
        "lesson_time": FieldSemantic.SCHEDULE_TIME,
    }


class WizardConfig(BaseSettings):
    """Import wizard behaviour. Fixed for the lifetime of an engine."""

    model_config = {"env_prefix": "ROSTERIMPORT_WIZARD_"}

    confidence_threshold: float = Field(default=0.7, ge=0.0, le=1.0)
    sample_row_count: int = Field(default=5, ge=1)
    allowed_extension: str = ".csv"
    fallback_encoding: str = "cp1252"
    source_options: list[SourceOption] = Field(
        default_factory=lambda: list(DEFAULT_SOURCE_OPTIONS)
    )
    # Used when the mapping service sends a target field without a semantic tag
    field_semantics: dict[str, FieldSemantic] = Field(default_factory=_default_field_semantics)

    def source_values(self) -> set[str]:
        return {opt.value for opt in self.source_options}


class MappingServiceConfig(BaseSettings):
    """Remote column-mapping service configuration."""

    model_config = {"env_prefix": "ROSTERIMPORT_MAPPING_"}

    base_url: str = "http://localhost:54321"
    path: str = "/functions/v1/csv-import-mapping"
    timeout: float | None = None  # callers apply their own timeout policy


class RedisConfig(BaseSettings):
    """Redis configuration for the session draft store."""

    model_config = {"env_prefix": "ROSTERIMPORT_REDIS_"}

    host: str = "localhost"
    port: int = 6379
    db: int = 0


class DraftStoreConfig(BaseSettings):
    """Session draft store configuration."""

    model_config = {"env_prefix": "ROSTERIMPORT_DRAFTS_"}

    ttl_seconds: int = 14400  # 4 hours
    key_prefix: str = "import-draft"


class S3Config(BaseSettings):
    """S3 upload bucket configuration."""

    model_config = {"env_prefix": "ROSTERIMPORT_S3_"}

    bucket: str = "rosterimport-uploads"
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "ROSTERIMPORT_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    wizard: WizardConfig = WizardConfig()
    mapping_service: MappingServiceConfig = MappingServiceConfig()
    redis: RedisConfig = RedisConfig()
    drafts: DraftStoreConfig = DraftStoreConfig()
    s3: S3Config = S3Config()
