"""Central configuration for the CV extraction core.

This module uses Pydantic Settings for validation and env management.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from vocab.headings import (
    CERTIFICATE_HEADINGS,
    EDUCATION_HEADINGS,
    EXPERIENCE_HEADINGS,
    OTHER_HEADINGS,
    SKILL_HEADINGS,
)


class OCRSettings(BaseSettings):
    """Text acquisition and OCR configuration."""
    model_config = SettingsConfigDict(env_prefix="OCR_", extra="ignore")

    tesseract_lang: str = Field(
        default="eng+ind",
        description="Tesseract language codes, recognised together",
    )
    dpi: int = Field(default=300, ge=150, le=600)
    min_native_chars: int = Field(
        default=50,
        ge=0,
        description="Embedded text shorter than this (trimmed) triggers OCR",
    )
    tesseract_cmd: str | None = Field(default=None, description="Explicit tesseract binary")
    poppler_path: str | None = Field(default=None, description="Directory holding pdftoppm")


class SectionSettings(BaseSettings):
    """Section heading vocabulary, one list per heading group."""
    model_config = SettingsConfigDict(env_prefix="SECTION_", extra="ignore")

    experience: list[str] = Field(default_factory=lambda: list(EXPERIENCE_HEADINGS))
    education: list[str] = Field(default_factory=lambda: list(EDUCATION_HEADINGS))
    skills: list[str] = Field(default_factory=lambda: list(SKILL_HEADINGS))
    certificates: list[str] = Field(default_factory=lambda: list(CERTIFICATE_HEADINGS))
    other: list[str] = Field(default_factory=lambda: list(OTHER_HEADINGS))
    fuzzy_threshold: int = Field(
        default=90,
        ge=0,
        le=100,
        description="Rapidfuzz ratio for OCR-garbled headings; 100 disables fuzzy matching",
    )

    @field_validator("experience", "education", "skills", "certificates", "other")
    @classmethod
    def normalize_phrases(cls, v: list[str]) -> list[str]:
        return [" ".join(p.lower().split()) for p in v if p and p.strip()]


class PipelineSettings(BaseSettings):
    """Caller-side batch execution settings."""
    model_config = SettingsConfigDict(env_prefix="PIPELINE_", extra="ignore")

    max_concurrency: int = Field(default=4, ge=1, le=64)
    timeout_seconds: float | None = Field(default=None, gt=0)


class LoggingSettings(BaseSettings):
    """Logging configuration."""
    model_config = SettingsConfigDict(env_prefix="LOG_", extra="ignore")

    level: str = Field(default="INFO")
    format: Literal["text", "json"] = Field(default="text")
    file: str | None = Field(default=None)


class Settings(BaseSettings):
    """Main application settings."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    debug: bool = Field(default=False)
    app_name: str = Field(default="Talent CV Extractor")
    version: str = Field(default="0.2.0")

    # Sub-configs
    ocr: OCRSettings = Field(default_factory=OCRSettings)
    sections: SectionSettings = Field(default_factory=SectionSettings)
    pipeline: PipelineSettings = Field(default_factory=PipelineSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()


settings = get_settings()
