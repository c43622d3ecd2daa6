"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # API (constants, not from env)
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "Heidelberg reader"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Reader
    READER_PATH: str = "/heidelberg"
    MAX_PAGE: int = 52
    HYSTERESIS_PAGES: int = 1

    # Client behavior, published through /settings
    SLIDER_DEBOUNCE_MS: int = 300
    INTERSECTION_THRESHOLD: float = 0.6
    INTERSECTION_ROOT_MARGIN_PX: int = 20

    @computed_field  # type: ignore[prop-decorator]
    @property
    def slider_debounce_seconds(self) -> float:
        """Slider debounce delay in seconds."""
        return self.SLIDER_DEBOUNCE_MS / 1000

    @field_validator("MAX_PAGE", mode="after")
    @classmethod
    def validate_max_page(cls, value: int) -> int:
        """Reject an empty page range."""
        if value < 1:
            msg = "MAX_PAGE must be at least 1"
            raise ValueError(msg)
        return value

    @field_validator("HYSTERESIS_PAGES", "SLIDER_DEBOUNCE_MS", mode="after")
    @classmethod
    def validate_non_negative(cls, value: int) -> int:
        """Reject negative bands and delays."""
        if value < 0:
            msg = "value cannot be negative"
            raise ValueError(msg)
        return value

    @field_validator("INTERSECTION_THRESHOLD", mode="after")
    @classmethod
    def validate_threshold(cls, value: float) -> float:
        """Intersection thresholds are visible fractions."""
        if not 0 < value <= 1:
            msg = "INTERSECTION_THRESHOLD must be in (0, 1]"
            raise ValueError(msg)
        return value

    @field_validator("READER_PATH", mode="after")
    @classmethod
    def normalize_reader_path(cls, value: str) -> str:
        """Keep a single leading slash and no trailing one."""
        return "/" + value.strip().strip("/")


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    # Determine if we should use JSON output (production) or console output (dev)
    use_json = environment == "production"

    # Configure stdlib logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    # Configure structlog
    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
