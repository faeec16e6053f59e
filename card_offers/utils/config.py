"""Configuration and settings management."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import field_validator

from ..core.constants import MATCH_MIN_SCORE, OFFER_RATIO


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    # Catalog JSON file; the built-in catalog is used when unset
    CATALOG_PATH: Optional[str] = None

    # Matching and pricing
    MATCH_MIN_SCORE: int = MATCH_MIN_SCORE
    OFFER_RATIO: float = OFFER_RATIO

    # Worker threads per batch (1 = score fragments sequentially)
    MAX_WORKERS: int = 1

    @field_validator('CATALOG_PATH', mode='before')
    @classmethod
    def validate_catalog_path(cls, v):
        """Convert empty/whitespace strings to None."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        """Convert empty/whitespace strings to default."""
        if isinstance(v, str) and not v.strip():
            return "INFO"
        return v

    @field_validator('LOG_FORMAT', mode='before')
    @classmethod
    def validate_log_format(cls, v):
        if isinstance(v, str):
            v = v.strip().lower() or "json"
            if v not in ("json", "console"):
                raise ValueError("LOG_FORMAT must be 'json' or 'console'")
        return v

    @field_validator('MATCH_MIN_SCORE')
    @classmethod
    def validate_match_min_score(cls, v):
        if v < 1:
            raise ValueError("MATCH_MIN_SCORE must be at least 1")
        return v

    @field_validator('OFFER_RATIO')
    @classmethod
    def validate_offer_ratio(cls, v):
        if not 0 < v <= 1:
            raise ValueError("OFFER_RATIO must be in (0, 1]")
        return v

    @field_validator('MAX_WORKERS')
    @classmethod
    def validate_max_workers(cls, v):
        if v < 1:
            raise ValueError("MAX_WORKERS must be at least 1")
        return v

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore"
    }

# Global settings instance
settings = Settings()
