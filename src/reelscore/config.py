"""Centralised configuration via Pydantic Settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Engine-wide configuration loaded from environment variables."""

    model_config = {"env_prefix": "REELSCORE_", "frozen": True}

    # Profiles
    # Id of the profile handed out when the caller has not picked one.
    default_profile_id: str = "balanced"

    # Custom formats
    # When disabled only the built-in library takes part in matching.
    custom_formats_enabled: bool = True

    # Logging
    # Emit a per-release DEBUG trace of matched formats and verdicts.
    log_scoring_details: bool = False


def get_settings() -> Settings:
    """Build settings from the environment; tests pass their own instead."""
    return Settings()
