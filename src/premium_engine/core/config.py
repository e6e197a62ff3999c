# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Configuration management using Pydantic Settings."""

import logging
from decimal import Decimal

from beartype import beartype
from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings with immutable configuration."""

    model_config = SettingsConfigDict(
        env_prefix="PREMIUM_ENGINE_",
        env_file=None,
        frozen=True,
        validate_default=True,
        extra="forbid",
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level applied by configure_logging()",
    )

    max_plausible_per_mille: Decimal = Field(
        default=Decimal("50"),
        gt=Decimal("0"),
        description="Per-mille rates above this are flagged as unusually high",
    )
    max_per_mille: Decimal = Field(
        default=Decimal("100"),
        gt=Decimal("0"),
        description="Per-mille rates above this are most likely not per-mille at all",
    )
    value_warning_threshold: Decimal = Field(
        default=Decimal("10000000"),
        gt=Decimal("0"),
        description="Insured values above this are flagged for review",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls: type["Settings"], v: str) -> str:
        """Normalise the level name and reject unknown ones."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("max_per_mille")
    @classmethod
    def validate_per_mille_limits(
        cls: type["Settings"], v: Decimal, info: ValidationInfo
    ) -> Decimal:
        """Ensure the hard per-mille limit is not below the plausibility limit."""
        if "max_plausible_per_mille" in info.data:
            plausible = info.data["max_plausible_per_mille"]
            if v < plausible:
                raise ValueError(
                    f"max_per_mille ({v}) must be >= max_plausible_per_mille ({plausible})"
                )
        return v

    @property
    @beartype
    def log_level_number(self) -> int:
        """Numeric value of ``log_level`` for the logging module."""
        return logging.getLevelNamesMapping()[self.log_level]


_settings: Settings | None = None


@beartype
def get_settings() -> Settings:
    """Get cached settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


@beartype
def clear_settings_cache() -> None:
    """Clear settings cache (for testing)."""
    global _settings
    _settings = None
