"""Tunable pipeline settings.

The agency bonus/penalty and the damping threshold are empirically chosen
constants. They are read once from the environment so that recalibration
does not require a code change.
"""

import os

import structlog
from pydantic import BaseModel as PydanticBaseModel, ConfigDict, Field

logger = structlog.get_logger()

ENV_PREFIX = "PAGEWRIGHT_"


class PipelineSettings(PydanticBaseModel):
    """Constants consumed by the classifier, extractor and assembler."""

    model_config = ConfigDict(frozen=True)

    agency_bonus: int = Field(default=10, ge=0, description="Flat boost for agency-shaped verticals")
    agency_penalty: int = Field(default=8, ge=0, description="Deduction for other scored verticals")
    damping_threshold: int = Field(
        default=5, ge=0, description="Same-vertical score drift below this keeps the previous result"
    )
    max_display_keywords: int = Field(default=5, ge=1)
    max_statistics: int = Field(default=4, ge=1)
    min_statistics: int = Field(default=2, ge=1)
    max_faqs: int = Field(default=6, ge=1)

    @classmethod
    def from_env(cls) -> "PipelineSettings":
        """Build settings from PAGEWRIGHT_* environment variables.

        Unset variables keep their defaults. Non-integer values are rejected
        by validation.
        """
        overrides: dict[str, str] = {}
        for name in cls.model_fields:
            value = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
            if value is not None and value.strip():
                overrides[name] = value.strip()

        if overrides:
            logger.info("Pipeline settings overridden from environment", fields=sorted(overrides))

        return cls.model_validate(overrides)


_settings: PipelineSettings | None = None


def get_settings() -> PipelineSettings:
    """Get the process-wide settings, loading them on first use.

    Returns:
        The cached PipelineSettings instance.
    """
    global _settings
    if _settings is None:
        _settings = PipelineSettings.from_env()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
