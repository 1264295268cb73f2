"""Pydantic configuration models for claimcheck components."""

from typing import Self

from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel

from claimcheck.scorer.claimbuster import CLAIMBUSTER_API_URL

# ============================================================
# Tool Config
# ============================================================


class FactCheckConfig(BaseModel):
    """Configuration for FactCheckTool.

    Fields accept their camelCase names as well (``lowThreshold``,
    ``maxRequestsPerMinute``, ...) so node inputs validate directly.
    ``include_sources`` and ``require_citations`` are accepted but not used.
    """

    api_key: str | None = Field(default=None, repr=False)
    base_url: str = CLAIMBUSTER_API_URL
    max_requests_per_minute: int = Field(default=60, gt=0)
    low_threshold: float = 0.3
    high_threshold: float = 0.7
    batch_size: int = Field(default=5, ge=1)
    include_sources: bool = True
    require_citations: bool = False
    detailed_analysis: bool = True
    retries: int = Field(default=3, ge=0)
    backoff_ms: int = Field(default=500, ge=0)
    timeout: float = Field(default=30.0, gt=0)

    model_config = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}

    @model_validator(mode="after")
    def thresholds_ordered(self) -> Self:
        if self.low_threshold > self.high_threshold:
            raise ValueError(
                f"low_threshold ({self.low_threshold}) must not exceed "
                f"high_threshold ({self.high_threshold})"
            )
        return self


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for per-run JSON logging."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class ClaimCheckConfig(BaseModel):
    """Root configuration for claimcheck."""

    tool: FactCheckConfig = Field(default_factory=FactCheckConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
