"""Configuration system for unbiased-randint.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (RANDINT_*) -> .env file -> field defaults.

The functional API (``random_number`` and friends) takes no configuration;
only :class:`~unbiased_randint.sampler.RandintSampler` reads it.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_FALLBACK_MODES: frozenset[str] = frozenset({"error", "system", "mock_uniform"})
_LOG_LEVELS: frozenset[str] = frozenset({"none", "summary", "full"})


class RandintConfig(BaseSettings):
    """Configuration for unbiased-randint.

    Resolution order: init kwargs -> env vars (RANDINT_*) -> .env file -> defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="RANDINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # --- Entropy source ---

    entropy_source_type: str = Field(
        default="system",
        description="Primary entropy source identifier (registry key)",
    )
    fallback_mode: str = Field(
        default="error",
        description="Fallback entropy source: 'error', 'system', 'mock_uniform'",
    )
    mock_seed: int | None = Field(
        default=None,
        description="RNG seed for the mock_uniform source (None = unseeded)",
    )
    fixed_bytes_hex: str = Field(
        default="",
        description="Hex-encoded bytes replayed by the fixed source (e.g. recorded entropy)",
    )

    # --- Sampling limits ---

    max_rejections: int = Field(
        default=1000,
        description="Consecutive rejected draws before giving up (0 = unlimited)",
    )
    max_bound_bits: int = Field(
        default=0,
        description="Maximum bit length of a bound (0 = unlimited, 53 = JS safe integers)",
    )

    # --- Logging ---

    log_level: str = Field(
        default="none",
        description="Per-draw logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all draw records in memory for analysis",
    )

    @field_validator("max_rejections", "max_bound_bits")
    @classmethod
    def _non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("must be >= 0")
        return value

    @field_validator("fixed_bytes_hex")
    @classmethod
    def _valid_hex(cls, value: str) -> str:
        try:
            bytes.fromhex(value)
        except ValueError as exc:
            raise ValueError(f"must be hex-encoded bytes: {exc}") from None
        return value

    @field_validator("fallback_mode")
    @classmethod
    def _known_fallback(cls, value: str) -> str:
        if value not in _FALLBACK_MODES:
            raise ValueError(f"must be one of {sorted(_FALLBACK_MODES)}")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        if value not in _LOG_LEVELS:
            raise ValueError(f"must be one of {sorted(_LOG_LEVELS)}")
        return value
