"""Configuration system for subword-lattice.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (SWL_*) -> .env file -> field defaults.

Per-call overrides are applied via resolve_config() which creates a new
config instance without mutating the defaults.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from subword_lattice.exceptions import ConfigValidationError

_OVERRIDE_PREFIX = "swl_"

# All known config field names (populated after class definition).
_ALL_FIELDS: frozenset[str] = frozenset()


class LatticeConfig(BaseSettings):
    """Configuration for lattice construction, decoding and logging.

    Resolution order: init kwargs -> env vars (SWL_*) -> .env file -> defaults.

    Fields are divided into three groups:
    - **Lattice**: substring length bound and the fallback constants used
      when a token has no score, rank or vocabulary match.
    - **Markers**: continuation and word-initial prefixes shared by the
      WordPiece policy and the detokenizer.
    - **Logging / CLI**: verbosity and command-line defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="SWL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Lattice ---

    max_token_length: int = Field(
        default=20,
        ge=1,
        description="Longest substring tested against the vocabulary per start position",
    )
    fallback_penalty: float = Field(
        default=10.0,
        description="Score of a single-character fallback edge",
    )
    floor_probability: float = Field(
        default=1e-4,
        gt=0.0,
        le=1.0,
        description="Unigram probability substituted for tokens missing from the table",
    )
    unknown_rank: int = Field(
        default=999,
        description="BPE rank substituted for tokens missing from the rank table",
    )

    # --- Markers ---

    continuation_marker: str = Field(
        default="##",
        description="WordPiece prefix for tokens that attach to the previous token",
    )
    word_initial_marker: str = Field(
        default="Ġ",
        description="Byte-level BPE prefix for tokens that start a new word",
    )

    # --- Logging / CLI ---

    default_algorithm: str = Field(
        default="unigram",
        description="Algorithm used by the CLI when none is given",
    )
    normalize: bool = Field(
        default=True,
        description="Whether the CLI normalizes input text by default",
    )
    log_level: str = Field(
        default="summary",
        description="Logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all tokenization records in memory for analysis",
    )


_ALL_FIELDS = frozenset(LatticeConfig.model_fields.keys())


@lru_cache(maxsize=1)
def default_config() -> LatticeConfig:
    """Return the process-wide default configuration.

    Loaded once from the environment; callers that need different values
    pass their own LatticeConfig or use resolve_config().
    """
    return LatticeConfig()


def _strip_prefix(key: str) -> str:
    """Strip the 'swl_' prefix from an override key.

    Args:
        key: The key with or without 'swl_' prefix.

    Returns:
        The key with 'swl_' prefix removed if present.
    """
    if key.startswith(_OVERRIDE_PREFIX):
        return key[len(_OVERRIDE_PREFIX) :]
    return key


def validate_overrides(overrides: dict[str, Any]) -> None:
    """Validate override keys without creating a config.

    Args:
        overrides: Field overrides, with or without the 'swl_' prefix.

    Raises:
        ConfigValidationError: If any key does not name a config field.
    """
    for key in overrides:
        field_name = _strip_prefix(key)
        if field_name not in _ALL_FIELDS:
            raise ConfigValidationError(
                f"Unknown config field: '{key}' (no field '{field_name}' exists)"
            )


def resolve_config(
    defaults: LatticeConfig,
    overrides: dict[str, Any] | None,
) -> LatticeConfig:
    """Create a new config instance merging defaults with per-call overrides.

    Args:
        defaults: The base configuration.
        overrides: Field overrides, keys optionally prefixed with 'swl_'.

    Returns:
        A new LatticeConfig with overrides applied, or *defaults* itself
        when there is nothing to override.

    Raises:
        ConfigValidationError: If a key is unknown or a value fails validation.
    """
    if not overrides:
        return defaults

    validate_overrides(overrides)

    merged = defaults.model_dump()
    merged.update({_strip_prefix(key): value for key, value in overrides.items()})

    # model_validate (unlike model_copy) coerces and checks the new values.
    try:
        return LatticeConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigValidationError(f"Invalid config override: {exc}") from exc
