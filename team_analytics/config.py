"""
Analytics Configuration

Thresholds and weights used by the analyzers, loadable from YAML.
Defaults reproduce the standard dashboard constants, so an engine built
with ``AnalyticsConfig()`` needs no file at all.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from team_analytics.exceptions import ConfigError

DEFAULT_CONFIG_PATH = Path("config/analytics.yaml")


class MomentumConfig(BaseModel):
    """Recency-weighted form settings."""

    model_config = ConfigDict(frozen=True)

    window: int = Field(default=5, ge=1)
    win_weight: float = 3.0
    draw_weight: float = 1.0
    loss_weight: float = -2.0
    trend_threshold: float = Field(default=1.0, ge=0)


class ConsistencyConfig(BaseModel):
    """Consistency index settings. Band values are inclusive lower bounds."""

    model_config = ConfigDict(frozen=True)

    std_dev_multiplier: float = Field(default=10.0, ge=0)
    very_consistent: float = 80.0
    consistent: float = 65.0
    moderate: float = 45.0
    inconsistent: float = 25.0

    @model_validator(mode="after")
    def _check_band_order(self) -> "ConsistencyConfig":
        if not (self.very_consistent >= self.consistent >= self.moderate >= self.inconsistent):
            raise ValueError("consistency bands must be in descending order")
        return self


class PressureConfig(BaseModel):
    """Game-state context settings."""

    model_config = ConfigDict(frozen=True)

    close_game_margin: int = Field(default=3, ge=0)


class OpponentStrengthConfig(BaseModel):
    """Win-rate cutoffs (percent) for opponent tiers."""

    model_config = ConfigDict(frozen=True)

    strong_win_rate: float = 70.0
    weak_win_rate: float = 30.0
    bye_opponent_names: tuple[str, ...] = ("Bye",)

    @model_validator(mode="after")
    def _check_cutoffs(self) -> "OpponentStrengthConfig":
        if self.weak_win_rate > self.strong_win_rate:
            raise ValueError("weak_win_rate must not exceed strong_win_rate")
        return self

    def is_bye(self, opponent_name: str | None) -> bool:
        """Check whether an opponent name is a bye sentinel."""
        if opponent_name is None:
            return False
        name = opponent_name.strip().lower()
        return any(name == bye.strip().lower() for bye in self.bye_opponent_names)


class ChemistryConfig(BaseModel):
    """Quarter-to-quarter net score delta threshold."""

    model_config = ConfigDict(frozen=True)

    delta_threshold: float = Field(default=1.0, ge=0)


class AnalyticsConfig(BaseModel):
    """Complete analytics engine configuration."""

    model_config = ConfigDict(frozen=True)

    momentum: MomentumConfig = Field(default_factory=MomentumConfig)
    consistency: ConsistencyConfig = Field(default_factory=ConsistencyConfig)
    pressure: PressureConfig = Field(default_factory=PressureConfig)
    opponent_strength: OpponentStrengthConfig = Field(default_factory=OpponentStrengthConfig)
    chemistry: ChemistryConfig = Field(default_factory=ChemistryConfig)


def load_config(config_path: str | Path | None = None) -> AnalyticsConfig:
    """
    Load analytics configuration from a YAML file.

    Sections present in the file override the defaults; missing sections
    and keys keep their default values.

    Args:
        config_path: Path to the YAML file (default: config/analytics.yaml)

    Returns:
        Validated AnalyticsConfig

    Raises:
        ConfigError: If the file exists but is not valid YAML or fails validation
    """
    path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH

    if not path.exists():
        logger.warning(f"Analytics config not found at {path}, using defaults")
        return AnalyticsConfig()

    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    raw = raw or {}
    data: Any = raw.get("analytics", raw) if isinstance(raw, dict) else raw
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping in {path}, got {type(data).__name__}")

    try:
        config = AnalyticsConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid analytics config in {path}: {e}") from e

    logger.debug(f"Loaded analytics config from {path}")
    return config
