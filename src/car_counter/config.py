# Area: Shared
"""
car_counter.config — Game configuration
=======================================

Immutable tunables for difficulty scaling and presentation, validated
with pydantic. The defaults give a round 1 of 3-18 items in 14 seconds.

    >>> cfg = GameConfig()
    >>> cfg.start_max_items, cfg.max_items_cap
    (18, 60)
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, PositiveInt, ValidationError, model_validator

from .errors import ConfigError


class GameConfig(BaseModel):
    """Difficulty and presentation parameters for one game session.

    Fields
    ------
    min_items : int
        Lower bound of the item count drawn every round.
    start_max_items : int
        Item ceiling for round 1.
    max_items_cap : int
        Item ceiling never exceeded, whatever the round.
    max_items_increment : int
        Ceiling growth per round.
    start_time_limit : int
        Seconds allowed in round 1.
    min_time_limit : int
        Seconds allowed never drops below this.
    time_decrement : int
        Seconds removed from the limit per round.
    warn_time_threshold, panic_time_threshold : int
        HUD urgency levels for the remaining time.
    icon : str
        Glyph rendered once per item.
    best_score_key : str
        Storage key of the persisted best score.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    min_items: PositiveInt = 3
    start_max_items: PositiveInt = 18
    max_items_cap: PositiveInt = 60
    max_items_increment: PositiveInt = 2
    start_time_limit: PositiveInt = 14
    min_time_limit: PositiveInt = 6
    time_decrement: PositiveInt = 1

    warn_time_threshold: PositiveInt = 6
    panic_time_threshold: PositiveInt = 3
    icon: str = "🚗"
    best_score_key: str = "carCounterBestScore"

    @model_validator(mode="after")
    def _check_bounds(self) -> "GameConfig":
        if not self.min_items <= self.start_max_items <= self.max_items_cap:
            raise ValueError(
                "expected min_items <= start_max_items <= max_items_cap, got "
                f"{self.min_items} / {self.start_max_items} / {self.max_items_cap}"
            )
        if self.min_time_limit > self.start_time_limit:
            raise ValueError(
                f"min_time_limit ({self.min_time_limit}) exceeds "
                f"start_time_limit ({self.start_time_limit})"
            )
        if self.panic_time_threshold > self.warn_time_threshold:
            raise ValueError(
                f"panic_time_threshold ({self.panic_time_threshold}) exceeds "
                f"warn_time_threshold ({self.warn_time_threshold})"
            )
        if not self.icon:
            raise ValueError("icon must not be empty")
        if not self.best_score_key:
            raise ValueError("best_score_key must not be empty")
        return self


# Keys of the flat runner config that feed GameConfig
GAME_CONFIG_KEYS = tuple(GameConfig.model_fields)


def build_game_config(config: Mapping[str, Any]) -> GameConfig:
    """
    Build a validated GameConfig from a flat config mapping.

    Keys that are not GameConfig fields are ignored, so the whole runner
    config dict can be passed in.

    Raises:
        ConfigError: If any value is missing a constraint
    """
    values: Dict[str, Any] = {k: config[k] for k in GAME_CONFIG_KEYS if k in config}
    try:
        return GameConfig(**values)
    except ValidationError as e:
        errors = []
        for err in e.errors():
            location = ".".join(str(part) for part in err["loc"]) or "config"
            errors.append(f"{location}: {err['msg']}")
        raise ConfigError(errors, payload=values) from e
