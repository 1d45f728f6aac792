"""
Configuration for the Deep Thought agent.

Defaults live on the model; environment variables named DEEPTHOUGHT_<FIELD>
override them, and keyword overrides passed to load_config win over both.
"""

import os
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field, field_validator


ENV_PREFIX = "DEEPTHOUGHT_"


class BotConfig(BaseModel):
    """Tunable settings for the agent, its strategy and the HTTP adapter."""

    model_config = {"frozen": True}

    name: str = "Deep_Thought"
    stats_dir: Optional[str] = Field(
        default=None, description="Directory with <n>players.stat files; None uses the packaged tables"
    )
    strict: bool = Field(
        default=False, description="Raise on unhandled phases instead of folding"
    )

    # Pre-flop strategy
    dealer_bonus: float = 5.0
    raise_threshold: float = 60.0
    call_thresholds: Tuple[Tuple[float, int], ...] = Field(
        default=((15.0, 100), (22.0, 300), (30.0, 1000)),
        description="(minimum win %, maximum call amount) pairs tried in order",
    )
    missing_probability: float = Field(default=0.0, ge=0, le=100)

    # HTTP adapter
    host: str = "0.0.0.0"
    port: int = Field(default=8000, gt=0, lt=65536)
    log_level: str = "INFO"

    @field_validator("call_thresholds", mode="before")
    @classmethod
    def _parse_thresholds(cls, value: Any) -> Any:
        """Accept "15:100,22:300" as well as a sequence of pairs."""
        if isinstance(value, str):
            pairs = []
            for item in value.split(","):
                win, _, amount = item.strip().partition(":")
                pairs.append((float(win), int(amount)))
            return tuple(pairs)
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


def _from_environment() -> Dict[str, str]:
    values = {}
    for field_name in BotConfig.model_fields:
        raw = os.getenv(ENV_PREFIX + field_name.upper())
        if raw is not None:
            values[field_name] = raw
    return values


def load_config(**overrides: Any) -> BotConfig:
    """
    Build the configuration.

    Resolution order (last wins):
      1. Model defaults
      2. DEEPTHOUGHT_<FIELD> environment variables
      3. Keyword overrides

    Raises:
        pydantic.ValidationError: If a value does not validate.
    """
    values: Dict[str, Any] = _from_environment()
    values.update({k: v for k, v in overrides.items() if v is not None})
    return BotConfig(**values)
