"""
Deployment defaults for a pricing engine, read from environment variables.
"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from curve_pricing.common.model import CurveConfig


DEFAULT_INITIAL_PRICE = 50 * 10 ** 6
DEFAULT_SLOPE_NUMERATOR = 5
DEFAULT_SLOPE_DENOMINATOR = 100
DEFAULT_OWNER = "0x0000000000000000000000000000000000000001"


def _int_from_env(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip()
    try:
        if value[:2].lower() == "0x":
            return int(value, 16)
        return int(value, 10)
    except ValueError:
        raise ValueError(
            f"Environment variable {key} must be a decimal or 0x-prefixed hex integer, got {raw!r}"
        ) from None


@dataclass
class Settings:
    """Settings used to deploy a PricingEngine."""

    initial_price: int = DEFAULT_INITIAL_PRICE
    slope_numerator: int = DEFAULT_SLOPE_NUMERATOR
    slope_denominator: int = DEFAULT_SLOPE_DENOMINATOR
    owner: str = DEFAULT_OWNER

    @classmethod
    def load(cls, env: Optional[Mapping[str, str]] = None) -> 'Settings':
        """Load settings from the environment (or from 'env' when given)."""
        env = os.environ if env is None else env
        return cls(
            initial_price=_int_from_env(env, "CURVE_INITIAL_PRICE", DEFAULT_INITIAL_PRICE),
            slope_numerator=_int_from_env(env, "CURVE_SLOPE_NUMERATOR", DEFAULT_SLOPE_NUMERATOR),
            slope_denominator=_int_from_env(env, "CURVE_SLOPE_DENOMINATOR", DEFAULT_SLOPE_DENOMINATOR),
            owner=env.get("CURVE_OWNER") or DEFAULT_OWNER,
        )

    @property
    def curve_config(self) -> CurveConfig:
        return CurveConfig(self.initial_price, self.slope_numerator, self.slope_denominator)


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None
