from __future__ import annotations

import json
import os
from dataclasses import dataclass
from decimal import Decimal

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _json(name: str) -> dict:
    value = _env(name)
    if not value:
        return {}
    return json.loads(value)


def _csv(name: str, default: str) -> list[str]:
    value = _env(name, default) or ""
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    reward_token_price_usd: Decimal
    reward_token_price_overrides: dict
    emission_decimals: int
    baseline_range_percent: Decimal
    max_leverage: Decimal
    cors_allow_origins: list[str]


def get_settings() -> Settings:
    return Settings(
        reward_token_price_usd=Decimal(_env("REWARD_TOKEN_PRICE_USD", "0.5")),
        reward_token_price_overrides=_json("REWARD_TOKEN_PRICE_OVERRIDES"),
        emission_decimals=int(_env("EMISSION_DECIMALS", "9")),
        baseline_range_percent=Decimal(_env("BASELINE_RANGE_PERCENT", "10")),
        max_leverage=Decimal(_env("MAX_LEVERAGE", "10000")),
        cors_allow_origins=_csv("CORS_ALLOW_ORIGINS", "*"),
    )
